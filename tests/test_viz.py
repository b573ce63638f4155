from netlat.topology import kruskal_mst
from netlat.viz import circular_layout, marked_cables, plot_network


def test_circular_layout_shape():
    pos = circular_layout(4)
    assert pos.shape == (4, 2)
    assert abs(pos[0, 1] - 1.0) < 1e-9
    assert circular_layout(0).shape == (0, 2)


def test_plot_network_writes_png(sample_graph, tmp_path):
    out = tmp_path / "tree.png"
    plot_network(sample_graph, str(out), highlight=kruskal_mst(sample_graph).edges)
    assert out.exists()
    assert out.stat().st_size > 0


def test_only_the_selected_parallel_cable_is_marked(make_graph):
    g = make_graph(2, [(0, 1, "copper", 1, 5), (0, 1, "optical", 1, 1)])
    tree = kruskal_mst(g)
    marked = [(e.material.value, hot) for e, hot in marked_cables(g, tree.edges)]
    assert sorted(marked) == [("copper", False), ("optical", True)]


def test_reverse_direction_marks_the_cable(sample_graph):
    back = [e for e in sample_graph.adj(4) if e.destination == 1]
    marked = {(e.source, e.destination): hot for e, hot in marked_cables(sample_graph, back)}
    assert marked[(1, 4)] is True
    assert sum(marked.values()) == 1
