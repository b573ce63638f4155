import pytest

from netlat.errors import GraphSealed, InvalidVertex
from netlat.models import Edge
from netlat.topology import Graph, UnionFind, kruskal_mst


def test_union_find_components():
    uf = UnionFind(5)
    assert uf.union(0, 1)
    assert uf.union(1, 2)
    assert not uf.union(0, 2)
    assert uf.connected(0, 2)
    assert not uf.connected(0, 3)
    assert uf.count == 3


def test_degrees_and_edge_count(sample_graph):
    g = sample_graph
    assert g.V == 5
    assert g.E == 16
    assert g.E == sum(g.outdegree(v) for v in g)
    assert [g.outdegree(v) for v in g] == [3, 3, 3, 3, 4]
    assert [g.indegree(v) for v in g] == [3, 3, 3, 3, 4]
    assert len(g.edges()) == g.E


def test_adj_keeps_insertion_order():
    g = Graph.from_edges(3, [Edge(0, 2, "copper", 1), Edge(0, 1, "optical", 1)])
    assert [e.destination for e in g.adj(0)] == [2, 1]
    assert g.adj(1) == []


def test_copper_only_flag_is_monotonic():
    g = Graph(3)
    assert g.copper_only
    g.add_edge(Edge(0, 1, "copper", 1))
    assert g.copper_only
    g.add_edge(Edge(1, 2, "optical", 1))
    assert not g.copper_only
    g.add_edge(Edge(2, 0, "copper", 1))
    assert not g.copper_only


def test_invalid_vertex():
    g = Graph(2)
    with pytest.raises(InvalidVertex):
        g.add_edge(Edge(0, 2, "copper", 1))
    for bad in (-1, 2):
        with pytest.raises(InvalidVertex):
            g.adj(bad)
        with pytest.raises(InvalidVertex):
            g.outdegree(bad)
        with pytest.raises(InvalidVertex):
            g.indegree(bad)
    assert g.E == 0


def test_no_insertion_after_queries_begin(sample_graph):
    kruskal_mst(sample_graph)
    assert sample_graph.sealed
    with pytest.raises(GraphSealed):
        sample_graph.add_edge(Edge(0, 1, "copper", 1))


def test_str_lists_adjacency():
    g = Graph.from_edges(2, [Edge(0, 1, "optical", 10)])
    text = str(g)
    assert text.splitlines()[0] == "2 1"
    assert "0: 0->1 50.00" in text
