from netlat.models import Edge
from netlat.topology import CopperConnectivity, Graph, copper_connectivity, find_failure_point


def test_sample_is_copper_connectable(sample_graph):
    assert not sample_graph.copper_only
    assert copper_connectivity(sample_graph) is CopperConnectivity.COPPER_CONNECTABLE
    assert copper_connectivity(sample_graph, strict=True) is CopperConnectivity.COPPER_CONNECTABLE


def test_copper_only(make_graph):
    g = make_graph(3, [(0, 1, "copper", 1, 1), (1, 2, "copper", 1, 1)])
    assert copper_connectivity(g) is CopperConnectivity.COPPER_ONLY
    assert "only copper" in CopperConnectivity.COPPER_ONLY.message


def test_vertex_without_copper_means_neither(make_graph):
    g = make_graph(3, [(0, 1, "copper", 1, 1), (1, 2, "optical", 1, 1)])
    assert copper_connectivity(g) is CopperConnectivity.NEITHER


def test_heuristic_misses_split_copper_islands(make_graph):
    # 0-1 and 2-3 are copper islands bridged only by fiber
    g = make_graph(4, [(0, 1, "copper", 1, 1), (2, 3, "copper", 1, 1), (1, 2, "optical", 1, 1)])
    assert copper_connectivity(g) is CopperConnectivity.COPPER_CONNECTABLE
    assert copper_connectivity(g, strict=True) is CopperConnectivity.NEITHER


def test_sample_survives_two_failures(sample_graph):
    report = find_failure_point(sample_graph)
    assert report.survives
    assert report.vertex is None
    assert report.edges == ()


def test_first_low_degree_vertex_is_reported(make_graph):
    g = make_graph(3, [(0, 1, "copper", 1, 1), (1, 2, "copper", 1, 1)])
    report = find_failure_point(g)
    assert not report.survives
    assert report.vertex == 0
    assert [(e.source, e.destination) for e in report.edges] == [(0, 1)]


def test_scan_is_in_vertex_order(sample_graph):
    report = find_failure_point(sample_graph, min_degree=4)
    assert report.vertex == 0
    assert len(report.edges) == 3
    assert report.to_dict()["survives"] is False


def test_isolated_vertex_has_no_edges():
    g = Graph.from_edges(2, [Edge(1, 1, "copper", 1)])
    report = find_failure_point(g)
    assert report.vertex == 0
    assert report.edges == ()
