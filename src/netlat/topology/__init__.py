from .graph import Graph, UnionFind
from .shortest_path import IndexMinPQ, ShortestPaths, total_bandwidth
from .spanning_tree import SpanningTree, cable_pairs, kruskal_mst, undirected_edges
from .resilience import CopperConnectivity, FailureReport, copper_connectivity, find_failure_point

__all__ = [
    "Graph",
    "UnionFind",
    "IndexMinPQ",
    "ShortestPaths",
    "total_bandwidth",
    "SpanningTree",
    "cable_pairs",
    "kruskal_mst",
    "undirected_edges",
    "CopperConnectivity",
    "FailureReport",
    "copper_connectivity",
    "find_failure_point",
]
