from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from netlat.models import Edge
from netlat.topology.graph import Graph, UnionFind


_CableKey = Tuple[int, int, str, float, int]


def _key(e: Edge) -> _CableKey:
    return (e.source, e.destination, e.material.value, e.length_m, e.bandwidth)


def _twin_key(e: Edge) -> _CableKey:
    return (e.destination, e.source, e.material.value, e.length_m, e.bandwidth)


def cable_pairs(edges: Iterable[Edge]) -> List[Tuple[Edge, Optional[Edge]]]:
    """Match each directed edge with its opposite direction.

    An edge is paired with the earliest, not yet matched edge that is its
    exact reverse (same material, length and bandwidth). Returns one
    ``(edge, twin)`` tuple per cable, twin None for one-way edges. Parallel
    cables between the same vertices stay separate.
    """
    pending: Dict[_CableKey, List[int]] = defaultdict(list)
    pairs: List[Tuple[Edge, Optional[Edge]]] = []
    for e in edges:
        waiting = pending[_twin_key(e)]
        if waiting:
            i = waiting.pop(0)
            pairs[i] = (pairs[i][0], e)
            continue
        pending[_key(e)].append(len(pairs))
        pairs.append((e, None))
    return pairs


def undirected_edges(edges: Iterable[Edge]) -> List[Edge]:
    """Collapse each pair of opposite directed edges into a single cable."""
    return [e for e, _twin in cable_pairs(edges)]


@dataclass(frozen=True)
class SpanningTree:
    """Result of the minimum-latency spanning tree query."""

    vertex_count: int
    edges: Tuple[Edge, ...]
    total_latency: float

    @property
    def is_spanning(self) -> bool:
        """True when the tree touches every vertex (V-1 edges selected)."""
        return len(self.edges) == max(0, self.vertex_count - 1)

    @property
    def average_latency(self) -> Optional[float]:
        """Mean latency per selected edge; None when no edge was selected."""
        if not self.edges:
            return None
        return self.total_latency / len(self.edges)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "edges": [e.to_dict() for e in self.edges],
            "edge_count": len(self.edges),
            "total_latency_ns": self.total_latency,
            "average_latency_ns": self.average_latency,
            "is_spanning": self.is_spanning,
        }


def kruskal_mst(graph: Graph) -> SpanningTree:
    """Minimum-latency spanning tree (forest if disconnected) via Kruskal.

    Both directions of a cable count as one candidate. Equal latencies keep
    the graph's edge order, so the result is deterministic.
    """
    graph.seal()
    uf = UnionFind(graph.V)
    selected: List[Edge] = []
    total = 0.0
    target = max(0, graph.V - 1)

    for e in sorted(undirected_edges(graph.edges())):
        if len(selected) >= target:
            break
        if uf.union(e.source, e.destination):
            selected.append(e)
            total += e.latency

    return SpanningTree(vertex_count=graph.V, edges=tuple(selected), total_latency=total)
