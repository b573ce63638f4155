from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from netlat.models import Edge
from netlat.topology.graph import Graph, UnionFind


class CopperConnectivity(str, Enum):
    COPPER_ONLY = "copper_only"
    COPPER_CONNECTABLE = "copper_connectable"
    NEITHER = "neither"

    @property
    def message(self) -> str:
        return _COPPER_MESSAGES[self]


_COPPER_MESSAGES = {
    CopperConnectivity.COPPER_ONLY: "This graph consists of only copper wires, it is copper-connected.",
    CopperConnectivity.COPPER_CONNECTABLE: "This graph has optical wires but can be connected with only copper wires.",
    CopperConnectivity.NEITHER: "This graph is not copper-only and cannot be connected with only copper wires.",
}


def _every_vertex_has_copper(graph: Graph) -> bool:
    return all(any(e.is_copper for e in graph.adj(v)) for v in graph)


def _copper_edges_connect(graph: Graph) -> bool:
    uf = UnionFind(graph.V)
    for e in graph.edges():
        if e.is_copper:
            uf.union(e.source, e.destination)
    return uf.count <= 1


def copper_connectivity(graph: Graph, *, strict: bool = False) -> CopperConnectivity:
    """Classify the network as copper-only, copper-connectable, or neither.

    The default check is local: every vertex needs at least one outgoing
    copper edge. It does not prove the copper edges form one component, so
    a network split into two copper islands joined by fiber still reports
    COPPER_CONNECTABLE. With ``strict=True`` the copper edges must connect
    all vertices instead.
    """
    graph.seal()
    if graph.copper_only:
        return CopperConnectivity.COPPER_ONLY
    ok = _copper_edges_connect(graph) if strict else _every_vertex_has_copper(graph)
    return CopperConnectivity.COPPER_CONNECTABLE if ok else CopperConnectivity.NEITHER


@dataclass(frozen=True)
class FailureReport:
    """Outcome of the two-link failure check.

    `vertex` is the first vertex (ascending index) with too few links; its
    outgoing edges are the links whose joint failure isolates it.
    """

    vertex: Optional[int]
    edges: Tuple[Edge, ...] = ()
    min_degree: int = 3

    @property
    def survives(self) -> bool:
        return self.vertex is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "survives": self.survives,
            "vertex": self.vertex,
            "edges": [e.to_dict() for e in self.edges],
            "min_degree": self.min_degree,
        }


def find_failure_point(graph: Graph, *, min_degree: int = 3) -> FailureReport:
    """Scan vertices in order and report the first one with outdegree < `min_degree`.

    Degree >= 3 everywhere is necessary for surviving any two link failures
    but not sufficient: this does not verify 2-edge-connectivity.
    """
    graph.seal()
    for v in graph:
        if graph.outdegree(v) < min_degree:
            return FailureReport(vertex=v, edges=tuple(graph.adj(v)), min_degree=min_degree)
    return FailureReport(vertex=None, min_degree=min_degree)
