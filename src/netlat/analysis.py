from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple
import math

from netlat.config import AnalysisConfig
from netlat.io.edge_reader import EdgeListReader
from netlat.models import Edge
from netlat.topology import (
    CopperConnectivity,
    FailureReport,
    Graph,
    ShortestPaths,
    SpanningTree,
    copper_connectivity,
    find_failure_point,
    kruskal_mst,
    total_bandwidth,
)


@dataclass(frozen=True)
class PathReport:
    """Lowest-latency path between two vertices."""

    source: int
    destination: int
    latency: float
    edges: Optional[Tuple[Edge, ...]]
    bandwidth: int

    @property
    def reachable(self) -> bool:
        return self.edges is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "destination": self.destination,
            "reachable": self.reachable,
            "latency_ns": self.latency if math.isfinite(self.latency) else None,
            "edges": [e.to_dict() for e in self.edges or ()],
            "bandwidth": self.bandwidth,
        }


class NetworkAnalyzer:
    """Runs the four network queries against one graph."""

    def __init__(self, graph: Graph, config: Optional[AnalysisConfig] = None):
        self.graph = graph
        self.config = config or AnalysisConfig()

    @classmethod
    def from_file(cls, filepath: str, config: Optional[AnalysisConfig] = None) -> "NetworkAnalyzer":
        config = config or AnalysisConfig()
        graph = EdgeListReader(filepath, strict=config.strict_ingest).read()
        return cls(graph, config)

    def shortest_path(self, source: int, destination: int) -> PathReport:
        sp = ShortestPaths(self.graph, source, check=self.config.check_optimality)
        path = sp.path_to(destination)
        return PathReport(
            source=source,
            destination=destination,
            latency=sp.dist_to(destination),
            edges=tuple(path) if path is not None else None,
            bandwidth=total_bandwidth(path or ()),
        )

    def copper(self) -> CopperConnectivity:
        return copper_connectivity(self.graph, strict=self.config.strict_copper)

    def spanning_tree(self) -> SpanningTree:
        return kruskal_mst(self.graph)

    def failure_points(self) -> FailureReport:
        return find_failure_point(self.graph, min_degree=self.config.failure_min_degree)

    def summary(self, source: int, destination: int) -> Dict[str, Any]:
        """All four query results as one JSON-serialisable dict."""
        copper = self.copper()
        return {
            "vertices": self.graph.V,
            "edges": self.graph.E,
            "shortest_path": self.shortest_path(source, destination).to_dict(),
            "copper": {"classification": copper.value, "message": copper.message},
            "spanning_tree": self.spanning_tree().to_dict(),
            "failure": self.failure_points().to_dict(),
        }
