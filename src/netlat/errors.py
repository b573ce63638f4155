from __future__ import annotations


class NetworkError(Exception):
    """Base class for every error raised by the network core."""


class InvalidVertex(NetworkError, ValueError):
    """A vertex index outside [0, V) was handed to the graph or an engine."""

    def __init__(self, vertex: int, vertex_count: int):
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(f"vertex {vertex} is not between 0 and {vertex_count - 1}")


class InvalidEdge(NetworkError, ValueError):
    """Malformed edge construction arguments (index, material, length, bandwidth)."""


class InvalidWeight(NetworkError, ValueError):
    """Negative latency found before running the shortest-path algorithm."""


class GraphSealed(NetworkError, RuntimeError):
    """Edge insertion attempted after queries started reading the graph."""
