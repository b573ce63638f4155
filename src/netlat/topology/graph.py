from __future__ import annotations

from typing import Iterable, Iterator, List
import logging

from netlat.errors import GraphSealed, InvalidVertex
from netlat.models import Edge


logger = logging.getLogger(__name__)


class UnionFind:
    """Disjoint Set Union (Union-Find) over vertices 0..n-1.

    Operations are nearly O(1) amortized with path compression + union by rank.
    """
    def __init__(self, n: int):
        self.parent: List[int] = list(range(n))
        self.rank: List[int] = [0] * n
        self.count = n

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # compress
        while self.parent[x] != x:
            nxt = self.parent[x]
            self.parent[x] = root
            x = nxt
        return root

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of `a` and `b`; False if they were already one set."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1
        self.count -= 1
        return True


class Graph:
    """Adjacency-list digraph of a cable network.

    Vertices: 0..V-1, fixed at construction
    Edges: one directed Edge per travel direction of a cable

    Edges are only added during setup. The first query seals the graph;
    any later insertion raises GraphSealed.
    """

    def __init__(self, vertex_count: int) -> None:
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, int) or vertex_count < 0:
            raise ValueError(f"number of vertices must be a nonnegative integer, got {vertex_count!r}")
        self._V = vertex_count
        self._E = 0
        self._adj: List[List[Edge]] = [[] for _ in range(vertex_count)]
        self._indegree: List[int] = [0] * vertex_count
        self._copper_only = True
        self._sealed = False

    @property
    def V(self) -> int:
        return self._V

    @property
    def E(self) -> int:
        return self._E

    @property
    def copper_only(self) -> bool:
        """True iff no non-copper edge has ever been inserted."""
        return self._copper_only

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        self._sealed = True

    def validate_vertex(self, v: int) -> None:
        if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v < self._V:
            raise InvalidVertex(v, self._V)

    def add_edge(self, edge: Edge) -> None:
        if self._sealed:
            raise GraphSealed(f"cannot add edge {edge}: graph is already being queried")
        self.validate_vertex(edge.source)
        self.validate_vertex(edge.destination)
        if not edge.is_copper:
            self._copper_only = False
        self._adj[edge.source].append(edge)
        self._indegree[edge.destination] += 1
        self._E += 1

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Iterable[Edge]) -> "Graph":
        g = cls(vertex_count)
        for e in edges:
            g.add_edge(e)
        return g

    def adj(self, v: int) -> List[Edge]:
        """Outgoing edges of `v`, in insertion order."""
        self.validate_vertex(v)
        return list(self._adj[v])

    def outdegree(self, v: int) -> int:
        self.validate_vertex(v)
        return len(self._adj[v])

    def indegree(self, v: int) -> int:
        self.validate_vertex(v)
        return self._indegree[v]

    def edges(self) -> List[Edge]:
        """Every edge, grouped by source vertex in ascending order."""
        return [e for bucket in self._adj for e in bucket]

    def __iter__(self) -> Iterator[int]:
        return iter(range(self._V))

    def __len__(self) -> int:
        return self._V

    def __str__(self) -> str:
        lines = [f"{self._V} {self._E}"]
        for v in range(self._V):
            lines.append(f"{v}: " + "  ".join(str(e) for e in self._adj[v]))
        return "\n".join(lines)
