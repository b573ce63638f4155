from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple
import heapq
import logging
import math

from netlat.errors import InvalidVertex, InvalidWeight
from netlat.models import Edge
from netlat.topology.graph import Graph


logger = logging.getLogger(__name__)


class IndexMinPQ:
    """Min priority queue of vertex indices keyed by float priority.

    Backed by heapq; decrease_key pushes a fresh entry and stale entries are
    skipped on pop.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int]] = []
        self._keys: Dict[int, float] = {}

    def __contains__(self, i: int) -> bool:
        return i in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def is_empty(self) -> bool:
        return not self._keys

    def insert(self, i: int, key: float) -> None:
        if i in self._keys:
            raise ValueError(f"index {i} is already in the priority queue")
        self._keys[i] = key
        heapq.heappush(self._heap, (key, i))

    def decrease_key(self, i: int, key: float) -> None:
        if i not in self._keys:
            raise ValueError(f"index {i} is not in the priority queue")
        if key >= self._keys[i]:
            raise ValueError(f"decrease_key({i}) would not strictly decrease the key")
        self._keys[i] = key
        heapq.heappush(self._heap, (key, i))

    def del_min(self) -> int:
        while self._heap:
            key, i = heapq.heappop(self._heap)
            if self._keys.get(i) == key:
                del self._keys[i]
                return i
        raise IndexError("priority queue underflow")


class ShortestPaths:
    """Single-source lowest-latency paths (Dijkstra) over a cable network.

    Distances are in nanoseconds. Unreachable vertices keep +inf and no
    back-edge. The result is computed once in the constructor and never
    changes afterwards.
    """

    def __init__(self, graph: Graph, source: int, *, check: bool = True):
        edges = graph.edges()
        for e in edges:
            if e.latency < 0:
                raise InvalidWeight(f"edge {e} has negative latency")
        graph.validate_vertex(source)
        graph.seal()

        self.source = source
        self._V = graph.V
        self._dist: List[float] = [math.inf] * graph.V
        self._edge_to: List[Optional[Edge]] = [None] * graph.V
        self._dist[source] = 0.0

        # relax vertices in order of distance from source
        self._pq = IndexMinPQ()
        self._pq.insert(source, 0.0)
        while not self._pq.is_empty():
            v = self._pq.del_min()
            for e in graph.adj(v):
                self._relax(e)

        if check:
            assert self._check(graph), "shortest-path optimality conditions violated"

    def _relax(self, e: Edge) -> None:
        v, w = e.source, e.destination
        candidate = self._dist[v] + e.latency
        if candidate < self._dist[w]:
            self._dist[w] = candidate
            self._edge_to[w] = e
            if w in self._pq:
                self._pq.decrease_key(w, candidate)
            else:
                self._pq.insert(w, candidate)

    def _check(self, graph: Graph) -> bool:
        # (i) every edge v->w satisfies dist[w] <= dist[v] + latency
        # (ii) every back-edge v->w satisfies dist[w] == dist[v] + latency
        s = self.source
        if self._dist[s] != 0.0 or self._edge_to[s] is not None:
            logger.error("dist[%d] and edge_to[%d] inconsistent", s, s)
            return False
        for v in range(self._V):
            if v != s and self._edge_to[v] is None and self._dist[v] != math.inf:
                logger.error("dist[] and edge_to[] inconsistent at vertex %d", v)
                return False
        for e in graph.edges():
            if self._dist[e.source] + e.latency < self._dist[e.destination]:
                logger.error("edge %s not relaxed", e)
                return False
        for w, e in enumerate(self._edge_to):
            if e is None:
                continue
            if e.destination != w or self._dist[e.source] + e.latency != self._dist[w]:
                logger.error("edge %s on shortest path not tight", e)
                return False
        return True

    def _validate(self, v: int) -> None:
        if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v < self._V:
            raise InvalidVertex(v, self._V)

    def dist_to(self, v: int) -> float:
        """Latency of the best path to `v`, or +inf when unreachable."""
        self._validate(v)
        return self._dist[v]

    def has_path_to(self, v: int) -> bool:
        self._validate(v)
        return self._dist[v] < math.inf

    def path_to(self, v: int) -> Optional[List[Edge]]:
        """Edges of the best path from the source to `v`, in travel order.

        None when `v` is unreachable; an empty list when `v` is the source.
        """
        if not self.has_path_to(v):
            return None
        path: List[Edge] = []
        e = self._edge_to[v]
        while e is not None:
            path.append(e)
            e = self._edge_to[e.source]
        path.reverse()
        return path


def total_bandwidth(path: Iterable[Edge]) -> int:
    """Sum of bandwidth over `path`. The edges are not checked to form a path."""
    return sum(e.bandwidth for e in path)
