from __future__ import annotations
from typing import Dict, Hashable, Iterable, List, Sequence

from statesearch.search.dfs import DFS

Vertex = Hashable


class Graph:
    """
    Undirected graph with weighted edges.

    neighbors() enumerates in edge insertion order, so search results on a
    given graph are reproducible. Unknown vertices raise KeyError.
    """

    def __init__(self) -> None:
        self._adj: Dict[Vertex, Dict[Vertex, float]] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[Sequence]) -> "Graph":
        """edges: (u, v) or (u, v, weight) tuples."""
        g = cls()
        for e in edges:
            g.add_edge(*e)
        return g

    def add_vertex(self, v: Vertex) -> None:
        self._adj.setdefault(v, {})

    def add_edge(self, u: Vertex, v: Vertex, weight: float = 1) -> None:
        self.add_vertex(u)
        self.add_vertex(v)
        self._adj[u][v] = weight
        self._adj[v][u] = weight

    def neighbors(self, v: Vertex) -> List[Vertex]:
        return list(self._adj[v])

    def weight(self, u: Vertex, v: Vertex) -> float:
        return self._adj[u][v]

    def vertices(self) -> List[Vertex]:
        return list(self._adj)

    def path_cost(self, path: Sequence[Vertex]) -> float:
        return sum(self.weight(a, b) for a, b in zip(path, path[1:]))

    def connected(self) -> bool:
        """True if every vertex is reachable from the first one."""
        if not self._adj:
            return True
        s = DFS(next(iter(self._adj)), self.neighbors, lambda v: False)
        s.perform()
        return s.visited() == set(self._adj)

    def __contains__(self, v: Vertex) -> bool:
        return v in self._adj

    def __len__(self) -> int:
        return len(self._adj)
