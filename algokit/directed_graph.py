"""Directed graph on adjacency lists."""

from __future__ import annotations

import random

from algokit.graph import Adjacency, Graph


class DirectedGraph(Graph):
    """A weighted directed graph with at most one edge per ordered pair."""

    @classmethod
    def random_graph(
        cls, vertex_count: int, rng: random.Random | None = None
    ) -> DirectedGraph:
        """Build vertices 0..n-1 and join each i -> j (i < j) with chance 1/3.

        Edge weights are drawn from 0..99.
        """
        rng = rng if rng is not None else random.Random()
        graph = cls()
        for vid in range(vertex_count):
            graph.add_vertex(vid)
        for i in range(vertex_count):
            for j in range(i + 1, vertex_count):
                if rng.randrange(3) == 0:
                    graph.add_edge(i, j, rng.randrange(100))
        return graph

    def add_vertex(self, vertex_id: int) -> bool:
        """Add an empty vertex; return False if the id is already present."""
        if vertex_id in self._adjacency:
            return False
        self._adjacency[vertex_id] = Adjacency(vertex_id)
        return True

    def delete_vertex(self, vertex_id: int) -> bool:
        """Remove a vertex with its incoming and outgoing edges."""
        adj = self._adjacency.get(vertex_id)
        if adj is None:
            return False
        for other in self._adjacency.values():
            if other.vertex_id != vertex_id and other.delete_vertex(vertex_id):
                self._edges -= 1
        self._edges -= len(adj)
        del self._adjacency[vertex_id]
        return True

    def add_edge(self, x: int, y: int, weight: int) -> bool:
        """Add x -> y; False if a vertex is missing or the edge exists."""
        source = self._adjacency.get(x)
        target = self._adjacency.get(y)
        if source is None or target is None:
            return False
        if self._is_adjacent(source, target):
            return False
        source._link(y, weight)
        self._edges += 1
        return True

    def delete_edge(self, x: int, y: int) -> bool:
        """Remove x -> y; return whether it existed."""
        source = self._adjacency.get(x)
        if source is None or y not in self._adjacency:
            return False
        if source.delete_vertex(y):
            self._edges -= 1
            return True
        return False

    def transpose(self) -> DirectedGraph:
        """Return a new graph with every edge reversed."""
        trans = type(self)()
        for adj in self:
            trans.add_vertex(adj.vertex_id)
            for target, weight in adj.neighbours.items():
                trans.add_vertex(target)
                trans.add_edge(target, adj.vertex_id, weight)
        return trans