"""Adjacency-list graph: vertices with weighted outgoing neighbour lists."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from enum import Enum
from types import MappingProxyType


class VertexColor(Enum):
    """Marking used by graph searches."""

    GRAY = 0
    WHITE = 1
    BLACK = 2


class Adjacency:
    """A vertex together with its neighbours and the weights leading to them."""

    def __init__(self, vertex_id: int) -> None:
        self.vertex_id = vertex_id
        self.color = VertexColor.WHITE
        self.discover = 0
        self.finish = 0
        self._neighbours: dict[int, int] = {}

    @property
    def neighbours(self) -> Mapping[int, int]:
        """Read-only view of neighbour id -> edge weight, in insertion order."""
        return MappingProxyType(self._neighbours)

    def __getitem__(self, vertex_id: int) -> int:
        """Return the weight of the edge to ``vertex_id``; KeyError if absent."""
        return self._neighbours[vertex_id]

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._neighbours

    def __iter__(self) -> Iterator[int]:
        return iter(self._neighbours)

    def __len__(self) -> int:
        return len(self._neighbours)

    def delete_vertex(self, vertex_id: int) -> bool:
        """Drop ``vertex_id`` from the neighbours; return whether it was there."""
        if vertex_id not in self._neighbours:
            return False
        del self._neighbours[vertex_id]
        return True

    def _link(self, vertex_id: int, weight: int) -> None:
        self._neighbours[vertex_id] = weight

    def __repr__(self) -> str:
        return f"Adjacency({self.vertex_id!r}, neighbours={self._neighbours!r})"


class Graph(ABC):
    """Base for graphs kept as an ordered collection of adjacency lists."""

    def __init__(self) -> None:
        self._adjacency: dict[int, Adjacency] = {}
        self._edges = 0
        self.tick = 0

    def __getitem__(self, vertex_id: int) -> Adjacency:
        """Return the adjacency list of ``vertex_id``; KeyError if absent."""
        return self._adjacency[vertex_id]

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._adjacency

    def __iter__(self) -> Iterator[Adjacency]:
        """Yield the adjacency lists in the order the vertices were added."""
        return iter(self._adjacency.values())

    def vertex_count(self) -> int:
        return len(self._adjacency)

    def edge_count(self) -> int:
        return self._edges

    def format(self) -> str:
        """Describe the graph, one vertex per line with its weighted neighbours."""
        lines = [f"Graph : {self.vertex_count()} vertex, {self._edges} edges\n"]
        for adj in self:
            cells = "".join(f"{vid}(w:{w})\t" for vid, w in adj.neighbours.items())
            lines.append(f"{adj.vertex_id}(neigh:{len(adj)})->{{{cells}}}\n")
        return "".join(lines)

    def to_dot(self) -> str:
        """Render the graph in GraphViz dot format between marker lines."""
        lines = [
            "==== BEGIN OF DOT ====",
            "digraph G {",
            "\tnode [shape = circle];",
        ]
        for adj in self:
            vid = adj.vertex_id
            if adj.color is VertexColor.GRAY:
                lines.append(f"\t{vid} [style=filled fillcolor=gray];")
            elif adj.color is VertexColor.BLACK:
                lines.append(
                    f"\t{vid} [style=filled fillcolor=black fontcolor=white];"
                )
            else:
                lines.append(f"\t{vid};")
            for target, weight in adj.neighbours.items():
                lines.append(f'\t{vid} -> {target} [label = "{weight}"];')
        lines.extend(["}", "==== END OF DOT ===="])
        return "\n".join(lines) + "\n"

    def _is_adjacent(self, source: Adjacency, target: Adjacency) -> bool:
        return target.vertex_id in source

    @abstractmethod
    def add_vertex(self, vertex_id: int) -> bool:
        """Add a vertex; return False if it already exists."""

    @abstractmethod
    def delete_vertex(self, vertex_id: int) -> bool:
        """Remove a vertex and its edges; return whether it existed."""

    @abstractmethod
    def add_edge(self, x: int, y: int, weight: int) -> bool:
        """Add an edge from ``x`` to ``y``; return whether it was added."""

    @abstractmethod
    def delete_edge(self, x: int, y: int) -> bool:
        """Remove the edge from ``x`` to ``y``; return whether it existed."""