"""Single-source shortest paths with Dijkstra's algorithm."""

from __future__ import annotations

from algokit.graph import Graph
from algokit.heap import Heap

LARGE_NUMBER = 999999


def dijkstra(graph: Graph, source: int) -> dict[int, int | None]:
    """Return each vertex's predecessor on a shortest path from ``source``.

    The source and unreachable vertices map to None. Edge weights must not be
    negative; distances are capped at LARGE_NUMBER. Raises KeyError if
    ``source`` is not a vertex of the graph.
    """
    if source not in graph:
        raise KeyError(source)
    queue = Heap(graph.vertex_count() + graph.edge_count())
    dist: dict[int, int] = {}
    previous: dict[int, int | None] = {}
    for adj in graph:
        vid = adj.vertex_id
        dist[vid] = LARGE_NUMBER
        previous[vid] = None
        queue.push(LARGE_NUMBER, vid)

    dist[source] = 0
    queue.decrease_key(source, 0)

    visited: set[int] = set()
    while not queue.is_empty():
        vid = queue.pop().data
        if vid in visited:
            continue
        visited.add(vid)
        dist_u = dist[vid]
        for target, weight in graph[vid].neighbours.items():
            alt = dist_u + weight
            if alt < dist[target]:
                dist[target] = alt
                previous[target] = vid
                queue.decrease_key(target, alt)
    return previous


def shortest_path(previous: dict[int, int | None], target: int) -> list[int]:
    """Follow a predecessor table back from ``target``; return the path in order.

    An unreachable target gives a path holding only itself.
    """
    if target not in previous:
        raise KeyError(target)
    path = [target]
    seen = {target}
    node = previous[target]
    while node is not None:
        if node in seen:
            raise ValueError("predecessor table contains a cycle")
        seen.add(node)
        path.append(node)
        node = previous[node]
    path.reverse()
    return path