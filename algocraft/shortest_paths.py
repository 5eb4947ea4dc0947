"""Single-source and all-pairs shortest paths on weighted graphs.

Adjacency lists hold (weight, neighbour) pairs; edge lists hold
(u, v, weight) triples.
"""

from __future__ import annotations

import heapq
import math
from collections.abc import Callable, Iterable, Sequence
from typing import Optional

Heuristic = Callable[[int, int], float]


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


def _estimate(heuristic: Optional[Heuristic], vertex: int, goal: int) -> float:
    """Heuristic estimate from vertex to goal; zero when no heuristic is given."""
    if heuristic is None:
        return 0
    return heuristic(vertex, goal)


def a_star(
    adjacency: Sequence[Iterable[Sequence[int]]],
    source: int,
    goal: int,
    heuristic: Optional[Heuristic] = None,
) -> Optional[float]:
    """Cost of the cheapest path from source to goal, or None if unreachable.

    Without a heuristic the search behaves like Dijkstra's algorithm.
    """
    g_score = [math.inf] * len(adjacency)
    closed = [False] * len(adjacency)
    g_score[source] = 0
    open_heap = [(_estimate(heuristic, source, goal), 0, source)]

    while open_heap:
        _, cost, u = heapq.heappop(open_heap)
        if u == goal:
            return cost
        if closed[u]:
            continue
        closed[u] = True
        for weight, v in adjacency[u]:
            tentative = cost + weight
            if tentative < g_score[v]:
                g_score[v] = tentative
                heapq.heappush(
                    open_heap,
                    (tentative + _estimate(heuristic, v, goal), tentative, v),
                )
    return None


def bellman_ford(
    vertex_count: int, edges: Iterable[Sequence[int]], source: int
) -> list[Optional[int]]:
    """Shortest distances from source; None marks unreachable vertices.

    Raises NegativeCycleError when a negative cycle is reachable.
    """
    edge_list = [tuple(edge) for edge in edges]
    dist: list[float] = [math.inf] * vertex_count
    dist[source] = 0

    for _ in range(1, vertex_count):
        changed = False
        for u, v, weight in edge_list:
            if dist[u] != math.inf and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                changed = True
        if not changed:
            break

    for u, v, weight in edge_list:
        if dist[u] != math.inf and dist[u] + weight < dist[v]:
            raise NegativeCycleError("negative weight cycle detected")

    return [None if d == math.inf else d for d in dist]


def dijkstra(
    adjacency: Sequence[Iterable[Sequence[int]]], source: int
) -> list[Optional[int]]:
    """Shortest distances from source; None marks unreachable vertices."""
    dist: list[float] = [math.inf] * len(adjacency)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for weight, v in adjacency[u]:
            candidate = dist[u] + weight
            if candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return [None if d == math.inf else d for d in dist]


def floyd_warshall(dist: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances from a square distance matrix.

    Missing edges are math.inf. A new matrix is returned.
    """
    result = [list(row) for row in dist]
    size = len(result)
    if any(len(row) != size for row in result):
        raise ValueError("distance matrix must be square")

    for k in range(size):
        row_k = result[k]
        for row in result:
            through = row[k]
            if through == math.inf:
                continue
            for j, onward in enumerate(row_k):
                if onward != math.inf and through + onward < row[j]:
                    row[j] = through + onward
    return result