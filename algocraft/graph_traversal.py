"""Breadth-first and depth-first traversal over adjacency lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def build_adjacency(
    vertex_count: int,
    edges: Iterable[tuple[int, int]],
    directed: bool = False,
) -> list[list[int]]:
    """Build adjacency lists for vertices 0..vertex_count-1.

    Each undirected edge is recorded in both directions.
    """
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge ({u}, {v}) has a vertex out of range")
        adjacency[u].append(v)
        if not directed:
            adjacency[v].append(u)
    return adjacency


def bfs(adjacency: Sequence[Sequence[int]], source: int) -> list[int]:
    """Return vertices reachable from source in breadth-first order."""
    visited = [False] * len(adjacency)
    visited[source] = True
    queue = deque([source])
    order: list[int] = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in adjacency[u]:
            if not visited[v]:
                visited[v] = True
                queue.append(v)
    return order


def dfs(adjacency: Sequence[Sequence[int]], source: int) -> list[int]:
    """Return vertices reachable from source in depth-first (preorder) order."""
    visited = [False] * len(adjacency)
    visited[source] = True
    order = [source]
    stack = [iter(adjacency[source])]
    while stack:
        for v in stack[-1]:
            if not visited[v]:
                visited[v] = True
                order.append(v)
                stack.append(iter(adjacency[v]))
                break
        else:
            stack.pop()
    return order