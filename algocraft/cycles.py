"""Cycle detection in directed and undirected graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


class DirectedGraph:
    """A directed graph on vertices 0..vertex_count-1."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self.adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def add_edge(self, u: int, v: int) -> None:
        """Add the edge u -> v."""
        if not (0 <= u < self.vertex_count and 0 <= v < self.vertex_count):
            raise IndexError(f"edge ({u}, {v}) has a vertex out of range")
        self.adjacency[u].append(v)

    def has_cycle(self) -> bool:
        """Detect a cycle by Kahn's topological sort.

        The graph is cyclic when not every vertex can be removed.
        """
        in_degree = [0] * self.vertex_count
        for neighbours in self.adjacency:
            for v in neighbours:
                in_degree[v] += 1

        queue = deque(u for u, degree in enumerate(in_degree) if degree == 0)
        processed = 0
        while queue:
            u = queue.popleft()
            processed += 1
            for v in self.adjacency[u]:
                in_degree[v] -= 1
                if in_degree[v] == 0:
                    queue.append(v)
        return processed != self.vertex_count


def has_directed_cycle(adjacency: Sequence[Sequence[int]]) -> bool:
    """Detect a back edge with depth-first search."""
    vertex_count = len(adjacency)
    visited = [False] * vertex_count
    on_stack = [False] * vertex_count
    for start in range(vertex_count):
        if visited[start]:
            continue
        visited[start] = on_stack[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for v in neighbours:
                if not visited[v]:
                    visited[v] = on_stack[v] = True
                    stack.append((v, iter(adjacency[v])))
                    break
                if on_stack[v]:
                    return True
            else:
                on_stack[node] = False
                stack.pop()
    return False


def undirected_adjacency(
    vertex_count: int, edges: Iterable[Sequence[int]]
) -> list[list[int]]:
    """Build undirected adjacency lists from (u, v) pairs."""
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise IndexError(f"edge ({u}, {v}) has a vertex out of range")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def has_undirected_cycle_bfs(
    vertex_count: int, edges: Iterable[Sequence[int]]
) -> bool:
    """Detect a cycle by breadth-first search with parent tracking."""
    adjacency = undirected_adjacency(vertex_count, edges)
    visited = [False] * vertex_count
    for start in range(vertex_count):
        if visited[start]:
            continue
        visited[start] = True
        queue: deque[tuple[int, int | None]] = deque([(start, None)])
        while queue:
            node, parent = queue.popleft()
            for neighbour in adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append((neighbour, node))
                elif neighbour != parent:
                    return True
    return False


def has_undirected_cycle_dfs(
    vertex_count: int, edges: Iterable[Sequence[int]]
) -> bool:
    """Detect a cycle by depth-first search with parent tracking."""
    adjacency = undirected_adjacency(vertex_count, edges)
    visited = [False] * vertex_count
    for start in range(vertex_count):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, None, iter(adjacency[start]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, node, iter(adjacency[neighbour])))
                    break
                if neighbour != parent:
                    return True
            else:
                stack.pop()
    return False