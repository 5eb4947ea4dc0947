"""Minimum spanning trees: Kruskal with a disjoint set, and Prim."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self.parent = list(range(size))
        self.rank = [0] * size

    def find(self, x: int) -> int:
        """Return the representative of x's set."""
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of a and b; False if they were already joined."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self.rank[a] < self.rank[b]:
            a, b = b, a
        self.parent[b] = a
        if self.rank[a] == self.rank[b]:
            self.rank[a] += 1
        return True


def kruskal_mst(vertex_count: int, edges: Iterable[Sequence[int]]) -> int:
    """Total weight of a minimum spanning forest from (u, v, weight) edges."""
    ordered = sorted(edges, key=lambda edge: edge[2])
    components = DisjointSet(vertex_count)
    total = 0
    used = 0
    for u, v, weight in ordered:
        if components.union(u, v):
            total += weight
            used += 1
            if used == vertex_count - 1:
                break
    return total


def prim_mst(adjacency: Sequence[Iterable[Sequence[int]]]) -> int:
    """Total weight of the spanning tree of vertex 0's component.

    Each adjacency entry is a (weight, neighbour) pair.
    """
    if not adjacency:
        return 0
    in_tree = [False] * len(adjacency)
    heap = [(0, 0)]
    total = 0
    while heap:
        weight, u = heapq.heappop(heap)
        if in_tree[u]:
            continue
        in_tree[u] = True
        total += weight
        for edge_weight, v in adjacency[u]:
            if not in_tree[v]:
                heapq.heappush(heap, (edge_weight, v))
    return total