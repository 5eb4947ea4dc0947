"""Travelling salesman tours by Held-Karp dynamic programming."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Optional


def solve_tsp(cost: Sequence[Sequence[float]]) -> tuple[float, list[int]]:
    """Cheapest tour from city 0 through every city and back.

    Returns the cost and the tour, which starts and ends at 0.
    """
    n = len(cost)
    if n < 2:
        raise ValueError("at least two cities are needed")
    if any(len(row) != n for row in cost):
        raise ValueError("cost matrix must be square")

    states = 1 << n
    full = states - 1
    best = [[math.inf] * n for _ in range(states)]
    parent: list[list[Optional[int]]] = [[None] * n for _ in range(states)]
    best[1][0] = 0

    for mask in range(1, states):
        for u in range(n):
            bit = 1 << u
            if not mask & bit:
                continue
            prev_mask = mask ^ bit
            if not prev_mask:
                continue
            for v in range(n):
                if not (prev_mask >> v) & 1:
                    continue
                candidate = best[prev_mask][v] + cost[v][u]
                if candidate < best[mask][u]:
                    best[mask][u] = candidate
                    parent[mask][u] = v

    best_cost = math.inf
    last: Optional[int] = None
    for city in range(1, n):
        candidate = best[full][city] + cost[city][0]
        if candidate < best_cost:
            best_cost = candidate
            last = city
    if last is None:
        raise ValueError("no tour of finite cost exists")

    tour = [0]
    mask = full
    current: Optional[int] = last
    while current is not None:
        tour.append(current)
        previous = parent[mask][current]
        mask ^= 1 << current
        current = previous
    tour.reverse()
    return best_cost, tour