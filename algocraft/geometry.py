"""Closest pair of points by divide and conquer."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in the plane with the index it was given at."""

    x: int
    y: int
    id: int


def closest_pair(points: Iterable[Sequence[int]]) -> tuple[float, tuple[int, int]]:
    """Return the smallest distance and the indices of the two points at it.

    Points are (x, y) pairs; indices refer to their input positions.
    """
    pts = [Point(x, y, index) for index, (x, y) in enumerate(points)]
    if len(pts) < 2:
        raise ValueError("at least two points are needed")
    pts.sort(key=lambda p: (p.x, p.y))

    best_dist = math.inf
    best_pair = (pts[0].id, pts[1].id)

    def update(a: Point, b: Point) -> None:
        nonlocal best_dist, best_pair
        dx = float(a.x) - b.x
        dy = float(a.y) - b.y
        d = math.sqrt(dx * dx + dy * dy)
        if d < best_dist:
            best_dist = d
            best_pair = (a.id, b.id)

    def by_y(p: Point) -> int:
        return p.y

    def solve(lo: int, hi: int) -> None:
        if hi - lo <= 3:
            for i in range(lo, hi):
                for j in range(i + 1, hi):
                    update(pts[i], pts[j])
            pts[lo:hi] = sorted(pts[lo:hi], key=by_y)
            return
        mid = (lo + hi) // 2
        mid_x = pts[mid].x
        solve(lo, mid)
        solve(mid, hi)
        pts[lo:hi] = list(heapq.merge(pts[lo:mid], pts[mid:hi], key=by_y))

        strip: list[Point] = []
        for p in pts[lo:hi]:
            if abs(p.x - mid_x) < best_dist:
                for q in reversed(strip):
                    if float(p.y) - q.y >= best_dist:
                        break
                    update(p, q)
                strip.append(p)

    solve(0, len(pts))
    return best_dist, best_pair