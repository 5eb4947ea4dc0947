"""Fractional and 0/1 knapsack solvers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item with a weight and a value."""

    weight: int
    value: int


def fractional_knapsack(capacity: int, items: Iterable[Item]) -> float:
    """Greatest value when items may be taken in fractions.

    Items are taken greedily by value per unit weight.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    pool = list(items)
    if any(item.weight <= 0 for item in pool):
        raise ValueError("item weights must be positive")
    pool.sort(key=lambda item: item.value / item.weight, reverse=True)

    total = 0.0
    remaining = capacity
    for item in pool:
        if item.weight <= remaining:
            remaining -= item.weight
            total += item.value
        else:
            total += item.value * remaining / item.weight
            break
    return total


def _check(capacity: int, weights: Sequence[int], values: Sequence[int]) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if any(w < 0 for w in weights):
        raise ValueError("weights must not be negative")


def knapsack_01(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Greatest value of a subset of items within capacity, by a full table."""
    _check(capacity, weights, values)
    table = [[0] * (capacity + 1)]
    for weight, value in zip(weights, values):
        previous = table[-1]
        row = [
            max(previous[w], previous[w - weight] + value) if weight <= w else previous[w]
            for w in range(capacity + 1)
        ]
        table.append(row)
    return table[-1][capacity]


def knapsack_01_compact(
    capacity: int, weights: Sequence[int], values: Sequence[int]
) -> int:
    """Greatest value of a subset of items within capacity, in one row."""
    _check(capacity, weights, values)
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for w in range(capacity, weight - 1, -1):
            best[w] = max(best[w], best[w - weight] + value)
    return best[capacity]