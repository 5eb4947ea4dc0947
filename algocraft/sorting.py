"""Classic comparison sorts, each returning a new sorted list."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs.

    Stops early once a full pass makes no swap.
    """
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = (len(values) - 1) // 2 + 1
    left = merge_sort(values[:middle])
    right = merge_sort(values[middle:])
    # heapq.merge prefers the earlier iterable on ties, keeping the sort stable.
    return list(heapq.merge(left, right))


def _partition(values: list[Any], low: int, high: int) -> int:
    """Lomuto partition around the last element; returns the pivot's place."""
    pivot = values[high]
    i = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
    values[i + 1], values[high] = values[high], values[i + 1]
    return i + 1


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quicksort with Lomuto partitioning."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(result, low, high)
            pending.append((pivot_index + 1, high))
            pending.append((low, pivot_index - 1))
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly selecting the minimum of the unsorted suffix."""
    result = list(items)
    for i in range(len(result) - 1):
        min_index = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[min_index] = result[min_index], result[i]
    return result