"""Naive suffix array construction and binary-search lookup."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional


def build_suffix_array(text: str) -> list[int]:
    """Starting indices of the suffixes of text in lexicographic order."""
    return sorted(range(len(text)), key=lambda index: text[index:])


def search(
    text: str, pattern: str, suffix_array: Optional[Sequence[int]] = None
) -> Optional[int]:
    """Index of one occurrence of pattern in text, or None if absent.

    The suffix array is built when not supplied.
    """
    if suffix_array is None:
        suffix_array = build_suffix_array(text)
    m = len(pattern)
    low, high = 0, len(suffix_array) - 1
    while low <= high:
        mid = low + (high - low) // 2
        start = suffix_array[mid]
        prefix = text[start : start + m]
        if prefix == pattern:
            return start
        if pattern < prefix:
            high = mid - 1
        else:
            low = mid + 1
    return None