"""Huffman coding: tree construction, code tables, encoding and decoding."""

from __future__ import annotations

import heapq
import itertools
from collections import Counter
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass
class HuffmanNode:
    """A Huffman tree node; leaves carry a character."""

    freq: int
    char: Optional[str] = None
    left: Optional[HuffmanNode] = None
    right: Optional[HuffmanNode] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_huffman_tree(data: str) -> HuffmanNode:
    """Build the Huffman tree for the character frequencies of data."""
    if not data:
        raise ValueError("cannot build a Huffman tree from empty data")
    order = itertools.count()
    heap = [
        (freq, next(order), HuffmanNode(freq, char))
        for char, freq in Counter(data).items()
    ]
    heapq.heapify(heap)
    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        total = left_freq + right_freq
        heapq.heappush(heap, (total, next(order), HuffmanNode(total, None, left, right)))
    return heap[0][2]


def build_codes(root: HuffmanNode) -> dict[str, str]:
    """Map each leaf character to its bit string ('0' left, '1' right)."""
    codes: dict[str, str] = {}
    stack = [(root, "")]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf:
            codes[node.char] = prefix
            continue
        if node.right is not None:
            stack.append((node.right, prefix + "1"))
        if node.left is not None:
            stack.append((node.left, prefix + "0"))
    return codes


def encode(data: str, codes: Mapping[str, str]) -> str:
    """Concatenate the codes of the characters of data."""
    try:
        return "".join(codes[char] for char in data)
    except KeyError as error:
        raise ValueError(f"no code for character {error.args[0]!r}") from None


def decode(encoded: str, root: HuffmanNode) -> str:
    """Walk the tree bit by bit, emitting a character at every leaf."""
    decoded: list[str] = []
    node = root
    for bit in encoded:
        child = node.left if bit == "0" else node.right
        if child is None:
            raise ValueError("bit string does not fit the Huffman tree")
        node = child
        if node.is_leaf:
            decoded.append(node.char)
            node = root
    return "".join(decoded)