"""Binary tree nodes and depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """A binary tree node."""

    data: Any
    left: Optional[Node] = None
    right: Optional[Node] = None


def preorder(root: Optional[Node]) -> Iterator[Any]:
    """Yield node data root, left, right."""
    if root is None:
        return
    yield root.data
    yield from preorder(root.left)
    yield from preorder(root.right)


def inorder(root: Optional[Node]) -> Iterator[Any]:
    """Yield node data left, root, right."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.data
    yield from inorder(root.right)


def postorder(root: Optional[Node]) -> Iterator[Any]:
    """Yield node data left, right, root."""
    if root is None:
        return
    yield from postorder(root.left)
    yield from postorder(root.right)
    yield root.data