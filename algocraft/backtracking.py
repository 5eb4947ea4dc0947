"""Backtracking searches: m-colouring of a graph and the n-queens puzzle."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional


def graph_coloring(
    graph: Sequence[Sequence[object]], colours: int
) -> Optional[list[int]]:
    """Colour the vertices of an adjacency matrix with colours 1..colours.

    Returns the first assignment found, or None if none exists.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    if colours < 0:
        raise ValueError("number of colours must not be negative")
    assignment = [0] * size

    def safe(vertex: int, colour: int) -> bool:
        return all(
            not edge or assigned != colour
            for edge, assigned in zip(graph[vertex], assignment)
        )

    def place(vertex: int) -> bool:
        if vertex == size:
            return True
        for colour in range(1, colours + 1):
            if safe(vertex, colour):
                assignment[vertex] = colour
                if place(vertex + 1):
                    return True
                assignment[vertex] = 0
        return False

    return assignment if place(0) else None


def solve_n_queens(n: int) -> list[list[int]]:
    """Every placement of n non-attacking queens.

    Each solution lists the queen's column for each row, in search order.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    solutions: list[list[int]] = []
    positions: list[int] = []

    def safe(row: int, col: int) -> bool:
        return all(
            prev_col != col and abs(prev_col - col) != row - prev_row
            for prev_row, prev_col in enumerate(positions)
        )

    def place(row: int) -> None:
        if row == n:
            solutions.append(list(positions))
            return
        for col in range(n):
            if safe(row, col):
                positions.append(col)
                place(row + 1)
                positions.pop()

    place(0)
    return solutions


def render_board(solution: Sequence[int]) -> str:
    """Draw a solution as rows of 'Q' and '.' separated by spaces."""
    size = len(solution)
    return "\n".join(
        " ".join("Q" if c == col else "." for c in range(size)) for col in solution
    )