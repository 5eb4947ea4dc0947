"""Square matrix addition and Strassen multiplication."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[int]]


def matrix_add(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]], sign: int = 1
) -> Matrix:
    """Elementwise a + sign * b."""
    if len(a) != len(b) or any(len(ra) != len(rb) for ra, rb in zip(a, b)):
        raise ValueError("matrices must have the same shape")
    return [[x + sign * y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def _size(matrix: Sequence[Sequence[int]]) -> int:
    n = len(matrix)
    if n == 0 or n & (n - 1):
        raise ValueError("matrix size must be a positive power of two")
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    return n


def _quadrants(matrix: Sequence[Sequence[int]], half: int) -> tuple[Matrix, ...]:
    top, bottom = matrix[:half], matrix[half:]
    return (
        [list(row[:half]) for row in top],
        [list(row[half:]) for row in top],
        [list(row[:half]) for row in bottom],
        [list(row[half:]) for row in bottom],
    )


def _strassen(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    n = len(a)
    if n == 1:
        return [[a[0][0] * b[0][0]]]
    half = n // 2
    a11, a12, a21, a22 = _quadrants(a, half)
    b11, b12, b21, b22 = _quadrants(b, half)

    m1 = _strassen(matrix_add(a11, a22), matrix_add(b11, b22))
    m2 = _strassen(matrix_add(a21, a22), b11)
    m3 = _strassen(a11, matrix_add(b12, b22, -1))
    m4 = _strassen(a22, matrix_add(b21, b11, -1))
    m5 = _strassen(matrix_add(a11, a12), b22)
    m6 = _strassen(matrix_add(a21, a11, -1), matrix_add(b11, b12))
    m7 = _strassen(matrix_add(a12, a22, -1), matrix_add(b21, b22))

    c11 = matrix_add(matrix_add(m1, m4), matrix_add(m7, m5, -1))
    c12 = matrix_add(m3, m5)
    c21 = matrix_add(m2, m4)
    c22 = matrix_add(matrix_add(m1, m3), matrix_add(m6, m2, -1))

    return [left + right for left, right in zip(c11, c12)] + [
        left + right for left, right in zip(c21, c22)
    ]


def strassen(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Product of two n-by-n matrices, n a power of two, by Strassen's method."""
    if _size(a) != _size(b):
        raise ValueError("matrices must have the same size")
    return _strassen(a, b)