"""Dynamic programming and exhaustive-search classics.

Longest common subsequence, matrix-chain ordering, maximum subarray and
subset sum.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def lcs_length(x: str, y: str) -> int:
    """Length of the longest common subsequence of x and y."""
    previous = [0] * (len(y) + 1)
    for x_char in x:
        current = [0]
        for j, y_char in enumerate(y, 1):
            if x_char == y_char:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def is_subsequence(sub: str, text: str) -> bool:
    """True if sub can be obtained from text by deleting characters."""
    remaining = iter(text)
    return all(char in remaining for char in sub)


def brute_force_lcs(s1: str, s2: str) -> str:
    """Longest common subsequence by trying every subsequence of the shorter string.

    Among equally long candidates the one found first is kept.
    """
    small, large = (s1, s2) if len(s1) <= len(s2) else (s2, s1)
    best = ""
    for mask in range(1 << len(small)):
        if mask.bit_count() <= len(best):
            continue
        candidate = "".join(
            char for i, char in enumerate(small) if (mask >> i) & 1
        )
        if is_subsequence(candidate, large):
            best = candidate
    return best


def matrix_chain_order(dims: Sequence[int]) -> int:
    """Fewest scalar multiplications to multiply a chain of matrices.

    Matrix i has dimensions dims[i-1] x dims[i].
    """
    n = len(dims) - 1
    if n < 1:
        raise ValueError("at least one matrix (two dimensions) is needed")
    cost = [[0] * (n + 1) for _ in range(n + 1)]
    for length in range(2, n + 1):
        for i in range(1, n - length + 2):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i - 1] * dims[k] * dims[j]
                for k in range(i, j)
            )
    return cost[1][n]


def max_subarray(values: Iterable[int]) -> tuple[int, int, int]:
    """Kadane's algorithm: (largest sum, start index, end index inclusive)."""
    best: int | None = None
    current = 0
    start = end = candidate_start = 0
    for i, value in enumerate(values):
        if current + value < value:
            current = value
            candidate_start = i
        else:
            current += value
        if best is None or current > best:
            best = current
            start, end = candidate_start, i
    if best is None:
        raise ValueError("values must not be empty")
    return best, start, end


def is_subset_sum(values: Iterable[int], target: int) -> bool:
    """True if some subset of the non-negative values adds up to target."""
    if target < 0:
        raise ValueError("target must not be negative")
    reachable = {0}
    for value in values:
        if value < 0:
            raise ValueError("values must not be negative")
        reachable |= {total + value for total in reachable if total + value <= target}
        if target in reachable:
            return True
    return target in reachable