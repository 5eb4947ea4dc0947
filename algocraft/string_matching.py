"""Exact string search: naive, Knuth-Morris-Pratt, Boyer-Moore, Rabin-Karp.

Each search returns the list of starting indices of the pattern in the text.
"""

from __future__ import annotations


def naive_search(text: str, pattern: str) -> list[int]:
    """Check the pattern at every position of the text."""
    m = len(pattern)
    return [i for i in range(len(text) - m + 1) if text[i : i + m] == pattern]


def build_lps(pattern: str) -> list[int]:
    """Longest proper prefix that is also a suffix, for every prefix."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def _require_pattern(pattern: str) -> None:
    if not pattern:
        raise ValueError("pattern must not be empty")


def kmp_search(text: str, pattern: str) -> list[int]:
    """Knuth-Morris-Pratt search."""
    _require_pattern(pattern)
    lps = build_lps(pattern)
    m = len(pattern)
    occurrences: list[int] = []
    i = j = 0
    while i < len(text):
        if text[i] == pattern[j]:
            i += 1
            j += 1
            if j == m:
                occurrences.append(i - j)
                j = lps[j - 1]
        elif j:
            j = lps[j - 1]
        else:
            i += 1
    return occurrences


def build_bad_char(pattern: str) -> dict[str, int]:
    """Map each character of the pattern to its last index in it."""
    return {char: index for index, char in enumerate(pattern)}


def build_good_suffix(pattern: str) -> list[int]:
    """Good-suffix shift table of length len(pattern) + 1."""
    _require_pattern(pattern)
    m = len(pattern)
    suff = [0] * m
    suff[m - 1] = m
    g = m - 1
    f = 0
    for i in range(m - 2, -1, -1):
        if i > g and suff[i + m - 1 - f] < i - g:
            suff[i] = suff[i + m - 1 - f]
        else:
            if i < g:
                g = i
            f = i
            while g >= 0 and pattern[g] == pattern[g + m - 1 - f]:
                g -= 1
            suff[i] = f - g

    good = [m] * (m + 1)
    j = 0
    for i in range(m - 1, -1, -1):
        if suff[i] == i + 1:
            while j < m - 1 - i:
                good[j] = m - 1 - i
                j += 1
    for i in range(m - 1):
        good[m - 1 - suff[i]] = m - 1 - i
    return good


def boyer_moore_search(text: str, pattern: str) -> list[int]:
    """Boyer-Moore search with bad-character and good-suffix shifts."""
    _require_pattern(pattern)
    n, m = len(text), len(pattern)
    bad = build_bad_char(pattern)
    good = build_good_suffix(pattern)
    occurrences: list[int] = []
    s = 0
    while s <= n - m:
        j = m - 1
        while j >= 0 and pattern[j] == text[s + j]:
            j -= 1
        if j < 0:
            occurrences.append(s)
            s += good[0]
        else:
            s += max(good[j + 1], j - bad.get(text[s + j], -1))
    return occurrences


def rabin_karp_search(text: str, pattern: str, modulus: int = 101) -> list[int]:
    """Rabin-Karp search with a rolling hash modulo the given prime."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    n, m = len(text), len(pattern)
    if m > n:
        return []
    radix = 256
    high = pow(radix, m - 1, modulus) if m else 1

    pattern_hash = 0
    window_hash = 0
    for p_char, t_char in zip(pattern, text):
        pattern_hash = (radix * pattern_hash + ord(p_char)) % modulus
        window_hash = (radix * window_hash + ord(t_char)) % modulus

    occurrences: list[int] = []
    for i in range(n - m + 1):
        if pattern_hash == window_hash and text[i : i + m] == pattern:
            occurrences.append(i)
        if i < n - m:
            window_hash = (
                radix * (window_hash - ord(text[i]) * high) + ord(text[i + m])
            ) % modulus
    return occurrences