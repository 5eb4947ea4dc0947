"""Karatsuba multiplication of numbers written as bit strings."""

from __future__ import annotations


def _check_bits(*values: str) -> None:
    for value in values:
        if any(char not in "01" for char in value):
            raise ValueError(f"not a bit string: {value!r}")


def make_equal_length(first: str, second: str) -> tuple[str, str]:
    """Pad the shorter bit string with leading zeros to the longer's length."""
    width = max(len(first), len(second))
    return first.rjust(width, "0"), second.rjust(width, "0")


def _add(first: str, second: str) -> str:
    first, second = make_equal_length(first, second)
    bits: list[str] = []
    carry = 0
    for a_char, b_char in zip(reversed(first), reversed(second)):
        a, b = int(a_char), int(b_char)
        bits.append(str(a ^ b ^ carry))
        carry = (a & b) | (b & carry) | (a & carry)
    if carry:
        bits.append("1")
    return "".join(reversed(bits))


def add_bit_strings(first: str, second: str) -> str:
    """Sum of two bit strings, keeping the width of the longer one.

    A leading 1 is added when the sum overflows that width.
    """
    _check_bits(first, second)
    return _add(first, second)


def _multiply(x: str, y: str) -> int:
    x, y = make_equal_length(x, y)
    n = len(x)
    if n == 0:
        return 0
    if n == 1:
        return int(x) * int(y)

    first_half = n // 2
    second_half = n - first_half
    x_left, x_right = x[:first_half], x[first_half:]
    y_left, y_right = y[:first_half], y[first_half:]

    p1 = _multiply(x_left, y_left)
    p2 = _multiply(x_right, y_right)
    p3 = _multiply(_add(x_left, x_right), _add(y_left, y_right))

    return (p1 << (2 * second_half)) + ((p3 - p1 - p2) << second_half) + p2


def multiply(x: str, y: str) -> int:
    """Product of two bit strings as an integer, by Karatsuba's method."""
    _check_bits(x, y)
    return _multiply(x, y)