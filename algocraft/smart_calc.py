"""Addition and subtraction in any base written with user-defined symbols.

The symbols file lists the digit symbols, lowest value first, on its first
line. Each instruction line reads ``OPERATION NUM1 NUM2 BASE`` where the
operation is ADD or SUBTRACT.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence
from typing import Optional

_WHITESPACE = " \t\n\r\f\v"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


class CalculatorError(Exception):
    """Raised for bad symbol definitions and bad instructions."""


class SymbolTable:
    """Digit symbols in order of value."""

    def __init__(self, symbols: Iterable[str]) -> None:
        ordered: list[str] = []
        seen: set[str] = set()
        for token in symbols:
            if len(token) != 1:
                raise CalculatorError(
                    f"Invalid symbol (must be single character): {token}"
                )
            if token in seen:
                raise CalculatorError(f"Duplicate character found: {token}")
            seen.add(token)
            ordered.append(token)
        if not ordered:
            raise CalculatorError("No symbols provided in the file.")
        self.symbols = tuple(ordered)
        self.values = {symbol: value for value, symbol in enumerate(ordered)}

    @property
    def max_base(self) -> int:
        """The largest base the symbols can express."""
        return len(self.symbols)

    def to_decimal(self, digits: str, base: int) -> int:
        """Value of a number written with these symbols in the given base."""
        result = 0
        for char in digits:
            try:
                digit = self.values[char]
            except KeyError:
                raise CalculatorError(
                    f"Character not found in symbol map: {char}"
                ) from None
            result = result * base + digit
        return result

    def from_decimal(self, number: int, base: int) -> str:
        """Write a non-negative number with these symbols in the given base."""
        if number < 0:
            raise CalculatorError("Cannot represent a negative number")
        if not 1 <= base <= self.max_base:
            raise CalculatorError(f"Base out of range (1 to {self.max_base}): {base}")
        if number == 0:
            return self.symbols[0]
        if base < 2:
            raise CalculatorError("Base 1 can only represent zero")
        digits: list[str] = []
        while number:
            number, remainder = divmod(number, base)
            digits.append(self.symbols[remainder])
        return "".join(reversed(digits))


def read_symbols(path: str) -> SymbolTable:
    """Read the symbol table from the first line of a file."""
    try:
        with open(path, encoding="utf-8") as handle:
            first_line = handle.readline()
    except OSError as error:
        raise CalculatorError(f"Could not open file {path}") from error
    return SymbolTable(first_line.split())


def _parse_base(text: str, line: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise CalculatorError(f"Invalid base: {text} in line: {line}")
    base = int(match.group(1))
    if not _INT_MIN <= base <= _INT_MAX:
        raise CalculatorError(f"Invalid base: {text} in line: {line}")
    return base


def _validate_digits(
    symbols: SymbolTable, number: str, label: str, base: int, line: str
) -> None:
    for char in number:
        value = symbols.values.get(char)
        if value is None:
            raise CalculatorError(
                f"Invalid character '{char}' in {label} of line: {line}"
            )
        if value >= base:
            raise CalculatorError(
                f"Digit '{char}' in {label} exceeds base {base} in line: {line}"
            )


def evaluate_instruction(symbols: SymbolTable, line: str) -> Optional[str]:
    """Carry out one instruction line; None for a blank line."""
    text = line.strip(_WHITESPACE)
    if not text:
        return None
    parts = text.split()
    if len(parts) != 4:
        raise CalculatorError(f"Invalid instruction line: {text}")
    operation, first, second, base_text = parts

    base = _parse_base(base_text, text)
    if not 1 <= base <= symbols.max_base:
        raise CalculatorError(
            f"Base out of range (1 to {symbols.max_base}): {base} in line: {text}"
        )
    _validate_digits(symbols, first, "num1", base, text)
    _validate_digits(symbols, second, "num2", base, text)

    left = symbols.to_decimal(first, base)
    right = symbols.to_decimal(second, base)
    if operation == "ADD":
        result = left + right
    elif operation == "SUBTRACT":
        result = left - right
        if result < 0:
            raise CalculatorError(f"Negative result in subtraction in line: {text}")
    else:
        raise CalculatorError(f"Invalid operation: {operation} in line: {text}")
    return symbols.from_decimal(result, base)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run every instruction of a file against a symbols file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Usage: smart_calc <symbols_file> <instructions_file>", file=sys.stderr)
        return 1
    symbols_path, instructions_path = args

    try:
        symbols = read_symbols(symbols_path)
    except CalculatorError as error:
        print(f"Error reading symbols: {error}", file=sys.stderr)
        return 1

    try:
        handle = open(instructions_path, encoding="utf-8")
    except OSError:
        print(f"Could not open instructions file: {instructions_path}", file=sys.stderr)
        return 1

    with handle:
        for line in handle:
            try:
                result = evaluate_instruction(symbols, line)
            except CalculatorError as error:
                print(error, file=sys.stderr)
                continue
            if result is not None:
                print(result)
    return 0