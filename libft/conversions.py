"""Conversions between 32-bit integers and their decimal text."""

from __future__ import annotations

INT_MIN = -2147483648
INT_MAX = 2147483647

_SPACES = frozenset("\t\n\v\f\r ")


def atoi(s: str) -> int:
    """Parse a leading decimal integer from ``s``.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit. A result outside the 32-bit signed range
    raises ``OverflowError``.
    """
    text = s.lstrip("".join(_SPACES))
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = []
    for ch in text:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = sign * int("".join(digits)) if digits else 0
    if not INT_MIN <= value <= INT_MAX:
        raise OverflowError(f"value {value} does not fit in a 32-bit signed integer")
    return value


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"value {n} does not fit in a 32-bit signed integer")
    return str(n)