"""Writing characters, strings and integers to text streams."""

from __future__ import annotations

import sys
from typing import TextIO, Union

from libft.conversions import itoa

Char = Union[int, str]


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def putchar_fd(c: Char, stream: TextIO) -> None:
    """Write one character to ``stream``."""
    stream.write(_char(c))


def putstr_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` to ``stream``, stopping at an embedded NUL character."""
    stream.write(s.split("\0", 1)[0])


def putendl_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    putstr_fd(s, stream)
    putchar_fd("\n", stream)


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal text of a 32-bit signed integer to ``stream``."""
    stream.write(itoa(n))


def putnbr(n: int) -> None:
    """Write the decimal text of a 32-bit signed integer to standard output."""
    putnbr_fd(n, sys.stdout)