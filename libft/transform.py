"""Building new strings from existing ones: slicing, joining, trimming,
splitting and mapping."""

from __future__ import annotations

from typing import Callable, List, Optional, Union

Char = Union[int, str]


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` at or past the end of ``s`` gives an empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(a: Optional[str], b: Optional[str]) -> Optional[str]:
    """Concatenate ``a`` and ``b``.

    A missing (``None``) operand counts as empty; when both are missing the
    result is ``None``.
    """
    if a is None and b is None:
        return None
    return (a or "") + (b or "")


def strtrim(s: Optional[str], charset: str) -> str:
    """Strip characters found in ``charset`` from both ends of ``s``.

    The backward scan for the last kept character never examines index 0,
    so when that character would be the first one of ``s`` (including any
    one-character string) the result is empty.
    """
    if not s:
        return ""
    start = next((i for i, ch in enumerate(s) if ch not in charset), len(s))
    end = next((i for i in range(len(s) - 1, 0, -1) if s[i] not in charset), 0)
    if end == 0:
        return ""
    return s[start : end + 1]


def split(s: str, c: Char) -> List[str]:
    """Split ``s`` on the delimiter ``c``, dropping empty pieces."""
    delimiter = _char(c)
    return [word for word in s.split(delimiter) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return the string made of ``f(index, char)`` for every character of ``s``."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(s: str, f: Callable[[int, str], Optional[str]]) -> str:
    """Call ``f(index, char)`` for every character of ``s``.

    When ``f`` returns a string it replaces that character; when it returns
    ``None`` the character is kept. The resulting string is returned.
    """
    pieces = []
    for i, ch in enumerate(s):
        replacement = f(i, ch)
        pieces.append(ch if replacement is None else replacement)
    return "".join(pieces)