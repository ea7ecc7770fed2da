"""Measuring, searching, comparing and bounded copying of text.

A search result is an index into the string, or ``None`` when nothing is
found. Searching for the NUL character finds the terminator, whose index is
the length of the string. The bounded copy functions return the new text
together with the length they tried to create.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

Char = Union[int, str]


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strlen(s: Optional[str]) -> int:
    """Return the length of ``s``; ``None`` counts as empty."""
    return 0 if s is None else len(s)


def strchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    A NUL character matches the terminator at index ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    A NUL character matches the terminator at index ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference of the first pair that differs, where the end
    of a string counts as code 0, or 0 when no difference is found.
    """
    _check_size("n", n)
    for i in range(min(n, max(len(a), len(b)))):
        x = ord(a[i]) if i < len(a) else 0
        y = ord(b[i]) if i < len(b) else 0
        if x != y:
            return x - y
    return 0


def strcmp(a: str, b: str) -> int:
    """Compare two strings, returning 1, -1 or 0.

    Comparison stops as soon as either string ends, so a string compares
    equal to any string it is a prefix of.
    """
    for x, y in zip(a, b):
        if x != y:
            return 1 if x > y else -1
    return 0


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots, one kept for the terminator.

    Returns the copied text and ``len(src)``; truncation happened when the
    length is at least ``size``.
    """
    _check_size("size", size)
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``size`` slots.

    Returns the resulting text and the length it tried to create,
    ``min(len(dst), size) + len(src)``. When ``dst`` already fills ``size``
    slots it is returned unchanged.
    """
    _check_size("size", size)
    start = min(len(dst), size)
    if start >= size:
        return dst, start + len(src)
    room = size - start - 1
    return dst + src[:room], start + len(src)


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    _check_size("length", length)
    if not needle:
        return 0
    limit = min(length, len(haystack))
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index