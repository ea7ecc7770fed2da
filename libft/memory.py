"""Byte-buffer operations on mutable buffers such as ``bytearray``."""

from __future__ import annotations

from typing import Optional


def _check_span(name: str, buf, n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    if n > len(buf):
        raise ValueError(f"n ({n}) exceeds the length of {name} ({len(buf)})")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_span("buf", buf, n)
    buf[:n] = bytes(n)


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (taken modulo 256)."""
    _check_span("buf", buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def memcpy(dst: bytearray, src, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _check_span("dst", dst, n)
    _check_span("src", src, n)
    dst[:n] = src[:n]
    return dst


def memmove(dst: bytearray, src, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to ``dst``; the regions may overlap."""
    _check_span("dst", dst, n)
    _check_span("src", src, n)
    dst[:n] = bytes(src[:n])
    return dst


def memchr(buf, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_span("buf", buf, n)
    target = c & 0xFF
    return next((i for i, b in enumerate(bytes(buf[:n])) if b == target), None)


def memcmp(a, b, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_span("a", a, n)
    _check_span("b", b, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)