"""Helpers for ASCII characters, byte buffers, integer text, strings, stream output, buffered line reading and a singly linked list."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "conversions",
    "search",
    "output",
    "transform",
    "lines",
    "linked",
]