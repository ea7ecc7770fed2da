"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(eq=False)
class Node(Generic[T]):
    """One element of a linked list: its content and the node after it."""

    content: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list that grows at either end."""

    def __init__(self, contents: Optional[Iterable[T]] = None) -> None:
        self.head: Optional[Node[T]] = None
        for content in contents or ():
            self.add_back(content)

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: T) -> Node[T]:
        """Insert ``content`` before the first element and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: T) -> Node[T]:
        """Append ``content`` after the last element and return its node."""
        node: Node[T] = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.content

    def last(self) -> Optional[Node[T]]:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every element, passing each content to ``delete`` first if given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            self.head = following
            node = following

    def for_each(self, f: Callable[[T], Any]) -> None:
        """Call ``f`` on every content, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[T], U]) -> "LinkedList[U]":
        """Return a new list holding ``f(content)`` for every content, in order."""
        return LinkedList(f(content) for content in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"