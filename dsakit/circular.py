"""Circular singly linked list addressed through its tail node."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from dsakit.singly import Node


class CircularLinkedList:
    """A ring of nodes; iteration starts at ``tail`` and goes once around."""

    def __init__(self) -> None:
        self.tail: Node | None = None

    def _nodes(self) -> Iterator[Node]:
        if self.tail is None:
            return
        node = self.tail
        while True:
            yield node
            node = node.next
            if node is self.tail or node is None:
                return

    def insert_after(self, element: Any, value: Any) -> None:
        """Insert ``value`` after the first node holding ``element``, searching from the tail.

        In an empty list ``value`` becomes the only node and ``element`` is ignored.
        """
        if self.tail is None:
            node = Node(value)
            node.next = node
            self.tail = node
            return
        target = next((node for node in self._nodes() if node.data == element), None)
        if target is None:
            raise ValueError(f"{element!r} is not in the list")
        target.next = Node(value, target.next)

    def delete(self, element: Any) -> None:
        """Remove the first node holding ``element``, searching from the node after the tail."""
        if self.tail is None:
            raise ValueError("list is empty")
        previous = self.tail
        for _ in range(len(self)):
            current = previous.next
            if current.data == element:
                break
            previous = current
        else:
            raise ValueError(f"{element!r} is not in the list")
        previous.next = current.next
        if current is previous:
            self.tail = None
        elif current is self.tail:
            self.tail = previous
        current.next = None

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        if self.tail is None:
            return "list is empty"
        return "".join(f"{value} " for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def is_circular(self) -> bool:
        """Return True when following the links from the tail leads back to it."""
        if self.tail is None:
            return False
        node = self.tail.next
        while node is not None and node is not self.tail:
            node = node.next
        return node is self.tail