"""Doubly linked list with positional insert and delete and in-place reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class DoublyNode:
    """A list cell linked to both its neighbours."""

    data: Any
    prev: DoublyNode | None = None
    next: DoublyNode | None = None


class DoublyLinkedList:
    """A chain of two-way linked nodes from ``head``; positions are counted from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: DoublyNode | None = None
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[DoublyNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _last(self) -> DoublyNode | None:
        last = None
        for last in self._nodes():
            pass
        return last

    def _node_at(self, position: int) -> DoublyNode:
        if position >= 1:
            for index, node in enumerate(self._nodes(), start=1):
                if index == position:
                    return node
        raise IndexError(f"no node at position {position}")

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first node."""
        node = DoublyNode(value, next=self.head)
        if self.head is not None:
            self.head.prev = node
        self.head = node

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        last = self._last()
        node = DoublyNode(value, prev=last)
        if last is None:
            self.head = node
        else:
            last.next = node

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``.

        Position ``len + 1`` appends; anything beyond raises IndexError.
        """
        if position < 1:
            raise IndexError(f"position must be at least 1, got {position}")
        if position == 1:
            self.push_front(value)
            return
        before = self._node_at(position - 1)
        node = DoublyNode(value, prev=before, next=before.next)
        if before.next is not None:
            before.next.prev = node
        before.next = node

    def delete_at(self, position: int) -> Any:
        """Remove the node at 1-based ``position`` and return its value."""
        node = self._node_at(position)
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        node.prev = node.next = None
        return node.data

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._last()
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + " NULL"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def reverse(self) -> None:
        """Reverse the list in place by swapping every node's links."""
        node = self.head
        last = None
        while node is not None:
            node.prev, node.next = node.next, node.prev
            last = node
            node = node.prev
        self.head = last