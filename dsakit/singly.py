"""Singly linked list with positional insert and delete, reversal and middle lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A list cell holding a value and a link to the next cell."""

    data: Any
    next: Node | None = None


class SinglyLinkedList:
    """A chain of nodes reachable from ``head``; positions are counted from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> Node:
        if position >= 1:
            for index, node in enumerate(self._nodes(), start=1):
                if index == position:
                    return node
        raise IndexError(f"no node at position {position}")

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first node."""
        self.head = Node(value, self.head)

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        node = Node(value)
        last = None
        for last in self._nodes():
            pass
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
        before.next = Node(value, before.next)

    def delete_at(self, position: int) -> Any:
        """Remove the node at 1-based ``position`` and return its value."""
        if position < 1 or self.head is None:
            raise IndexError(f"no node at position {position}")
        if position == 1:
            node = self.head
            self.head = node.next
            node.next = None
            return node.data
        before = self._node_at(position - 1)
        node = before.next
        if node is None:
            raise IndexError(f"no node at position {position}")
        before.next = node.next
        node.next = None
        return node.data

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return "".join(f"{value} ->" for value in self) + " NULL"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: Node | None = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous, current = current, following
        self.head = previous

    def middle(self) -> Any:
        """Return the middle value; of two middles, the second one."""
        length = len(self)
        if length == 0:
            raise ValueError("middle of an empty list")
        return self._node_at(length // 2 + 1).data

    def reverse_in_groups(self, k: int) -> None:
        """Reverse each run of ``k`` nodes in place; a shorter last run is reversed too."""
        if k < 1:
            raise ValueError(f"group size must be at least 1, got {k}")
        new_head: Node | None = None
        joined_tail: Node | None = None
        current = self.head
        while current is not None:
            group_start = current
            previous: Node | None = None
            count = 0
            while current is not None and count < k:
                following = current.next
                current.next = previous
                previous, current = current, following
                count += 1
            if joined_tail is None:
                new_head = previous
            else:
                joined_tail.next = previous
            joined_tail = group_start
        self.head = new_head

    def is_circular(self) -> bool:
        """Return True when following the links from the head leads back to it."""
        if self.head is None:
            return False
        node = self.head.next
        while node is not None and node is not self.head:
            node = node.next
        return node is self.head