"""A circular singly linked list whose last node points back to the first."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Optional

from linkedlists.singly import Node, _Chain


@dataclass(eq=False)
class CircularNode(Node):
    """One cell of a circular list."""


class CircularLinkedList(_Chain):
    """A ring of nodes, held by its last node so both ends are at hand."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: Optional[CircularNode] = None
        for value in values:
            self.insert_at_end(value)

    @property
    def head(self) -> Optional[CircularNode]:
        return None if self._tail is None else self._tail.next

    def __iter__(self) -> Iterator[Any]:
        return map(attrgetter("value"), self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        return self._render(self, "->")

    def cycle(self, count: int = 10) -> Iterator[Any]:
        """Yield ``count`` values, going round the ring as often as needed."""
        node = self.head
        if node is None:
            return
        for _ in range(count):
            yield node.value
            node = node.next

    def _link_new(self, value: Any) -> CircularNode:
        node = CircularNode(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        return node

    def insert_at_start(self, value: Any) -> None:
        """Make ``value`` the new first element."""
        self._link_new(value)

    def insert_at_end(self, value: Any) -> None:
        """Make ``value`` the new last element."""
        self._tail = self._link_new(value)

    def delete_at_start(self) -> Any:
        """Remove the first node; return its value, or None if empty."""
        if self._tail is None:
            return None
        first = self._tail.next
        if first is self._tail:
            self._tail = None
        else:
            self._tail.next = first.next
        return first.value

    def delete_at_end(self) -> Any:
        """Remove the last node; return its value, or None if empty."""
        last = self._tail
        if last is None:
            return None
        if last.next is last:
            self._tail = None
            return last.value
        second_last = next(node for node in self._nodes() if node.next is last)
        second_last.next = last.next
        self._tail = second_last
        return last.value

    def split(self) -> tuple[CircularLinkedList, CircularLinkedList]:
        """Return two new rings: the first half (the larger) and the rest."""
        values = list(self)
        if not values:
            raise ValueError("cannot split an empty list")
        cut = math.ceil(len(values) / 2)
        return CircularLinkedList(values[:cut]), CircularLinkedList(values[cut:])