"""A singly linked list with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    value: Any
    next: Optional[Node] = None


class _Chain:
    """Walking, lookup and rendering shared by lists reached from ``head``."""

    head: Optional[Node]

    def _nodes(self) -> Iterator[Any]:
        first = node = self.head
        while node is not None:
            yield node
            node = node.next
            if node is first:
                break

    def _node_at(self, position: int) -> Any:
        if position >= 1:
            for index, node in enumerate(self._nodes(), start=1):
                if index == position:
                    return node
        raise IndexError(f"position {position} is out of range")

    def _last(self) -> Any:
        last = None
        for last in self._nodes():
            pass
        return last

    @staticmethod
    def _render(values: Iterable[Any], arrow: str, end: str = "") -> str:
        return "".join(f"{value}{arrow}" for value in values) + end


class SinglyLinkedList(_Chain):
    """A chain of nodes reached from ``head``. Positions are 1-based."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for value in reversed(list(values)):
            self.insert_at_head(value)

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return self._render(self, "->", "Null")

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` in front of the list."""
        self.head = Node(value, self.head)

    def insert_at_end(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        last = self._last()
        if last is None:
            self.insert_at_head(value)
        else:
            last.next = Node(value)

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``position``."""
        if position == 1:
            self.insert_at_head(value)
            return
        prev = self._node_at(position - 1)
        prev.next = Node(value, prev.next)

    def delete_at_head(self) -> Any:
        """Remove the first node; return its value, or None if empty."""
        if self.head is None:
            return None
        removed = self.head
        self.head = removed.next
        return removed.value

    def delete_at_end(self) -> Any:
        """Remove the last node; return its value, or None if empty."""
        if self.head is None:
            return None
        return self.delete_at(len(self))

    def delete_at(self, position: int) -> Any:
        """Remove the node at ``position`` and return its value."""
        if position == 1:
            return self.delete_at_head()
        prev = self._node_at(position - 1)
        removed = prev.next
        if removed is None:
            raise IndexError(f"position {position} is out of range")
        prev.next = removed.next
        return removed.value

    def update(self, position: int, value: Any) -> None:
        """Replace the value stored at ``position``."""
        self._node_at(position).value = value

    def delete_alternate(self) -> None:
        """Remove the 2nd, 4th, 6th ... nodes."""
        node = self.head
        while node is not None and node.next is not None:
            node.next = node.next.next
            node = node.next

    def middle(self) -> Any:
        """Return the middle value; the second of the two for even lengths."""
        if self.head is None:
            raise ValueError("middle of an empty list")
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow.value