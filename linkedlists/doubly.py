"""A doubly linked list that can be walked and reversed in place."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from linkedlists.singly import Node, _Chain


@dataclass(eq=False)
class DoublyNode(Node):
    """One cell of a doubly linked list."""

    prev: Optional[DoublyNode] = None


class DoublyLinkedList(_Chain):
    """Nodes linked both ways from ``head``. Positions are 1-based."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[DoublyNode] = None
        for value in reversed(list(values)):
            self.insert_at_start(value)

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __reversed__(self) -> Iterator[Any]:
        node = self._last()
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return len(list(self._nodes()))

    def __str__(self) -> str:
        return self._render(self, "--", "Null")

    def backward_str(self) -> str:
        """Render the list from the last node back to the first."""
        return self._render(reversed(self), "--", "Null")

    def _link_after(self, prev: DoublyNode, value: Any) -> None:
        node = DoublyNode(value, next=prev.next, prev=prev)
        if prev.next is not None:
            prev.next.prev = node
        prev.next = node

    def _unlink(self, node: DoublyNode) -> Any:
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        return node.value

    def insert_at_start(self, value: Any) -> None:
        """Put ``value`` in front of the list."""
        node = DoublyNode(value, next=self.head)
        if self.head is not None:
            self.head.prev = node
        self.head = node

    def insert_at_end(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        last = self._last()
        if last is None:
            self.insert_at_start(value)
        else:
            self._link_after(last, value)

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``position``."""
        if position == 1:
            self.insert_at_start(value)
        else:
            self._link_after(self._node_at(position - 1), value)

    def delete_at_start(self) -> Any:
        """Remove the first node; return its value, or None if empty."""
        return None if self.head is None else self._unlink(self.head)

    def delete_at_end(self) -> Any:
        """Remove the last node; return its value, or None if empty."""
        last = self._last()
        return None if last is None else self._unlink(last)

    def delete_at(self, position: int) -> Any:
        """Remove the node at ``position`` and return its value."""
        return self._unlink(self._node_at(position))

    def reverse(self) -> None:
        """Reverse the list in place by swapping each node's links."""
        node = self.head
        last = None
        while node is not None:
            last = node
            node.next, node.prev = node.prev, node.next
            node = node.prev
        if last is not None:
            self.head = last