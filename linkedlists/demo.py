"""Walk-throughs of the list operations, printed line by line."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from functools import partial
from typing import Any

from linkedlists.circular import CircularLinkedList
from linkedlists.doubly import DoublyLinkedList
from linkedlists.singly import SinglyLinkedList


def _trace(lst: Any, steps: Iterable[Callable[[], Any]]) -> list[str]:
    """Run each step and record the list as it stands afterwards."""
    lines = []
    for step in steps:
        step()
        lines.append(str(lst))
    return lines


def _circular() -> list[str]:
    lst = CircularLinkedList([1, 2])
    intro = [str(lst), "".join(f"{v}->" for v in lst.cycle(10))]
    return intro + _trace(
        lst,
        [
            partial(lst.insert_at_start, 3),
            partial(lst.insert_at_end, 4),
            lst.delete_at_start,
            lst.delete_at_end,
        ],
    )


def _split() -> list[str]:
    lst = CircularLinkedList([1, 2, 3, 4])
    return [str(lst), *map(str, lst.split())]


def _doubly_intro(lst: DoublyLinkedList) -> list[str]:
    return [str(lst), lst.backward_str()]


def _doubly() -> list[str]:
    lst = DoublyLinkedList([1, 2])
    return _doubly_intro(lst) + _trace(
        lst,
        [
            partial(lst.insert_at_start, 9),
            partial(lst.insert_at, 1, 3),
            lst.delete_at_start,
            lst.delete_at_end,
            partial(lst.insert_at_start, 9),
            partial(lst.delete_at, 2),
        ],
    )


def _reverse() -> list[str]:
    lst = DoublyLinkedList([1, 2])
    return _doubly_intro(lst) + _trace(
        lst,
        [partial(lst.insert_at_start, 9), partial(lst.insert_at, 1, 3), lst.reverse],
    )


def _delete_alternate() -> list[str]:
    lst = SinglyLinkedList([1, 2, 3, 4])
    return [str(lst)] + _trace(lst, [lst.delete_alternate])


def _middle() -> list[str]:
    lst = SinglyLinkedList([1, 2, 3, 4, 5])
    return [str(lst), str(lst.middle())]


DEMOS: dict[str, Callable[[], list[str]]] = {
    "circular": _circular,
    "split": _split,
    "doubly": _doubly,
    "reverse": _reverse,
    "delete-alternate": _delete_alternate,
    "middle": _middle,
}


def run_demo(name: str) -> list[str]:
    """Run the named walk-through and return the lines it shows."""
    try:
        demo = DEMOS[name]
    except KeyError:
        raise ValueError(f"unknown demo {name!r}; choose from {', '.join(DEMOS)}") from None
    return demo()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show linked list operations.")
    parser.add_argument("names", nargs="*", help=f"demos to run: {', '.join(DEMOS)}")
    args = parser.parse_args(argv)
    for name in args.names or list(DEMOS):
        try:
            lines = run_demo(name)
        except ValueError as exc:
            parser.error(str(exc))
        print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())