# linkedlists

Three small linked-list types, each with the usual exercises built in.
Every type accepts an iterable of starting values, can be iterated, has a
length, and prints as its values joined by arrows.

## The list types

### `SinglyLinkedList` (`linkedlists.singly`)

Positions are 1-based.

- `insert_at_head(value)`, `insert_at_end(value)`, `insert_at(position, value)`
- `delete_at_head()`, `delete_at_end()`, `delete_at(position)`: each returns
  the removed value; the head and end deletions return `None` on an empty list.
- `update(position, value)`: replace the value at a position.
- `delete_alternate()`: remove the 2nd, 4th, 6th ... nodes.
- `middle()`: the middle value; for an even length, the second of the two
  middle values. Raises `ValueError` on an empty list.
- `str(lst)` gives `1->2->3->Null`.

A position past the end of the list raises `IndexError`.

### `DoublyLinkedList` (`linkedlists.doubly`)

Positions are 1-based.

- `insert_at_start(value)`, `insert_at_end(value)`, `insert_at(position, value)`
- `delete_at_start()`, `delete_at_end()`, `delete_at(position)`: each returns
  the removed value; the start and end deletions return `None` on an empty list.
- `reverse()`: reverse the list in place.
- `reversed(lst)` walks the values from last to first.
- `str(lst)` gives `1--2--Null`; `lst.backward_str()` gives the same from the
  last node back to the first.

A position past the end of the list raises `IndexError`.

### `CircularLinkedList` (`linkedlists.circular`)

- `insert_at_start(value)`, `insert_at_end(value)`
- `delete_at_start()`, `delete_at_end()`: return the removed value, or `None`
  on an empty list.
- `cycle(count=10)`: yield `count` values, going round the ring as often as
  needed.
- `split()`: return two new rings, the first half (the larger one for an odd
  length) and the rest. The list itself is left as it was. Raises
  `ValueError` on an empty list.
- `str(lst)` gives `1->2->3->`.

## Install

```
pip install .
```

## Use

```python
from linkedlists.singly import SinglyLinkedList
from linkedlists.doubly import DoublyLinkedList
from linkedlists.circular import CircularLinkedList

numbers = SinglyLinkedList([1, 2, 3, 4])
numbers.delete_alternate()
print(numbers)                 # 1->3->Null

print(SinglyLinkedList([1, 2, 3, 4, 5]).middle())   # 3

items = DoublyLinkedList([1, 2])
items.insert_at_start(9)
items.reverse()
print(items)                   # 2--1--9--Null
print(items.backward_str())    # 9--1--2--Null

ring = CircularLinkedList([1, 2, 3, 4])
first, second = ring.split()
print(first, second)           # 1->2-> 3->4->
print(list(ring.cycle(5)))     # [1, 2, 3, 4, 1]
```

## Demo

`linkedlists-demo` runs a series of steps on each list type and prints the
list after every step. With no arguments it runs every demo in turn:

```
linkedlists-demo
```

Name one or more demos to run only those. The names are `circular`, `split`,
`doubly`, `reverse`, `delete-alternate` and `middle`:

```
linkedlists-demo split middle
linkedlists-demo --help
```

From Python, `linkedlists.demo.run_demo(name)` returns the lines a demo would
print, and raises `ValueError` for an unknown name.

## Tests

```
pip install .[test]
pytest
```