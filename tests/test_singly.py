import pytest

from linkedlists.singly import SinglyLinkedList

BASE = [1, 2, 3, 4]


@pytest.fixture
def chain():
    return SinglyLinkedList(BASE)


def test_contents(chain):
    assert (list(chain), len(chain), str(chain)) == (BASE, 4, "1->2->3->4->Null")


def test_empty_list_behaviour():
    empty = SinglyLinkedList()
    assert (list(empty), len(empty), str(empty)) == ([], 0, "Null")
    assert empty.delete_at_head() is None
    assert empty.delete_at_end() is None
    empty.insert_at_end(7)
    assert str(empty) == "7->Null"


def test_ends(chain):
    chain.insert_at_head(0)
    chain.insert_at_end(5)
    assert list(chain) == [0, 1, 2, 3, 4, 5]
    assert (chain.delete_at_head(), chain.delete_at_end()) == (0, 5)
    assert list(chain) == BASE


def test_delete_at_end_of_single_node():
    single = SinglyLinkedList([8])
    assert single.delete_at_end() == 8
    assert str(single) == "Null"


@pytest.mark.parametrize(
    "position, expected",
    [(1, [0, 1, 2, 3, 4]), (3, [1, 2, 0, 3, 4]), (5, [1, 2, 3, 4, 0])],
)
def test_insert_at(chain, position, expected):
    chain.insert_at(position, 0)
    assert list(chain) == expected


@pytest.mark.parametrize(
    "position, removed, rest",
    [(1, 1, [2, 3, 4]), (2, 2, [1, 3, 4]), (4, 4, [1, 2, 3])],
)
def test_delete_at(chain, position, removed, rest):
    assert chain.delete_at(position) == removed
    assert list(chain) == rest


@pytest.mark.parametrize(
    "operation, position",
    [
        ("insert", 0),
        ("insert", -1),
        ("insert", 6),
        ("delete", 0),
        ("delete", 5),
        ("update", 0),
        ("update", 5),
    ],
)
def test_out_of_range(chain, operation, position):
    calls = {
        "insert": lambda: chain.insert_at(position, 0),
        "delete": lambda: chain.delete_at(position),
        "update": lambda: chain.update(position, 0),
    }
    with pytest.raises(IndexError):
        calls[operation]()
    assert list(chain) == BASE


def test_update(chain):
    chain.update(3, 77)
    assert list(chain) == [1, 2, 77, 4]


@pytest.mark.parametrize(
    "values, kept",
    [([], []), ([1], [1]), ([1, 2], [1]), ([1, 2, 3, 4], [1, 3]), ([1, 2, 3, 4, 5], [1, 3, 5])],
)
def test_delete_alternate(values, kept):
    lst = SinglyLinkedList(values)
    lst.delete_alternate()
    assert list(lst) == kept


@pytest.mark.parametrize(
    "values, middle",
    [([1], 1), ([1, 2], 2), ([1, 2, 3], 2), ([1, 2, 3, 4], 3), ([1, 2, 3, 4, 5], 3)],
)
def test_middle(values, middle):
    assert SinglyLinkedList(values).middle() == middle


def test_middle_of_empty_raises():
    with pytest.raises(ValueError):
        SinglyLinkedList().middle()