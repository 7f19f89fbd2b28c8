import pytest

from arborlab.linked_list import SinglyLinkedList


def test_append_keeps_insertion_order():
    items = [3, 1, 4, 1, 5]
    lst = SinglyLinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_push_front_prepends():
    lst = SinglyLinkedList([2, 3])
    lst.push_front(1)
    assert list(lst) == [1, 2, 3]
    lst.append(4)
    assert list(lst) == [1, 2, 3, 4]


def test_push_front_on_empty_then_append():
    lst = SinglyLinkedList()
    lst.push_front("a")
    lst.append("b")
    assert list(lst) == ["a", "b"]


def test_empty_list_string():
    lst = SinglyLinkedList()
    assert lst.is_empty()
    assert str(lst) == "The list is empty\n"


def test_string_has_trailing_spaces():
    assert str(SinglyLinkedList([1, 2, 3])) == "1 2 3 "


def test_contains():
    lst = SinglyLinkedList(["x", "y"])
    assert "y" in lst
    assert "z" not in lst
    assert "x" not in SinglyLinkedList()


def test_delete_head_middle_and_tail():
    lst = SinglyLinkedList([1, 2, 3, 4])
    assert lst.delete(1) is True
    assert list(lst) == [2, 3, 4]
    assert lst.delete(3) is True
    assert list(lst) == [2, 4]
    assert lst.delete(4) is True
    assert list(lst) == [2]
    lst.append(9)
    assert list(lst) == [2, 9]
    assert len(lst) == 2


def test_delete_only_first_occurrence():
    lst = SinglyLinkedList([5, 6, 5])
    assert lst.delete(5) is True
    assert list(lst) == [6, 5]


def test_delete_missing_returns_false():
    lst = SinglyLinkedList([1, 2])
    assert lst.delete(7) is False
    assert list(lst) == [1, 2]
    assert SinglyLinkedList().delete(1) is False


def test_delete_last_remaining_empties_list():
    lst = SinglyLinkedList([8])
    assert lst.delete(8) is True
    assert lst.is_empty()
    lst.append(1)
    assert list(lst) == [1]


@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_rotate_moves_prefix_to_end(k):
    items = [10, 20, 30, 40, 50]
    lst = SinglyLinkedList(items)
    lst.rotate(k)
    result = list(lst)
    assert sorted(result) == sorted(items)
    assert result[-k:] == items[:k]
    assert result[: len(items) - k] == items[k:]


def test_rotate_worked_example():
    lst = SinglyLinkedList([1, 2, 3, 4, 5])
    lst.rotate(2)
    assert list(lst) == [3, 4, 5, 1, 2]
    lst.append(6)
    assert list(lst) == [3, 4, 5, 1, 2, 6]


@pytest.mark.parametrize("k", [0, -1, 5, 9])
def test_rotate_out_of_range_is_noop(k):
    items = [1, 2, 3, 4, 5]
    lst = SinglyLinkedList(items)
    lst.rotate(k)
    assert list(lst) == items


def test_rotate_empty_raises():
    with pytest.raises(ValueError):
        SinglyLinkedList().rotate(1)


def test_rotate_full_cycle_by_repetition():
    items = list("abcdef")
    lst = SinglyLinkedList(items)
    for _ in range(len(items)):
        lst.rotate(1)
    assert list(lst) == items