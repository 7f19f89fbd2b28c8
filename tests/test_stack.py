import pytest

from arborlab.stack import DEFAULT_MAX_SIZE, Stack


def test_default_capacity_is_unsigned_max():
    assert Stack().max_size() == 4294967295
    assert DEFAULT_MAX_SIZE == Stack().max_size()


def test_push_and_top_follow_lifo_order():
    stack = Stack()
    for value in (10, 15, -8, 45):
        assert stack.push(value) is True
        assert stack.top() == value
    assert len(stack) == 4
    assert [stack.pop() for _ in range(4)] == [45, -8, 15, 10]
    assert len(stack) == 0


def test_bool_reflects_emptiness():
    stack = Stack()
    assert not stack
    stack.push("x")
    assert stack
    stack.pop()
    assert not stack


def test_bounded_stack_drops_overflow():
    stack = Stack(5)
    words = ["Cheer", "Cheer", "for", "Old", "Notre", "Dame"]
    results = [stack.push(word) for word in words]
    assert results == [True] * 5 + [False]
    assert len(stack) == 5
    assert stack.top() == "Notre"
    assert stack.max_size() == 5


def test_zero_capacity_accepts_nothing():
    stack = Stack(0)
    assert stack.push(1) is False
    assert len(stack) == 0


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(-1)


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_top_empty_raises():
    with pytest.raises(IndexError):
        Stack().top()


def test_replace_top_changes_only_top():
    stack = Stack()
    stack.push(False)
    stack.push(True)
    stack.replace_top(False)
    assert stack.pop() is False
    assert stack.top() is False
    assert len(stack) == 1


def test_replace_top_empty_raises():
    with pytest.raises(IndexError):
        Stack().replace_top(1)


def test_pop_after_overflow_restores_room():
    stack = Stack(2)
    stack.push("a")
    stack.push("b")
    assert stack.push("c") is False
    assert stack.pop() == "b"
    assert stack.push("c") is True
    assert stack.top() == "c"