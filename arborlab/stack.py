"""A LIFO stack with an optional capacity limit."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_MAX_SIZE = 2**32 - 1
"""Capacity of a stack built without an explicit limit."""


class Stack(Generic[T]):
    """A last-in, first-out stack.

    Pushing onto a full stack is silently ignored, matching a bounded
    buffer that drops overflow.
    """

    def __init__(self, max_size: int = DEFAULT_MAX_SIZE) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self._max_size = max_size
        self._items: list[T] = []

    def max_size(self) -> int:
        """Return the largest number of items the stack will hold."""
        return self._max_size

    def push(self, item: T) -> bool:
        """Push ``item``; return False if the stack was full and it was dropped."""
        if len(self._items) >= self._max_size:
            return False
        self._items.append(item)
        return True

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def replace_top(self, item: T) -> None:
        """Overwrite the top item in place."""
        if not self._items:
            raise IndexError("replace_top on an empty stack")
        self._items[-1] = item

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r}, max_size={self._max_size})"