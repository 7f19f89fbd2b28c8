"""A singly linked list with append, front insertion, deletion and rotation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    data: T
    next: Optional["_Node[T]"] = None


class SinglyLinkedList(Generic[T]):
    """A singly linked list of values."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._length = 0
        for item in items or ():
            self.append(item)

    def append(self, value: T) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._length += 1

    def push_front(self, value: T) -> None:
        """Add ``value`` at the front of the list."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._length += 1

    def delete(self, target: T) -> bool:
        """Remove the first occurrence of ``target``; return whether one was found."""
        prev: Optional[_Node[T]] = None
        curr = self._head
        while curr is not None and curr.data != target:
            prev, curr = curr, curr.next
        if curr is None:
            return False
        if prev is None:
            self._head = curr.next
        else:
            prev.next = curr.next
        if curr is self._tail:
            self._tail = prev
        self._length -= 1
        return True

    def rotate(self, k: int) -> None:
        """Move the first ``k`` nodes to the end of the list.

        Values of ``k`` below 1 or above the length leave the list unchanged.
        """
        if self._head is None:
            raise ValueError("can't rotate an empty list")
        if k < 1 or k >= self._length:
            return
        k_node = self._head
        for _ in range(k - 1):
            assert k_node.next is not None
            k_node = k_node.next
        assert self._tail is not None
        self._tail.next = self._head
        self._head = k_node.next
        k_node.next = None
        self._tail = k_node

    def is_empty(self) -> bool:
        """Return True if the list holds no values."""
        return self._head is None

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        if self.is_empty():
            return "The list is empty\n"
        return "".join(f"{item} " for item in self)

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"