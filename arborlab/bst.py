"""An unbalanced binary search tree with traversal, height and diameter paths."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, Optional


class Traversal(Enum):
    """Depth-first traversal orders, valued by their display names."""

    IN_ORDER = "In-Order"
    PRE_ORDER = "Pre-Order"
    POST_ORDER = "Post-Order"


@dataclass(eq=False)
class _Node:
    data: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def format_values(values: Iterable[Any]) -> str:
    """Render values as ``{a, b, }``, each followed by a comma and a space."""
    return "{" + "".join(f"{value}, " for value in values) + "}"


def _nodes_post_order(node: Optional[_Node]) -> list[_Node]:
    """Return the nodes below ``node`` with every child before its parent."""
    if node is None:
        return []
    collected: list[_Node] = []
    stack = [node]
    while stack:
        current = stack.pop()
        collected.append(current)
        if current.left is not None:
            stack.append(current.left)
        if current.right is not None:
            stack.append(current.right)
    collected.reverse()
    return collected


def _height_path(node: Optional[_Node]) -> list[Any]:
    """Return the values on a longest downward path from ``node``.

    When both subtrees are equally tall the path continues to the right.
    """
    paths: dict[_Node, list[Any]] = {}
    for current in _nodes_post_order(node):
        left = paths.pop(current.left, []) if current.left is not None else []
        right = paths.pop(current.right, []) if current.right is not None else []
        paths[current] = [current.data] + (left if len(left) > len(right) else right)
    return paths.get(node, []) if node is not None else []


class BinarySearchTree:
    """A binary search tree of distinct, mutually ordered values."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._root: Optional[_Node] = None
        for value in values or ():
            self.insert(value)

    def is_empty(self) -> bool:
        """Return True if the tree holds no values."""
        return self._root is None

    def insert(self, value: Any) -> bool:
        """Insert ``value``; return False if it was already present."""
        if self._root is None:
            self._root = _Node(value)
            return True
        node = self._root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = _Node(value)
                    return True
                node = node.left
            elif node.data < value:
                if node.right is None:
                    node.right = _Node(value)
                    return True
                node = node.right
            else:
                return False

    def remove(self, value: Any) -> None:
        """Remove ``value`` if present; absent values are ignored."""
        self._root = self._remove(self._root, value)

    def _remove(self, node: Optional[_Node], value: Any) -> Optional[_Node]:
        if node is None:
            return None
        if value < node.data:
            node.left = self._remove(node.left, value)
        elif node.data < value:
            node.right = self._remove(node.right, value)
        elif node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.data = successor.data
            node.right = self._remove(node.right, node.data)
        else:
            return node.left if node.left is not None else node.right
        return node

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value < node.data:
                node = node.left
            elif node.data < value:
                node = node.right
            else:
                return True
        return False

    def find_min(self) -> Any:
        """Return the smallest value; raise ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.data

    def find_max(self) -> Any:
        """Return the largest value; raise ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.data

    def in_order(self) -> Iterator[Any]:
        """Yield values in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def pre_order(self) -> Iterator[Any]:
        """Yield each value before the values of its subtrees."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.data
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def post_order(self) -> Iterator[Any]:
        """Yield each value after the values of its subtrees."""
        for node in _nodes_post_order(self._root):
            yield node.data

    def traversal_report(self, order: Traversal) -> str:
        """Return a one-line listing of the tree in the given order."""
        if self._root is None:
            return "The tree is empty\n\n"
        walks = {
            Traversal.IN_ORDER: self.in_order,
            Traversal.PRE_ORDER: self.pre_order,
            Traversal.POST_ORDER: self.post_order,
        }
        body = "".join(f"{value} " for value in walks[order]())
        return f"Tree - {order.value} Traversal: {body}\n"

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        levels = 0
        level = [self._root] if self._root is not None else []
        while level:
            levels += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return levels

    def height_path(self) -> list[Any]:
        """Return the values along a longest path from the root down."""
        return _height_path(self._root)

    def diameter_path(self) -> list[Any]:
        """Return the left subtree's longest path reversed, the root, then the right's."""
        if self._root is None:
            return []
        left = _height_path(self._root.left)
        right = _height_path(self._root.right)
        return left[::-1] + [self._root.data] + right