"""A splay tree: every insertion and lookup moves the touched value to the root."""

from __future__ import annotations

from typing import Any, Optional

from arborlab.bst import BinarySearchTree, _Node


def _splay(node: _Node, value: Any) -> _Node:
    """Splay the subtree rooted at ``node`` around ``value`` and return the new root.

    The new root holds ``value`` if it is present, otherwise the last node
    reached while searching for it.
    """
    header = _Node(None)
    left_max = right_min = header
    while True:
        if value < node.data:
            if node.left is None:
                break
            if value < node.left.data:
                child = node.left
                node.left = child.right
                child.right = node
                node = child
                if node.left is None:
                    break
            right_min.left = node
            right_min = node
            node = node.left
        elif node.data < value:
            if node.right is None:
                break
            if node.right.data < value:
                child = node.right
                node.right = child.left
                child.left = node
                node = child
                if node.right is None:
                    break
            left_max.right = node
            left_max = node
            node = node.right
        else:
            break
    left_max.right = node.left
    right_min.left = node.right
    node.left = header.right
    node.right = header.left
    return node


class SplayTree(BinarySearchTree):
    """A self-adjusting binary search tree of distinct, ordered values."""

    def insert(self, value: Any) -> bool:
        """Insert ``value`` and make it the root; return False if it was present."""
        root: Optional[_Node] = self._root
        if root is None:
            self._root = _Node(value)
            return True
        root = _splay(root, value)
        if not (value < root.data or root.data < value):
            self._root = root
            return False
        node = _Node(value)
        if value < root.data:
            node.left = root.left
            node.right = root
            root.left = None
        else:
            node.right = root.right
            node.left = root
            root.right = None
        self._root = node
        return True

    def contains(self, value: Any) -> bool:
        """Splay towards ``value`` and return whether it is now at the root."""
        if self._root is None:
            return False
        self._root = _splay(self._root, value)
        return self._root.data == value

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def root_value(self) -> Any:
        """Return the value at the root; raise ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("tree is empty")
        return self._root.data