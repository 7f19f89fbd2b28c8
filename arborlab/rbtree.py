"""A red-black tree with insertion, deletion and level-order traversal."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional


class Color(Enum):
    """The colour of a red-black tree node."""

    RED = "red"
    BLACK = "black"


@dataclass(eq=False)
class RBNode:
    """A node of a red-black tree, linked to its children and its parent."""

    value: Any
    color: Color = Color.RED
    left: Optional["RBNode"] = None
    right: Optional["RBNode"] = None
    parent: Optional["RBNode"] = None

    def __repr__(self) -> str:
        return f"RBNode({self.value!r}, {self.color.name})"

    def is_on_left(self) -> bool:
        """Return True if this node is its parent's left child."""
        return self.parent is not None and self is self.parent.left

    def uncle(self) -> Optional[RBNode]:
        """Return the sibling of this node's parent, or None."""
        if self.parent is None or self.parent.parent is None:
            return None
        grandparent = self.parent.parent
        return grandparent.right if self.parent.is_on_left() else grandparent.left

    def sibling(self) -> Optional[RBNode]:
        """Return the other child of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.right if self.is_on_left() else self.parent.left

    def has_red_child(self) -> bool:
        """Return True if either child is red."""
        return any(
            child is not None and child.color is Color.RED
            for child in (self.left, self.right)
        )

    def move_down(self, new_parent: RBNode) -> None:
        """Put ``new_parent`` in this node's place and hang this node below it."""
        if self.parent is not None:
            if self.is_on_left():
                self.parent.left = new_parent
            else:
                self.parent.right = new_parent
        new_parent.parent = self.parent
        self.parent = new_parent


class RedBlackTree:
    """A self-balancing binary search tree of distinct, ordered values."""

    def __init__(self) -> None:
        self._root: Optional[RBNode] = None

    def root(self) -> Optional[RBNode]:
        """Return the root node, or None for an empty tree."""
        return self._root

    def search(self, value: Any) -> Optional[RBNode]:
        """Return the node holding ``value``.

        If the value is absent, return the last node reached while looking
        for it (the node it would be attached to); None for an empty tree.
        """
        node = self._root
        while node is not None:
            if value < node.value:
                if node.left is None:
                    break
                node = node.left
            elif value == node.value:
                break
            else:
                if node.right is None:
                    break
                node = node.right
        return node

    def insert(self, value: Any) -> bool:
        """Insert ``value``; return False if it was already present."""
        if self._root is None:
            self._root = RBNode(value, Color.BLACK)
            return True
        anchor = self.search(value)
        assert anchor is not None
        if anchor.value == value:
            return False
        node = RBNode(value, parent=anchor)
        if value < anchor.value:
            anchor.left = node
        else:
            anchor.right = node
        self._fix_red_red(node)
        return True

    def delete(self, value: Any) -> None:
        """Remove ``value``.

        Deleting from an empty tree does nothing; deleting a value that a
        non-empty tree does not hold raises KeyError.
        """
        if self._root is None:
            return
        node = self.search(value)
        assert node is not None
        if node.value != value:
            raise KeyError(value)
        self._delete_node(node)

    def __contains__(self, value: Any) -> bool:
        node = self.search(value)
        return node is not None and node.value == value

    def in_order(self) -> Iterator[Any]:
        """Yield values in ascending order."""
        stack: list[RBNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __iter__(self) -> Iterator[Any]:
        return self.in_order()

    def level_order(self) -> Iterator[Any]:
        """Yield values level by level, left to right within each level."""
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            node = queue.popleft()
            yield node.value
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def _rotate_left(self, node: RBNode) -> None:
        new_parent = node.right
        assert new_parent is not None
        if node is self._root:
            self._root = new_parent
        node.move_down(new_parent)
        node.right = new_parent.left
        if new_parent.left is not None:
            new_parent.left.parent = node
        new_parent.left = node

    def _rotate_right(self, node: RBNode) -> None:
        new_parent = node.left
        assert new_parent is not None
        if node is self._root:
            self._root = new_parent
        node.move_down(new_parent)
        node.left = new_parent.right
        if new_parent.right is not None:
            new_parent.right.parent = node
        new_parent.right = node

    @staticmethod
    def _swap_colors(first: RBNode, second: RBNode) -> None:
        first.color, second.color = second.color, first.color

    def _fix_red_red(self, node: RBNode) -> None:
        while True:
            if node is self._root:
                node.color = Color.BLACK
                return
            parent = node.parent
            assert parent is not None
            if parent.color is Color.BLACK:
                return
            grandparent = parent.parent
            assert grandparent is not None
            uncle = node.uncle()
            if uncle is not None and uncle.color is Color.RED:
                parent.color = Color.BLACK
                uncle.color = Color.BLACK
                grandparent.color = Color.RED
                node = grandparent
                continue
            if parent.is_on_left():
                if node.is_on_left():
                    self._swap_colors(parent, grandparent)
                else:
                    self._rotate_left(parent)
                    self._swap_colors(node, grandparent)
                self._rotate_right(grandparent)
            else:
                if node.is_on_left():
                    self._rotate_right(parent)
                    self._swap_colors(node, grandparent)
                else:
                    self._swap_colors(parent, grandparent)
                self._rotate_left(grandparent)
            return

    def _fix_double_black(self, node: RBNode) -> None:
        while node is not self._root:
            sibling = node.sibling()
            parent = node.parent
            assert parent is not None
            if sibling is None:
                node = parent
                continue
            if sibling.color is Color.RED:
                parent.color = Color.RED
                sibling.color = Color.BLACK
                if sibling.is_on_left():
                    self._rotate_right(parent)
                else:
                    self._rotate_left(parent)
                continue
            if sibling.has_red_child():
                if sibling.left is not None and sibling.left.color is Color.RED:
                    if sibling.is_on_left():
                        sibling.left.color = sibling.color
                        sibling.color = parent.color
                        self._rotate_right(parent)
                    else:
                        sibling.left.color = parent.color
                        self._rotate_right(sibling)
                        self._rotate_left(parent)
                else:
                    assert sibling.right is not None
                    if sibling.is_on_left():
                        sibling.right.color = parent.color
                        self._rotate_left(sibling)
                        self._rotate_right(parent)
                    else:
                        sibling.right.color = sibling.color
                        sibling.color = parent.color
                        self._rotate_left(parent)
                parent.color = Color.BLACK
                return
            sibling.color = Color.RED
            if parent.color is Color.BLACK:
                node = parent
                continue
            parent.color = Color.BLACK
            return

    @staticmethod
    def _replacement(node: RBNode) -> Optional[RBNode]:
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            return successor
        return node.left if node.left is not None else node.right

    def _delete_node(self, node: RBNode) -> None:
        while True:
            replacement = self._replacement(node)
            both_black = (
                replacement is None or replacement.color is Color.BLACK
            ) and node.color is Color.BLACK
            parent = node.parent

            if replacement is None:
                if node is self._root:
                    self._root = None
                    return
                assert parent is not None
                if both_black:
                    self._fix_double_black(node)
                else:
                    sibling = node.sibling()
                    if sibling is not None:
                        sibling.color = Color.RED
                if node.is_on_left():
                    parent.left = None
                else:
                    parent.right = None
                node.parent = None
                return

            if node.left is None or node.right is None:
                if node is self._root:
                    node.value = replacement.value
                    node.left = node.right = None
                else:
                    assert parent is not None
                    if node.is_on_left():
                        parent.left = replacement
                    else:
                        parent.right = replacement
                    replacement.parent = parent
                    node.parent = node.left = node.right = None
                    if both_black:
                        self._fix_double_black(replacement)
                    else:
                        replacement.color = Color.BLACK
                return

            node.value, replacement.value = replacement.value, node.value
            node = replacement