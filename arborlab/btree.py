"""A B-tree of a given order with insertion, deletion and search paths."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Any, Iterator, Optional


class BTreeNode:
    """A B-tree node holding sorted keys and, unless it is a leaf, child nodes."""

    def __init__(self, order: int, leaf: bool) -> None:
        self.order = order
        self.degree = (order + 1) // 2
        self.leaf = leaf
        self.keys: list[Any] = []
        self.children: list[BTreeNode] = []

    def __repr__(self) -> str:
        return f"BTreeNode(keys={self.keys!r}, leaf={self.leaf})"

    @property
    def is_full(self) -> bool:
        """True when the node holds as many keys as its order allows."""
        return len(self.keys) >= self.order - 1

    def traverse(self) -> Iterator[Any]:
        """Yield the keys of this subtree in ascending order."""
        if self.leaf:
            yield from self.keys
            return
        for child, key in zip(self.children, self.keys):
            yield from child.traverse()
            yield key
        yield from self.children[len(self.keys)].traverse()

    def search(self, key: Any) -> Optional[BTreeNode]:
        """Return the node of this subtree that holds ``key``, or None."""
        node: BTreeNode = self
        while True:
            index = bisect_left(node.keys, key)
            if index < len(node.keys) and node.keys[index] == key:
                return node
            if node.leaf:
                return None
            node = node.children[index]

    def _insert_non_full(self, key: Any) -> None:
        node: BTreeNode = self
        while not node.leaf:
            index = bisect_right(node.keys, key)
            if node.children[index].is_full:
                node._split_child(index)
                if node.keys[index] < key:
                    index += 1
            node = node.children[index]
        node.keys.insert(bisect_right(node.keys, key), key)

    def _split_child(self, index: int) -> None:
        full = self.children[index]
        middle = self.degree - 1
        sibling = BTreeNode(full.order, full.leaf)
        sibling.keys = full.keys[middle + 1:]
        promoted = full.keys[middle]
        full.keys = full.keys[:middle]
        if not full.leaf:
            sibling.children = full.children[middle + 1:]
            full.children = full.children[:middle + 1]
        self.children.insert(index + 1, sibling)
        self.keys.insert(index, promoted)

    def _remove(self, key: Any) -> None:
        index = bisect_left(self.keys, key)
        if index < len(self.keys) and self.keys[index] == key:
            if self.leaf:
                del self.keys[index]
            else:
                self._remove_from_non_leaf(index)
            return
        if self.leaf:
            raise KeyError(key)
        was_last = index == len(self.keys)
        if len(self.children[index].keys) < self.degree:
            self._fill(index)
        if was_last and index > len(self.keys):
            self.children[index - 1]._remove(key)
        else:
            self.children[index]._remove(key)

    def _remove_from_non_leaf(self, index: int) -> None:
        key = self.keys[index]
        if len(self.children[index].keys) >= self.degree:
            predecessor = self._predecessor(index)
            self.keys[index] = predecessor
            self.children[index]._remove(predecessor)
        elif len(self.children[index + 1].keys) >= self.degree:
            successor = self._successor(index)
            self.keys[index] = successor
            self.children[index + 1]._remove(successor)
        else:
            self._merge(index)
            self.children[index]._remove(key)

    def _predecessor(self, index: int) -> Any:
        node = self.children[index]
        while not node.leaf:
            node = node.children[len(node.keys)]
        return node.keys[-1]

    def _successor(self, index: int) -> Any:
        node = self.children[index + 1]
        while not node.leaf:
            node = node.children[0]
        return node.keys[0]

    def _fill(self, index: int) -> None:
        if index != 0 and len(self.children[index - 1].keys) >= self.degree:
            self._borrow_from_previous(index)
        elif index != len(self.keys) and len(self.children[index + 1].keys) >= self.degree:
            self._borrow_from_next(index)
        elif index != len(self.keys):
            self._merge(index)
        else:
            self._merge(index - 1)

    def _borrow_from_previous(self, index: int) -> None:
        child = self.children[index]
        sibling = self.children[index - 1]
        child.keys.insert(0, self.keys[index - 1])
        if not child.leaf:
            child.children.insert(0, sibling.children.pop())
        self.keys[index - 1] = sibling.keys.pop()

    def _borrow_from_next(self, index: int) -> None:
        child = self.children[index]
        sibling = self.children[index + 1]
        child.keys.append(self.keys[index])
        if not child.leaf:
            child.children.append(sibling.children.pop(0))
        self.keys[index] = sibling.keys.pop(0)

    def _merge(self, index: int) -> None:
        child = self.children[index]
        sibling = self.children.pop(index + 1)
        child.keys.append(self.keys.pop(index))
        child.keys.extend(sibling.keys)
        if not child.leaf:
            child.children.extend(sibling.children)


class BTree:
    """A B-tree whose nodes have at most ``order`` children."""

    def __init__(self, order: int) -> None:
        if order < 2:
            raise ValueError("order must be at least 2")
        self.order = order
        self.degree = (order + 1) // 2
        self.root: Optional[BTreeNode] = None

    def insert(self, key: Any) -> None:
        """Insert ``key``; equal keys may be stored more than once."""
        if self.root is None:
            self.root = BTreeNode(self.order, True)
            self.root.keys.append(key)
            return
        if not self.root.is_full:
            self.root._insert_non_full(key)
            return
        new_root = BTreeNode(self.order, False)
        new_root.children.append(self.root)
        new_root._split_child(0)
        index = 1 if new_root.keys[0] < key else 0
        new_root.children[index]._insert_non_full(key)
        self.root = new_root

    def remove(self, key: Any) -> None:
        """Remove one occurrence of ``key``; raise KeyError if it is absent."""
        if self.root is None:
            raise KeyError(key)
        try:
            self.root._remove(key)
        finally:
            if not self.root.keys:
                self.root = None if self.root.leaf else self.root.children[0]

    def search(self, key: Any) -> Optional[BTreeNode]:
        """Return the node holding ``key``, or None."""
        return None if self.root is None else self.root.search(key)

    def traverse(self) -> Iterator[Any]:
        """Yield every key in ascending order."""
        if self.root is not None:
            yield from self.root.traverse()

    def __iter__(self) -> Iterator[Any]:
        return self.traverse()

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def _walk(self, key: Any) -> tuple[list[Any], bool]:
        visited: list[Any] = []
        node = self.root
        while node is not None:
            index = bisect_left(node.keys, key)
            visited.extend(node.keys[:index])
            if index < len(node.keys) and node.keys[index] == key:
                visited.append(node.keys[index])
                return visited, True
            if node.leaf:
                break
            node = node.children[index]
        return visited, False

    def search_path(self, key: Any) -> list[Any]:
        """Return the keys passed while seeking ``key``, ending with it if found."""
        return self._walk(key)[0]

    def describe_search(self, key: Any) -> str:
        """Return a one-line account of the keys compared while seeking ``key``."""
        if self.root is None:
            return "Tree is empty!\n"
        visited, found = self._walk(key)
        if found:
            passed = "".join(f"{item} " for item in visited[:-1])
            return f"Seeking {key}: {passed}{visited[-1]}...key found!\n"
        passed = "".join(f"{item} " for item in visited)
        return f"Seeking {key}: {passed}...Node not found!\n"