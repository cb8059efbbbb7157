"""A binary search tree of unique integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Optional, TextIO

from dvakit.serial_io import send_int


class _Node:
    __slots__ = ("data", "left", "right")

    def __init__(self, data: int) -> None:
        self.data = data
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


class BSTree:
    """Binary search tree that ignores duplicate insertions."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._root: Optional[_Node] = None
        for item in items:
            self.insert(item)

    def is_empty(self) -> bool:
        """Return True if the tree holds no nodes."""
        return self._root is None

    def insert(self, data: int) -> bool:
        """Insert *data*; return False if it was already present."""
        if self._root is None:
            self._root = _Node(data)
            return True
        node = self._root
        while True:
            if data == node.data:
                return False
            if data < node.data:
                if node.left is None:
                    node.left = _Node(data)
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(data)
                    return True
                node = node.right

    def preorder(self) -> Iterator[int]:
        """Yield the items root first, then left subtree, then right subtree."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.data
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def inorder(self) -> Iterator[int]:
        """Yield the items in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def postorder(self) -> Iterator[int]:
        """Yield the items left subtree first, then right subtree, then root."""
        stack = [self._root] if self._root is not None else []
        reversed_order: list[int] = []
        while stack:
            node = stack.pop()
            reversed_order.append(node.data)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return reversed(reversed_order)

    def print_preorder(self, stream: TextIO) -> None:
        """Write the items in preorder, in decimal, to *stream*."""
        for data in self.preorder():
            send_int(stream, data)

    def print_inorder(self, stream: TextIO) -> None:
        """Write the items in order, in decimal, to *stream*."""
        for data in self.inorder():
            send_int(stream, data)

    def print_postorder(self, stream: TextIO) -> None:
        """Write the items in postorder, in decimal, to *stream*."""
        for data in self.postorder():
            send_int(stream, data)

    def find(self, data: int) -> bool:
        """Return True if *data* is in the tree."""
        node = self._root
        while node is not None:
            if data == node.data:
                return True
            node = node.left if data < node.data else node.right
        return False

    def __contains__(self, data: object) -> bool:
        return isinstance(data, int) and self.find(data)

    def _relink(self, parent: Optional[_Node], old: _Node, new: Optional[_Node]) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def remove(self, data: int) -> bool:
        """Remove *data* if present; return whether it was found."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.data != data:
            parent = node
            node = node.left if data < node.data else node.right
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.data = successor.data
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
            return True
        child = node.left if node.left is not None else node.right
        self._relink(parent, node, child)
        return True

    def __len__(self) -> int:
        return sum(1 for _ in self.preorder())

    def __iter__(self) -> Iterator[int]:
        return self.inorder()

    def depth(self) -> int:
        """Return the number of levels in the tree (0 when empty)."""
        level = [self._root] if self._root is not None else []
        levels = 0
        while level:
            levels += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return levels

    def min_depth(self) -> int:
        """Return the depth a perfectly balanced tree of this size would have."""
        return len(self).bit_length()

    def min_value(self) -> int:
        """Return the smallest item."""
        if self._root is None:
            raise ValueError("min_value of an empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.data

    def to_sorted_list(self) -> list[int]:
        """Return the items as an ascending list."""
        return list(self.inorder())

    def _build_from_sorted(self, values: Sequence[int]) -> None:
        if not values:
            return
        middle = len(values) // 2
        self.insert(values[middle])
        self._build_from_sorted(values[:middle])
        self._build_from_sorted(values[middle + 1 :])

    def balance(self) -> None:
        """Rebuild the tree so that its depth equals its minimum depth."""
        values = self.to_sorted_list()
        self.clear()
        self._build_from_sorted(values)

    def clear(self) -> None:
        """Remove every node."""
        self._root = None

    def __repr__(self) -> str:
        return f"BSTree({self.to_sorted_list()!r})"