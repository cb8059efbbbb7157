"""A singly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional, TextIO

from dvakit.serial_io import send_int


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: int, next_node: Optional[_Node] = None) -> None:
        self.data = data
        self.next = next_node


class LinkedList:
    """Singly linked list with sorting helpers."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        for item in items:
            self.add_last(item)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _require_items(self, operation: str) -> _Node:
        if self._head is None:
            raise IndexError(f"{operation} on an empty list")
        return self._head

    def is_empty(self) -> bool:
        """Return True if the list holds no nodes."""
        return self._head is None

    def add_first(self, data: int) -> None:
        """Insert *data* at the front."""
        self._head = _Node(data, self._head)

    def add_last(self, data: int) -> None:
        """Append *data* at the back."""
        new = _Node(data)
        if self._head is None:
            self._head = new
            return
        tail = self._head
        while tail.next is not None:
            tail = tail.next
        tail.next = new

    def remove_first(self) -> int:
        """Remove and return the first item."""
        head = self._require_items("remove_first")
        self._head = head.next
        return head.data

    def remove_last(self) -> int:
        """Remove and return the last item."""
        node = self._require_items("remove_last")
        prev: Optional[_Node] = None
        while node.next is not None:
            prev, node = node, node.next
        if prev is None:
            self._head = None
        else:
            prev.next = None
        return node.data

    def clear(self) -> None:
        """Remove every node."""
        while self._head is not None:
            self.remove_first()

    def print_to(self, stream: TextIO) -> None:
        """Write every item in decimal, one after another, to *stream*."""
        for data in self:
            send_int(stream, data)

    def first(self) -> int:
        """Return the first item."""
        return self._require_items("first").data

    def last(self) -> int:
        """Return the last item."""
        node = self._require_items("last")
        while node.next is not None:
            node = node.next
        return node.data

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __contains__(self, data: object) -> bool:
        return any(item == data for item in self)

    def search(self, data: int) -> bool:
        """Return True if *data* is in the list; the list must not be empty."""
        self._require_items("search")
        return data in self

    def remove(self, data: int) -> bool:
        """Remove the first occurrence of *data*; return whether one was found."""
        prev: Optional[_Node] = None
        for node in self._nodes():
            if node.data == data:
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                return True
            prev = node
        return False

    def is_sorted(self) -> bool:
        """Return True if the items are in non-decreasing order."""
        return all(
            node.next is None or node.data <= node.next.data for node in self._nodes()
        )

    def bubblesort(self) -> None:
        """Sort in place by relinking neighbouring nodes."""
        swapped = True
        while swapped:
            swapped = False
            prev: Optional[_Node] = None
            node = self._head
            while node is not None and node.next is not None:
                following = node.next
                if node.data > following.data:
                    node.next = following.next
                    following.next = node
                    if prev is None:
                        self._head = following
                    else:
                        prev.next = following
                    prev = following
                    swapped = True
                else:
                    prev, node = node, following

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"