"""A doubly linked list with insertion and deletion by key."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    data: Any
    prev: Optional["_Node"] = None
    next: Optional["_Node"] = None


class DoublyLinkedList:
    """A list of nodes linked both ways around a sentinel head."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head = _Node(None)
        self._head.prev = self._head.next = self._head
        self._size = 0
        for item in items:
            self.insert_end(item)

    def _link_after(self, node: _Node, data: Any) -> None:
        following = node.next
        assert following is not None
        new = _Node(data, node, following)
        following.prev = new
        node.next = new
        self._size += 1

    def _unlink(self, node: _Node) -> Any:
        assert node.prev is not None and node.next is not None
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.data

    def _nodes(self) -> Iterator[_Node]:
        node = self._head.next
        while node is not self._head:
            assert node is not None
            yield node
            node = node.next

    def _find(self, key: Any) -> _Node:
        for node in self._nodes():
            if node.data == key:
                return node
        raise KeyError(f"{key} not found")

    def insert_beginning(self, data: Any) -> None:
        self._link_after(self._head, data)

    def insert_end(self, data: Any) -> None:
        assert self._head.prev is not None
        self._link_after(self._head.prev, data)

    def insert_before(self, data: Any, key: Any) -> None:
        """Insert ``data`` before the first node holding ``key``."""
        node = self._find(key)
        assert node.prev is not None
        self._link_after(node.prev, data)

    def insert_after(self, data: Any, key: Any) -> None:
        """Insert ``data`` after the first node holding ``key``."""
        self._link_after(self._find(key), data)

    def delete_beginning(self) -> Any:
        if not self._size:
            raise IndexError("list empty")
        assert self._head.next is not None
        return self._unlink(self._head.next)

    def delete_end(self) -> Any:
        if not self._size:
            raise IndexError("list empty")
        assert self._head.prev is not None
        return self._unlink(self._head.prev)

    def delete(self, key: Any) -> Any:
        """Remove the first node holding ``key`` and return its data."""
        if not self._size:
            raise IndexError("list empty")
        return self._unlink(self._find(key))

    def reverse(self) -> None:
        """Reverse the list in place by swapping every node's links."""
        node = self._head
        while True:
            node.prev, node.next = node.next, node.prev
            node = node.prev
            assert node is not None
            if node is self._head:
                break

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._head.prev
        while node is not self._head:
            assert node is not None
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def __str__(self) -> str:
        body = "".join(f"{data:5d} -> " for data in self)
        return f"start: {body}:end"