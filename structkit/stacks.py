"""Stack variants: linked, front-indexed array and two-queue stacks."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class StackFullError(OverflowError):
    """Raised when an item is pushed onto a stack that has no room left."""


class StackEmptyError(IndexError):
    """Raised when an item is popped from an empty stack."""


def _check_capacity(capacity: int) -> int:
    if capacity <= 0:
        raise ValueError("capacity must be positive")
    return capacity


@dataclass(eq=False)
class _Link(Generic[T]):
    data: T
    below: Optional["_Link[T]"] = None


class LinkedStack(Generic[T]):
    """An unbounded last-in, first-out stack of linked cells."""

    def __init__(self) -> None:
        self._top: Optional[_Link[T]] = None
        self._size = 0

    def push(self, item: T) -> None:
        self._top = _Link(item, self._top)
        self._size += 1

    def pop(self) -> T:
        if self._top is None:
            raise StackEmptyError("no items in stack")
        cell = self._top
        self._top = cell.below
        self._size -= 1
        return cell.data

    def reverse(self) -> None:
        """Reverse the stack by passing its items through two spare stacks."""
        first: LinkedStack[T] = LinkedStack()
        second: LinkedStack[T] = LinkedStack()
        while self:
            first.push(self.pop())
        while first:
            second.push(first.pop())
        while second:
            self.push(second.pop())

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack downwards."""
        cell = self._top
        while cell is not None:
            yield cell.data
            cell = cell.below


class FrontStack(Generic[T]):
    """A bounded stack whose top is kept at index 0 of its storage."""

    def __init__(self, capacity: int = 10) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: List[T] = []

    def push(self, item: T) -> None:
        if len(self._items) >= self.capacity:
            raise StackFullError("stack full")
        self._items.insert(0, item)

    def pop(self) -> T:
        if not self._items:
            raise StackEmptyError("stack empty")
        return self._items.pop(0)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top (index 0) to the first pushed item."""
        return iter(list(self._items))


class QueueStack(Generic[T]):
    """A bounded stack built from two queues.

    Pushing is a single enqueue; popping moves all but the newest item
    across to the spare queue, takes the newest, then moves them back.
    """

    def __init__(self, capacity: int = 10) -> None:
        self.capacity = _check_capacity(capacity)
        self._main: Deque[T] = deque()

    def push(self, item: T) -> None:
        if len(self._main) >= self.capacity:
            raise StackFullError("queue full")
        self._main.append(item)

    def pop(self) -> T:
        if not self._main:
            raise StackEmptyError("stack empty")
        spare: Deque[T] = deque()
        while len(self._main) > 1:
            spare.append(self._main.popleft())
        item = self._main.popleft()
        while spare:
            self._main.append(spare.popleft())
        return item

    def __len__(self) -> int:
        return len(self._main)