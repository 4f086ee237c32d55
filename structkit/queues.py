"""Bounded and unbounded queue variants: deque, linked, two-stack and priority."""

from __future__ import annotations

from bisect import insort
from collections import deque
from typing import Deque, Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class QueueFullError(OverflowError):
    """Raised when an item is added to a queue that has no room left."""


class QueueEmptyError(IndexError):
    """Raised when an item is taken from an empty queue."""


def _check_capacity(capacity: int) -> int:
    if capacity <= 0:
        raise ValueError("capacity must be positive")
    return capacity


class CircularDeque(Generic[T]):
    """A double-ended queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 10) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: Deque[T] = deque()

    def _ensure_room(self) -> None:
        if len(self._items) >= self.capacity:
            raise QueueFullError("deque full")

    def _ensure_items(self) -> None:
        if not self._items:
            raise QueueEmptyError("deque empty")

    def insert_rear(self, item: T) -> None:
        self._ensure_room()
        self._items.append(item)

    def insert_front(self, item: T) -> None:
        self._ensure_room()
        self._items.appendleft(item)

    def delete_front(self) -> T:
        self._ensure_items()
        return self._items.popleft()

    def delete_rear(self) -> T:
        self._ensure_items()
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        return iter(list(self._items))


class LinkedQueue(Generic[T]):
    """An unbounded first-in, first-out queue."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def enqueue(self, item: T) -> None:
        self._items.append(item)

    def dequeue(self) -> T:
        if not self._items:
            raise QueueEmptyError("no elements")
        return self._items.popleft()

    def reverse(self) -> None:
        """Reverse the queue by draining it onto a stack and back."""
        stack: List[T] = []
        while self._items:
            stack.append(self.dequeue())
        while stack:
            self.enqueue(stack.pop())

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        return iter(list(self._items))


class StackQueue(Generic[T]):
    """A bounded queue built from two stacks.

    The main stack keeps the front of the queue on top, so dequeuing is a
    single pop; enqueuing moves everything across to the spare stack and
    back again.
    """

    def __init__(self, capacity: int = 10) -> None:
        self.capacity = _check_capacity(capacity)
        self._main: List[T] = []

    def enqueue(self, item: T) -> None:
        if len(self._main) >= self.capacity:
            raise QueueFullError("stack full")
        spare: List[T] = []
        while self._main:
            spare.append(self._main.pop())
        self._main.append(item)
        while spare:
            self._main.append(spare.pop())

    def dequeue(self) -> T:
        if not self._main:
            raise QueueEmptyError("queue empty")
        return self._main.pop()

    def __len__(self) -> int:
        return len(self._main)


class PriorityQueue(Generic[T]):
    """A bounded queue served in ascending order of priority number.

    Items of equal priority leave in the order they arrived.
    """

    def __init__(self, capacity: int = 10) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: List[Tuple[T, int]] = []

    def enqueue(self, data: T, priority: int) -> None:
        if len(self._items) >= self.capacity:
            raise QueueFullError("queue full")
        insort(self._items, (data, priority), key=lambda entry: entry[1])

    def dequeue(self) -> T:
        if not self._items:
            raise QueueEmptyError("queue empty")
        data, _ = self._items.pop(0)
        return data

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Tuple[T, int]]:
        """Iterate over ``(data, priority)`` pairs from front to rear."""
        return iter(list(self._items))


class _Level:
    """A linear array queue: slots freed at the front are reused only once empty."""

    def __init__(self, capacity: int) -> None:
        self.slots: List[Optional[int]] = [None] * capacity
        self.front = -1
        self.rear = -1

    @property
    def empty(self) -> bool:
        return self.front == -1

    @property
    def full(self) -> bool:
        return self.rear == len(self.slots) - 1

    def insert(self, value: int) -> None:
        if self.front == -1:
            self.front = 0
        self.rear += 1
        self.slots[self.rear] = value

    def delete(self) -> int:
        value = self.slots[self.front]
        assert value is not None
        self.slots[self.front] = None
        self.front += 1
        if self.front == self.rear + 1:
            self.front = self.rear = -1
        return value


class LevelPriorityQueue:
    """Priority queue with one fixed-size queue per level; level 1 is served first."""

    def __init__(self, levels: int = 5, capacity: int = 5) -> None:
        if levels <= 0:
            raise ValueError("levels must be positive")
        _check_capacity(capacity)
        self.levels = levels
        self.capacity = capacity
        self._levels = [_Level(capacity) for _ in range(levels)]

    def insert(self, value: int, level: int) -> None:
        if not 1 <= level <= self.levels:
            raise ValueError(f"priority level must be between 1 and {self.levels}")
        queue = self._levels[level - 1]
        if queue.full:
            raise QueueFullError(f"{level} level of queue full")
        queue.insert(value)

    def delete(self) -> int:
        for queue in self._levels:
            if not queue.empty:
                return queue.delete()
        raise QueueEmptyError("priority queue empty")

    def rows(self) -> List[List[Optional[int]]]:
        """The slots of each level, ``None`` where a slot is unused."""
        return [list(queue.slots) for queue in self._levels]

    def format(self) -> str:
        """The levels as a text table."""
        lines = ["p_lvl   priority queue", "-----   -----------------------"]
        for number, row in enumerate(self.rows(), start=1):
            cells = "".join("  -  " if v is None else f"{v:<5d}" for v in row)
            lines.append(f"  {number}   {cells}")
        lines.append("-----    -------------------")
        return "\n".join(lines)