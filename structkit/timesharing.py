"""A time-sharing simulation driven by a priority queue of tasks."""

from __future__ import annotations

import argparse
import random
from collections import deque
from dataclasses import dataclass, replace
from typing import Deque, Iterable, Iterator, List, Optional, Sequence, Tuple


@dataclass
class Task:
    """A task with a priority (higher runs first) and remaining run time."""

    name: str
    priority: int
    execution_time: int
    waiting_time: int = 0

    def __post_init__(self) -> None:
        if self.execution_time < 0:
            raise ValueError(f"task {self.name}: execution time must be >= 0")


def _rank(task: Task) -> Tuple[int, int]:
    return (-task.priority, -task.waiting_time)


class TaskQueue:
    """Tasks ordered by priority, then by longest waiting time.

    A task equal to others in both goes behind them.
    """

    def __init__(self) -> None:
        self._tasks: List[Task] = []

    def push(self, task: Task) -> None:
        key = _rank(task)
        position = next(
            (k for k, queued in enumerate(self._tasks) if _rank(queued) > key),
            len(self._tasks),
        )
        self._tasks.insert(position, task)

    def pop(self) -> Task:
        """Remove and return the front task; raise IndexError when empty."""
        if not self._tasks:
            raise IndexError("pop from an empty task queue")
        return self._tasks.pop(0)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)


def random_tasks(count: int = 10, rng: Optional[random.Random] = None) -> List[Task]:
    """Make ``count`` tasks named A, B, ... with random priority and run time."""
    rng = rng if rng is not None else random.Random()
    return [
        Task(chr(ord("A") + i), rng.randrange(10), rng.randrange(20) + 1)
        for i in range(count)
    ]


def simulate(tasks: Iterable[Task]) -> Iterator[Tuple[int, Task]]:
    """Yield ``(tick, task)`` for every time slice a task is run.

    Each task's ``waiting_time`` is the tick at which it enters the
    priority queue; these must be non-negative and non-decreasing. The
    yielded task is a snapshot taken before the slice is spent. The
    tasks passed in are not modified.
    """
    arrivals: Deque[Task] = deque(replace(t) for t in tasks)
    ticks = [t.waiting_time for t in arrivals]
    if any(t < 0 for t in ticks) or any(a > b for a, b in zip(ticks, ticks[1:])):
        raise ValueError("entry ticks must be non-negative and non-decreasing")
    return _run(arrivals)


def _run(arrivals: Deque[Task]) -> Iterator[Tuple[int, Task]]:
    queue = TaskQueue()
    tick = 0
    while queue or arrivals:
        while arrivals and arrivals[0].waiting_time == tick:
            queue.push(arrivals.popleft())
        if queue:
            current = queue.pop()
            if current.execution_time > 0:
                yield tick, replace(current)
                for waiting in queue:
                    waiting.waiting_time += 1
                current.waiting_time = 0
                current.execution_time -= 1
                queue.push(current)
        tick += 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Simulate a time-sharing system with random tasks."
    )
    parser.add_argument("--count", type=int, default=10, help="number of tasks")
    parser.add_argument("--seed", type=int, help="random seed")
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("--count must be non-negative")
    tasks = random_tasks(args.count, random.Random(args.seed))
    for task in tasks:
        print(
            f"Task {task.name} introduced with priority {task.priority} "
            f"and execution time {task.execution_time} ms"
        )
    for _, task in simulate(tasks):
        print(
            f"Executing Task {task.name} (Priority: {task.priority}, "
            f"Execution Time Remaining: {task.execution_time} ms)"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())