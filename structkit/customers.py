"""A bounded queue of customers with waiting-time lookup."""

from __future__ import annotations

import argparse
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, Optional, Sequence

from .queues import QueueEmptyError, QueueFullError


@dataclass(frozen=True)
class Customer:
    """A customer identified by number, with a service time in minutes."""

    number: int
    name: str
    service_time: int

    def __post_init__(self) -> None:
        if self.service_time < 0:
            raise ValueError(f"customer {self.number}: service time must be >= 0")


class CustomerQueue:
    """First-come, first-served customers, at most ``capacity`` at once."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._customers: Deque[Customer] = deque()

    def enqueue(self, customer: Customer) -> None:
        if len(self._customers) >= self.capacity:
            raise QueueFullError("queue full")
        self._customers.append(customer)

    def dequeue(self) -> Customer:
        if not self._customers:
            raise QueueEmptyError("queue empty")
        return self._customers.popleft()

    def waiting_time(self, number: int) -> int:
        """Total service time of everyone ahead of customer ``number``."""
        waited = 0
        for customer in self._customers:
            if customer.number == number:
                return waited
            waited += customer.service_time
        raise KeyError(f"cust no {number} not found")

    def __len__(self) -> int:
        return len(self._customers)

    def __iter__(self) -> Iterator[Customer]:
        """Iterate from front to rear."""
        return iter(list(self._customers))


def _parse_customer(text: str) -> Customer:
    try:
        number, rest = text.split(":", 1)
        name, sep, minutes = rest.rpartition(":")
        if not sep or not name:
            raise ValueError
        return Customer(int(number), name, int(minutes))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"expected number:name:minutes, got {text!r}"
        ) from exc


def _describe(queue: CustomerQueue) -> str:
    lines = ["Customer queue:", "----------------------", "front:"]
    if not len(queue):
        lines.append("EMPTY")
        return "\n".join(lines)
    for c in queue:
        lines.append(f"customer no={c.number}")
        lines.append(f"customer name={c.name}")
        lines.append(f"customer serv_time={c.service_time}")
        lines.append("")
    lines.append("rear")
    lines.append("-----------------------")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Queue customers and report how long each must wait."
    )
    parser.add_argument(
        "customers", nargs="*", type=_parse_customer,
        help="customers as number:name:minutes, in arrival order",
    )
    parser.add_argument("--capacity", type=int, default=5, help="queue size")
    parser.add_argument(
        "--wait", type=int, action="append", default=[], metavar="NUMBER",
        help="customer number whose waiting time to report",
    )
    args = parser.parse_args(argv)
    if args.capacity <= 0:
        parser.error("--capacity must be positive")
    queue = CustomerQueue(args.capacity)
    for customer in args.customers:
        try:
            queue.enqueue(customer)
        except QueueFullError:
            print("queue full")
    print(_describe(queue))
    for number in args.wait:
        try:
            print(f"waiting time={queue.waiting_time(number)}")
        except KeyError:
            print(f"cust no {number} not found")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())