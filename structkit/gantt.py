"""CPU scheduling that records a Gantt chart of every run slice."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .scheduling import Process, ProcessResult, sort_by_arrival


@dataclass(frozen=True)
class GanttSlot:
    """A span of time during which one process held the CPU."""

    pid: int
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class GanttSchedule:
    """Run slices in execution order plus the per-process results table."""

    slots: Tuple[GanttSlot, ...]
    results: Tuple[ProcessResult, ...]

    @property
    def average_waiting(self) -> float:
        return sum(r.waiting for r in self.results) / len(self.results)

    @property
    def average_turnaround(self) -> float:
        return sum(r.turnaround for r in self.results) / len(self.results)

    def __str__(self) -> str:
        if not self.slots:
            return ""
        chart = "".join(f"|P{s.pid}|{s.end}" for s in self.slots)
        return f"{self.slots[0].start}\n{chart}"


def _ordered(processes: Iterable[Process]) -> List[Process]:
    order = sort_by_arrival(processes)
    if not order:
        raise ValueError("at least one process is required")
    return order


def _result(process: Process, start: int, completion: int) -> ProcessResult:
    return ProcessResult(
        pid=process.pid,
        arrival=process.arrival,
        burst=process.burst,
        response=start - process.arrival,
        completion=completion,
    )


def fcfs(processes: Iterable[Process]) -> GanttSchedule:
    """First come, first served; results in order of arrival."""
    clock = 0
    slots: List[GanttSlot] = []
    results: List[ProcessResult] = []
    for process in _ordered(processes):
        clock = max(clock, process.arrival)
        end = clock + process.burst
        slots.append(GanttSlot(process.pid, clock, end))
        results.append(_result(process, clock, end))
        clock = end
    return GanttSchedule(tuple(slots), tuple(results))


def _non_preemptive(
    order: List[Process], rank: Callable[[Process], int]
) -> GanttSchedule:
    done: Dict[int, ProcessResult] = {}
    slots: List[GanttSlot] = []
    pending = list(range(len(order)))
    clock = 0
    while pending:
        ready = [i for i in pending if order[i].arrival <= clock]
        if not ready:
            clock = min(order[i].arrival for i in pending)
            continue
        chosen = min(ready, key=lambda i: rank(order[i]))
        process = order[chosen]
        end = clock + process.burst
        slots.append(GanttSlot(process.pid, clock, end))
        done[chosen] = _result(process, clock, end)
        clock = end
        pending.remove(chosen)
    return GanttSchedule(tuple(slots), tuple(done[i] for i in range(len(order))))


def sjf(processes: Iterable[Process]) -> GanttSchedule:
    """Non-preemptive shortest job first.

    Processes are ordered by arrival, then burst; results follow that order.
    """
    order = sorted(_ordered(processes), key=lambda p: (p.arrival, p.burst))
    return _non_preemptive(order, lambda p: p.burst)


def priority_schedule(processes: Iterable[Process]) -> GanttSchedule:
    """Non-preemptive priority scheduling; a lower number runs first.

    Results are listed by priority, then arrival, then burst.
    """
    order = sorted(
        _ordered(processes), key=lambda p: (p.priority, p.arrival, p.burst)
    )
    return _non_preemptive(order, lambda p: p.priority)


def round_robin(processes: Iterable[Process], quantum: int) -> GanttSchedule:
    """Round robin over the arrival-ordered processes.

    After each visit the scan moves to the next process if it has arrived,
    otherwise it returns to the first one. Results are in completion order.
    """
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    order = _ordered(processes)
    count = len(order)
    remaining = [p.burst for p in order]
    finished = [False] * count
    first_start: List[Optional[int]] = [None] * count
    slots: List[GanttSlot] = []
    results: List[ProcessResult] = []
    clock = order[0].arrival
    index = 0
    while len(results) < count:
        process = order[index]
        if not finished[index]:
            if first_start[index] is None:
                first_start[index] = clock
            run = min(remaining[index], quantum)
            if run:
                slots.append(GanttSlot(process.pid, clock, clock + run))
            remaining[index] -= run
            clock += run
            if remaining[index] == 0:
                finished[index] = True
                start = first_start[index]
                assert start is not None
                results.append(_result(process, start, clock))
        elif not any(
            not done and p.arrival <= clock for p, done in zip(order, finished)
        ):
            upcoming = [p.arrival for p, done in zip(order, finished) if not done]
            if upcoming:
                clock = min(upcoming)
        if index == count - 1 or order[index + 1].arrival > clock:
            index = 0
        else:
            index += 1
    return GanttSchedule(tuple(slots), tuple(results))


def _parse_process(text: str) -> Process:
    fields = text.split(":")
    if len(fields) not in (3, 4):
        raise argparse.ArgumentTypeError(
            f"expected pid:arrival:burst[:priority], got {text!r}"
        )
    try:
        return Process(*(int(f) for f in fields))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Schedule processes and draw a Gantt chart."
    )
    parser.add_argument("algorithm", choices=["fcfs", "sjf", "priority", "rr"])
    parser.add_argument(
        "processes", nargs="+", type=_parse_process,
        help="processes as pid:arrival:burst[:priority]",
    )
    parser.add_argument("--quantum", type=int, help="time slice for rr")
    args = parser.parse_args(argv)

    if args.algorithm == "rr":
        if args.quantum is None or args.quantum <= 0:
            parser.error("rr needs a positive --quantum")
        schedule = round_robin(args.processes, args.quantum)
    elif args.algorithm == "sjf":
        schedule = sjf(args.processes)
    elif args.algorithm == "priority":
        schedule = priority_schedule(args.processes)
    else:
        schedule = fcfs(args.processes)

    print("Gantt Chart")
    print(schedule)
    print("PID\tARR\tBURST\tCOMP\tTURN\tWAIT")
    for r in schedule.results:
        print(
            f"{r.pid}\t{r.arrival}\t{r.burst}\t{r.completion}\t"
            f"{r.turnaround}\t{r.waiting}"
        )
    print(f"Average waiting time: {schedule.average_waiting:f}")
    print(f"Average turnaround time: {schedule.average_turnaround:f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())