"""CPU scheduling: FCFS, shortest job first, priority and round robin."""

from __future__ import annotations

import argparse
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Iterable, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Process:
    """A process to schedule; a lower ``priority`` number runs first."""

    pid: int
    arrival: int
    burst: int
    priority: int = 0

    def __post_init__(self) -> None:
        if self.arrival < 0:
            raise ValueError(f"process {self.pid}: arrival time must be >= 0")
        if self.burst < 0:
            raise ValueError(f"process {self.pid}: burst time must be >= 0")


@dataclass(frozen=True)
class ProcessResult:
    """Timing figures of one process after scheduling."""

    pid: int
    arrival: int
    burst: int
    response: int
    completion: int

    @property
    def turnaround(self) -> int:
        return self.completion - self.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.burst


@dataclass(frozen=True)
class ScheduleReport:
    """Per-process results, in order of arrival, with integer averages."""

    results: Tuple[ProcessResult, ...]

    @property
    def average_waiting(self) -> int:
        return sum(r.waiting for r in self.results) // len(self.results)

    @property
    def average_turnaround(self) -> int:
        return sum(r.turnaround for r in self.results) // len(self.results)


def sort_by_arrival(processes: Iterable[Process]) -> List[Process]:
    """Return the processes ordered by arrival time, ties kept in input order."""
    return sorted(processes, key=lambda p: p.arrival)


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


def fcfs(processes: Iterable[Process]) -> ScheduleReport:
    """First come, first served."""
    clock = 0
    results = []
    for process in _ordered(processes):
        clock = max(clock, process.arrival)
        results.append(_result(process, clock, clock + process.burst))
        clock += process.burst
    return ScheduleReport(tuple(results))


def _non_preemptive(
    processes: Iterable[Process], rank: Callable[[Process], int]
) -> ScheduleReport:
    order = _ordered(processes)
    results: List[Optional[ProcessResult]] = [None] * len(order)
    pending = list(range(len(order)))
    clock = 0
    while pending:
        ready = [i for i in pending if order[i].arrival <= clock]
        if not ready:
            clock = min(order[i].arrival for i in pending)
            continue
        chosen = min(ready, key=lambda i: rank(order[i]))
        process = order[chosen]
        results[chosen] = _result(process, clock, clock + process.burst)
        clock += process.burst
        pending.remove(chosen)
    return ScheduleReport(tuple(r for r in results if r is not None))


def sjf(processes: Iterable[Process]) -> ScheduleReport:
    """Non-preemptive shortest job first; ties go to the earlier arrival."""
    return _non_preemptive(processes, lambda p: p.burst)


def priority_schedule(processes: Iterable[Process]) -> ScheduleReport:
    """Non-preemptive priority scheduling; lower number means higher priority."""
    return _non_preemptive(processes, lambda p: p.priority)


def round_robin(processes: Iterable[Process], quantum: int) -> ScheduleReport:
    """Round robin with the given time quantum.

    Processes queue in order of arrival. A process at the front that has
    not yet arrived is moved to the back when another queued process is
    ready; when none is ready the clock jumps to the earliest arrival.
    """
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    order = _ordered(processes)
    remaining = [p.burst for p in order]
    started: List[Optional[int]] = [None] * len(order)
    results: List[Optional[ProcessResult]] = [None] * len(order)
    queue: Deque[int] = deque(range(len(order)))
    clock = 0
    while queue:
        index = queue[0]
        process = order[index]
        if process.arrival > clock:
            if any(order[i].arrival <= clock for i in queue):
                queue.rotate(-1)
            else:
                clock = min(order[i].arrival for i in queue)
            continue
        queue.popleft()
        if started[index] is None:
            started[index] = clock
        run = min(remaining[index], quantum)
        remaining[index] -= run
        clock += run
        if remaining[index] == 0:
            results[index] = _result(process, started[index], clock)
        else:
            queue.append(index)
    return ScheduleReport(tuple(r for r in results if r is not None))


_HEADER = (
    "PID  Arr_Time  Burst_Time  Response_Time  Completion_Time  "
    "TurnAround_tIme  Waiting_Time"
)


def format_report(report: ScheduleReport) -> str:
    """Render a report as the results table followed by the averages."""
    lines = [_HEADER]
    lines.extend(
        f"{r.pid:<5d}{r.arrival:<10d}{r.burst:<12d}{r.response:<15d}"
        f"{r.completion:<17d}{r.turnaround:<17d}{r.waiting:d}"
        for r in report.results
    )
    lines.append("")
    lines.append(f"avg waiting time={report.average_waiting}")
    lines.append(f"avg turn around time={report.average_turnaround}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compare FCFS, SJF, priority and round robin scheduling."
    )
    parser.add_argument("--arrival", type=int, nargs="+", required=True,
                        help="arrival times of the processes")
    parser.add_argument("--burst", type=int, nargs="+", required=True,
                        help="burst times of the processes")
    parser.add_argument("--priority", type=int, nargs="+", required=True,
                        help="priorities (lower number is higher priority)")
    parser.add_argument("--quantum", type=int, required=True,
                        help="time quantum for round robin")
    args = parser.parse_args(argv)
    if not len(args.arrival) == len(args.burst) == len(args.priority):
        parser.error("--arrival, --burst and --priority need the same count")
    if args.quantum <= 0:
        parser.error("--quantum must be positive")
    try:
        processes = sort_by_arrival(
            Process(pid, arrival, burst, priority)
            for pid, (arrival, burst, priority) in enumerate(
                zip(args.arrival, args.burst, args.priority), start=1
            )
        )
    except ValueError as exc:
        parser.error(str(exc))

    print("The given table is: ")
    print("PID  Arr_Time  Burst_Time  Priority")
    for p in processes:
        print(f"{p.pid:<5d}{p.arrival:<10d}{p.burst:<12d}{p.priority:d}")

    sections = [
        ("\n\nFCFS", fcfs(processes)),
        ("SJF:", sjf(processes)),
        ("PRIORITY SCHEDULING:\n"
         "[NOTE: we assumed that lower no denotes higher priority]",
         priority_schedule(processes)),
        ("ROUND ROBIN:", round_robin(processes, args.quantum)),
    ]
    for title, report in sections:
        print(title)
        print(format_report(report))
        print("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())