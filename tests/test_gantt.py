from collections import defaultdict

import pytest

from structkit.gantt import (
    GanttSchedule,
    GanttSlot,
    fcfs,
    main,
    priority_schedule,
    round_robin,
    sjf,
)
from structkit.scheduling import Process

PROCS = [
    Process(1, 0, 5, 3),
    Process(2, 1, 3, 1),
    Process(3, 2, 1, 2),
]


def _busy_time(schedule):
    totals = defaultdict(int)
    for slot in schedule.slots:
        totals[slot.pid] += slot.length
    return dict(totals)


def _no_overlap(schedule):
    return all(a.end <= b.start for a, b in zip(schedule.slots, schedule.slots[1:]))


@pytest.mark.parametrize("algorithm", [fcfs, sjf, priority_schedule])
def test_non_preemptive_invariants(algorithm):
    schedule = algorithm(PROCS)
    assert _busy_time(schedule) == {p.pid: p.burst for p in PROCS}
    assert _no_overlap(schedule)
    assert sorted(r.pid for r in schedule.results) == [1, 2, 3]
    for r in schedule.results:
        assert r.completion == r.arrival + r.response + r.burst
        assert r.waiting >= 0


def test_fcfs_runs_in_arrival_order():
    schedule = fcfs(list(reversed(PROCS)))
    assert [s.pid for s in schedule.slots] == [p.pid for p in PROCS]
    assert [r.pid for r in schedule.results] == [p.pid for p in PROCS]


def test_fcfs_idles_until_arrival():
    schedule = fcfs([Process(1, 0, 2), Process(2, 10, 3)])
    assert schedule.slots[1] == GanttSlot(2, 10, 13)
    assert schedule.results[1].response == 0


def test_sjf_picks_shortest_ready_job():
    schedule = sjf(PROCS)
    assert [s.pid for s in schedule.slots] == [1, 3, 2]


def test_sjf_orders_equal_arrivals_by_burst():
    schedule = sjf([Process(1, 0, 4), Process(2, 0, 2)])
    assert [r.pid for r in schedule.results] == [2, 1]
    assert schedule.slots[0].pid == 2


def test_priority_lower_number_first():
    schedule = priority_schedule(
        [Process(1, 0, 2, 5), Process(2, 0, 2, 1), Process(3, 0, 2, 3)]
    )
    assert [s.pid for s in schedule.slots] == [2, 3, 1]
    assert [r.pid for r in schedule.results] == [2, 3, 1]


def test_round_robin_invariants():
    quantum = 2
    schedule = round_robin(PROCS, quantum)
    assert _busy_time(schedule) == {p.pid: p.burst for p in PROCS}
    assert all(0 < s.length <= quantum for s in schedule.slots)
    assert _no_overlap(schedule)
    assert schedule.slots[-1].end == sum(p.burst for p in PROCS)


def test_round_robin_slice_sequence():
    schedule = round_robin(PROCS, 2)
    assert [s.pid for s in schedule.slots] == [1, 2, 3, 1, 2, 1]
    assert [r.pid for r in schedule.results] == [3, 2, 1]


def test_round_robin_large_quantum_matches_fcfs():
    rr = round_robin(PROCS, 100)
    assert rr.slots == fcfs(PROCS).slots


def test_round_robin_skips_idle_gap():
    schedule = round_robin([Process(1, 0, 2), Process(2, 10, 3)], 2)
    assert schedule.slots[1].start == 10
    assert schedule.results[-1].completion == 13


def test_round_robin_rejects_bad_quantum():
    with pytest.raises(ValueError):
        round_robin(PROCS, 0)


def test_empty_process_list_rejected():
    with pytest.raises(ValueError):
        fcfs([])


def test_averages_match_results():
    schedule = sjf(PROCS)
    waits = [r.waiting for r in schedule.results]
    assert schedule.average_waiting == pytest.approx(sum(waits) / len(waits))
    assert schedule.average_turnaround >= schedule.average_waiting


def test_chart_text():
    schedule = GanttSchedule(
        (GanttSlot(1, 0, 5), GanttSlot(2, 5, 8)), ()
    )
    assert str(schedule) == "0\n|P1|5|P2|8"


def test_main_prints_chart(capsys):
    assert main(["sjf", "1:0:5", "2:1:3"]) == 0
    out = capsys.readouterr().out
    assert "Gantt Chart" in out
    assert "|P1|5" in out


def test_main_rr_requires_quantum():
    with pytest.raises(SystemExit):
        main(["rr", "1:0:5"])