import pytest

from structkit.scheduling import (
    Process,
    ScheduleReport,
    fcfs,
    format_report,
    main,
    priority_schedule,
    round_robin,
    sjf,
    sort_by_arrival,
)

MIXED = [
    Process(1, 2, 5, 3),
    Process(2, 0, 3, 1),
    Process(3, 1, 8, 2),
    Process(4, 3, 6, 4),
    Process(5, 20, 2, 0),
]

SCHEDULERS = [
    fcfs,
    sjf,
    priority_schedule,
    lambda ps: round_robin(ps, 2),
    lambda ps: round_robin(ps, 1),
]


def _check_consistency(report, processes):
    expected_order = [p.pid for p in sort_by_arrival(processes)]
    assert [r.pid for r in report.results] == expected_order
    for r in report.results:
        assert r.turnaround == r.completion - r.arrival
        assert r.waiting == r.turnaround - r.burst
        assert r.response >= 0
        assert r.waiting >= 0
        assert r.response <= r.waiting


def test_sort_by_arrival_is_stable():
    procs = [Process(1, 3, 1), Process(2, 1, 1), Process(3, 1, 2)]
    assert [p.pid for p in sort_by_arrival(procs)] == [2, 3, 1]


@pytest.mark.parametrize("scheduler", SCHEDULERS)
def test_results_are_consistent(scheduler):
    report = scheduler(MIXED)
    _check_consistency(report, MIXED)


@pytest.mark.parametrize("scheduler", SCHEDULERS)
def test_averages_are_integer_means(scheduler):
    report = scheduler(MIXED)
    n = len(report.results)
    assert report.average_waiting == sum(r.waiting for r in report.results) // n
    assert report.average_turnaround == (
        sum(r.turnaround for r in report.results) // n
    )


@pytest.mark.parametrize("scheduler", [fcfs, sjf, priority_schedule])
def test_non_preemptive_runs_do_not_overlap(scheduler):
    report = scheduler(MIXED)
    intervals = sorted((r.completion - r.burst, r.completion) for r in report.results)
    for (_, end), (start, _) in zip(intervals, intervals[1:]):
        assert start >= end
    for r in report.results:
        assert r.response == r.waiting
        assert r.completion - r.burst >= r.arrival


def test_fcfs_worked_example():
    procs = [Process(1, 0, 24), Process(2, 0, 3), Process(3, 0, 3)]
    report = fcfs(procs)
    assert [r.waiting for r in report.results] == [0, 24, 27]
    assert report.average_waiting == 17


def test_sjf_worked_example():
    procs = [Process(1, 0, 24), Process(2, 0, 3), Process(3, 0, 3)]
    report = sjf(procs)
    assert [r.waiting for r in report.results] == [6, 0, 3]


def test_fcfs_idles_until_arrival():
    procs = [Process(1, 0, 2), Process(2, 10, 4)]
    late = fcfs(procs).results[1]
    assert late.response == 0
    assert late.completion == procs[1].arrival + procs[1].burst


def test_sjf_with_equal_bursts_matches_fcfs():
    procs = [Process(i, i, 4) for i in range(1, 6)]
    assert sjf(procs) == fcfs(procs)


def test_priority_with_burst_as_priority_matches_sjf():
    procs = [Process(p.pid, p.arrival, p.burst, p.burst) for p in MIXED]
    assert priority_schedule(procs) == sjf(procs)


def test_priority_prefers_lower_number():
    procs = [Process(1, 0, 3, 5), Process(2, 0, 3, 1)]
    results = {r.pid: r for r in priority_schedule(procs).results}
    assert results[2].completion < results[1].completion


def test_round_robin_large_quantum_matches_fcfs():
    procs = [Process(1, 0, 5), Process(2, 0, 3), Process(3, 0, 7)]
    assert round_robin(procs, 100) == fcfs(procs)


def test_round_robin_without_idle_ends_at_total_burst():
    procs = [Process(1, 0, 5), Process(2, 0, 3), Process(3, 0, 7)]
    report = round_robin(procs, 2)
    assert max(r.completion for r in report.results) == sum(p.burst for p in procs)
    assert report.results[0].response == 0


def test_round_robin_idles_until_arrival():
    procs = [Process(1, 0, 1), Process(2, 5, 1)]
    late = round_robin(procs, 2).results[1]
    assert late.completion == procs[1].arrival + procs[1].burst


def test_round_robin_rejects_non_positive_quantum():
    with pytest.raises(ValueError):
        round_robin(MIXED, 0)


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        fcfs([])
    with pytest.raises(ValueError):
        sjf([])
    with pytest.raises(ValueError):
        priority_schedule([])
    with pytest.raises(ValueError):
        round_robin([], 2)
    with pytest.raises(ValueError):
        round_robin([], 1)


def test_negative_burst_rejected():
    with pytest.raises(ValueError):
        Process(1, 0, -1)


def test_format_report_layout():
    report = fcfs(MIXED)
    text = format_report(report)
    lines = text.splitlines()
    assert lines[0].startswith("PID  Arr_Time  Burst_Time  Response_Time")
    assert lines[1].startswith(f"{report.results[0].pid:<5d}")
    assert lines[-2] == f"avg waiting time={report.average_waiting}"
    assert lines[-1] == f"avg turn around time={report.average_turnaround}"
    assert isinstance(report, ScheduleReport)


def test_main_prints_all_sections(capsys):
    code = main(
        ["--arrival", "0", "1", "2", "--burst", "4", "3", "1",
         "--priority", "2", "1", "3", "--quantum", "2"]
    )
    out = capsys.readouterr().out
    assert code == 0
    for title in ("FCFS", "SJF:", "PRIORITY SCHEDULING:", "ROUND ROBIN:"):
        assert title in out


def test_main_rejects_mismatched_counts():
    with pytest.raises(SystemExit):
        main(["--arrival", "0", "1", "--burst", "4",
              "--priority", "1", "2", "--quantum", "2"])