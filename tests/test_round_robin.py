from collections import defaultdict

import pytest

from oslabkit.round_robin import format_round_robin, main, round_robin
from oslabkit.schedule import GanttEntry, Process, fcfs

WORKLOAD = [
    Process(1, 0, 5),
    Process(2, 1, 3),
    Process(3, 2, 8),
    Process(4, 3, 6),
]


def test_single_process_is_sliced():
    result = round_robin([Process(1, 0, 5)], 2)
    assert result.gantt == (GanttEntry(1, 0, 2), GanttEntry(1, 2, 4), GanttEntry(1, 4, 5))


def test_slices_cover_bursts_and_respect_quantum():
    result = round_robin(WORKLOAD, 2)
    totals = defaultdict(int)
    for entry in result.gantt:
        assert 0 < entry.length <= 2
        totals[entry.pid] += entry.length
    assert dict(totals) == {p.pid: p.burst for p in WORKLOAD}


def test_timeline_is_contiguous_from_zero():
    result = round_robin(WORKLOAD, 3)
    assert result.gantt[0].start == 0
    for before, after in zip(result.gantt, result.gantt[1:]):
        assert after.start == before.end


def test_completion_is_end_of_last_slice():
    result = round_robin(WORKLOAD, 2)
    for proc in result.processes:
        last = max(e.end for e in result.gantt if e.pid == proc.pid)
        assert proc.completion == last
        assert proc.waiting == proc.turnaround - proc.burst


def test_large_quantum_matches_fcfs_completions():
    rr = round_robin(WORKLOAD, 100)
    first_come = fcfs(WORKLOAD)
    assert [p.completion for p in rr.processes] == [p.completion for p in first_come.processes]


def test_table_sorted_by_arrival():
    shuffled = [WORKLOAD[2], WORKLOAD[0], WORKLOAD[3], WORKLOAD[1]]
    result = round_robin(shuffled, 2)
    assert [p.arrival for p in result.processes] == sorted(p.arrival for p in WORKLOAD)


def test_invalid_quantum_and_burst():
    with pytest.raises(ValueError):
        round_robin(WORKLOAD, 0)
    with pytest.raises(ValueError):
        round_robin([Process(1, 0, 0)], 2)


def test_format_layout():
    result = round_robin(WORKLOAD, 2)
    text = format_round_robin(result)
    assert text.startswith("\nGantt Chart:\n| P1 0 ")
    assert f"| {result.gantt[-1].end}\n" in text
    assert "\nPID\tAT\tBT\tCT\tTAT\tWT\n" in text
    assert f"Average TAT = {result.average_turnaround():.2f}" in text


def test_main_with_arguments(capsys):
    assert main(["2", "0", "3", "1", "2", "2"]) == 0
    out = capsys.readouterr().out
    assert "Average WT = " in out
    assert "| P1 0 " in out


def test_main_rejects_zero_quantum(capsys):
    assert main(["1", "0", "3", "0"]) == 1
    assert "quantum" in capsys.readouterr().out