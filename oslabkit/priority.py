"""Priority scheduling, with and without preemption; lower number wins."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

from oslabkit.schedule import GanttEntry, Process, ScheduledProcess, ScheduleResult


def _pick(processes: Sequence[Process], ready: list[int]) -> int:
    # Lowest priority value first; on a tie the earlier arrival, then the earlier entry.
    return min(ready, key=lambda i: (processes[i].priority, processes[i].arrival))


def priority_non_preemptive(processes: Sequence[Process]) -> ScheduleResult:
    """Run each chosen process to completion; idle time is charted unit by unit."""
    processes = list(processes)
    completion: dict[int, int] = {}
    start_of: dict[int, int] = {}
    gantt: list[GanttEntry] = []
    time = 0
    while len(completion) < len(processes):
        ready = [
            i for i, p in enumerate(processes) if p.arrival <= time and i not in completion
        ]
        if not ready:
            gantt.append(GanttEntry(None, time, time + 1))
            time += 1
            continue
        idx = _pick(processes, ready)
        start_of[idx] = time
        time += processes[idx].burst
        completion[idx] = time
        gantt.append(GanttEntry(processes[idx].pid, start_of[idx], time))
    done = tuple(
        ScheduledProcess(
            pid=p.pid,
            arrival=p.arrival,
            burst=p.burst,
            completion=completion[i],
            response=start_of[i] - p.arrival,
            priority=p.priority,
        )
        for i, p in enumerate(processes)
    )
    return ScheduleResult(done, tuple(gantt))


def priority_preemptive(processes: Sequence[Process]) -> ScheduleResult:
    """Re-choose the process every time unit; bursts must be positive."""
    processes = list(processes)
    if any(p.burst <= 0 for p in processes):
        raise ValueError("burst times must be positive")
    remaining = [p.burst for p in processes]
    completion: dict[int, int] = {}
    first_start: dict[int, int] = {}
    gantt: list[GanttEntry] = []
    time = 0
    while len(completion) < len(processes):
        ready = [i for i, p in enumerate(processes) if p.arrival <= time and remaining[i] > 0]
        if not ready:
            time = min(p.arrival for i, p in enumerate(processes) if remaining[i] > 0)
            continue
        idx = _pick(processes, ready)
        first_start.setdefault(idx, time)
        remaining[idx] -= 1
        gantt.append(GanttEntry(processes[idx].pid, time, time + 1))
        time += 1
        if remaining[idx] == 0:
            completion[idx] = time
    done = tuple(
        ScheduledProcess(
            pid=p.pid,
            arrival=p.arrival,
            burst=p.burst,
            completion=completion[i],
            response=first_start[i] - p.arrival,
            priority=p.priority,
        )
        for i, p in enumerate(processes)
    )
    return ScheduleResult(done, tuple(gantt))


def _table(result: ScheduleResult, priority_heading: str) -> str:
    rows = "".join(
        f"{p.pid}\t{p.arrival}\t{p.burst}\t{p.completion}\t{p.turnaround}\t{p.waiting}\t{p.priority}\n"
        for p in result.processes
    )
    return (
        f"\nPID\tAT\tBT\tCT\tTAT\tWT\t{priority_heading}\n"
        + rows
        + f"\nAverage TAT = {result.average_turnaround():.2f}"
        + f"\nAverage WT = {result.average_waiting():.2f}\n"
    )


def format_non_preemptive(result: ScheduleResult) -> str:
    """Render a non-preemptive schedule: chart, table and averages."""
    chart = "".join(
        f"| Idle till {e.end} " if e.pid is None else f"| P{e.pid} ({e.length}) {e.end} "
        for e in result.gantt
    )
    return "\nGantt Chart:\n\n" + chart + "|\n" + _table(result, "Priority")


def format_preemptive(result: ScheduleResult) -> str:
    """Render a preemptive schedule: chart, table and averages."""
    chart = "".join(f"| P{e.pid}({e.length}) {e.end}" for e in result.gantt if e.pid is not None)
    return "\nGantt Chart:\n" + chart + "|\n" + _table(result, "P")


def _tokens(args: Sequence[str]) -> Iterator[str]:
    if args:
        yield from args
        return
    for line in sys.stdin:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Read processes and print a priority schedule; ``--preemptive`` selects that mode."""
    args = list(sys.argv[1:] if argv is None else argv)
    preemptive = "--preemptive" in args
    args = [a for a in args if a != "--preemptive"]
    tokens = _tokens(args)
    print("\nEnter the number of processes:", flush=True)
    try:
        count = int(next(tokens))
        if preemptive:
            print("\nEnter the arrival time, burst time and priority of the process:")
            print("AT BT P", flush=True)
        else:
            print("\nEnter the Arrival Time, Burst Time and Priority of each process:")
            print("AT BT Priority", flush=True)
        processes = []
        for pid in range(1, count + 1):
            arrival, burst, prio = (int(next(tokens)) for _ in range(3))
            processes.append(Process(pid, arrival, burst, prio))
    except (StopIteration, ValueError, RuntimeError):
        print("Invalid input")
        return 1
    if not processes:
        print("Number of processes must be positive")
        return 1
    try:
        if preemptive:
            print(format_preemptive(priority_preemptive(processes)), end="")
        else:
            print(format_non_preemptive(priority_non_preemptive(processes)), end="")
    except ValueError as exc:
        print(exc)
        return 1
    return 0