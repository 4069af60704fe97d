"""Round-robin scheduling with a fixed time quantum."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from operator import attrgetter

from oslabkit.schedule import GanttEntry, Process, ScheduledProcess, ScheduleResult


def round_robin(processes: Iterable[Process], quantum: int) -> ScheduleResult:
    """Schedule processes (sorted by arrival) in time slices of at most *quantum*.

    The first process is dispatched at time 0, and when the ready queue runs
    dry the next unfinished process is dispatched at once, without waiting
    for its arrival.
    """
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    order = sorted(processes, key=attrgetter("arrival"))
    if any(p.burst <= 0 for p in order):
        raise ValueError("burst times must be positive")
    if not order:
        return ScheduleResult((), ())

    remaining = [p.burst for p in order]
    completion: dict[int, int] = {}
    first_start: dict[int, int] = {}
    gantt: list[GanttEntry] = []
    queue = deque([0])
    visited = {0}
    time = 0
    while len(completion) < len(order):
        idx = queue.popleft()
        start = time
        first_start.setdefault(idx, start)
        run = min(quantum, remaining[idx])
        time += run
        remaining[idx] -= run
        gantt.append(GanttEntry(order[idx].pid, start, time))
        if remaining[idx] == 0:
            completion[idx] = time

        for i, proc in enumerate(order):
            if i != idx and i not in visited and proc.arrival <= time:
                queue.append(i)
                visited.add(i)
        if remaining[idx] > 0:
            queue.append(idx)
        if not queue:
            pending = next((i for i, left in enumerate(remaining) if left > 0), None)
            if pending is not None:
                queue.append(pending)
                visited.add(pending)

    done = tuple(
        ScheduledProcess(
            pid=p.pid,
            arrival=p.arrival,
            burst=p.burst,
            completion=completion[i],
            response=first_start[i] - p.arrival,
            priority=p.priority,
        )
        for i, p in enumerate(order)
    )
    return ScheduleResult(done, tuple(gantt))


def format_round_robin(result: ScheduleResult) -> str:
    """Render the Gantt chart, table and averages."""
    chart = "".join(f"| P{e.pid} {e.start} " for e in result.gantt)
    end = result.gantt[-1].end if result.gantt else 0
    rows = "".join(
        f"{p.pid}\t{p.arrival}\t{p.burst}\t{p.completion}\t{p.turnaround}\t{p.waiting}\n"
        for p in result.processes
    )
    return (
        "\nGantt Chart:\n"
        + chart
        + f"| {end}\n"
        + "\nPID\tAT\tBT\tCT\tTAT\tWT\n"
        + rows
        + f"\nAverage TAT = {result.average_turnaround():.2f}"
        + f"\nAverage WT = {result.average_waiting():.2f}\n"
    )


def _tokens(args: Sequence[str]) -> Iterator[str]:
    if args:
        yield from args
        return
    for line in sys.stdin:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Read processes and a quantum, then print the round-robin schedule."""
    args = list(sys.argv[1:] if argv is None else argv)
    tokens = _tokens(args)
    try:
        print("Enter number of processes: ", end="", flush=True)
        count = int(next(tokens))
        print("Enter Arrival Time and Burst Time (AT BT):", flush=True)
        processes = []
        for pid in range(1, count + 1):
            arrival = int(next(tokens))
            burst = int(next(tokens))
            processes.append(Process(pid, arrival, burst))
        print("Enter Time Quantum: ", end="", flush=True)
        quantum = int(next(tokens))
    except (StopIteration, ValueError):
        print("\nInvalid input")
        return 1
    if not processes:
        print("\nNumber of processes must be positive")
        return 1
    try:
        result = round_robin(processes, quantum)
    except ValueError as exc:
        print(f"\n{exc}")
        return 1
    print(format_round_robin(result), end="")
    return 0