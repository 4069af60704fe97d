"""Process records, schedule results and first-come first-served scheduling."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from operator import attrgetter
from statistics import fmean


@dataclass(frozen=True)
class Process:
    """A process waiting to be scheduled."""

    pid: int
    arrival: int
    burst: int
    priority: int = 0


@dataclass(frozen=True)
class ScheduledProcess:
    """A process together with the times a schedule gave it."""

    pid: int
    arrival: int
    burst: int
    completion: int
    response: int
    priority: int = 0

    @property
    def turnaround(self) -> int:
        return self.completion - self.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.burst


@dataclass(frozen=True)
class GanttEntry:
    """One slice of the CPU timeline; ``pid`` is None while the CPU is idle."""

    pid: int | None
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class ScheduleResult:
    """Per-process times, in table order, and the Gantt chart."""

    processes: tuple[ScheduledProcess, ...]
    gantt: tuple[GanttEntry, ...]

    def average_turnaround(self) -> float:
        """Mean turnaround time; raises ValueError when there are no processes."""
        return fmean(p.turnaround for p in self.processes)

    def average_waiting(self) -> float:
        """Mean waiting time; raises ValueError when there are no processes."""
        return fmean(p.waiting for p in self.processes)

    def average_response(self) -> float:
        """Mean response time; raises ValueError when there are no processes."""
        return fmean(p.response for p in self.processes)


def fcfs(processes: Iterable[Process]) -> ScheduleResult:
    """Run the processes in order of arrival, each to completion."""
    elapsed = 0
    done: list[ScheduledProcess] = []
    gantt: list[GanttEntry] = []
    for proc in sorted(processes, key=attrgetter("arrival")):
        start = max(elapsed, proc.arrival)
        elapsed = start + proc.burst
        gantt.append(GanttEntry(proc.pid, start, elapsed))
        done.append(
            ScheduledProcess(
                pid=proc.pid,
                arrival=proc.arrival,
                burst=proc.burst,
                completion=elapsed,
                response=start - proc.arrival,
                priority=proc.priority,
            )
        )
    return ScheduleResult(tuple(done), tuple(gantt))


def format_fcfs(result: ScheduleResult) -> str:
    """Render the Gantt chart, observation table and averages."""
    chart = "".join(f"| P{e.pid} ({e.start} - {e.end}) " for e in result.gantt) + "|"
    lines = ["", "Gantt Chart:", chart, "", "Observation Table:", "PID\tAT\tBT\tCT\tTAT\tWT\tRT"]
    lines += [
        f"{p.pid}\t{p.arrival}\t{p.burst}\t{p.completion}\t{p.turnaround}\t{p.waiting}\t{p.response}"
        for p in result.processes
    ]
    lines += [
        "",
        f"Average Turnaround Time: {result.average_turnaround():.2f}",
        f"Average Waiting Time: {result.average_waiting():.2f}",
        f"Average Response Time: {result.average_response():.2f}",
    ]
    return "\n".join(lines) + "\n"


def _tokens(args: Sequence[str]) -> Iterator[str]:
    if args:
        yield from args
        return
    for line in sys.stdin:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str) -> int:
    print(prompt, end="", flush=True)
    return int(next(tokens))


def main(argv: Sequence[str] | None = None) -> int:
    """Read processes (from the arguments, else stdin) and print an FCFS schedule."""
    args = list(sys.argv[1:] if argv is None else argv)
    tokens = _tokens(args)
    try:
        count = _ask(tokens, "Enter the number of processes: ")
        processes = []
        for pid in range(1, count + 1):
            arrival = _ask(tokens, f"Enter Arrival Time for Process {pid}: ")
            burst = _ask(tokens, f"Enter Burst Time for Process {pid}: ")
            print()
            processes.append(Process(pid, arrival, burst))
    except (StopIteration, ValueError):
        print("\nInvalid input")
        return 1
    if not processes:
        print("\nNumber of processes must be positive")
        return 1
    print(format_fcfs(fcfs(processes)), end="")
    return 0