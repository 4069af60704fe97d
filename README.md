# oslabkit

Small operating-systems lab exercises, usable as a Python library and from
the command line:

- file utilities: `cat`, `grep`, `ls` and `rm`
- positioned reads with `seek` and a chunked file copy
- process demonstrations: fork and exec, a zombie child and an orphan child
- CPU scheduling: first-come first-served, priority (preemptive and
  non-preemptive) and round robin, with Gantt charts, observation tables
  and average times
- threads: the sum 1..n and n! computed in two threads
- synchronisation: producers and consumers over a bounded ring buffer, and
  readers and writers over a shared counter
- shared memory between a parent and a child process: odd numbers, the
  Fibonacci series and the primes in a range

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
|---|---|
| `oslab-cat FILE` | print a file, followed by a newline |
| `oslab-grep [FILE [PATTERN]]` | print the lines of FILE that contain PATTERN; prompts for what is missing |
| `oslab-ls DIR` | list the entries of DIR, `.` and `..` first |
| `oslab-rm [FILE]` | remove a file or an empty directory; prompts for the name if missing |
| `oslab-seek [FILE]` | seek and read at fixed positions in FILE (default `myfile.txt`) |
| `oslab-copy [SRC [DST]]` | copy SRC (default `data.txt`) to DST (default `destination.txt`) |
| `oslab-fcfs` | first-come first-served scheduling |
| `oslab-priority [--preemptive]` | priority scheduling; lower number is higher priority |
| `oslab-round-robin` | round-robin scheduling with a time quantum |
| `oslab-sum-mul N` | sum of 1..N and N! computed in two threads |
| `oslab-producer-consumer [SEED]` | three producers and three consumers over a three-slot buffer |
| `oslab-readers-writers [--interleave] [COUNT]` | COUNT readers and COUNT writers (default 3) over a counter that starts at 1 |
| `oslab-processes [fork\|zombie\|orphan] [SECONDS]` | one process demonstration (default `fork`, 10 seconds) |
| `oslab-odd [N]` | a child process writes the first N odd numbers (at most 100) into shared memory |
| `oslab-fibonacci N` | a child process writes the first N Fibonacci numbers into shared memory |
| `oslab-primes M N` | a child process writes the primes between M and N into shared memory |

The scheduling commands take their numbers from the command-line arguments
or, when there are none, from standard input, in the order they prompt for
them:

- `oslab-fcfs`: the number of processes, then arrival and burst time for
  each process.
- `oslab-priority`: the number of processes, then arrival time, burst time
  and priority for each.
- `oslab-round-robin`: the number of processes, arrival and burst time for
  each, then the time quantum.

Examples:

```
oslab-cat notes.txt
oslab-ls .
oslab-fcfs 3 0 5 1 3 2 1
oslab-priority --preemptive 2 0 3 2 1 2 1
oslab-round-robin 2 0 5 1 3 2
oslab-sum-mul 5
oslab-fibonacci 6
oslab-primes 2 10
```

## Library

```python
from oslabkit.primes import is_prime, primes_report
from oslabkit.fibonacci import fibonacci_text
from oslabkit.sum_mul import sum_and_factorial
from oslabkit.odd_numbers import first_odd_numbers

is_prime(7)                  # True
primes_report(2, 10)         # "The prime numbers between 2 and 10 are:\n2\n3\n5\n7\n"
fibonacci_text(6)            # "0 1 1 2 3 5 "
sum_and_factorial(5)         # (15, 120)
first_odd_numbers(5)         # [1, 3, 5, 7, 9]
```

### File utilities

`oslabkit.commands` has `cat(path)`, `grep(path, pattern)` (matching lines
with their newlines), `list_dir(path)` and `remove(path)`.
`oslabkit.fileio` has `seek_demo(path)`, which returns `(heading, text)`
pairs for the fixed sequence of seeks and reads, and
`copy_file(source, destination)`, which returns the number of bytes copied.
The destination is created with mode 0644 when missing and is not truncated.

### Scheduling

`oslabkit.schedule` defines `Process(pid, arrival, burst, priority=0)` and
`fcfs(processes)`. The schedulers return a `ScheduleResult` holding a tuple
of `ScheduledProcess` records (with `completion`, `response`, `turnaround`
and `waiting`) and a tuple of `GanttEntry` slices (`pid` is `None` for idle
time). `average_turnaround()`, `average_waiting()` and `average_response()`
give the means and raise `ValueError` when there are no processes.

- `oslabkit.schedule`: `fcfs`, `format_fcfs`
- `oslabkit.priority`: `priority_non_preemptive`, `priority_preemptive`,
  `format_non_preemptive`, `format_preemptive`
- `oslabkit.round_robin`: `round_robin(processes, quantum)`,
  `format_round_robin`

`priority_preemptive` and `round_robin` raise `ValueError` for burst times
that are not positive, and `round_robin` also for a quantum that is not
positive.

### Synchronisation

`oslabkit.bounded_buffer.BoundedBuffer(size=3)` has blocking `put(item)`
(returns the slot used) and `get()` (returns `(item, slot)`).
`run_producers_consumers(producers, consumers, items_each, buffer_size, rng)`
runs the threads and returns the event log.

`oslabkit.readers_writers.ReadersWriterLock` gives `read_lock()` and
`write_lock()` context managers, with reader preference.
`run_readers_writers(count, interleave)` returns the event log.

### Processes and shared memory

`oslabkit.processes` has `fork_demo()`, `zombie_demo(seconds)` and
`orphan_demo(seconds)`; each returns the transcript as a list of lines.
`fork_demo` runs the system `pwd` command in the child.

`oslabkit.odd_numbers.run(n)`, `oslabkit.fibonacci.run(n)` and
`oslabkit.primes.run(m, n)` create a shared-memory segment, let a child
process fill it and return what the parent reads back. `fill_shared`,
`write_fibonacci` and `write_primes` are the child's side, attaching to a
segment by name.

## Limitations

- The process demonstrations use `os.fork` and work only on Unix-like
  systems.
- The shared-memory exercises create a new, uniquely named segment on each
  run rather than one with a fixed key; the segment is removed when the run
  ends. Text segments hold 4096 bytes, and the odd-number segment holds at
  most 100 numbers; larger requests raise `ValueError`.