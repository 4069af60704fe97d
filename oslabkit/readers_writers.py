"""Readers-writers synchronisation with reader preference."""

from __future__ import annotations

import sys
import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager


class ReadersWriterLock:
    """Many readers at once, or one writer; the first reader locks writers out."""

    def __init__(self) -> None:
        self._write = threading.Semaphore(1)
        self._mutex = threading.Lock()
        self._readers = 0

    @contextmanager
    def read_lock(self) -> Iterator[None]:
        """Hold shared access for the duration of the block."""
        with self._mutex:
            self._readers += 1
            if self._readers == 1:
                self._write.acquire()
        try:
            yield
        finally:
            with self._mutex:
                self._readers -= 1
                if self._readers == 0:
                    self._write.release()

    @contextmanager
    def write_lock(self) -> Iterator[None]:
        """Hold exclusive access for the duration of the block."""
        self._write.acquire()
        try:
            yield
        finally:
            self._write.release()


def run_readers_writers(count: int = 3, interleave: bool = False) -> list[str]:
    """Run *count* readers and *count* writers over a counter that starts at 1.

    Each writer doubles the counter. Threads start readers first, or in
    reader/writer pairs when *interleave* is true. Returns the event log.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    lock = ReadersWriterLock()
    lines: list[str] = []
    value = 1

    def writer(number: int) -> None:
        nonlocal value
        with lock.write_lock():
            value *= 2
            lines.append(f"Writer {number} modified cnt to {value}")

    def reader(number: int) -> None:
        with lock.read_lock():
            lines.append(f"Reader {number}: read cnt as {value}")

    readers = [threading.Thread(target=reader, args=(k,)) for k in range(1, count + 1)]
    writers = [threading.Thread(target=writer, args=(k,)) for k in range(1, count + 1)]
    if interleave:
        order = [t for pair in zip(readers, writers) for t in pair]
    else:
        order = readers + writers
    for thread in order:
        thread.start()
    for thread in order:
        thread.join()
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration; ``--interleave`` pairs the threads, a number sets the count."""
    args = list(sys.argv[1:] if argv is None else argv)
    interleave = "--interleave" in args
    args = [a for a in args if a != "--interleave"]
    try:
        count = int(args[0]) if args else 3
        lines = run_readers_writers(count, interleave)
    except ValueError:
        print("Count must be a non-negative integer")
        return 1
    for line in lines:
        print(line)
    return 0