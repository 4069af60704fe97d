"""Producers and consumers sharing a bounded ring buffer."""

from __future__ import annotations

import random
import sys
import threading
from collections.abc import Sequence
from typing import Any


class BoundedBuffer:
    """A fixed-size ring buffer; put blocks while full, get blocks while empty."""

    def __init__(self, size: int = 3) -> None:
        if size <= 0:
            raise ValueError("buffer size must be positive")
        self._slots: list[Any] = [None] * size
        self._empty = threading.Semaphore(size)
        self._full = threading.Semaphore(0)
        self._mutex = threading.Lock()
        self._in = 0
        self._out = 0

    @property
    def size(self) -> int:
        return len(self._slots)

    def put(self, item: Any) -> int:
        """Store *item*, waiting for a free slot; return the slot used."""
        self._empty.acquire()
        with self._mutex:
            slot = self._in
            self._slots[slot] = item
            self._in = (slot + 1) % len(self._slots)
        self._full.release()
        return slot

    def get(self) -> tuple[Any, int]:
        """Take the oldest item, waiting for one; return (item, slot)."""
        self._full.acquire()
        with self._mutex:
            slot = self._out
            item = self._slots[slot]
            self._slots[slot] = None
            self._out = (slot + 1) % len(self._slots)
        self._empty.release()
        return item, slot


def run_producers_consumers(
    producers: int = 3,
    consumers: int = 3,
    items_each: int = 3,
    buffer_size: int = 3,
    rng: random.Random | None = None,
) -> list[str]:
    """Run producer and consumer threads over one buffer; return the event log.

    Each producer inserts *items_each* random items below 100 and each
    consumer removes as many, so both sides must move the same total.
    """
    if producers < 0 or consumers < 0 or items_each < 0:
        raise ValueError("counts must not be negative")
    if producers * items_each != consumers * items_each:
        raise ValueError("producers and consumers must move the same number of items")
    rng = rng if rng is not None else random.Random()
    buffer = BoundedBuffer(buffer_size)
    rng_lock = threading.Lock()
    log_lock = threading.Lock()
    lines: list[str] = []

    def produce(number: int) -> None:
        for _ in range(items_each):
            with rng_lock:
                item = rng.randrange(100)
            slot = buffer.put(item)
            with log_lock:
                lines.append(f"Producer {number}: Insert Item {item} at {slot}")

    def consume(number: int) -> None:
        for _ in range(items_each):
            item, slot = buffer.get()
            with log_lock:
                lines.append(f"Consumer {number}: Remove Item {item} from {slot}")

    workers = [threading.Thread(target=produce, args=(k,)) for k in range(1, producers + 1)]
    workers += [threading.Thread(target=consume, args=(k,)) for k in range(1, consumers + 1)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Run three producers and three consumers; an optional argument seeds the items."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        rng = random.Random(int(args[0])) if args else random.Random()
    except ValueError:
        print("Seed must be an integer")
        return 1
    for line in run_producers_consumers(rng=rng):
        print(line)
    return 0