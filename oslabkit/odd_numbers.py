"""First n odd numbers, generated by a child process into shared memory."""

from __future__ import annotations

import multiprocessing
import struct
import sys
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from multiprocessing.shared_memory import SharedMemory

CAPACITY = 100

_COUNT = struct.Struct("i")
_LAYOUT_SIZE = struct.calcsize(f"i{CAPACITY}i")


def first_odd_numbers(n: int) -> list[int]:
    """Return the first *n* odd numbers; n may not exceed the segment capacity."""
    if n > CAPACITY:
        raise ValueError(f"n must be at most {CAPACITY}")
    return [2 * i + 1 for i in range(n)]


def fill_shared(name: str) -> list[int]:
    """Attach to segment *name*, read n from it and store the first n odd numbers."""
    shm = SharedMemory(name=name)
    try:
        (n,) = _COUNT.unpack_from(shm.buf, 0)
        numbers = first_odd_numbers(n)
        struct.pack_into(f"{len(numbers)}i", shm.buf, _COUNT.size, *numbers)
    finally:
        shm.close()
    return numbers


@contextmanager
def _segment(size: int) -> Iterator[SharedMemory]:
    shm = SharedMemory(create=True, size=size)
    try:
        yield shm
    finally:
        shm.close()
        shm.unlink()


def _spawn(target: Callable[..., object], *args: object) -> None:
    child = multiprocessing.Process(target=target, args=args)
    child.start()
    child.join()
    if child.exitcode != 0:
        raise RuntimeError(f"child process failed with exit code {child.exitcode}")


def _read_numbers(shm: SharedMemory, n: int) -> list[int]:
    count = max(n, 0)
    return list(struct.unpack_from(f"{count}i", shm.buf, _COUNT.size))


def _child_report(name: str) -> None:
    print(f"[CHILD] Attached to shared memory with name = {name}", flush=True)
    numbers = fill_shared(name)
    print(f"[CHILD] Finished generating first {len(numbers)} odd numbers", flush=True)


def run(n: int) -> list[int]:
    """Have a child process fill a fresh segment with the first *n* odd numbers."""
    if n > CAPACITY:
        raise ValueError(f"n must be at most {CAPACITY}")
    with _segment(_LAYOUT_SIZE) as shm:
        _COUNT.pack_into(shm.buf, 0, n)
        _spawn(fill_shared, shm.name)
        return _read_numbers(shm, n)


def main(argv: Sequence[str] | None = None) -> int:
    """Read n (argument or stdin), let a child fill shared memory, print the result."""
    args = list(sys.argv[1:] if argv is None else argv)
    with _segment(_LAYOUT_SIZE) as shm:
        print(f"[PARENT] Created shared memory with name = {shm.name}, size = {shm.size}")
        print("[PARENT] Enter n: ", end="", flush=True)
        try:
            n = int(args[0] if args else input())
            if n > CAPACITY:
                raise ValueError(n)
        except (ValueError, EOFError):
            print(f"\nInvalid input: n must be an integer of at most {CAPACITY}")
            return 1
        if args:
            print()
        _COUNT.pack_into(shm.buf, 0, n)
        try:
            _spawn(_child_report, shm.name)
        except RuntimeError as exc:
            print(f"[PARENT] {exc}")
            return 1
        print("[PARENT] Child finished executing.")
        print(f"[PARENT] The first {n} odd numbers are:")
        print("".join(f"{x} " for x in _read_numbers(shm, n)))
    print("[PARENT] Shared Memory Deleted")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())