"""Primes in a range, reported by a child process through shared memory."""

from __future__ import annotations

import multiprocessing
import sys
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from multiprocessing.shared_memory import SharedMemory

SIZE = 4096


def is_prime(num: int) -> bool:
    """Trial division up to num // 2."""
    if num <= 1:
        return False
    return all(num % d for d in range(2, num // 2 + 1))


def primes_report(m: int, n: int) -> str:
    """Return the heading and one line per prime in m..n inclusive."""
    lines = [f"The prime numbers between {m} and {n} are:\n"]
    lines += [f"{num}\n" for num in range(m, n + 1) if is_prime(num)]
    return "".join(lines)


def _encode(text: str, limit: int) -> bytes:
    data = text.encode("ascii") + b"\0"
    if len(data) > limit:
        raise ValueError(f"{len(data) - 1} bytes of text do not fit in {limit} bytes")
    return data


def write_primes(name: str, m: int, n: int) -> str:
    """Write the report for m..n into segment *name*; return the text."""
    text = primes_report(m, n)
    shm = SharedMemory(name=name)
    try:
        data = _encode(text, shm.size)
        shm.buf[: len(data)] = data
    finally:
        shm.close()
    return text


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


def run(m: int, n: int) -> str:
    """Have a child process write the report for m..n; return what the parent reads."""
    if m > n:
        raise ValueError(f"Error input {m} > {n}")
    _encode(primes_report(m, n), SIZE)
    with _segment(SIZE) as shm:
        _spawn(write_primes, shm.name, m, n)
        return bytes(shm.buf).split(b"\0", 1)[0].decode("ascii")


def main(argv: Sequence[str] | None = None) -> int:
    """Take M and N from the command line and print the primes between them."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Error: Minimum of two arguments must be passed on command line arguments")
        return 1
    try:
        m, n = (int(a) for a in args)
    except ValueError:
        print(f"Error input {args[0]} {args[1]}")
        return 1
    if m > n:
        print(f"Error input {m} > {n}")
        return 0
    try:
        text = run(m, n)
    except (ValueError, RuntimeError) as exc:
        print(f"Error: {exc}")
        return 1
    print("PARENT: child completed")
    print("Parent printing:")
    print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())