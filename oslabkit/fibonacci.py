"""Fibonacci series written by a child process into shared memory."""

from __future__ import annotations

import multiprocessing
import sys
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from multiprocessing.shared_memory import SharedMemory

SIZE = 4096


def fibonacci_text(n: int) -> str:
    """Return the first *n* Fibonacci numbers, each followed by a space."""
    if n < 1:
        raise ValueError("n must be at least 1")
    terms = []
    a, b = 0, 1
    for _ in range(n):
        terms.append(a)
        a, b = b, a + b
    return "".join(f"{term} " for term in terms)


def _encode(text: str, limit: int) -> bytes:
    data = text.encode("ascii") + b"\0"
    if len(data) > limit:
        raise ValueError(f"{len(data) - 1} bytes of text do not fit in {limit} bytes")
    return data


def write_fibonacci(name: str, n: int) -> str:
    """Write the series for *n* as text into segment *name*; return the text."""
    text = fibonacci_text(n)
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


def _read_text(shm: SharedMemory) -> str:
    return bytes(shm.buf).split(b"\0", 1)[0].decode("ascii")


def _child_report(name: str, n: int) -> None:
    print("CHILD", flush=True)
    write_fibonacci(name, n)


def _run(n: int, target: Callable[[str, int], object]) -> str:
    _encode(fibonacci_text(n), SIZE)
    with _segment(SIZE) as shm:
        _spawn(target, shm.name, n)
        return _read_text(shm)


def run(n: int) -> str:
    """Have a child process write the series for *n*; return what the parent reads."""
    return _run(n, write_fibonacci)


def main(argv: Sequence[str] | None = None) -> int:
    """Take N from the command line and print the series a child computed."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Error: Not passing N in command line")
        return 1
    try:
        n = int(args[0])
    except ValueError:
        print(f"Error input {args[0]}")
        return 1
    if n < 1:
        print(f"Error input {n}")
        return 0
    try:
        text = _run(n, _child_report)
    except (ValueError, RuntimeError) as exc:
        print(f"Error: {exc}")
        return 1
    print("PARENT child completed")
    print("Parent printing")
    print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())