"""Sum of 1..n and n! computed in two worker threads."""

from __future__ import annotations

import math
import os
import re
import sys
import threading
from collections.abc import Callable, Sequence

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way; anything else reads as 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _run(n: int, log: Callable[[str], object]) -> tuple[int, int]:
    results: dict[str, int] = {}

    def total() -> None:
        log("inside sum thread")
        results["sum"] = sum(range(1, n + 1))
        log("sum thread completed")

    def product() -> None:
        log("inside mul thread")
        results["product"] = math.prod(range(2, n + 1))
        log("mul thread completed product")

    workers = [threading.Thread(target=total), threading.Thread(target=product)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return results["sum"], results["product"]


def sum_and_factorial(n: int) -> tuple[int, int]:
    """Return (1 + 2 + ... + n, n!) computed by two threads; n < 1 gives (0, 1)."""
    return _run(n, lambda _message: None)


def main(argv: Sequence[str] | None = None) -> int:
    """Take n from the command line and print its sum and factorial."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "sum_mul"
        print(f"Usage: {program} <n>")
        return 1
    total, product = _run(_atoi(args[0]), print)
    print("Inside main thread")
    print(f"sum={total}")
    print(f"Factorial={product}")
    return 0