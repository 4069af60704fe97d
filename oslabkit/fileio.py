"""Positioned reads and a chunked file copy."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from functools import partial
from typing import BinaryIO

_SEEK_STEPS = (
    ("Reading first 10 charecters from file:", 0, os.SEEK_CUR, 10),
    ("Skipping 5 charecters from current position in the file:", 5, os.SEEK_CUR, 10),
    ("Going 10 charecters before the current position in the file:", -10, os.SEEK_CUR, 10),
    ("Going to 5th last charecter in the file:", -5, os.SEEK_END, 5),
    ("Going to the 3rd charecter in the file:", 2, os.SEEK_SET, 10),
)

_CHUNK_SIZE = 100


def _run_steps(handle: BinaryIO) -> list[tuple[str, str]]:
    steps = []
    for heading, offset, whence, size in _SEEK_STEPS:
        try:
            handle.seek(offset, whence)
        except OSError:
            # An offset before the start is refused; the position stays put.
            pass
        data = handle.read(size) or b""
        steps.append((heading, data.decode("utf-8", errors="replace")))
    return steps


def seek_demo(path: str | os.PathLike[str]) -> list[tuple[str, str]]:
    """Run the fixed sequence of seeks and reads; return (heading, text) pairs."""
    with open(path, "rb", buffering=0) as handle:
        return _run_steps(handle)


def copy_file(source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> int:
    """Copy *source* over the start of *destination*; return bytes copied.

    The destination is created with mode 0644 when missing and is not
    truncated, so bytes past the copied length are left in place.
    """
    copied = 0
    with open(source, "rb") as src:
        fd = os.open(destination, os.O_WRONLY | os.O_CREAT, 0o644)
        with open(fd, "wb") as dst:
            for chunk in iter(partial(src.read, _CHUNK_SIZE), b""):
                dst.write(chunk)
                copied += len(chunk)
    return copied


def seek_main(argv: Sequence[str] | None = None) -> int:
    """Show the seek demonstration on a file (default myfile.txt)."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else "myfile.txt"
    try:
        handle = open(path, "rb", buffering=0)
    except OSError:
        print("Failed to open file.")
        return 1
    with handle:
        print(f"File discriptor is {handle.fileno()}")
        for heading, text in _run_steps(handle):
            print(heading)
            print(text)
    return 0


def copy_main(argv: Sequence[str] | None = None) -> int:
    """Copy a file (default data.txt to destination.txt)."""
    args = list(sys.argv[1:] if argv is None else argv)
    source = args[0] if args else "data.txt"
    destination = args[1] if len(args) > 1 else "destination.txt"
    try:
        copy_file(source, destination)
    except OSError as exc:
        if exc.filename == source:
            print("Failed to open source file.")
        else:
            print("Failed to create destination file.")
        return 1
    print("File copied successfully using system calls.")
    return 0