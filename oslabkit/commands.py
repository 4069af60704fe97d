"""Small file utilities: cat, grep, ls and rm."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence


def _args(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def _ask(args: list[str], prompt: str) -> str:
    """Take the next argument, or prompt for a single word on stdin."""
    if args:
        return args.pop(0)
    print(prompt)
    words = input().split()
    return words[0] if words else ""


def cat(path: str | os.PathLike[str]) -> str:
    """Return the whole contents of the file at *path*."""
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        return handle.read()


def grep(path: str | os.PathLike[str], pattern: str) -> list[str]:
    """Return the lines of *path* that contain *pattern*, newlines kept."""
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        return [line for line in handle if pattern in line]


def list_dir(path: str | os.PathLike[str]) -> list[str]:
    """Return every entry of the directory, including '.' and '..'."""
    return [".", "..", *os.listdir(path)]


def remove(path: str | os.PathLike[str]) -> None:
    """Remove a file, or an empty directory."""
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.remove(path)


def cat_main(argv: Sequence[str] | None = None) -> int:
    """Print a file named on the command line."""
    args = _args(argv)
    if not args:
        print("File not entered")
        return 1
    try:
        text = cat(args[0])
    except OSError:
        print("File does not exist")
        return 1
    sys.stdout.write(text)
    sys.stdout.write("\n")
    return 0


def grep_main(argv: Sequence[str] | None = None) -> int:
    """Print the lines of a file that contain a pattern."""
    args = _args(argv)
    path = _ask(args, "Enter file name")
    pattern = _ask(args, "Enter pattern to be searched")
    try:
        lines = grep(path, pattern)
    except OSError:
        print("File not found")
        return 1
    for line in lines:
        sys.stdout.write(line)
    return 0


def ls_main(argv: Sequence[str] | None = None) -> int:
    """Print the entries of a directory named on the command line."""
    args = _args(argv)
    if not args:
        print("\n You are not passing the directory")
        return 1
    try:
        names = list_dir(args[0])
    except OSError:
        print(f"\nCannot open it does't exist {args[0]} file!")
        return 1
    for name in names:
        print(name)
    return 0


def rm_main(argv: Sequence[str] | None = None) -> int:
    """Remove a file and report whether that worked."""
    args = _args(argv)
    path = _ask(args, "Enter source filename")
    try:
        remove(path)
    except OSError:
        print("File cannot be removed")
    else:
        print("File removed")
    return 0