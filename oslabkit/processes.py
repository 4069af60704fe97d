"""Process creation demonstrations: fork and exec, a zombie and an orphan."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Sequence

_ENCODING = "utf-8"


def _send(fd: int, lines: Sequence[str]) -> None:
    data = memoryview("".join(f"{line}\n" for line in lines).encode(_ENCODING))
    while data:
        written = os.write(fd, data)
        data = data[written:]


def _receive(fd: int) -> list[str]:
    with os.fdopen(fd, encoding=_ENCODING, errors="replace") as pipe:
        return pipe.read().splitlines()


def _fork() -> int:
    sys.stdout.flush()
    sys.stderr.flush()
    return os.fork()


def _child_intro() -> list[str]:
    return [
        "[CHILD] This is the child process.",
        f"[CHILD] My pid is {os.getpid()}",
        f"[CHILD] My parent's pid is {os.getppid()}",
    ]


def _parent_intro() -> list[str]:
    return ["[PARENT] This is the parent process.", f"[PARENT] My pid is {os.getpid()}"]


def _check_seconds(seconds: float) -> None:
    if seconds < 0:
        raise ValueError("seconds must not be negative")


def fork_demo() -> list[str]:
    """Fork a child that runs ``pwd``; wait for it and return the whole transcript."""
    counter = 10
    read_fd, write_fd = os.pipe()
    pid = _fork()
    if pid == 0:
        try:
            os.close(read_fd)
            _send(
                write_fd,
                [
                    *_child_intro(),
                    f"[CHILD] i= {counter - 1}",
                    "[CHILD] Child process going to load another program using execlp syscall",
                ],
            )
            os.dup2(write_fd, 1)
            os.close(write_fd)
            os.execlp("pwd", "pwd")
        finally:
            os._exit(127)
    os.close(write_fd)
    lines = [*_parent_intro(), "[PARENT] Waiting for child to terminate"]
    lines += _receive(read_fd)
    waited, _status = os.waitpid(pid, 0)
    lines += [
        f"[PARENT] Resuming after the termination of {waited}",
        f"[PARENT] My parent's pid is {os.getppid()}",
        f"[PARENT] My child's pid is {pid}",
        f"[PARENT] i= {counter + 1}",
    ]
    return lines


def zombie_demo(seconds: float = 10) -> list[str]:
    """Let a child exit while the parent sleeps without waiting; return the transcript.

    The child is reaped once the transcript is complete.
    """
    _check_seconds(seconds)
    read_fd, write_fd = os.pipe()
    pid = _fork()
    if pid == 0:
        try:
            os.close(read_fd)
            _send(write_fd, [*_child_intro(), "[CHILD] Exiting."])
        finally:
            os._exit(0)
    os.close(write_fd)
    lines = [
        *_parent_intro(),
        f"[PARENT] My parent's pid is {os.getppid()}",
        f"[PARENT] Sleeping for {seconds:g} seconds.",
    ]
    lines += _receive(read_fd)
    time.sleep(seconds)
    lines += [
        f"[PARENT] Child pid = {pid} has ended, but it has an entry in process table.",
        "[PARENT] It is a zombie process.",
    ]
    os.waitpid(pid, 0)
    return lines


def orphan_demo(seconds: float = 10) -> list[str]:
    """Start a child that outlives the parent's part; return the transcript so far.

    The child reports its start, sleeps, then writes its closing line straight
    to standard output and exits. It is not waited for.
    """
    _check_seconds(seconds)
    read_fd, write_fd = os.pipe()
    pid = _fork()
    if pid == 0:
        try:
            os.close(read_fd)
            _send(write_fd, [*_child_intro(), f"[CHILD] Sleeping for {seconds:g} seconds."])
            os.close(write_fd)
            time.sleep(seconds)
            _send(1, ["[CHILD] My parent ended. So I am an orphan process adopted by init process."])
        finally:
            os._exit(0)
    os.close(write_fd)
    lines = [*_parent_intro(), f"[PARENT] My parent's pid is {os.getppid()}"]
    lines += _receive(read_fd)
    lines.append("[PARENT] Exiting.")
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Run one demonstration: ``fork`` (default), ``zombie`` or ``orphan`` [seconds]."""
    args = list(sys.argv[1:] if argv is None else argv)
    demo = args[0] if args else "fork"
    try:
        seconds = float(args[1]) if len(args) > 1 else 10.0
        if demo == "fork":
            lines = fork_demo()
        elif demo == "zombie":
            lines = zombie_demo(seconds)
        elif demo == "orphan":
            lines = orphan_demo(seconds)
        else:
            raise ValueError(demo)
    except ValueError:
        print("Usage: processes [fork|zombie|orphan] [seconds]")
        return 1
    except OSError:
        print("Fork failed. Exiting!")
        return 0
    for line in lines:
        print(line)
    return 0