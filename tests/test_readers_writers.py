import re
import threading

import pytest

from oslabkit.readers_writers import ReadersWriterLock, main, run_readers_writers

WRITER = re.compile(r"Writer (\d+) modified cnt to (\d+)")
READER = re.compile(r"Reader (\d+): read cnt as (\d+)")


@pytest.mark.parametrize("interleave", [False, True])
def test_writers_double_in_turn(interleave):
    lines = run_readers_writers(3, interleave)
    values = [int(m.group(2)) for m in map(WRITER.fullmatch, lines) if m]
    assert values == [2, 4, 8]


@pytest.mark.parametrize("interleave", [False, True])
def test_readers_see_a_written_value(interleave):
    lines = run_readers_writers(4, interleave)
    writes = {1} | {int(m.group(2)) for m in map(WRITER.fullmatch, lines) if m}
    reads = [int(m.group(2)) for m in map(READER.fullmatch, lines) if m]
    assert len(reads) == 4
    assert set(reads) <= writes


@pytest.mark.parametrize("interleave", [False, True])
def test_every_thread_reports_once(interleave):
    lines = run_readers_writers(5, interleave)
    assert len(lines) == 10
    readers = sorted(int(m.group(1)) for m in map(READER.fullmatch, lines) if m)
    writers = sorted(int(m.group(1)) for m in map(WRITER.fullmatch, lines) if m)
    assert readers == writers == list(range(1, 6))


def test_zero_count_gives_empty_log():
    assert run_readers_writers(0) == []


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        run_readers_writers(-1)


def _run_while_held(outer, inner):
    """Start a thread entering ``inner`` while ``outer`` is held; return event order."""
    order = []
    entered = threading.Event()

    def worker():
        with inner():
            order.append("inner")
            entered.set()

    with outer():
        thread = threading.Thread(target=worker)
        thread.start()
        entered.wait(0.2)
        order.append("outer released")
    thread.join(5)
    return order


def test_writer_excludes_reader():
    lock = ReadersWriterLock()
    order = _run_while_held(lock.write_lock, lock.read_lock)
    assert order == ["outer released", "inner"]


def test_reader_excludes_writer():
    lock = ReadersWriterLock()
    order = _run_while_held(lock.read_lock, lock.write_lock)
    assert order == ["outer released", "inner"]


def test_writer_excludes_writer():
    lock = ReadersWriterLock()
    order = _run_while_held(lock.write_lock, lock.write_lock)
    assert order == ["outer released", "inner"]


def test_readers_share():
    lock = ReadersWriterLock()
    order = _run_while_held(lock.read_lock, lock.read_lock)
    assert order == ["inner", "outer released"]


def test_lock_released_after_error():
    lock = ReadersWriterLock()
    with pytest.raises(RuntimeError, match="boom"):
        with lock.write_lock():
            raise RuntimeError("boom")
    order = _run_while_held(lock.read_lock, lock.read_lock)
    assert order == ["inner", "outer released"]


def test_main_prints_log(capsys):
    assert main(["--interleave", "2"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 4


def test_main_rejects_bad_count(capsys):
    assert main(["many"]) == 1
    assert "non-negative" in capsys.readouterr().out