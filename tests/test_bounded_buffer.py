import random
import re
import threading

import pytest

from oslabkit.bounded_buffer import BoundedBuffer, main, run_producers_consumers

INSERT = re.compile(r"Producer (\d+): Insert Item (\d+) at (\d+)")
REMOVE = re.compile(r"Consumer (\d+): Remove Item (\d+) from (\d+)")


def test_slots_wrap_around_in_fifo_order():
    buf = BoundedBuffer(3)
    assert [buf.put(x) for x in "abc"] == [0, 1, 2]
    assert buf.get() == ("a", 0)
    assert buf.put("d") == 0
    assert [buf.get() for _ in range(3)] == [("b", 1), ("c", 2), ("d", 0)]


def test_size_property():
    assert BoundedBuffer(5).size == 5


@pytest.mark.parametrize("size", [0, -2])
def test_non_positive_size_rejected(size):
    with pytest.raises(ValueError):
        BoundedBuffer(size)


def test_put_blocks_while_full():
    buf = BoundedBuffer(1)
    buf.put(1)
    worker = threading.Thread(target=buf.put, args=(2,))
    worker.start()
    worker.join(0.1)
    assert worker.is_alive()
    assert buf.get() == (1, 0)
    worker.join(5)
    assert not worker.is_alive()
    assert buf.get() == (2, 0)


def test_get_blocks_while_empty():
    buf = BoundedBuffer(2)
    got = []
    worker = threading.Thread(target=lambda: got.append(buf.get()))
    worker.start()
    worker.join(0.1)
    assert worker.is_alive()
    buf.put("x")
    worker.join(5)
    assert got == [("x", 0)]


def test_run_moves_every_item_once():
    lines = run_producers_consumers(3, 3, 3, 3, random.Random(7))
    inserted = [INSERT.fullmatch(line) for line in lines if line.startswith("Producer")]
    removed = [REMOVE.fullmatch(line) for line in lines if line.startswith("Consumer")]
    assert all(inserted) and all(removed)
    assert len(inserted) == len(removed) == 9
    items_in = sorted(int(m.group(2)) for m in inserted)
    items_out = sorted(int(m.group(2)) for m in removed)
    expected_rng = random.Random(7)
    assert items_in == sorted(expected_rng.randrange(100) for _ in range(9))
    assert items_out == items_in


def test_run_each_worker_does_its_share_and_slots_are_in_range():
    lines = run_producers_consumers(2, 2, 4, 2, random.Random(1))
    producers = [int(INSERT.fullmatch(l).group(1)) for l in lines if l.startswith("Producer")]
    consumers = [int(REMOVE.fullmatch(l).group(1)) for l in lines if l.startswith("Consumer")]
    assert sorted(producers) == [1] * 4 + [2] * 4
    assert sorted(consumers) == [1] * 4 + [2] * 4
    slots = {int((INSERT.fullmatch(l) or REMOVE.fullmatch(l)).group(3)) for l in lines}
    assert slots <= {0, 1}


def test_unbalanced_workers_rejected():
    with pytest.raises(ValueError):
        run_producers_consumers(2, 3, 1, 3, random.Random(0))


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        run_producers_consumers(-1, -1, 1, 3, random.Random(0))


def test_main_prints_all_events(capsys):
    assert main(["1"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 18
    assert sum(line.startswith("Producer") for line in out) == 9


def test_main_bad_seed(capsys):
    assert main(["seed"]) == 1
    assert "integer" in capsys.readouterr().out