import threading

import pytest

from homerun.playerqueue import PlayerQueue
from homerun.protocol import UpdateData


def test_starts_empty():
    queue = PlayerQueue()
    assert len(queue) == 0
    with pytest.raises(IndexError):
        queue.dequeue()


def test_fifo_order():
    queue = PlayerQueue()
    for z in (1.0, 2.0, 3.0):
        queue.enqueue(UpdateData(z=z))
    assert len(queue) == 3
    assert [queue.dequeue().z for _ in range(3)] == [1.0, 2.0, 3.0]
    assert len(queue) == 0


def test_front_and_second():
    queue = PlayerQueue()
    queue.enqueue(UpdateData(x=1.0))
    queue.enqueue(UpdateData(x=2.0))
    assert queue.front().x == 1.0
    assert queue.second().x == 2.0
    assert len(queue) == 2


def test_second_needs_two_entries():
    queue = PlayerQueue()
    queue.enqueue(UpdateData())
    with pytest.raises(IndexError):
        queue.second()


def test_front_on_empty():
    with pytest.raises(IndexError):
        PlayerQueue().front()


def test_enqueue_stores_snapshot():
    queue = PlayerQueue()
    data = UpdateData(y=1.0)
    queue.enqueue(data)
    data.y = 5.0
    assert queue.front().y == 1.0


def test_clear():
    queue = PlayerQueue()
    queue.enqueue(UpdateData())
    queue.enqueue(UpdateData())
    queue.clear()
    assert len(queue) == 0


def test_concurrent_enqueue_keeps_every_item():
    queue = PlayerQueue()

    def worker():
        for _ in range(200):
            queue.enqueue(UpdateData())

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(queue) == 800