from __future__ import annotations

import threading

from artnet_capture.capture.buffer import FrameBuffer
from artnet_capture.dmx.frame import Frame
from artnet_capture.dmx.universe import DMX_CHANNEL_COUNT


def _frame(universe: int = 0, first: int = 0, at: float = 0.0) -> Frame:
    return Frame(
        universe=universe,
        channels=bytes([first]) + bytes(DMX_CHANNEL_COUNT - 1),
        received_at=at,
    )


def test_buffer_keeps_arrival_order_and_duplicates() -> None:
    buffer = FrameBuffer()
    a, b = _frame(first=1, at=2.0), _frame(first=2, at=1.0)
    buffer.append(a)
    buffer.append(b)
    buffer.append(a)

    assert buffer.snapshot() == [a, b, a]
    assert len(buffer) == 3


def test_snapshot_is_a_copy() -> None:
    buffer = FrameBuffer()
    buffer.append(_frame())

    snapshot = buffer.snapshot()
    snapshot.clear()

    assert len(buffer) == 1
    assert buffer.snapshot() is not buffer.snapshot()


def test_clear_empties_buffer() -> None:
    buffer = FrameBuffer()
    for i in range(5):
        buffer.append(_frame(first=i))

    buffer.clear()

    assert buffer.snapshot() == []
    buffer.append(_frame(first=9))
    assert buffer.snapshot()[0].channels[0] == 9


def test_latest_per_universe() -> None:
    buffer = FrameBuffer()
    buffer.append(_frame(universe=0, first=1))
    buffer.append(_frame(universe=1, first=2))
    buffer.append(_frame(universe=0, first=3))

    assert buffer.latest(0).channels[0] == 3
    assert buffer.latest(1).channels[0] == 2
    assert buffer.latest(5) is None


def test_concurrent_snapshots_grow_monotonically() -> None:
    buffer = FrameBuffer()
    done = threading.Event()
    observed: list[list[int]] = [[] for _ in range(4)]

    def writer() -> None:
        for i in range(2000):
            buffer.append(_frame(first=i % 256, at=float(i)))
        done.set()

    def reader(lengths: list[int]) -> None:
        while not done.is_set():
            lengths.append(len(buffer.snapshot()))
        lengths.append(len(buffer.snapshot()))

    readers = [threading.Thread(target=reader, args=(lengths,)) for lengths in observed]
    for thread in readers:
        thread.start()
    writer_thread = threading.Thread(target=writer)
    writer_thread.start()

    writer_thread.join()
    for thread in readers:
        thread.join()

    for lengths in observed:
        assert lengths == sorted(lengths)
        assert lengths[-1] == 2000
