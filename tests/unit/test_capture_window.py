from __future__ import annotations

import threading
import time
from typing import Callable

from artnet_capture.capture.receiver import ArtNetReceiver
from artnet_capture.dmx.frame import Frame
from artnet_capture.dmx.sender import ArtNetSender


def _universe_with(first: int) -> bytes:
    return bytes([first]) + bytes(511)


def test_capture_window_collects_a_burst(
    receiver: ArtNetReceiver, sender: ArtNetSender
) -> None:
    result: list[Frame] = []

    def capture() -> None:
        result.extend(receiver.capture_frames(0.5))

    capture_thread = threading.Thread(target=capture)
    capture_thread.start()
    # Let the window open before the action under observation
    time.sleep(0.05)

    for value in range(10):
        sender.send_dmx(universe=0, dmx_data=_universe_with(value))
        time.sleep(0.02)

    capture_thread.join(timeout=5.0)

    assert not capture_thread.is_alive()
    assert 8 <= len(result) <= 10
    timestamps = [frame.received_at for frame in result]
    assert timestamps == sorted(timestamps)


def test_capture_window_clears_earlier_frames(
    receiver: ArtNetReceiver,
    sender: ArtNetSender,
    wait_for: Callable[..., bool],
) -> None:
    sender.send_dmx(universe=0, dmx_data=_universe_with(1))
    assert wait_for(lambda: len(receiver.get_frames()) == 1)

    assert receiver.capture_frames(0.05) == []


def test_cancelled_capture_returns_partial_snapshot(
    receiver: ArtNetReceiver,
    sender: ArtNetSender,
    wait_for: Callable[..., bool],
) -> None:
    cancel = threading.Event()
    result: list[Frame] = []

    capture_thread = threading.Thread(
        target=lambda: result.extend(receiver.capture_frames(30.0, cancel=cancel))
    )
    started = time.monotonic()
    capture_thread.start()
    time.sleep(0.05)

    sender.send_dmx(universe=0, dmx_data=_universe_with(200))
    assert wait_for(lambda: len(receiver.get_frames()) == 1)
    cancel.set()
    capture_thread.join(timeout=5.0)

    assert not capture_thread.is_alive()
    assert time.monotonic() - started < 5.0
    assert [frame.channels[0] for frame in result] == [200]


def test_zero_duration_returns_immediately(receiver: ArtNetReceiver) -> None:
    started = time.monotonic()
    assert receiver.capture_frames(0) == []
    assert time.monotonic() - started < 0.5


def test_capture_on_idle_receiver_reads_the_buffer() -> None:
    receiver = ArtNetReceiver(port=0, host="127.0.0.1")

    assert receiver.capture_frames(0.01) == []
