from __future__ import annotations

import time
from typing import Callable, Iterator

import pytest

from artnet_capture.capture.receiver import ArtNetReceiver
from artnet_capture.core.exceptions import CaptureUnavailableError
from artnet_capture.dmx.sender import ArtNetSender

LOOPBACK = "127.0.0.1"


@pytest.fixture
def receiver() -> Iterator[ArtNetReceiver]:
    """A running receiver on an ephemeral loopback port."""
    receiver = ArtNetReceiver(port=0, host=LOOPBACK, poll_interval=0.02)
    try:
        receiver.start()
    except CaptureUnavailableError as e:
        pytest.skip(f"Art-Net capture unavailable: {e.message}")
    yield receiver
    receiver.stop()


@pytest.fixture
def sender(receiver: ArtNetReceiver) -> Iterator[ArtNetSender]:
    assert receiver.address is not None
    with ArtNetSender(host=LOOPBACK, port=receiver.address[1]) as sender:
        yield sender


@pytest.fixture
def wait_for() -> Callable[..., bool]:
    def _wait_for(predicate: Callable[[], bool], timeout: float = 2.0) -> bool:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if predicate():
                return True
            time.sleep(0.005)
        return predicate()

    return _wait_for
