"""Thread-safe, append-only store of captured frames."""

from __future__ import annotations

import threading
from typing import Optional

from artnet_capture.dmx.frame import Frame


class FrameBuffer:
    """
    Frames in arrival order, shared between one writer and many readers.

    The receive thread appends; test code snapshots and clears from any
    thread. Snapshots are copies so readers never hold the lock while
    iterating.
    """

    def __init__(self) -> None:
        self._frames: list[Frame] = []
        self._lock = threading.Lock()

    def append(self, frame: Frame) -> None:
        with self._lock:
            self._frames.append(frame)

    def snapshot(self) -> list[Frame]:
        with self._lock:
            return list(self._frames)

    def clear(self) -> None:
        with self._lock:
            self._frames.clear()

    def latest(self, universe: int) -> Optional[Frame]:
        """Return the most recent frame for a universe, if any."""
        with self._lock:
            for frame in reversed(self._frames):
                if frame.universe == universe:
                    return frame
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._frames)
