"""
Helpers for asserting on captured frames.

Fade tests look for three things in a capture: whether a channel passed
through intermediate values, when it first reached its target, and the
rate the server emitted frames at. Jitter makes exact comparisons
brittle, so comparisons take a tolerance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from artnet_capture.dmx.frame import Frame
from artnet_capture.dmx.universe import is_valid_dmx_channel


@dataclass(frozen=True)
class ChannelDiff:
    """A channel whose value differs between two frames."""

    universe: int
    channel: int  # 1-based
    value_a: int
    value_b: int
    diff: int

    def __str__(self) -> str:
        return (
            f"Universe {self.universe} Channel {self.channel}: "
            f"{self.value_a} vs {self.value_b} (diff: {self.diff})"
        )


class FrameComparator:
    """Compares two frames channel by channel within a tolerance."""

    def __init__(self, tolerance: int = 0):
        if tolerance < 0:
            raise ValueError(f"tolerance must be >= 0, got {tolerance}")
        self.tolerance = tolerance

    def compare(self, a: Optional[Frame], b: Optional[Frame]) -> list[ChannelDiff]:
        if a is None or b is None:
            return []

        values_a = np.frombuffer(a.channels, dtype=np.uint8).astype(np.int16)
        values_b = np.frombuffer(b.channels, dtype=np.uint8).astype(np.int16)
        diffs = np.abs(values_a - values_b)

        return [
            ChannelDiff(
                universe=a.universe,
                channel=int(index) + 1,
                value_a=int(values_a[index]),
                value_b=int(values_b[index]),
                diff=int(diffs[index]),
            )
            for index in np.flatnonzero(diffs > self.tolerance)
        ]


def frames_for_universe(frames: Sequence[Frame], universe: int) -> list[Frame]:
    return [frame for frame in frames if frame.universe == universe]


def _check_channel(channel: int) -> None:
    if not is_valid_dmx_channel(channel):
        raise ValueError(f"DMX channel out of range: {channel}")


def channel_series(frames: Sequence[Frame], universe: int, channel: int) -> np.ndarray:
    """Values of a 1-based channel across the frames of one universe."""
    _check_channel(channel)
    return np.array(
        [frame.channels[channel - 1] for frame in frames if frame.universe == universe],
        dtype=np.uint8,
    )


def first_frame_at(
    frames: Sequence[Frame],
    universe: int,
    channel: int,
    target: int,
) -> Optional[int]:
    """Index of the first frame where the channel is at or above target."""
    _check_channel(channel)
    for index, frame in enumerate(frames):
        if frame.universe == universe and frame.channels[channel - 1] >= target:
            return index
    return None


def observed_frame_rate(frames: Sequence[Frame]) -> float:
    """Frames per second between the first and last capture timestamps."""
    if len(frames) < 2:
        return 0.0
    span = frames[-1].received_at - frames[0].received_at
    if span <= 0:
        return 0.0
    return (len(frames) - 1) / span
