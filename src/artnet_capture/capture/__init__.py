"""Frame capture: buffer, receiver and assertion helpers."""

from artnet_capture.capture.analysis import (
    ChannelDiff,
    FrameComparator,
    channel_series,
    first_frame_at,
    frames_for_universe,
    observed_frame_rate,
)
from artnet_capture.capture.buffer import FrameBuffer
from artnet_capture.capture.receiver import ArtNetReceiver, ReceiverState

__all__ = [
    "ArtNetReceiver",
    "ReceiverState",
    "FrameBuffer",
    "ChannelDiff",
    "FrameComparator",
    "channel_series",
    "first_frame_at",
    "frames_for_universe",
    "observed_frame_rate",
]
