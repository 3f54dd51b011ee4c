"""Decoded ArtDMX frame."""

from __future__ import annotations

from dataclasses import dataclass

from artnet_capture.dmx.universe import (
    DMX_CHANNEL_COUNT,
    is_valid_dmx_channel,
    split_port_address,
)


@dataclass(frozen=True)
class Frame:
    """
    One captured DMX universe snapshot.

    ``channels`` always holds the full 512-slot universe; slots past the
    packet's declared length are zero. ``received_at`` is a
    ``time.monotonic()`` reading, so it orders frames and measures frame
    rate but is not wall-clock time.
    """

    universe: int
    channels: bytes
    received_at: float
    sequence: int = 0
    physical: int = 0

    def __post_init__(self) -> None:
        if len(self.channels) != DMX_CHANNEL_COUNT:
            raise ValueError(
                f"Frame needs {DMX_CHANNEL_COUNT} channels, got {len(self.channels)}"
            )

    @property
    def net(self) -> int:
        return split_port_address(self.universe)[0]

    @property
    def sub_net(self) -> int:
        return split_port_address(self.universe)[1]

    @property
    def universe_index(self) -> int:
        """Low 4 bits of the Port-Address (the universe within its sub-net)."""
        return split_port_address(self.universe)[2]

    def channel(self, channel: int) -> int:
        """Return the value of a 1-based DMX channel."""
        if not is_valid_dmx_channel(channel):
            raise ValueError(f"DMX channel out of range: {channel}")
        return self.channels[channel - 1]
