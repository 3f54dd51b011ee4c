"""Canonical DMX universe sizing and Art-Net Port-Address helpers."""

from __future__ import annotations

DMX_CHANNEL_COUNT = 512
DMX_CHANNEL_MIN = 1
DMX_CHANNEL_MAX = DMX_CHANNEL_COUNT
ARTDMX_MIN_DATA_LENGTH = 2

# 15-bit Port-Address: Net (7 bits) | SubNet (4 bits) | Universe (4 bits)
PORT_ADDRESS_MAX = 0x7FFF


def is_valid_dmx_channel(channel: int) -> bool:
    """Return True when a channel index is a valid 1-based DMX slot."""
    return DMX_CHANNEL_MIN <= channel <= DMX_CHANNEL_MAX


def pad_channels(data: bytes) -> bytes:
    """Zero-pad slot data to a full 512-channel universe."""
    if len(data) > DMX_CHANNEL_COUNT:
        raise ValueError(f"DMX data too large: {len(data)} bytes")
    return bytes(data).ljust(DMX_CHANNEL_COUNT, b"\x00")


def port_address(net: int, sub_net: int, universe: int) -> int:
    """Compose a Port-Address from its Net / SubNet / Universe fields."""
    return ((net & 0x7F) << 8) | ((sub_net & 0x0F) << 4) | (universe & 0x0F)


def split_port_address(address: int) -> tuple[int, int, int]:
    """Split a Port-Address into (net, sub_net, universe)."""
    address &= PORT_ADDRESS_MAX
    return address >> 8, (address >> 4) & 0x0F, address & 0x0F
