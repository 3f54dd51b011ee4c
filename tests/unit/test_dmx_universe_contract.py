from __future__ import annotations

import pytest

from artnet_capture.dmx.frame import Frame
from artnet_capture.dmx.universe import (
    DMX_CHANNEL_COUNT,
    is_valid_dmx_channel,
    pad_channels,
    port_address,
    split_port_address,
)


def test_pad_channels_contract() -> None:
    padded = pad_channels(b"\x0b\x63")
    assert len(padded) == DMX_CHANNEL_COUNT
    assert padded[:2] == b"\x0b\x63"
    assert padded[2:] == bytes(DMX_CHANNEL_COUNT - 2)

    with pytest.raises(ValueError):
        pad_channels(bytes(DMX_CHANNEL_COUNT + 1))


def test_channel_bounds_are_one_based() -> None:
    assert not is_valid_dmx_channel(0)
    assert is_valid_dmx_channel(1)
    assert is_valid_dmx_channel(512)
    assert not is_valid_dmx_channel(513)


def test_port_address_composition() -> None:
    assert port_address(net=1, sub_net=2, universe=3) == 0x0123
    assert split_port_address(0x0123) == (1, 2, 3)
    assert split_port_address(0x7FFF) == (0x7F, 0x0F, 0x0F)
    # Universe 1 of the lighting API is Port-Address 0 on the wire
    assert split_port_address(0) == (0, 0, 0)


def test_frame_requires_full_universe() -> None:
    with pytest.raises(ValueError):
        Frame(universe=0, channels=bytes(511), received_at=0.0)


def test_frame_channel_lookup() -> None:
    channels = bytearray(DMX_CHANNEL_COUNT)
    channels[0] = 11
    channels[511] = 99
    frame = Frame(universe=0, channels=bytes(channels), received_at=0.0)

    assert frame.channel(1) == 11
    assert frame.channel(512) == 99
    with pytest.raises(ValueError):
        frame.channel(0)
    with pytest.raises(ValueError):
        frame.channel(513)
