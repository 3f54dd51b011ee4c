"""Art-Net ArtDMX packet decoding and encoding."""

from __future__ import annotations

import struct
import time
from typing import Optional

from artnet_capture.dmx.frame import Frame
from artnet_capture.dmx.universe import (
    ARTDMX_MIN_DATA_LENGTH,
    DMX_CHANNEL_COUNT,
    PORT_ADDRESS_MAX,
    pad_channels,
)

ARTNET_PORT = 6454
ARTNET_HEADER = b"Art-Net\x00"
ARTNET_OPCODE_DMX = 0x5000
ARTNET_PROTOCOL_VERSION = 14
ARTDMX_HEADER_SIZE = 18

# ID, OpCode (LE), ProtVer (BE), Sequence, Physical, SubUni, Net, Length (BE)
_ARTDMX_HEADER = struct.Struct("<8sH")
_ARTDMX_FIELDS = struct.Struct(">HBBBBH")


def decode_artdmx(payload: bytes, received_at: Optional[float] = None) -> Optional[Frame]:
    """
    Decode an ArtDMX datagram.

    Returns None for anything that is not a well-formed ArtDMX packet:
    short or foreign payloads, other Art-Net opcodes (ArtPoll and friends
    are legitimate traffic, just not ours), and lengths that are out of
    range or run past the end of the datagram. Never raises for bad input.
    """
    if len(payload) < ARTDMX_HEADER_SIZE:
        return None

    header, opcode = _ARTDMX_HEADER.unpack_from(payload, 0)
    if header != ARTNET_HEADER or opcode != ARTNET_OPCODE_DMX:
        return None

    # Protocol version is not enforced
    _version, sequence, physical, sub_uni, net, length = _ARTDMX_FIELDS.unpack_from(
        payload, 10
    )
    if not ARTDMX_MIN_DATA_LENGTH <= length <= DMX_CHANNEL_COUNT:
        return None
    end = ARTDMX_HEADER_SIZE + length
    if end > len(payload):
        return None

    return Frame(
        universe=((net & 0x7F) << 8) | sub_uni,
        channels=pad_channels(payload[ARTDMX_HEADER_SIZE:end]),
        received_at=time.monotonic() if received_at is None else received_at,
        sequence=sequence,
        physical=physical,
    )


def build_artdmx_packet(
    universe: int,
    dmx_data: bytes,
    sequence: int = 0,
    physical: int = 0,
    pad: bool = True,
) -> bytes:
    """
    Build an ArtDMX packet.

    Expects up to 512 channels of slot data without DMX start code. With
    ``pad`` the full universe is sent; otherwise the data is sent as-is,
    rounded up to the even length Art-Net requires.
    """
    if len(dmx_data) > DMX_CHANNEL_COUNT:
        raise ValueError(f"ArtDMX payload too large: {len(dmx_data)} bytes")

    if pad:
        payload = pad_channels(dmx_data)
    else:
        length = max(ARTDMX_MIN_DATA_LENGTH, len(dmx_data) + len(dmx_data) % 2)
        payload = bytes(dmx_data).ljust(length, b"\x00")

    packet = bytearray()
    packet.extend(ARTNET_HEADER)
    packet.extend(struct.pack("<H", ARTNET_OPCODE_DMX))
    packet.extend(struct.pack(">H", ARTNET_PROTOCOL_VERSION))
    packet.extend(bytes([sequence & 0xFF, physical & 0xFF]))
    # SubUni then Net: the Port-Address little-endian
    packet.extend(struct.pack("<H", universe & PORT_ADDRESS_MAX))
    packet.extend(struct.pack(">H", len(payload)))
    packet.extend(payload)
    return bytes(packet)
