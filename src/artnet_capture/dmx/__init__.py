"""DMX universe helpers and the ArtDMX wire codec."""

from artnet_capture.dmx.frame import Frame
from artnet_capture.dmx.packet import (
    ARTNET_HEADER,
    ARTNET_OPCODE_DMX,
    ARTNET_PORT,
    build_artdmx_packet,
    decode_artdmx,
)
from artnet_capture.dmx.universe import (
    DMX_CHANNEL_COUNT,
    DMX_CHANNEL_MAX,
    DMX_CHANNEL_MIN,
    is_valid_dmx_channel,
    pad_channels,
    port_address,
    split_port_address,
)

__all__ = [
    "Frame",
    "ARTNET_HEADER",
    "ARTNET_OPCODE_DMX",
    "ARTNET_PORT",
    "build_artdmx_packet",
    "decode_artdmx",
    "DMX_CHANNEL_COUNT",
    "DMX_CHANNEL_MIN",
    "DMX_CHANNEL_MAX",
    "is_valid_dmx_channel",
    "pad_channels",
    "port_address",
    "split_port_address",
]
