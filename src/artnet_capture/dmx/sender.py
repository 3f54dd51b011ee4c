"""Loopback ArtDMX sender for diagnostics and receiver tests."""

from __future__ import annotations

import socket
from typing import Optional

from artnet_capture.core.exceptions import SenderNotOpenError
from artnet_capture.dmx.packet import ARTNET_PORT, build_artdmx_packet


class ArtNetSender:
    """UDP sender for Art-Net DMX packets."""

    def __init__(
        self,
        host: str = "127.0.0.1",
        port: int = ARTNET_PORT,
        broadcast: bool = False,
    ):
        self.host = host
        self.port = port
        self.broadcast = broadcast
        self._socket: Optional[socket.socket] = None

    def open(self) -> None:
        if self._socket is not None:
            return
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        if self.broadcast:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        self._socket = sock

    def close(self) -> None:
        if self._socket is not None:
            self._socket.close()
            self._socket = None

    def __enter__(self) -> "ArtNetSender":
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def send_raw(self, payload: bytes) -> None:
        if self._socket is None:
            raise SenderNotOpenError()
        self._socket.sendto(payload, (self.host, self.port))

    def send_dmx(
        self,
        universe: int,
        dmx_data: bytes,
        sequence: int = 0,
        pad: bool = True,
    ) -> None:
        packet = build_artdmx_packet(
            universe=universe,
            dmx_data=dmx_data,
            sequence=sequence,
            pad=pad,
        )
        self.send_raw(packet)
