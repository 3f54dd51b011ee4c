"""
Art-Net Receiver: capture the DMX frames a lighting server emits.

Listens passively on a UDP port and records every ArtDMX packet it sees,
so tests can assert on real channel progressions (fades, snaps, frame
rate) rather than on what the server claims it is outputting.
"""

from __future__ import annotations

import socket
import threading
import time
from enum import Enum
from typing import Optional

import structlog

from artnet_capture.capture.buffer import FrameBuffer
from artnet_capture.core.config import ReceiverConfig, Settings
from artnet_capture.core.exceptions import ReceiverBindError, ReceiverStateError
from artnet_capture.dmx.frame import Frame
from artnet_capture.dmx.packet import ARTNET_PORT, decode_artdmx
from artnet_capture.dmx.universe import is_valid_dmx_channel

logger = structlog.get_logger()


class ReceiverState(Enum):
    """Receiver lifecycle. Transitions are linear; STOPPED is terminal."""

    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class ArtNetReceiver:
    """
    Receives Art-Net DMX packets on a dedicated thread.

    One receiver owns one socket, one receive thread and one frame buffer.
    Construct a fresh receiver per test; a stopped receiver cannot be
    restarted.

    The socket carries a short timeout so the loop notices stop() even on
    platforms where closing a socket does not wake a blocked recvfrom().
    """

    def __init__(
        self,
        port: int = ARTNET_PORT,
        host: str = "",
        poll_interval: float = 0.1,
        recv_buffer_size: int = 1024,
    ):
        self.port = port
        self.host = host
        self.poll_interval = poll_interval
        self.recv_buffer_size = recv_buffer_size

        self._buffer = FrameBuffer()

        # Lifecycle synchronization
        self._lock = threading.Lock()
        self._state = ReceiverState.IDLE
        self._socket: Optional[socket.socket] = None
        self._thread: Optional[threading.Thread] = None
        self._address: Optional[tuple[str, int]] = None

        # Stats (written by the receive thread only)
        self._packets_received = 0
        self._frames_accepted = 0
        self._packets_dropped = 0

    @classmethod
    def from_config(cls, config: ReceiverConfig) -> "ArtNetReceiver":
        return cls(
            port=config.port,
            host=config.host,
            poll_interval=config.poll_interval_s,
            recv_buffer_size=config.recv_buffer_size,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "ArtNetReceiver":
        return cls.from_config(settings.receiver_config())

    @property
    def state(self) -> ReceiverState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is ReceiverState.RUNNING

    @property
    def address(self) -> Optional[tuple[str, int]]:
        """Bound (host, port) while running; reports the real port for port 0."""
        return self._address if self.is_running else None

    def start(self) -> None:
        """Bind the UDP socket and start the receive thread."""
        with self._lock:
            if self._state is ReceiverState.RUNNING:
                raise ReceiverStateError(self._state.value, "already started")
            if self._state is ReceiverState.STOPPED:
                raise ReceiverStateError(
                    self._state.value, "create a new receiver to capture again"
                )

            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            try:
                sock.bind((self.host, self.port))
            except OSError as e:
                sock.close()
                logger.warning(
                    "Art-Net receiver bind failed",
                    host=self.host,
                    port=self.port,
                    error=str(e),
                )
                raise ReceiverBindError(self.host, self.port, str(e)) from e

            sock.settimeout(self.poll_interval)
            self._socket = sock
            self._address = sock.getsockname()
            self._state = ReceiverState.RUNNING

            self._thread = threading.Thread(
                target=self._receive_loop,
                args=(sock,),
                name=f"ArtNet-Receive-{self._address[1]}",
                daemon=True,
            )
            self._thread.start()

        logger.info("Art-Net receiver started", host=self._address[0], port=self._address[1])

    def stop(self) -> None:
        """Close the socket and end the receive thread. Captured frames are kept."""
        with self._lock:
            if self._state is not ReceiverState.RUNNING:
                return
            self._state = ReceiverState.STOPPED
            sock, self._socket = self._socket, None
            thread, self._thread = self._thread, None

        if sock is not None:
            sock.close()

        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=self.poll_interval + 1.0)

        logger.info("Art-Net receiver stopped", **self.get_stats())

    def __enter__(self) -> "ArtNetReceiver":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _receive_loop(self, sock: socket.socket) -> None:
        """Read datagrams until the socket is closed."""
        while self._state is ReceiverState.RUNNING:
            try:
                payload, _sender = sock.recvfrom(self.recv_buffer_size)
            except socket.timeout:
                continue
            except OSError as e:
                # Closed by stop(); anything else ends capture early
                if self._state is ReceiverState.RUNNING:
                    logger.warning("Art-Net receive loop terminated", error=str(e))
                return

            self._packets_received += 1
            frame = decode_artdmx(payload, time.monotonic())
            if frame is None:
                self._packets_dropped += 1
                continue

            self._frames_accepted += 1
            self._buffer.append(frame)

    def get_frames(self) -> list[Frame]:
        """Return a copy of all captured frames in arrival order."""
        return self._buffer.snapshot()

    def clear_frames(self) -> None:
        self._buffer.clear()

    def capture_frames(
        self,
        duration: float,
        cancel: Optional[threading.Event] = None,
    ) -> list[Frame]:
        """
        Capture frames for a time window.

        Clears the buffer, waits ``duration`` seconds (or until ``cancel``
        is set) and returns what arrived. A cancelled window still returns
        its partial snapshot. Start the window before triggering the action
        under observation, otherwise its first frames are missed.
        """
        self._buffer.clear()

        if duration > 0:
            waiter = cancel if cancel is not None else threading.Event()
            if waiter.wait(duration):
                logger.debug("Capture window cancelled", frames=len(self._buffer))

        return self._buffer.snapshot()

    def get_latest_frame(self, universe: int) -> Optional[Frame]:
        return self._buffer.latest(universe)

    def get_channel_value(self, universe: int, channel: int) -> Optional[int]:
        """Latest value of a 1-based channel, or None if nothing was captured."""
        if not is_valid_dmx_channel(channel):
            return None
        frame = self._buffer.latest(universe)
        if frame is None:
            return None
        return frame.channel(channel)

    def get_stats(self) -> dict:
        """Get capture statistics."""
        return {
            "state": self._state.value,
            "packets_received": self._packets_received,
            "frames_accepted": self._frames_accepted,
            "packets_dropped": self._packets_dropped,
            "buffered_frames": len(self._buffer),
        }
