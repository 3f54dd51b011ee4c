"""
Custom Exceptions for Art-Net Capture.

Provides a small hierarchy so callers can tell "capture cannot run here"
apart from lifecycle misuse. Malformed packets are never exceptions;
they are dropped by the decoder.
"""

from __future__ import annotations


class CaptureError(Exception):
    """Base exception for all Art-Net capture errors."""

    def __init__(self, message: str, recoverable: bool = True):
        super().__init__(message)
        self.message = message
        self.recoverable = recoverable


# =============================================================================
# Receiver Errors
# =============================================================================


class CaptureUnavailableError(CaptureError):
    """Art-Net capture cannot run in this environment."""
    pass


class ReceiverBindError(CaptureUnavailableError):
    """Failed to bind the receiver's UDP socket."""

    def __init__(self, host: str, port: int, reason: str):
        super().__init__(
            f"Failed to bind Art-Net receiver to {host or '*'}:{port}: {reason}",
            recoverable=False,
        )
        self.host = host
        self.port = port
        self.reason = reason


class ReceiverStateError(CaptureError):
    """Receiver lifecycle method called in the wrong state."""

    def __init__(self, state: str, reason: str):
        super().__init__(f"Receiver is {state}: {reason}", recoverable=False)
        self.state = state
        self.reason = reason


# =============================================================================
# Sender Errors
# =============================================================================


class SenderNotOpenError(CaptureError):
    """Loopback sender used before open()."""

    def __init__(self) -> None:
        super().__init__("ArtNetSender is not open", recoverable=True)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(CaptureError):
    """Invalid or unreadable configuration."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Configuration error in {source}: {reason}", recoverable=False)
        self.source = source
