"""Core configuration and errors for Art-Net capture."""

from artnet_capture.core.config import ReceiverConfig, Settings
from artnet_capture.core.exceptions import (
    CaptureError,
    CaptureUnavailableError,
    ConfigError,
    ReceiverBindError,
    ReceiverStateError,
    SenderNotOpenError,
)

__all__ = [
    "ReceiverConfig",
    "Settings",
    "CaptureError",
    "CaptureUnavailableError",
    "ConfigError",
    "ReceiverBindError",
    "ReceiverStateError",
    "SenderNotOpenError",
]
