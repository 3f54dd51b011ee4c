"""
Art-Net Capture: observe the DMX a lighting server actually emits.

A receive-only Art-Net listener for contract tests. It decodes ArtDMX
packets into frames, keeps them in arrival order, and offers snapshot,
clear and time-windowed capture so fade and snap behaviour can be
verified without lighting hardware.
"""

__version__ = "0.1.0"

from artnet_capture.capture import ArtNetReceiver, FrameBuffer, ReceiverState
from artnet_capture.core.config import Settings
from artnet_capture.dmx import Frame, decode_artdmx

__all__ = [
    "ArtNetReceiver",
    "FrameBuffer",
    "Frame",
    "ReceiverState",
    "Settings",
    "decode_artdmx",
    "__version__",
]
