"""
Configuration Management for Art-Net Capture.

Uses Pydantic Settings for type-safe configuration with environment
variable support and YAML file loading.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from artnet_capture.core.exceptions import ConfigError
from artnet_capture.dmx.packet import ARTDMX_HEADER_SIZE, ARTNET_PORT
from artnet_capture.dmx.universe import DMX_CHANNEL_COUNT

LOOPBACK_HOST = "127.0.0.1"


class ReceiverConfig(BaseModel):
    """UDP receiver configuration."""
    host: str = ""  # "" = all interfaces
    port: int = Field(default=ARTNET_PORT, ge=0, le=65535)  # 0 = ephemeral
    poll_interval_s: float = Field(default=0.1, gt=0)
    recv_buffer_size: int = Field(
        default=1024, ge=ARTDMX_HEADER_SIZE + DMX_CHANNEL_COUNT
    )


class Settings(BaseSettings):
    """
    Main capture settings.

    Can be configured via:
    - Environment variables (prefixed with ARTNET_, e.g. ARTNET_LISTEN_PORT)
    - YAML config file
    - Direct instantiation
    """

    model_config = SettingsConfigDict(
        env_prefix="ARTNET_",
        env_nested_delimiter="__",
    )

    listen_port: int = Field(default=ARTNET_PORT, ge=0, le=65535)
    # Address the server under test broadcasts to; loopback pins the bind too
    broadcast: Optional[str] = None

    receiver: ReceiverConfig = Field(default_factory=ReceiverConfig)

    # Debug
    debug: bool = False
    log_level: str = "INFO"

    def receiver_config(self) -> ReceiverConfig:
        """Resolve the effective receiver config from the flat env overrides."""
        host = LOOPBACK_HOST if self.broadcast == LOOPBACK_HOST else self.receiver.host
        return self.receiver.model_copy(update={"host": host, "port": self.listen_port})

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(str(path), str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(str(path), "top level must be a mapping")
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(str(path), str(e)) from e

    def to_yaml(self, path: Path) -> None:
        """Save settings to a YAML file."""
        with open(path, "w") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False)
