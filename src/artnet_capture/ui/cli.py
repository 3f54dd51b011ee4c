"""
Command-Line Interface for Art-Net Capture.

Provides commands for watching what a lighting server emits and for
sending test frames at a receiver.
"""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path
from typing import Optional

import click
import structlog

from artnet_capture import __version__
from artnet_capture.core.config import Settings
from artnet_capture.core.exceptions import CaptureError, CaptureUnavailableError

logger = structlog.get_logger()


def _load_settings(config_path: Optional[Path]) -> Settings:
    if config_path:
        return Settings.from_yaml(config_path)
    return Settings()


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to configuration file",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config: Optional[str]) -> None:
    """
    Art-Net Capture - observe the DMX a lighting server emits.

    Listens for ArtDMX packets and reports per-universe frame counts,
    frame rate and channel values.
    """
    ctx.ensure_object(dict)

    config_path = Path(config) if config else None
    try:
        settings = _load_settings(config_path)
    except CaptureError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    settings.debug = settings.debug or debug

    # Configure logging
    log_level = "DEBUG" if settings.debug else settings.log_level.upper()
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level, logging.INFO)
        ),
    )

    ctx.obj["debug"] = settings.debug
    ctx.obj["settings"] = settings


@cli.command()
@click.option("--port", "-p", type=int, default=None, help="UDP port (default from settings)")
@click.option("--host", default=None, help="Bind address (default all interfaces)")
@click.option("--duration", "-d", default=5.0, help="Capture window in seconds")
@click.option("--channels", "-n", default=16, help="Channels to print per universe")
@click.pass_context
def listen(
    ctx: click.Context,
    port: Optional[int],
    host: Optional[str],
    duration: float,
    channels: int,
) -> None:
    """Capture Art-Net frames for a window and summarise them."""
    from artnet_capture.capture.analysis import frames_for_universe, observed_frame_rate
    from artnet_capture.capture.receiver import ArtNetReceiver

    settings: Settings = ctx.obj["settings"]
    config = settings.receiver_config()
    update = {}
    if port is not None:
        update["port"] = port
    if host is not None:
        update["host"] = host
    receiver = ArtNetReceiver.from_config(config.model_copy(update=update))

    try:
        receiver.start()
    except CaptureUnavailableError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    bound_host, bound_port = receiver.address or (receiver.host, receiver.port)
    click.echo(f"Listening on {bound_host or '*'}:{bound_port} for {duration}s...")
    click.echo("Press Ctrl+C to stop early.")

    interrupted = False
    try:
        frames = receiver.capture_frames(duration)
    except KeyboardInterrupt:
        interrupted = True
        frames = receiver.get_frames()
    finally:
        receiver.stop()

    if interrupted:
        click.echo()

    click.echo(f"Captured {len(frames)} frames ({observed_frame_rate(frames):.1f} fps)")
    click.echo("-" * 60)

    for universe in sorted({frame.universe for frame in frames}):
        universe_frames = frames_for_universe(frames, universe)
        latest = universe_frames[-1]
        values = " ".join(f"{v:3d}" for v in latest.channels[:channels])
        click.echo(
            f"Universe {universe} (net {latest.net}, sub-net {latest.sub_net}, "
            f"universe {latest.universe_index}): {len(universe_frames)} frames, "
            f"{observed_frame_rate(universe_frames):.1f} fps"
        )
        click.echo(f"  {values}")

    if not frames:
        click.echo("  (no Art-Net frames received)")


@cli.command()
@click.option("--host", default="127.0.0.1", help="Destination address")
@click.option("--port", "-p", type=int, default=None, help="UDP port (default from settings)")
@click.option("--universe", "-u", default=0, help="Port-Address (0-32767)")
@click.option("--channel", "-c", type=int, required=True, help="DMX channel (1-512)")
@click.option("--value", "-v", type=int, required=True, help="Value (0-255)")
@click.option("--count", default=1, help="Number of frames to send")
@click.option("--interval", default=0.025, help="Seconds between frames")
@click.pass_context
def emit(
    ctx: click.Context,
    host: str,
    port: Optional[int],
    universe: int,
    channel: int,
    value: int,
    count: int,
    interval: float,
) -> None:
    """Send ArtDMX test frames setting a single channel."""
    from artnet_capture.dmx.sender import ArtNetSender
    from artnet_capture.dmx.universe import DMX_CHANNEL_COUNT, is_valid_dmx_channel

    if not is_valid_dmx_channel(channel):
        click.echo("Error: Channel must be 1-512", err=True)
        sys.exit(1)

    if not 0 <= value <= 255:
        click.echo("Error: Value must be 0-255", err=True)
        sys.exit(1)

    settings: Settings = ctx.obj["settings"]
    dmx_data = bytearray(DMX_CHANNEL_COUNT)
    dmx_data[channel - 1] = value

    sender = ArtNetSender(host=host, port=port if port is not None else settings.listen_port)
    click.echo(f"Sending {count} frame(s) to {sender.host}:{sender.port}...")

    try:
        with sender:
            for sequence in range(count):
                # Sequence 0 means "disabled", so count 1..255
                sender.send_dmx(universe, bytes(dmx_data), sequence=sequence % 255 + 1)
                if sequence < count - 1:
                    time.sleep(interval)
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        if ctx.obj["debug"]:
            raise
        sys.exit(1)

    logger.debug("Emit finished", frames=count, universe=universe)


def main() -> None:
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
