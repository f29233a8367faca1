"""Command-line interface for Sleep-On-LAN (sleep-on-lan)."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from sleeponlan import __version__
from sleeponlan.config.loader import DEFAULT_CONFIG_PATH, read_settings
from sleeponlan.errors import DaemonError

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )


# ── Root group ────────────────────────────────────────────────────────────────


@click.group()
@click.version_option(version=__version__, prog_name="sleep-on-lan")
@click.option(
    "--config",
    "-c",
    default=str(DEFAULT_CONFIG_PATH),
    envvar="SLEEP_ON_LAN_CONFIG",
    show_default=True,
    help="Path to sleep-on-lan config file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def main(ctx: click.Context, config: str, verbose: bool) -> None:
    """Sleep-On-LAN: trigger system sleep on magic packet receipt.

    Uses the Wake-on-LAN magic packet format, except that the MAC address
    has to be written in reverse byte order.
    """
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


# ── run command ───────────────────────────────────────────────────────────────


@main.command()
@click.option(
    "--dry-run",
    is_flag=True,
    help="Receipt of a magic packet does not trigger actual sleep",
)
@click.pass_context
def run(ctx: click.Context, dry_run: bool) -> None:
    """Listen for magic packets and put this machine to sleep."""
    from sleeponlan.core.listener import Listener

    config_path = ctx.obj["config"]
    try:
        settings = read_settings(Path(config_path), dry_run=dry_run)
    except DaemonError as exc:
        logger.error("Failed to read application config: %s", exc)
        sys.exit(1)

    if settings.dry_run:
        logger.warning("Starting application in DRY-RUN mode with config %s", config_path)
    else:
        logger.debug("Starting application with config %s", config_path)

    with Listener(settings.interface, settings.port, settings.sleep_command) as listener:
        try:
            listener.run()
        except DaemonError as exc:
            logger.error("Failed to start application: %s", exc)
            sys.exit(1)


# ── send command ──────────────────────────────────────────────────────────────


@main.command()
@click.argument("mac_address")
@click.option(
    "--broadcast",
    "-b",
    default="255.255.255.255",
    show_default=True,
    help="Broadcast IP address",
)
@click.option(
    "--port",
    "-p",
    default=9,
    type=click.IntRange(1, 65535),
    show_default=True,
    help="Target UDP port",
)
def send(mac_address: str, broadcast: str, port: int) -> None:
    """Send a sleep packet to the host with MAC_ADDRESS."""
    from sleeponlan.core.wol import send_sleep_packet

    try:
        send_sleep_packet(mac_address, ip_address=broadcast, port=port)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(f"Sleep packet sent to {mac_address} via {broadcast}:{port}")


# ── mac command ───────────────────────────────────────────────────────────────


@main.command()
@click.argument("interface", required=False)
@click.pass_context
def mac(ctx: click.Context, interface: Optional[str]) -> None:
    """Show the MAC address of INTERFACE (default: the configured interface)."""
    from sleeponlan.core.packet import format_mac, reverse_address
    from sleeponlan.core.resolver import resolve_hardware_address

    try:
        if interface is None:
            interface = read_settings(Path(ctx.obj["config"])).interface
        address = resolve_hardware_address(interface)
    except DaemonError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"{interface}: {format_mac(address)}")
    click.echo(f"Reversed (send this): {format_mac(reverse_address(address))}")


if __name__ == "__main__":
    main()
