"""Send a sleep packet to a remote Sleep-On-LAN host."""

import logging

from wakeonlan import send_magic_packet

from sleeponlan.core.packet import format_mac, parse_mac, reverse_address

logger = logging.getLogger(__name__)


def send_sleep_packet(
    mac_address: str, ip_address: str = "255.255.255.255", port: int = 9
) -> bool:
    """
    Send a sleep packet to put a remote machine to sleep.

    The packet is a regular Wake-on-LAN magic packet built from the reversed
    MAC address.

    Args:
        mac_address: MAC address of the target machine (e.g., "AA:BB:CC:DD:EE:FF")
        ip_address: Broadcast IP address (default: 255.255.255.255)
        port: UDP port the target listens on (default: 9)

    Returns:
        True if the packet was sent

    Raises:
        ValueError: If ``mac_address`` is not a MAC address
    """
    reversed_mac = format_mac(reverse_address(parse_mac(mac_address)))
    logger.info(
        "Sending sleep packet to %s (as %s) via %s:%d", mac_address, reversed_mac, ip_address, port
    )
    send_magic_packet(reversed_mac, ip_address=ip_address, port=port)
    logger.debug("Sleep packet sent successfully")
    return True
