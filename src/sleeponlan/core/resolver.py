"""Hardware address lookup for local network interfaces."""

import logging

import psutil

from sleeponlan.core.packet import MAC_LENGTH, format_mac, parse_mac
from sleeponlan.errors import AddressLookupFailed, NoAddressFound

logger = logging.getLogger(__name__)


def resolve_hardware_address(interface: str) -> bytes:
    """
    Look up the MAC address bound to a local network interface.

    The first link-layer address psutil reports for the interface is used.

    Args:
        interface: Interface name (e.g., "eth0")

    Returns:
        The 6 raw bytes of the hardware address

    Raises:
        AddressLookupFailed: If the interface does not exist or the OS query fails
        NoAddressFound: If the interface has no usable hardware address
    """
    try:
        addresses = psutil.net_if_addrs()
    except (OSError, psutil.Error) as exc:
        raise AddressLookupFailed(interface, exc) from exc

    if interface not in addresses:
        exc = LookupError(f"no such interface '{interface}'")
        raise AddressLookupFailed(interface, exc) from exc

    for item in addresses[interface]:
        if item.family != psutil.AF_LINK or not item.address:
            continue
        try:
            mac = parse_mac(item.address)
        except ValueError:
            logger.debug("Ignoring link address %r on %s", item.address, interface)
            continue
        # Loopback reports an all-zero address
        if len(mac) == MAC_LENGTH and any(mac):
            logger.debug("Resolved %s to MAC %s", interface, format_mac(mac))
            return mac

    raise NoAddressFound(interface)
