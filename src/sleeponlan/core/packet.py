"""Magic packet layout and matching.

A sleep packet uses the Wake-on-LAN layout with the target MAC written in
reverse byte order::

    offset  length  content
    0       6       0xFF x 6
    6       96      reversed MAC address, repeated 16 times

Anything that is not exactly 102 bytes long is rejected without looking at
its contents.
"""

import re

HEADER = b"\xff" * 6
MAC_LENGTH = 6
REPETITIONS = 16
MAGIC_PACKET_SIZE = len(HEADER) + REPETITIONS * MAC_LENGTH

_MAC_RE = re.compile(
    r"^(?:[0-9A-Fa-f]{2}([:\-]))(?:[0-9A-Fa-f]{2}\1){4}[0-9A-Fa-f]{2}$"
    r"|^[0-9A-Fa-f]{4}\.[0-9A-Fa-f]{4}\.[0-9A-Fa-f]{4}$"
    r"|^[0-9A-Fa-f]{12}$"
)


def parse_mac(text: str) -> bytes:
    """
    Parse a textual MAC address into its 6 raw bytes.

    Accepts ``AA:BB:CC:DD:EE:FF``, ``AA-BB-CC-DD-EE-FF``, ``AABB.CCDD.EEFF``
    and bare ``AABBCCDDEEFF``.

    Raises:
        ValueError: If the text is not a MAC address
    """
    candidate = text.strip()
    if not _MAC_RE.match(candidate):
        raise ValueError(f"invalid MAC address '{text}'")
    return bytes.fromhex(re.sub(r"[:\-.]", "", candidate))


def format_mac(address: bytes) -> str:
    """Render raw MAC bytes as ``aa:bb:cc:dd:ee:ff``."""
    return ":".join(f"{b:02x}" for b in address)


def reverse_address(address: bytes) -> bytes:
    """Return the hardware address with its byte order reversed."""
    if len(address) != MAC_LENGTH:
        raise ValueError(f"hardware address must be {MAC_LENGTH} bytes, got {len(address)}")
    return bytes(reversed(address))


def build_magic_packet(address: bytes) -> bytes:
    """Build the 102-byte sleep packet that targets ``address``."""
    return HEADER + reverse_address(address) * REPETITIONS


def is_magic_packet(reference: bytes, buffer: bytes) -> bool:
    """
    Decide whether ``buffer`` is a sleep packet for ``reference``.

    Args:
        reference: The local interface's 6-byte hardware address
        buffer: A received datagram of any length

    Returns:
        True only for a 102-byte buffer made of six 0xFF bytes followed by the
        reversed ``reference`` repeated 16 times
    """
    if len(buffer) != MAGIC_PACKET_SIZE:
        return False

    for i in range(len(HEADER)):
        if buffer[i] != 0xFF:
            return False

    reversed_mac = reference[::-1]
    for i in range(len(HEADER), MAGIC_PACKET_SIZE):
        if buffer[i] != reversed_mac[(i - len(HEADER)) % MAC_LENGTH]:
            return False

    return True
