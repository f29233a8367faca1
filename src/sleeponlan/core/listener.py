"""
UDP listener that puts the host to sleep on receipt of a magic packet.

One socket, one thread: every datagram is matched in turn and a valid packet
runs the sleep command before the next datagram is read. Deploy as a systemd
service::

    [Unit]
    Description=Sleep-On-LAN daemon
    After=network-online.target

    [Service]
    ExecStart=/usr/local/bin/sleep-on-lan run
    Restart=on-failure

    [Install]
    WantedBy=multi-user.target
"""

import enum
import logging
import socket
from typing import NoReturn, Optional

from sleeponlan.core.packet import MAGIC_PACKET_SIZE, format_mac, is_magic_packet
from sleeponlan.core.resolver import resolve_hardware_address
from sleeponlan.core.sleep import invoke_sleep
from sleeponlan.errors import BindFailed, ReadFailed

logger = logging.getLogger(__name__)

# Larger than a magic packet so oversized datagrams are not truncated into a match
RECV_BUFFER_SIZE = MAGIC_PACKET_SIZE * 4


class ListenerState(enum.Enum):
    BINDING = "binding"
    LISTENING = "listening"
    MATCHING = "matching"
    SLEEPING = "sleeping"
    SKIPPING = "skipping"
    FAILED = "failed"


class Listener:
    """Serves a single UDP socket until a fatal error occurs."""

    def __init__(
        self,
        interface: str,
        port: int,
        sleep_command: str,
        host: str = "0.0.0.0",
    ) -> None:
        self.interface = interface
        self.port = port
        self.sleep_command = sleep_command
        self.host = host
        self.state = ListenerState.BINDING
        self._sock: Optional[socket.socket] = None

    def __enter__(self) -> "Listener":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _set_state(self, state: ListenerState) -> None:
        logger.debug("Listener state %s -> %s", self.state.value, state.value)
        self.state = state

    def bind(self) -> socket.socket:
        """
        Bind the UDP socket to ``host:port``.

        Raises:
            BindFailed: If the socket cannot be created or bound
        """
        address = (self.host, self.port)
        self._set_state(ListenerState.BINDING)
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            sock.bind(address)
        except OSError as exc:
            self._set_state(ListenerState.FAILED)
            raise BindFailed(address, exc) from exc
        logger.debug("Successfully bound to address %s:%d", self.host, self.port)
        self._sock = sock
        return sock

    def close(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def handle_datagram(self, hardware_address: bytes, data: bytes, sender: tuple) -> bool:
        """
        Match one datagram and run the sleep command if it is a magic packet.

        Returns:
            The match verdict

        Raises:
            SleepInvocationFailed: If the sleep command cannot be run
        """
        self._set_state(ListenerState.MATCHING)
        if is_magic_packet(hardware_address, data):
            self._set_state(ListenerState.SLEEPING)
            logger.info("Magic packet received from %s - initiating machine sleep...", sender[0])
            try:
                invoke_sleep(self.sleep_command)
            except Exception:
                self._set_state(ListenerState.FAILED)
                raise
            return True

        self._set_state(ListenerState.SKIPPING)
        logger.warning(
            "Invalid magic packet received from %s (%d bytes) [%s] - skipping...",
            sender[0],
            len(data),
            data.hex(" "),
        )
        return False

    def run(self) -> NoReturn:
        """
        Bind, resolve the interface's MAC address and serve packets forever.

        Raises:
            BindFailed: If the socket cannot be bound
            AddressLookupFailed: If the interface's MAC cannot be looked up
            NoAddressFound: If the interface has no MAC address
            ReadFailed: If receiving from the socket fails
            SleepInvocationFailed: If the sleep command cannot be run
        """
        sock = self._sock or self.bind()
        try:
            hardware_address = resolve_hardware_address(self.interface)
        except Exception:
            self._set_state(ListenerState.FAILED)
            raise

        while True:
            self._set_state(ListenerState.LISTENING)
            logger.info("Waiting for magic packet for MAC %s", format_mac(hardware_address))
            try:
                data, sender = sock.recvfrom(RECV_BUFFER_SIZE)
            except OSError as exc:
                self._set_state(ListenerState.FAILED)
                raise ReadFailed(exc) from exc
            self.handle_datagram(hardware_address, data, sender)
