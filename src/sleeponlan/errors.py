"""Daemon errors.

Every failure that stops the daemon is a :class:`DaemonError`. A packet that
does not match is not an error; the listener logs it and keeps going.
"""

from typing import Optional


class DaemonError(Exception):
    """Base error for sleep-on-lan."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__(message)


class ConfigError(DaemonError):
    """Raised when the config file cannot be read or is invalid."""

    def __init__(self, config_path: str, reason: str) -> None:
        self.config_path = config_path
        self.reason = reason
        super().__init__(f"Failed to read config file {config_path}: {reason}")


class BindFailed(DaemonError):
    """Raised when the UDP socket cannot be bound."""

    def __init__(self, address: tuple[str, int], cause: BaseException) -> None:
        self.address = address
        host, port = address
        super().__init__(f"Failed to bind to address {host}:{port}: {cause}", cause)


class ReadFailed(DaemonError):
    """Raised when receiving from the bound socket fails."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Failed to read magic packet from socket: {cause}", cause)


class NoAddressFound(DaemonError):
    """Raised when an interface exists but reports no hardware address."""

    def __init__(self, interface: str) -> None:
        self.interface = interface
        super().__init__(f"No MAC address found for interface {interface}")


class AddressLookupFailed(DaemonError):
    """Raised when the OS query for an interface's hardware address fails."""

    def __init__(self, interface: str, cause: BaseException) -> None:
        self.interface = interface
        super().__init__(
            f"Failed to determine MAC address of interface {interface}: {cause}", cause
        )


class SleepInvocationFailed(DaemonError):
    """Raised when the sleep command cannot be spawned or waited on."""

    def __init__(self, command: str, cause: BaseException) -> None:
        self.command = command
        super().__init__(f"Failure during sleep command '{command}' invocation: {cause}", cause)
