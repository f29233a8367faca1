"""Tests for hardware address lookup."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import psutil
import pytest

from sleeponlan.core.resolver import resolve_hardware_address
from sleeponlan.errors import AddressLookupFailed, NoAddressFound


def _addr(family: int, address: str) -> SimpleNamespace:
    return SimpleNamespace(family=family, address=address, netmask=None, broadcast=None, ptp=None)


IFACES = {
    "eth0": [
        _addr(2, "192.168.1.10"),
        _addr(psutil.AF_LINK, "11:22:33:44:55:66"),
    ],
    "lo": [
        _addr(2, "127.0.0.1"),
        _addr(psutil.AF_LINK, "00:00:00:00:00:00"),
    ],
    "tun0": [_addr(2, "10.8.0.2")],
    "win0": [_addr(psutil.AF_LINK, "AA-BB-CC-DD-EE-FF")],
}


class TestResolveHardwareAddress:
    """Tests for resolve_hardware_address."""

    @patch("sleeponlan.core.resolver.psutil.net_if_addrs", return_value=IFACES)
    def test_returns_link_address(self, mock_addrs: MagicMock) -> None:
        assert resolve_hardware_address("eth0") == bytes.fromhex("112233445566")

    @patch("sleeponlan.core.resolver.psutil.net_if_addrs", return_value=IFACES)
    def test_dash_separated_address(self, mock_addrs: MagicMock) -> None:
        assert resolve_hardware_address("win0") == bytes.fromhex("aabbccddeeff")

    @patch("sleeponlan.core.resolver.psutil.net_if_addrs", return_value=IFACES)
    def test_loopback_has_no_address(self, mock_addrs: MagicMock) -> None:
        with pytest.raises(NoAddressFound) as exc_info:
            resolve_hardware_address("lo")
        assert exc_info.value.interface == "lo"

    @patch("sleeponlan.core.resolver.psutil.net_if_addrs", return_value=IFACES)
    def test_interface_without_link_family(self, mock_addrs: MagicMock) -> None:
        with pytest.raises(NoAddressFound):
            resolve_hardware_address("tun0")

    @patch("sleeponlan.core.resolver.psutil.net_if_addrs", return_value=IFACES)
    def test_unknown_interface(self, mock_addrs: MagicMock) -> None:
        with pytest.raises(AddressLookupFailed) as exc_info:
            resolve_hardware_address("wlan9")
        assert "wlan9" in str(exc_info.value)

    @patch("sleeponlan.core.resolver.psutil.net_if_addrs", side_effect=PermissionError("denied"))
    def test_os_error_wrapped(self, mock_addrs: MagicMock) -> None:
        with pytest.raises(AddressLookupFailed) as exc_info:
            resolve_hardware_address("eth0")
        assert isinstance(exc_info.value.cause, PermissionError)
        assert isinstance(exc_info.value.__cause__, PermissionError)
