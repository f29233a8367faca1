"""Tests for sending sleep packets."""

from unittest.mock import MagicMock, patch

import pytest

from sleeponlan.core.wol import send_sleep_packet


class TestSendSleepPacket:
    """Tests for send_sleep_packet."""

    @patch("sleeponlan.core.wol.send_magic_packet")
    def test_sends_reversed_mac(self, mock_send: MagicMock) -> None:
        """Should hand the reversed MAC to send_magic_packet."""
        result = send_sleep_packet("11:22:33:44:55:66")

        assert result is True
        mock_send.assert_called_once_with(
            "66:55:44:33:22:11", ip_address="255.255.255.255", port=9
        )

    @patch("sleeponlan.core.wol.send_magic_packet")
    def test_custom_broadcast_and_port(self, mock_send: MagicMock) -> None:
        send_sleep_packet("AA-BB-CC-DD-EE-FF", ip_address="192.168.1.255", port=7)

        mock_send.assert_called_once_with(
            "ff:ee:dd:cc:bb:aa", ip_address="192.168.1.255", port=7
        )

    @patch("sleeponlan.core.wol.send_magic_packet")
    def test_invalid_mac_raises(self, mock_send: MagicMock) -> None:
        with pytest.raises(ValueError):
            send_sleep_packet("not-a-mac")
        mock_send.assert_not_called()
