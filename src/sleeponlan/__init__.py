"""Sleep-On-LAN: suspend a host when it receives a reversed-MAC magic packet."""

__version__ = "0.1.0"
