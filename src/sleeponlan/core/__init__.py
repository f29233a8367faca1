"""Packet matching, address resolution, sleep invocation and the UDP listener."""
