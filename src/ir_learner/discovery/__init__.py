"""Network discovery of companion services."""

from .mdns import MDNSDiscovery, DiscoveredServer

__all__ = ["MDNSDiscovery", "DiscoveredServer"]
