"""Network discovery modules for paqet-autoconf.

Provides interface/gateway discovery and gateway MAC resolution.
"""

from .discovery import (
    DiscoveryError,
    discover_network,
    find_default_interface,
    get_default_gateway,
    get_interfaces,
)
from .neighbor import (
    BsdNeighborResolver,
    LinuxNeighborResolver,
    NeighborResolver,
    WindowsNeighborResolver,
    detect_host_platform,
    get_gateway_mac,
    parse_lladdr_line,
    parse_table_line,
    select_resolver,
)

__all__ = [
    # Discovery
    "DiscoveryError",
    "discover_network",
    "find_default_interface",
    "get_interfaces",
    "get_default_gateway",
    # Neighbor resolution
    "NeighborResolver",
    "BsdNeighborResolver",
    "LinuxNeighborResolver",
    "WindowsNeighborResolver",
    "detect_host_platform",
    "select_resolver",
    "get_gateway_mac",
    "parse_table_line",
    "parse_lladdr_line",
]
