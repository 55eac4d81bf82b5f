"""Type-safe enumerations for paqet-autoconf.

All categorical values use enum types for type safety and consistency.
"""

from enum import Enum


class AddressFamily(str, Enum):
    """IP address family of a neighbor query."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"


class HostPlatform(str, Enum):
    """Neighbor-table tool families.

    BSD: arp -a / ndp -a (macOS, FreeBSD, generic Unix)
    LINUX: ip neighbor show (iproute2)
    WINDOWS: arp -a / netsh interface ipv6 show neighbors
    """

    BSD = "bsd"
    LINUX = "linux"
    WINDOWS = "windows"


class ResolutionSource(str, Enum):
    """Where a resolved MAC address came from.

    TOOL: Parsed from neighbor-table command output
    FALLBACK: Sentinel value, resolution failed (NOT a real address)
    """

    TOOL = "tool"
    FALLBACK = "fallback"
