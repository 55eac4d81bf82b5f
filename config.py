"""Configuration constants for paqet-autoconf.

All configurable values stored here for easy customization.
Single source of truth for all constants and default client settings.
"""

from enum import IntEnum

# Timeout for neighbor-table commands
TIMEOUT_SECONDS: int = 10

# MAC Addresses
# FALLBACK_MAC is returned whenever gateway MAC resolution fails.
# It is NOT a real hardware address - config generation never blocks on it.
FALLBACK_MAC: str = "aa:bb:cc:dd:ee:ff"
NULL_MAC: str = "00:00:00:00:00:00"

# Socket address fallbacks (port 0 = let the client pick)
DEFAULT_IPV4_SOCKET: str = "127.0.0.1:0"
DEFAULT_IPV6_SOCKET: str = "[::1]:0"

# Interface Selection
# First interface with one of these prefixes AND an IPv4 address wins,
# otherwise the interface carrying the default route is used.
PREFERRED_INTERFACE_PREFIXES: tuple[str, ...] = ("en", "eth", "wlan")

# Neighbor Table Commands
# "{ip}" is substituted with the queried gateway address.
BSD_NEIGHBOR_COMMANDS: dict[str, list[str]] = {
    "ipv4": ["arp", "-a"],
    "ipv6": ["ndp", "-a"],
}

LINUX_NEIGHBOR_COMMANDS: dict[str, list[str]] = {
    "ipv4": ["ip", "neighbor", "show", "{ip}"],
    "ipv6": ["ip", "neighbor", "show", "{ip}"],
}

WINDOWS_NEIGHBOR_COMMANDS: dict[str, list[str]] = {
    "ipv4": ["arp", "-a", "{ip}"],
    "ipv6": ["netsh", "interface", "ipv6", "show", "neighbors"],
}

# Token that precedes the link-layer address in `ip neighbor` output:
#   192.168.1.1 dev eth0 lladdr d4:01:c3:a6:36:71 REACHABLE
LLADDR_MARKER: str = "lladdr"

# Loose length floors for MAC-looking tokens (not full validation)
MIN_COLON_MAC_LENGTH: int = 11  # 0:1:2:3:4:5
MIN_HYPHEN_MAC_LENGTH: int = 17  # 00-11-22-33-44-55

# Client Defaults
# Placeholders - override server and key on the command line.
DEFAULT_ROLE: str = "client"
DEFAULT_LOG_LEVEL: str = "info"
DEFAULT_SOCKS5_LISTEN: str = "127.0.0.1:1080"
DEFAULT_SOCKS5_USERNAME: str = ""
DEFAULT_SOCKS5_PASSWORD: str = ""
DEFAULT_SERVER_ADDR: str = "45.141.148.77:8443"
DEFAULT_TRANSPORT_PROTOCOL: str = "kcp"
DEFAULT_TRANSPORT_CONN: int = 1
DEFAULT_KCP_MODE: str = "fast"
DEFAULT_KCP_KEY: str = "RkCrATRTO0uAQQwCYBs26JDBaE1fzq2d"

# Output
OUTPUT_FILENAME: str = "auto_client.yaml"
CLIENT_BINARY_WINDOWS: str = r".\paqet.exe"
CLIENT_BINARY_POSIX: str = "sudo ./paqet"


class ExitCode(IntEnum):
    """Standard exit codes for paqet-autoconf."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENTS = 4


# Tool Metadata
VERSION: str = "1.0.0"
TOOL_NAME: str = "paqet-autoconf"
