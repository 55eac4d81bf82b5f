"""Data models for network discovery and client configuration.

All models use dataclasses for type safety.

Architecture: Nested dataclasses mirror the written YAML document:
- ClientConfig: complete client configuration (top level)
- NetworkConfig: discovered network identity (NetworkProfile)
- AddressConfig: socket address and router MAC for one IP family
- LogConfig, Socks5Config, ServerConfig, TransportConfig, KcpConfig: static settings

Discovery and resolution inputs/outputs:
- InterfaceAddresses, GatewayInfo, DiscoveryResult: discovery output
- NeighborQuery, ResolutionResult: gateway MAC resolution
- ClientDefaults: static settings assembled once at startup
"""

from dataclasses import dataclass, field

import config
from enums import AddressFamily, ResolutionSource


@dataclass(frozen=True)
class NeighborQuery:
    """Immutable input to gateway MAC resolution."""

    target_ip: str
    family: AddressFamily

    @classmethod
    def for_gateway(cls, ip: str, is_ipv6: bool) -> "NeighborQuery":
        """Create query from gateway IP and IPv6 flag."""
        family = AddressFamily.IPV6 if is_ipv6 else AddressFamily.IPV4
        return cls(target_ip=ip, family=family)


@dataclass(frozen=True)
class ResolutionResult:
    """Resolved MAC address and where it came from.

    Callers must not assume address is a genuine hardware address:
    check source == ResolutionSource.TOOL for that.
    """

    address: str  # Canonical aa:bb:cc:dd:ee:ff form
    source: ResolutionSource

    @classmethod
    def create_fallback(cls) -> "ResolutionResult":
        """Create sentinel result for failed resolution."""
        return cls(address=config.FALLBACK_MAC, source=ResolutionSource.FALLBACK)


@dataclass
class InterfaceAddresses:
    """Addresses assigned to a single network interface."""

    name: str  # Interface name (en0, eth0, wlan0)
    ipv4: list[str] = field(default_factory=list)
    ipv6: list[str] = field(default_factory=list)  # May carry %zone suffix


@dataclass
class GatewayInfo:
    """Default gateway as reported by the discovery library."""

    ip: str  # Gateway IP or ""
    interface: str  # Interface carrying the default route
    mac: str = ""  # Gateway MAC if the library provides one, else ""


@dataclass
class DiscoveryResult:
    """Complete discovery output consumed by the assembler."""

    interfaces: list[InterfaceAddresses]
    default_interface: InterfaceAddresses
    gateway: GatewayInfo


@dataclass
class LogConfig:
    """Client log settings."""

    level: str


@dataclass
class Socks5Config:
    """Local SOCKS5 listener."""

    listen: str
    username: str
    password: str


@dataclass
class AddressConfig:
    """Socket address and router MAC for one IP family."""

    addr: str  # "192.168.1.91:0" or "[fe80::1]:0"
    router_mac: str


@dataclass
class NetworkConfig:
    """Discovered network identity (the network profile)."""

    interface: str
    ipv4: AddressConfig
    ipv6: AddressConfig


@dataclass
class ServerConfig:
    """Remote server endpoint."""

    addr: str


@dataclass
class KcpConfig:
    """KCP transport parameters."""

    mode: str
    key: str


@dataclass
class TransportConfig:
    """Transport settings."""

    protocol: str
    conn: int
    kcp: KcpConfig


@dataclass
class ClientConfig:
    """Complete client configuration as written to disk.

    Field order matches the key order of the written document.
    """

    role: str
    log: LogConfig
    socks5: list[Socks5Config]
    network: NetworkConfig
    server: ServerConfig
    transport: TransportConfig


@dataclass(frozen=True)
class ClientDefaults:
    """Static (non-discovered) client settings.

    Built once at startup from config constants plus command-line
    overrides, then passed explicitly to the assembler.
    """

    role: str = config.DEFAULT_ROLE
    log_level: str = config.DEFAULT_LOG_LEVEL
    socks5_listen: str = config.DEFAULT_SOCKS5_LISTEN
    socks5_username: str = config.DEFAULT_SOCKS5_USERNAME
    socks5_password: str = config.DEFAULT_SOCKS5_PASSWORD
    server_addr: str = config.DEFAULT_SERVER_ADDR
    transport_protocol: str = config.DEFAULT_TRANSPORT_PROTOCOL
    transport_conn: int = config.DEFAULT_TRANSPORT_CONN
    kcp_mode: str = config.DEFAULT_KCP_MODE
    kcp_key: str = config.DEFAULT_KCP_KEY
