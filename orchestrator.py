"""Orchestrator for client configuration assembly.

Combines discovery output and gateway MAC resolution into a ClientConfig.
Assembly is pure data wiring; only collect_client_config() touches the host.
"""

import config
from logging_config import get_logger
from models import (
    AddressConfig,
    ClientConfig,
    ClientDefaults,
    DiscoveryResult,
    InterfaceAddresses,
    KcpConfig,
    LogConfig,
    NetworkConfig,
    ServerConfig,
    Socks5Config,
    TransportConfig,
)
from network import NeighborResolver, discover_network, get_gateway_mac
from utils import is_link_local_ipv6, sanitize_for_log, strip_zone_id

logger = get_logger(__name__)


def select_interface(discovery: DiscoveryResult) -> InterfaceAddresses:
    """Pick the interface to describe.

    First interface named en*/eth*/wlan* with an IPv4 address wins,
    otherwise the interface carrying the default route.

    Args:
        discovery: Discovery output

    Returns:
        Selected InterfaceAddresses.
    """
    for iface in discovery.interfaces:
        if iface.name.startswith(config.PREFERRED_INTERFACE_PREFIXES) and iface.ipv4:
            return iface
    return discovery.default_interface


def format_ipv4_socket(iface: InterfaceAddresses) -> str:
    """First IPv4 address with port 0, or 127.0.0.1:0."""
    if not iface.ipv4:
        return config.DEFAULT_IPV4_SOCKET
    return f"{iface.ipv4[0]}:0"


def format_ipv6_socket(iface: InterfaceAddresses) -> str:
    """First link-local IPv6 address with port 0, or [::1]:0.

    Zone identifier is dropped: "fe80::1%en1" -> "[fe80::1]:0".
    """
    for address in iface.ipv6:
        if is_link_local_ipv6(address):
            return f"[{strip_zone_id(address)}]:0"
    return config.DEFAULT_IPV6_SOCKET


def choose_ipv6_router_mac(gateway_mac: str, ipv4_router_mac: str) -> str:
    """IPv6 router MAC rule.

    The library-provided gateway MAC is used verbatim when present and
    not the all-zero MAC; otherwise the resolved IPv4 router MAC.
    """
    if gateway_mac and gateway_mac != config.NULL_MAC:
        return gateway_mac
    return ipv4_router_mac


def resolve_ipv4_router_mac(
    gateway_ip: str,
    resolver: NeighborResolver | None = None,
) -> str:
    """Resolve IPv4 gateway MAC, or fallback when there is no gateway IP."""
    if not gateway_ip:
        return config.FALLBACK_MAC
    return get_gateway_mac(gateway_ip, False, resolver=resolver)


def build_network_profile(
    discovery: DiscoveryResult,
    ipv4_router_mac: str,
) -> NetworkConfig:
    """Assemble the network section from discovery and resolved MAC.

    Args:
        discovery: Discovery output
        ipv4_router_mac: Resolved IPv4 gateway MAC

    Returns:
        NetworkConfig for the selected interface.
    """
    iface = select_interface(discovery)

    return NetworkConfig(
        interface=iface.name,
        ipv4=AddressConfig(
            addr=format_ipv4_socket(iface),
            router_mac=ipv4_router_mac,
        ),
        ipv6=AddressConfig(
            addr=format_ipv6_socket(iface),
            router_mac=choose_ipv6_router_mac(discovery.gateway.mac, ipv4_router_mac),
        ),
    )


def build_client_config(network: NetworkConfig, defaults: ClientDefaults) -> ClientConfig:
    """Combine network profile with static defaults."""
    return ClientConfig(
        role=defaults.role,
        log=LogConfig(level=defaults.log_level),
        socks5=[
            Socks5Config(
                listen=defaults.socks5_listen,
                username=defaults.socks5_username,
                password=defaults.socks5_password,
            )
        ],
        network=network,
        server=ServerConfig(addr=defaults.server_addr),
        transport=TransportConfig(
            protocol=defaults.transport_protocol,
            conn=defaults.transport_conn,
            kcp=KcpConfig(mode=defaults.kcp_mode, key=defaults.kcp_key),
        ),
    )


def collect_client_config(
    defaults: ClientDefaults,
    resolver: NeighborResolver | None = None,
) -> ClientConfig:
    """Discover the network and assemble the complete client config.

    Process:
        1. Discover interfaces and default gateway (fatal on failure)
        2. Resolve IPv4 gateway MAC (best-effort)
        3. Assemble network profile
        4. Merge static defaults

    Args:
        defaults: Static client settings
        resolver: Neighbor resolver (default: auto-detected)

    Returns:
        Complete ClientConfig.

    Raises:
        DiscoveryError: If interfaces or default gateway cannot be found.
    """
    discovery = discover_network()
    logger.info(
        "Found %d interfaces, default gateway %s",
        len(discovery.interfaces),
        sanitize_for_log(discovery.gateway.ip),
    )

    ipv4_router_mac = resolve_ipv4_router_mac(discovery.gateway.ip, resolver)
    network = build_network_profile(discovery, ipv4_router_mac)

    logger.debug(
        "[%s] IPv4 router MAC: %s, IPv6 router MAC: %s",
        sanitize_for_log(network.interface),
        network.ipv4.router_mac,
        network.ipv6.router_mac,
    )

    return build_client_config(network, defaults)
