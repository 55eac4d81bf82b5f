"""Interface and default gateway discovery.

Interfaces and addresses come from psutil, the default gateway from
netifaces. Both are cross-platform (Linux, macOS, Windows).

Failure to determine the default gateway or its interface is fatal:
DiscoveryError is raised and no configuration is written.
"""

import socket

import netifaces
import psutil

from logging_config import get_logger
from models import DiscoveryResult, GatewayInfo, InterfaceAddresses
from utils import (
    is_valid_ipv4,
    is_valid_ipv6,
    sanitize_for_log,
    validate_interface_name,
)

logger = get_logger(__name__)


class DiscoveryError(RuntimeError):
    """Interface enumeration or default gateway lookup failed."""


def get_interfaces() -> list[InterfaceAddresses]:
    """Enumerate interfaces with their IPv4/IPv6 addresses.

    Uses psutil.net_if_addrs(); order follows the library (OS order).
    Interfaces with empty or non-printable names are skipped.

    Returns:
        List of InterfaceAddresses (addresses in OS order).

    Raises:
        DiscoveryError: If the OS refuses to enumerate interfaces.
    """
    try:
        all_addrs = psutil.net_if_addrs()
    except (OSError, RuntimeError) as e:
        raise DiscoveryError(f"Could not enumerate interfaces: {e}") from e

    interfaces = []
    for name, addrs in all_addrs.items():
        if not validate_interface_name(name):
            logger.debug("Skipping interface with invalid name: %s", sanitize_for_log(name))
            continue

        iface = InterfaceAddresses(name=name)
        for addr in addrs:
            if addr.family == socket.AF_INET and is_valid_ipv4(addr.address):
                iface.ipv4.append(addr.address)
            elif addr.family == socket.AF_INET6 and is_valid_ipv6(addr.address):
                iface.ipv6.append(addr.address)

        logger.debug(
            "[%s] IPv4: %s, IPv6: %s",
            sanitize_for_log(name),
            sanitize_for_log(iface.ipv4),
            sanitize_for_log(iface.ipv6),
        )
        interfaces.append(iface)

    return interfaces


def get_default_gateway() -> GatewayInfo:
    """Get IPv4 default gateway.

    netifaces.gateways()["default"][AF_INET] -> (gateway_ip, interface).
    netifaces does not report the gateway MAC, so mac is left empty and
    resolved later from the neighbor cache.

    Returns:
        GatewayInfo for the default route.

    Raises:
        DiscoveryError: If there is no IPv4 default route.
    """
    try:
        gateways = netifaces.gateways()
    except (OSError, ValueError) as e:
        raise DiscoveryError(f"Could not read routing table: {e}") from e

    default = gateways.get("default", {}).get(netifaces.AF_INET)
    if not default:
        raise DiscoveryError("Could not find default gateway")

    gateway_ip, iface_name = default[0], default[1]
    if not is_valid_ipv4(gateway_ip):
        raise DiscoveryError(
            f"Default gateway is not an IPv4 address: {sanitize_for_log(gateway_ip)}"
        )

    logger.debug(
        "Default gateway: %s via %s",
        sanitize_for_log(gateway_ip),
        sanitize_for_log(iface_name),
    )
    return GatewayInfo(ip=gateway_ip, interface=iface_name)


def find_default_interface(
    interfaces: list[InterfaceAddresses],
    gateway: GatewayInfo,
) -> InterfaceAddresses | None:
    """Find the interface carrying the default route.

    Matches by name first. On Windows netifaces names interfaces by GUID
    while psutil uses friendly names, so fall back to matching the
    IPv4 addresses netifaces reports for the gateway interface.

    Args:
        interfaces: Enumerated interfaces
        gateway: Default gateway

    Returns:
        Matching interface or None.
    """
    for iface in interfaces:
        if iface.name == gateway.interface:
            return iface

    try:
        route_addrs = netifaces.ifaddresses(gateway.interface).get(netifaces.AF_INET, [])
    except ValueError:
        return None

    addresses = {entry.get("addr") for entry in route_addrs}
    for iface in interfaces:
        if addresses.intersection(iface.ipv4):
            logger.debug(
                "Matched default interface %s to %s by address",
                sanitize_for_log(gateway.interface),
                sanitize_for_log(iface.name),
            )
            return iface

    return None


def discover_network() -> DiscoveryResult:
    """Discover interfaces, default interface and default gateway.

    Returns:
        DiscoveryResult for the assembler.

    Raises:
        DiscoveryError: If gateway or default interface is missing.
    """
    interfaces = get_interfaces()
    gateway = get_default_gateway()

    default_interface = find_default_interface(interfaces, gateway)
    if default_interface is None:
        raise DiscoveryError(
            f"Could not find default interface {sanitize_for_log(gateway.interface)}"
        )

    return DiscoveryResult(
        interfaces=interfaces,
        default_interface=default_interface,
        gateway=gateway,
    )
