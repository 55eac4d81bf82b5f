"""Input validation utilities.

Validates interface names, IP addresses and MAC addresses before they
reach command lines or the written configuration.
"""

import ipaddress
import re

_MAC_OCTET = re.compile(r"^[0-9a-f]{1,2}$")


def validate_interface_name(name: str) -> bool:
    """Validate interface name.

    Any printable text without surrounding whitespace, including
    localized Windows friendly names
    ("Подключение по локальной сети", "イーサネット").
    Max length: 256 (Windows IF_MAX_STRING_SIZE)

    Args:
        name: Interface name to validate

    Returns:
        True if valid, False otherwise.
    """
    if not name or len(name) > 256:
        return False

    if name != name.strip():
        return False

    return name.isprintable()


def strip_zone_id(address: str) -> str:
    """Strip IPv6 zone identifier (fe80::1%en0 -> fe80::1)."""
    return address.split("%")[0]


def is_valid_ipv4(address: str | None) -> bool:
    """Validate IPv4 address.

    Args:
        address: IPv4 address string or None

    Returns:
        True if valid IPv4 address, False otherwise.
    """
    if not address:
        return False
    try:
        ipaddress.IPv4Address(address)
        return True
    except ValueError:
        return False


def is_valid_ipv6(address: str | None) -> bool:
    """Validate IPv6 address (zone identifier allowed).

    Args:
        address: IPv6 address string or None

    Returns:
        True if valid IPv6 address, False otherwise.
    """
    if not address:
        return False
    try:
        ipaddress.IPv6Address(strip_zone_id(address))
        return True
    except ValueError:
        return False


def is_valid_ip(address: str | None) -> bool:
    """Validate IPv4 or IPv6 address."""
    return is_valid_ipv4(address) or is_valid_ipv6(address)


def is_link_local_ipv6(address: str | None) -> bool:
    """Check for an IPv6 unicast link-local address (fe80::/10)."""
    if not is_valid_ipv6(address):
        return False
    return ipaddress.IPv6Address(strip_zone_id(address)).is_link_local


def normalize_mac(value: str | None) -> str | None:
    """Normalize MAC address to canonical lowercase colon form.

    Accepts colon or hyphen separators and 1-2 hex digits per octet
    (BSD arp prints "d4:1:c3:a6:36:71"). Anything that is not exactly
    six octets is rejected.

    Args:
        value: Raw MAC token

    Returns:
        "aa:bb:cc:dd:ee:ff" form, or None if not a MAC address.
    """
    if not value:
        return None

    octets = value.replace("-", ":").lower().split(":")
    if len(octets) != 6:
        return None
    if not all(_MAC_OCTET.match(octet) for octet in octets):
        return None

    return ":".join(octet.zfill(2) for octet in octets)
