"""Utilities package for paqet-autoconf.

Provides system command execution and input validation.
"""

from .system import run_command, sanitize_for_log
from .validators import (
    is_link_local_ipv6,
    is_valid_ip,
    is_valid_ipv4,
    is_valid_ipv6,
    normalize_mac,
    strip_zone_id,
    validate_interface_name,
)

__all__ = [
    # System
    "run_command",
    "sanitize_for_log",
    # Validators
    "validate_interface_name",
    "is_valid_ipv4",
    "is_valid_ipv6",
    "is_valid_ip",
    "is_link_local_ipv6",
    "strip_zone_id",
    "normalize_mac",
]
