"""Progress output and usage hint.

Human-readable lines printed while discovering and after writing the
configuration. Logging goes to stderr; this module writes to stdout.
"""

import platform
import sys
from pathlib import Path
from typing import TextIO

import config
from colors import Color
from models import ClientConfig


def print_discovery_start(file: TextIO | None = None) -> None:
    """Print discovery header."""
    if file is None:
        file = sys.stdout
    print(f"{Color.CYAN}Discovering network settings...{Color.RESET}", file=file)


def print_profile(client_config: ClientConfig, file: TextIO | None = None) -> None:
    """Print discovered interface, addresses and router MACs.

    Placeholder MACs (resolution failed) are highlighted in yellow.

    Args:
        client_config: Assembled configuration
        file: Optional file handle (default: sys.stdout)
    """
    if file is None:
        file = sys.stdout

    network = client_config.network
    rows = [
        ("Interface", network.interface),
        ("IPv4", network.ipv4.addr),
        ("IPv6", network.ipv6.addr),
        ("IPv4 router MAC", network.ipv4.router_mac),
        ("IPv6 router MAC", network.ipv6.router_mac),
    ]

    for label, value in rows:
        color = Color.YELLOW if value == config.FALLBACK_MAC else Color.GREEN
        print(f"  Found {label}: {color}{value}{Color.RESET}", file=file)

    if config.FALLBACK_MAC in (network.ipv4.router_mac, network.ipv6.router_mac):
        print(
            f"{Color.YELLOW}  Router MAC not found in neighbor cache - "
            f"placeholder {config.FALLBACK_MAC} written, edit before use{Color.RESET}",
            file=file,
        )


def format_usage_hint(output_path: Path, system: str | None = None) -> str:
    """Build the command line for running the client with this config.

    Args:
        output_path: Written configuration file
        system: Override for platform.system() (testing)

    Returns:
        ".\\paqet.exe run -c <file>" on Windows, "sudo ./paqet run -c <file>" elsewhere.
    """
    if system is None:
        system = platform.system()

    binary = config.CLIENT_BINARY_WINDOWS if system == "Windows" else config.CLIENT_BINARY_POSIX
    return f"{binary} run -c {output_path}"


def print_saved(output_path: Path, system: str | None = None, file: TextIO | None = None) -> None:
    """Print output location and usage hint."""
    if file is None:
        file = sys.stdout

    print(
        f"\n{Color.BOLD}Generated configuration saved to: {output_path}{Color.RESET}",
        file=file,
    )
    print("You can now run paqet with:", file=file)
    print(format_usage_hint(output_path, system), file=file)
