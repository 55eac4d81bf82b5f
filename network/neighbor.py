"""Gateway MAC address resolution.

Reads the operating system's neighbor (ARP / NDP) cache through the
platform's native tool and extracts the gateway's link-layer address.

Resolution is best-effort: every failure (tool missing, non-zero exit,
timeout, empty output, no plausible token) yields the FALLBACK_MAC
sentinel. Callers must not assume the result is a real hardware address.

Platform tools:
    BSD:     arp -a                    / ndp -a
    LINUX:   ip neighbor show <ip>     (both families)
    WINDOWS: arp -a <ip>               / netsh interface ipv6 show neighbors
"""

import platform

import config
from enums import HostPlatform, ResolutionSource
from logging_config import get_logger
from models import NeighborQuery, ResolutionResult
from utils import is_valid_ip, normalize_mac, run_command, sanitize_for_log

logger = get_logger(__name__)


def match_mac_token(token: str, separator: str) -> str | None:
    """Check a single whitespace-delimited token for a MAC address.

    Length floors are deliberately loose (11 for colon form so BSD's
    unpadded "0:1:2:3:4:5" passes, 17 for hyphen form); the token is
    then normalized, which enforces exactly six octets.

    Args:
        token: Candidate token
        separator: ":" (BSD/generic) or "-" (Windows)

    Returns:
        Canonical MAC or None.
    """
    min_length = (
        config.MIN_HYPHEN_MAC_LENGTH if separator == "-" else config.MIN_COLON_MAC_LENGTH
    )
    if separator not in token or len(token) < min_length:
        return None

    return normalize_mac(token)


def parse_table_line(line: str, ip: str, separator: str) -> str | None:
    """Extract MAC from one line of an ARP/NDP table dump.

    The line must contain the queried IP as a literal substring.

    Formats:
        BSD arp:  ? (192.168.1.1) at d4:1:c3:a6:36:71 on en1 ifscope [ethernet]
        BSD ndp:  fe80::1%en1   30:a2:20:fe:46:18   en1 23h59m58s S R
        Windows:  192.168.1.1           d4-01-c3-a6-36-71     dynamic

    Args:
        line: One line of command output
        ip: Queried IP address
        separator: MAC separator used by the tool

    Returns:
        First plausible MAC on the line, or None.
    """
    if ip not in line:
        return None

    for token in line.split():
        mac = match_mac_token(token, separator)
        if mac:
            return mac

    return None


def parse_lladdr_line(line: str) -> str | None:
    """Extract MAC following the lladdr marker.

    Format: "192.168.1.1 dev eth0 lladdr d4:01:c3:a6:36:71 REACHABLE"
    Incomplete entries ("192.168.1.1 dev eth0 FAILED") have no marker.

    Args:
        line: One line of `ip neighbor show` output

    Returns:
        Canonical MAC or None.
    """
    parts = line.split()
    try:
        position = parts.index(config.LLADDR_MARKER)
    except ValueError:
        return None

    if position + 1 >= len(parts):
        return None

    return normalize_mac(parts[position + 1])


class NeighborResolver:
    """Resolve a neighbor's MAC address from the OS neighbor cache.

    Subclasses provide the command table and the output parser for one
    host platform. resolve() never raises for tool or parse failures.
    """

    host_platform: HostPlatform = HostPlatform.BSD
    commands: dict[str, list[str]] = config.BSD_NEIGHBOR_COMMANDS
    separator: str = ":"

    def build_command(self, query: NeighborQuery) -> list[str]:
        """Build the neighbor-table command for a query."""
        template = self.commands[query.family.value]
        return [part.replace("{ip}", query.target_ip) for part in template]

    def parse_output(self, output: str, query: NeighborQuery) -> str | None:
        """Scan every line, return the first plausible MAC."""
        for line in output.splitlines():
            mac = parse_table_line(line, query.target_ip, self.separator)
            if mac:
                return mac
        return None

    def resolve(self, query: NeighborQuery) -> ResolutionResult:
        """Resolve query to a MAC address (or the fallback sentinel).

        Args:
            query: Target IP and address family

        Returns:
            ResolutionResult with source TOOL on success, FALLBACK otherwise.
        """
        if not is_valid_ip(query.target_ip):
            logger.warning(
                "Invalid neighbor query address: %s",
                sanitize_for_log(query.target_ip),
            )
            return ResolutionResult.create_fallback()

        cmd = self.build_command(query)
        logger.debug("[%s] Running: %s", self.host_platform.value, " ".join(cmd))

        output = run_command(cmd)
        if not output:
            logger.debug(
                "No neighbor output for %s, using fallback MAC",
                sanitize_for_log(query.target_ip),
            )
            return ResolutionResult.create_fallback()

        mac = self.parse_output(output, query)
        if not mac:
            logger.debug(
                "No MAC for %s in neighbor table, using fallback MAC",
                sanitize_for_log(query.target_ip),
            )
            return ResolutionResult.create_fallback()

        logger.debug("Resolved %s -> %s", sanitize_for_log(query.target_ip), mac)
        return ResolutionResult(address=mac, source=ResolutionSource.TOOL)


class BsdNeighborResolver(NeighborResolver):
    """macOS / BSD: full table dump via arp -a or ndp -a."""

    host_platform = HostPlatform.BSD
    commands = config.BSD_NEIGHBOR_COMMANDS
    separator = ":"


class LinuxNeighborResolver(NeighborResolver):
    """Linux: filtered lookup via ip neighbor show <ip>."""

    host_platform = HostPlatform.LINUX
    commands = config.LINUX_NEIGHBOR_COMMANDS
    separator = ":"

    def parse_output(self, output: str, query: NeighborQuery) -> str | None:
        """Output is already filtered by IP: only the first line counts."""
        lines = output.splitlines()
        if not lines:
            return None
        return parse_lladdr_line(lines[0])


class WindowsNeighborResolver(NeighborResolver):
    """Windows: arp -a <ip> or netsh neighbor dump, hyphenated MACs."""

    host_platform = HostPlatform.WINDOWS
    commands = config.WINDOWS_NEIGHBOR_COMMANDS
    separator = "-"


_RESOLVERS: dict[HostPlatform, type[NeighborResolver]] = {
    HostPlatform.BSD: BsdNeighborResolver,
    HostPlatform.LINUX: LinuxNeighborResolver,
    HostPlatform.WINDOWS: WindowsNeighborResolver,
}


def detect_host_platform(system: str | None = None) -> HostPlatform:
    """Map platform.system() to a neighbor-tool family.

    Darwin and the BSDs use arp/ndp; unknown systems get the same
    generic arp -a treatment.

    Args:
        system: Override for platform.system() (testing)

    Returns:
        HostPlatform for the running (or given) system.
    """
    name = (system if system is not None else platform.system()).lower()

    if name == "linux":
        return HostPlatform.LINUX
    if name == "windows" or name.startswith(("cygwin", "msys")):
        return HostPlatform.WINDOWS
    return HostPlatform.BSD


def select_resolver(system: str | None = None) -> NeighborResolver:
    """Create the resolver for the running (or given) system."""
    host_platform = detect_host_platform(system)
    logger.debug("Using %s neighbor resolver", host_platform.value)
    return _RESOLVERS[host_platform]()


def get_gateway_mac(
    ip: str,
    is_ipv6: bool,
    resolver: NeighborResolver | None = None,
) -> str:
    """Resolve gateway MAC address, never failing.

    Args:
        ip: Gateway IPv4 or IPv6 literal
        is_ipv6: True to query the IPv6 neighbor cache
        resolver: Platform resolver (default: auto-detected)

    Returns:
        Canonical MAC address, or FALLBACK_MAC if resolution failed.
    """
    if resolver is None:
        resolver = select_resolver()

    result = resolver.resolve(NeighborQuery.for_gateway(ip, is_ipv6))
    if result.source == ResolutionSource.FALLBACK:
        logger.warning(
            "Could not resolve MAC for gateway %s, using placeholder %s",
            sanitize_for_log(ip),
            config.FALLBACK_MAC,
        )
    return result.address
