"""Pytest configuration and shared fixtures.

Provides common test fixtures and configuration for the test suite.
"""

import sys
from pathlib import Path
from typing import Generator

import pytest

# Add parent directory to path so imports work
# This allows: from models import ... to find /project/models.py
sys.path.insert(0, str(Path(__file__).parent.parent))

from logging_config import setup_logging
from models import (
    AddressConfig,
    ClientConfig,
    ClientDefaults,
    DiscoveryResult,
    GatewayInfo,
    InterfaceAddresses,
    KcpConfig,
    LogConfig,
    NetworkConfig,
    ServerConfig,
    Socks5Config,
    TransportConfig,
)


@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> Generator[None, None, None]:
    """Configure logging once for all tests.

    Ensures every logger has real handlers with integer levels
    before any module under test logs.
    """
    setup_logging(verbose=False)
    yield


@pytest.fixture
def sample_interface() -> InterfaceAddresses:
    """macOS-style Wi-Fi interface with IPv4 and link-local IPv6."""
    return InterfaceAddresses(
        name="en1",
        ipv4=["192.168.1.91"],
        ipv6=["fe80::1%en1", "2001:db8::91"],
    )


@pytest.fixture
def sample_loopback() -> InterfaceAddresses:
    """Loopback interface."""
    return InterfaceAddresses(name="lo0", ipv4=["127.0.0.1"], ipv6=["::1"])


@pytest.fixture
def sample_discovery(
    sample_loopback: InterfaceAddresses,
    sample_interface: InterfaceAddresses,
) -> DiscoveryResult:
    """Discovery output: en1, gateway 192.168.1.1, no library MAC."""
    return DiscoveryResult(
        interfaces=[sample_loopback, sample_interface],
        default_interface=sample_interface,
        gateway=GatewayInfo(ip="192.168.1.1", interface="en1", mac=""),
    )


@pytest.fixture
def default_settings() -> ClientDefaults:
    """Client defaults with placeholder server and key."""
    return ClientDefaults(server_addr="1.2.3.4:8443", kcp_key="secret")


@pytest.fixture
def sample_client_config() -> ClientConfig:
    """Complete client configuration."""
    return ClientConfig(
        role="client",
        log=LogConfig(level="info"),
        socks5=[Socks5Config(listen="127.0.0.1:1080", username="", password="")],
        network=NetworkConfig(
            interface="en1",
            ipv4=AddressConfig(addr="192.168.1.91:0", router_mac="d4:01:c3:a6:36:71"),
            ipv6=AddressConfig(addr="[fe80::1]:0", router_mac="30:a2:20:fe:46:18"),
        ),
        server=ServerConfig(addr="1.2.3.4:8443"),
        transport=TransportConfig(
            protocol="kcp",
            conn=1,
            kcp=KcpConfig(mode="fast", key="secret"),
        ),
    )
