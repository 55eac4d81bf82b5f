"""YAML export functionality.

Serializes ClientConfig to the YAML document read by the paqet client,
and parses it back (used for round-trip checks and re-reading output).
"""

from pathlib import Path
from typing import Any

import yaml

from models import (
    AddressConfig,
    ClientConfig,
    KcpConfig,
    LogConfig,
    NetworkConfig,
    ServerConfig,
    Socks5Config,
    TransportConfig,
)


def export_to_yaml(client_config: ClientConfig) -> str:
    """Export to YAML format.

    Key order follows the dataclass field order (role, log, socks5,
    network, server, transport).

    Args:
        client_config: Complete client configuration

    Returns:
        YAML document string.
    """
    return yaml.safe_dump(
        _config_to_dict(client_config),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def load_from_yaml(text: str) -> ClientConfig:
    """Parse YAML document back into ClientConfig.

    Args:
        text: YAML document

    Returns:
        ClientConfig equal to the one that produced the document.

    Raises:
        yaml.YAMLError: Malformed YAML.
        ValueError: Document is missing required keys.
    """
    data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError("Configuration document must be a mapping")

    try:
        return _dict_to_config(data)
    except (KeyError, TypeError) as e:
        raise ValueError(f"Invalid configuration document: {e}") from e


def write_config(client_config: ClientConfig, path: Path) -> Path:
    """Serialize and write configuration in a single write.

    Args:
        client_config: Complete client configuration
        path: Destination file

    Returns:
        Path that was written.
    """
    path.write_text(export_to_yaml(client_config), encoding="utf-8")
    return path


def _config_to_dict(client_config: ClientConfig) -> dict[str, Any]:
    """Convert ClientConfig to nested dictionary."""
    network = client_config.network
    transport = client_config.transport

    return {
        "role": client_config.role,
        "log": {"level": client_config.log.level},
        "socks5": [
            {
                "listen": socks.listen,
                "username": socks.username,
                "password": socks.password,
            }
            for socks in client_config.socks5
        ],
        "network": {
            "interface": network.interface,
            "ipv4": {
                "addr": network.ipv4.addr,
                "router_mac": network.ipv4.router_mac,
            },
            "ipv6": {
                "addr": network.ipv6.addr,
                "router_mac": network.ipv6.router_mac,
            },
        },
        "server": {"addr": client_config.server.addr},
        "transport": {
            "protocol": transport.protocol,
            "conn": transport.conn,
            "kcp": {
                "mode": transport.kcp.mode,
                "key": transport.kcp.key,
            },
        },
    }


def _dict_to_config(data: dict[str, Any]) -> ClientConfig:
    """Rebuild ClientConfig from nested dictionary."""
    network = data["network"]
    transport = data["transport"]

    return ClientConfig(
        role=str(data["role"]),
        log=LogConfig(level=str(data["log"]["level"])),
        socks5=[
            Socks5Config(
                listen=str(socks["listen"]),
                username=str(socks["username"]),
                password=str(socks["password"]),
            )
            for socks in data["socks5"]
        ],
        network=NetworkConfig(
            interface=str(network["interface"]),
            ipv4=AddressConfig(
                addr=str(network["ipv4"]["addr"]),
                router_mac=str(network["ipv4"]["router_mac"]),
            ),
            ipv6=AddressConfig(
                addr=str(network["ipv6"]["addr"]),
                router_mac=str(network["ipv6"]["router_mac"]),
            ),
        ),
        server=ServerConfig(addr=str(data["server"]["addr"])),
        transport=TransportConfig(
            protocol=str(transport["protocol"]),
            conn=int(transport["conn"]),
            kcp=KcpConfig(
                mode=str(transport["kcp"]["mode"]),
                key=str(transport["kcp"]["key"]),
            ),
        ),
    )
