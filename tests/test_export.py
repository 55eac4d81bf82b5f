"""Tests for export.py.

Tests YAML structure, key order, round-trip and file writing.
"""

import pytest
import yaml

from export import export_to_yaml, load_from_yaml, write_config


class TestExportToYaml:
    """Tests for export_to_yaml function."""

    def test_valid_yaml(self, sample_client_config) -> None:
        """Test output parses as YAML mapping."""
        data = yaml.safe_load(export_to_yaml(sample_client_config))
        assert isinstance(data, dict)

    def test_top_level_key_order(self, sample_client_config) -> None:
        """Test keys appear in document order."""
        data = yaml.safe_load(export_to_yaml(sample_client_config))
        assert list(data) == ["role", "log", "socks5", "network", "server", "transport"]

    def test_network_section(self, sample_client_config) -> None:
        """Test network keys and values."""
        data = yaml.safe_load(export_to_yaml(sample_client_config))

        assert data["network"] == {
            "interface": "en1",
            "ipv4": {"addr": "192.168.1.91:0", "router_mac": "d4:01:c3:a6:36:71"},
            "ipv6": {"addr": "[fe80::1]:0", "router_mac": "30:a2:20:fe:46:18"},
        }

    def test_static_sections(self, sample_client_config) -> None:
        """Test log, socks5, server and transport sections."""
        data = yaml.safe_load(export_to_yaml(sample_client_config))

        assert data["role"] == "client"
        assert data["log"] == {"level": "info"}
        assert data["socks5"] == [
            {"listen": "127.0.0.1:1080", "username": "", "password": ""}
        ]
        assert data["server"] == {"addr": "1.2.3.4:8443"}
        assert data["transport"] == {
            "protocol": "kcp",
            "conn": 1,
            "kcp": {"mode": "fast", "key": "secret"},
        }

    def test_sexagesimal_looking_mac_stays_string(self, sample_client_config) -> None:
        """Test digit-only MAC is quoted so YAML 1.1 does not read a number."""
        sample_client_config.network.ipv4.router_mac = "12:34:56:12:34:56"

        data = yaml.safe_load(export_to_yaml(sample_client_config))

        assert data["network"]["ipv4"]["router_mac"] == "12:34:56:12:34:56"


class TestLoadFromYaml:
    """Tests for load_from_yaml function."""

    def test_round_trip(self, sample_client_config) -> None:
        """Test serialize then parse yields an equal record."""
        assert load_from_yaml(export_to_yaml(sample_client_config)) == sample_client_config

    def test_round_trip_multiple_listeners(self, sample_client_config) -> None:
        """Test socks5 list with several entries survives."""
        from models import Socks5Config

        sample_client_config.socks5.append(
            Socks5Config(listen="0.0.0.0:1081", username="user", password="pass")
        )

        assert load_from_yaml(export_to_yaml(sample_client_config)) == sample_client_config

    def test_not_a_mapping(self) -> None:
        """Test scalar document is rejected."""
        with pytest.raises(ValueError, match="mapping"):
            load_from_yaml("just a string")

    def test_missing_keys(self) -> None:
        """Test incomplete document is rejected."""
        with pytest.raises(ValueError, match="Invalid configuration"):
            load_from_yaml("role: client\nlog:\n  level: info\n")

    def test_malformed_yaml(self) -> None:
        """Test YAML syntax errors propagate."""
        with pytest.raises(yaml.YAMLError):
            load_from_yaml("role: [unclosed")


class TestWriteConfig:
    """Tests for write_config function."""

    def test_writes_file(self, sample_client_config, tmp_path) -> None:
        """Test document written to given path."""
        path = tmp_path / "auto_client.yaml"

        result = write_config(sample_client_config, path)

        assert result == path
        assert load_from_yaml(path.read_text(encoding="utf-8")) == sample_client_config

    def test_overwrites_existing(self, sample_client_config, tmp_path) -> None:
        """Test existing file is replaced."""
        path = tmp_path / "auto_client.yaml"
        path.write_text("stale: true\n")

        write_config(sample_client_config, path)

        assert "stale" not in path.read_text(encoding="utf-8")

    def test_missing_directory(self, sample_client_config, tmp_path) -> None:
        """Test unwritable destination raises OSError."""
        with pytest.raises(OSError):
            write_config(sample_client_config, tmp_path / "missing" / "out.yaml")
