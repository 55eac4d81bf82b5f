"""Tests for config.py.

Tests configuration constants, exit codes, and data validation.
"""

import config
from config import ExitCode
from utils.validators import normalize_mac


class TestExitCode:
    """Tests for ExitCode enum."""

    def test_exit_code_values(self):
        """Test exit code numeric values."""
        assert ExitCode.SUCCESS == 0
        assert ExitCode.GENERAL_ERROR == 1
        assert ExitCode.INVALID_ARGUMENTS == 4

    def test_exit_code_in_range(self):
        """Test exit codes are in valid range (0-255)."""
        for code in ExitCode:
            assert 0 <= code <= 255


class TestMacConstants:
    """Tests for sentinel MAC values."""

    def test_fallback_mac(self):
        """Test fallback sentinel value and shape."""
        assert config.FALLBACK_MAC == "aa:bb:cc:dd:ee:ff"
        assert normalize_mac(config.FALLBACK_MAC) == config.FALLBACK_MAC

    def test_null_mac(self):
        """Test all-zero MAC."""
        assert config.NULL_MAC == "00:00:00:00:00:00"

    def test_length_floors(self):
        """Test loose floors stay below canonical length."""
        assert config.MIN_COLON_MAC_LENGTH == 11
        assert config.MIN_HYPHEN_MAC_LENGTH == 17
        assert len(config.FALLBACK_MAC) >= config.MIN_HYPHEN_MAC_LENGTH


class TestNeighborCommands:
    """Tests for neighbor command tables."""

    def test_all_tables_cover_both_families(self):
        """Test every platform has IPv4 and IPv6 commands."""
        for table in (
            config.BSD_NEIGHBOR_COMMANDS,
            config.LINUX_NEIGHBOR_COMMANDS,
            config.WINDOWS_NEIGHBOR_COMMANDS,
        ):
            assert set(table) == {"ipv4", "ipv6"}
            assert all(isinstance(part, str) for cmd in table.values() for part in cmd)

    def test_linux_filters_by_ip(self):
        """Test Linux commands carry the {ip} placeholder."""
        assert "{ip}" in config.LINUX_NEIGHBOR_COMMANDS["ipv4"]
        assert "{ip}" in config.LINUX_NEIGHBOR_COMMANDS["ipv6"]


class TestDefaults:
    """Tests for default client settings."""

    def test_socket_fallbacks(self):
        """Test loopback socket defaults."""
        assert config.DEFAULT_IPV4_SOCKET == "127.0.0.1:0"
        assert config.DEFAULT_IPV6_SOCKET == "[::1]:0"

    def test_output_filename(self):
        """Test output file name."""
        assert config.OUTPUT_FILENAME == "auto_client.yaml"

    def test_preferred_prefixes(self):
        """Test interface name preference."""
        assert config.PREFERRED_INTERFACE_PREFIXES == ("en", "eth", "wlan")

    def test_tool_metadata(self):
        """Test tool name and version."""
        assert config.TOOL_NAME == "paqet-autoconf"
        assert config.VERSION.count(".") == 2
