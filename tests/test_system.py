"""Tests for utils/system.py.

Tests system command execution and sanitization utilities.
"""

import subprocess
from unittest.mock import Mock, patch

import pytest

from utils.system import run_command, sanitize_for_log


class TestRunCommand:
    """Tests for run_command function."""

    @patch("subprocess.run")
    def test_successful_command(self, mock_run):
        """Test successful command execution."""
        mock_run.return_value = Mock(returncode=0, stdout="output\n")
        result = run_command(["arp", "-a"])
        assert result == "output"
        args, kwargs = mock_run.call_args
        assert args[0] == ["arp", "-a"]
        assert kwargs["shell"] is False
        assert kwargs["check"] is False

    @patch("subprocess.run")
    def test_timeout_passed(self, mock_run):
        """Test timeout is bounded."""
        mock_run.return_value = Mock(returncode=0, stdout="")
        run_command(["arp", "-a"], timeout=3)
        assert mock_run.call_args.kwargs["timeout"] == 3

    @patch("subprocess.run")
    def test_command_failure(self, mock_run):
        """Test non-zero exit returns None."""
        mock_run.return_value = Mock(returncode=1, stdout="partial")
        assert run_command(["arp", "-a", "10.0.0.1"]) is None

    @pytest.mark.parametrize(
        "error",
        [
            subprocess.TimeoutExpired("arp", 10),
            FileNotFoundError(),
            PermissionError("denied"),
            OSError("error"),
            ValueError("embedded null byte"),
        ],
    )
    @patch("subprocess.run")
    def test_errors_return_none(self, mock_run, error):
        """Test every spawn error collapses to None."""
        mock_run.side_effect = error
        assert run_command(["ndp", "-a"]) is None

    @patch("subprocess.run")
    def test_output_stripped(self, mock_run):
        """Test output is stripped of whitespace."""
        mock_run.return_value = Mock(returncode=0, stdout="\n  output  \n")
        assert run_command(["test"]) == "output"


class TestSanitizeForLog:
    """Tests for sanitize_for_log function."""

    def test_normal_string(self):
        """Test normal string is unchanged."""
        assert sanitize_for_log("192.168.1.1") == "192.168.1.1"

    def test_remove_newlines(self):
        """Test newlines are replaced with spaces."""
        assert sanitize_for_log("line1\nline2") == "line1 line2"
        assert sanitize_for_log("line1\r\nline2") == "line1  line2"

    def test_remove_ansi_escapes(self):
        """Test ANSI escape codes are removed."""
        assert sanitize_for_log("\x1b[91mred\x1b[0m") == "red"

    def test_remove_control_characters(self):
        """Test control characters are removed."""
        assert sanitize_for_log("test\x00null") == "testnull"

    def test_truncate_long_strings(self):
        """Test strings over 200 chars are truncated."""
        result = sanitize_for_log("a" * 250)
        assert len(result) == 200
        assert result.endswith("...")

    def test_non_string_input(self):
        """Test non-string input is converted to string."""
        assert sanitize_for_log(["arp", "-a"]) == "['arp', '-a']"
        assert sanitize_for_log(None) == "None"
