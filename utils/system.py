"""System command execution utilities.

Runs neighbor-table tools with timeout protection.
Never uses shell=True to prevent command injection.
"""

import re
import subprocess
from typing import Any

import config
from logging_config import get_logger

logger = get_logger(__name__)


def run_command(cmd: list[str], timeout: int = config.TIMEOUT_SECONDS) -> str | None:
    """Execute system command safely.

    Every failure mode (not found, non-zero exit, timeout, OS error)
    collapses to None. Callers treat None as "no usable output".

    Args:
        cmd: Command as list (e.g., ["arp", "-a"])
        timeout: Seconds before the child process is killed

    Returns:
        Command output (stripped) or None on error.
    """
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
            shell=False,
        )
    except subprocess.TimeoutExpired:
        logger.debug("Command timed out after %ds: %s", timeout, sanitize_for_log(cmd))
        return None
    except FileNotFoundError:
        logger.debug("Command not found: %s", sanitize_for_log(cmd[0] if cmd else cmd))
        return None
    except (OSError, ValueError) as e:
        logger.debug("Command failed to start: %s", sanitize_for_log(e))
        return None

    if result.returncode != 0:
        logger.debug(
            "Command exited with %d: %s",
            result.returncode,
            sanitize_for_log(" ".join(cmd)),
        )
        return None

    return result.stdout.strip()


def sanitize_for_log(value: Any) -> str:
    """Sanitize values before logging to prevent log injection.

    Removes newlines, ANSI escape codes and control characters,
    truncates to 200 characters.

    Args:
        value: Value to sanitize (any type, will be converted to string)

    Returns:
        Sanitized string safe for logging.
    """
    text = str(value)
    text = text.replace("\n", " ").replace("\r", " ")
    text = re.sub(r"\x1b\[[0-9;]*m", "", text)
    text = "".join(c for c in text if c.isprintable() or c.isspace())

    if len(text) > 200:
        text = text[:197] + "..."

    return text
