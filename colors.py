"""ANSI color codes for terminal output.

Colors optimized for dark terminal backgrounds.
"""

from enum import StrEnum


class Color(StrEnum):
    """Active colors used for progress output.

    GREEN: discovered values
    CYAN: progress headers
    YELLOW: placeholder / fallback values
    """

    GREEN = "\033[92m"
    CYAN = "\033[96m"
    YELLOW = "\033[93m"
    BOLD = "\033[1m"
    RESET = "\033[0m"
