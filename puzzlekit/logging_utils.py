"""Logging utilities for puzzle solvers.

Provides color-coded console output. Errors go to stderr so that answers
printed on stdout stay machine-readable.
"""

import sys
from enum import Enum

from .config import Config


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Debug output
    RED = "\033[91m"       # Errors
    GREEN = "\033[92m"     # Answers/completion
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text unless PUZZLEKIT_NO_COLOR is set, otherwise plain text
    """
    if Config.NO_COLOR:
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def debug_enabled() -> bool:
    return Config.LOG_LEVEL == "DEBUG"


def log_debug(message: str, *, force: bool = False) -> None:
    """Log debug output (blue). Printed when LOG_LEVEL=DEBUG or ``force`` is set."""
    if force or debug_enabled():
        print(colored(f"{MARKER_DEBUG} {message}", Color.BLUE))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    if Config.LOG_LEVEL != "ERROR":
        print(colored(f"{MARKER_INFO} {message}", Color.CYAN))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(f"{MARKER_SUCCESS} {message}", Color.GREEN))


def log_error(message: str) -> None:
    """Log an error (red) to stderr."""
    print(colored(f"{MARKER_ERROR} {message}", Color.RED), file=sys.stderr)


# Markers for message types (color-blind accessible)
MARKER_DEBUG = "[•]"
MARKER_ERROR = "[!]"
MARKER_SUCCESS = "[✓]"
MARKER_INFO = "[i]"
