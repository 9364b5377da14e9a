"""
Puzzlekit Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "ERROR")


def _split_flags(raw: str | None) -> frozenset[str]:
    if not raw:
        return frozenset()
    return frozenset(flag.strip() for flag in raw.split(",") if flag.strip())


class Config:
    """Application configuration loaded from environment variables."""

    # Debug flags enabled for every run, comma separated (e.g. "path,stats")
    DEBUG_FLAGS: frozenset[str] = _split_flags(os.getenv("PUZZLEKIT_DEBUG"))

    # Disable ANSI colours in console output
    NO_COLOR: bool = bool(os.getenv("PUZZLEKIT_NO_COLOR"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Input files
    INPUT_ENCODING: str = os.getenv("INPUT_ENCODING", "utf-8")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.LOG_LEVEL not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {cls.LOG_LEVEL!r}"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        flags = ", ".join(sorted(cls.DEBUG_FLAGS)) or "(none)"
        lines = [
            "Puzzlekit Configuration:",
            f"  Log Level: {cls.LOG_LEVEL}",
            f"  Debug Flags: {flags}",
            f"  Colour: {'off' if cls.NO_COLOR else 'on'}",
            f"  Input Encoding: {cls.INPUT_ENCODING}",
        ]
        return "\n".join(lines)
