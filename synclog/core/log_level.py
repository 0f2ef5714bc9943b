"""
Log level enumeration
"""

from enum import IntEnum
from typing import Dict

from synclog.console.colors import TtyColor


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Totally ordered: TRACE < DEBUG < INFO < WARN < ERROR < FATAL.
    """

    TRACE = 0       # Most verbose, detailed tracing
    DEBUG = 1       # Debug information
    INFO = 2        # Informational messages
    WARN = 3        # Warning messages
    ERROR = 4       # Error messages
    FATAL = 5       # Unrecoverable errors

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level_str = level_str.upper()
        if level_str in LEVEL_FROM_NAME:
            return LEVEL_FROM_NAME[level_str]
        raise ValueError(f"Invalid log level: {level_str}")

    @property
    def display_name(self) -> str:
        """Name printed inside the level tag."""
        return LEVEL_NAMES[self]

    @property
    def color(self) -> TtyColor:
        """Display color for this level."""
        return LEVEL_COLORS[self]


# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.TRACE: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.FATAL: "FATAL",
}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}

LEVEL_COLORS: Dict[LogLevel, TtyColor] = {
    LogLevel.TRACE: TtyColor.BLUE,
    LogLevel.DEBUG: TtyColor.CYAN,
    LogLevel.INFO: TtyColor.GREEN,
    LogLevel.WARN: TtyColor.YELLOW,
    LogLevel.ERROR: TtyColor.RED,
    LogLevel.FATAL: TtyColor.MAGENTA,
}
