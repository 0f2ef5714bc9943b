"""
Level-based filter

Drops messages below a minimum severity
"""

import threading

from synclog.core.log_level import LogLevel
from synclog.filters.base_filter import BaseFilter


def should_log(level: LogLevel, threshold: LogLevel) -> bool:
    """Return True iff level is at or above threshold."""
    return level >= threshold


class LevelFilter(BaseFilter):
    """
    Filter messages based on a minimum log level.

    The threshold may be changed at runtime. It is guarded by the filter's
    own lock, never by the logger's stream lock, so filtering never waits
    on output.
    """

    def __init__(self, threshold: LogLevel = LogLevel.TRACE):
        """
        Initialize level filter.

        Args:
            threshold: Minimum log level (inclusive)

        Example:
            # Only log WARN and above
            filter = LevelFilter(LogLevel.WARN)
        """
        self._lock = threading.Lock()
        self._threshold = LogLevel(threshold)

    @property
    def threshold(self) -> LogLevel:
        """Current minimum level."""
        with self._lock:
            return self._threshold

    def set_threshold(self, threshold: LogLevel) -> None:
        """Change the minimum level."""
        threshold = LogLevel(threshold)
        with self._lock:
            self._threshold = threshold

    def should_log(self, level: LogLevel) -> bool:
        """
        Check if level is at or above the threshold.

        Args:
            level: Severity of the message

        Returns:
            True if the message passes, False otherwise
        """
        return should_log(level, self.threshold)

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilter(threshold={self.threshold.name})"
