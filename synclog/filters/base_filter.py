"""
Base filter interface
"""

from abc import ABC, abstractmethod
from synclog.core.log_level import LogLevel


class BaseFilter(ABC):
    """
    Abstract base class for log filters.

    Filters decide whether a message at a given level is emitted at all.
    They run before any output side effect.
    """

    @abstractmethod
    def should_log(self, level: LogLevel) -> bool:
        """
        Determine if a message at this level should be logged.

        Args:
            level: Severity of the message

        Returns:
            True if the message should be logged, False otherwise
        """
        pass

    def __call__(self, level: LogLevel) -> bool:
        """Allow filters to be callable."""
        return self.should_log(level)
