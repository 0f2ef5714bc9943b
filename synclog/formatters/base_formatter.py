"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from typing import TextIO

from synclog.console.colorizer import Colorizer
from synclog.core.log_entry import LogEntry
from synclog.core.logger_config import LoggerOptions


class BaseFormatter(ABC):
    """
    Abstract base class for prefix formatters.

    Formatters write the metadata preceding a message body straight into
    the output stream. The logger calls them while holding its stream lock.
    """

    @abstractmethod
    def write_prefix(
        self,
        stream: TextIO,
        entry: LogEntry,
        options: LoggerOptions,
        colorizer: Colorizer
    ) -> None:
        """
        Write the prefix for a log entry.

        Args:
            stream: Output stream
            entry: The log entry being emitted
            options: Decoration flags of the logger
            colorizer: Capability used to switch display colors
        """
        pass

    def __call__(self, stream: TextIO, entry: LogEntry, options: LoggerOptions, colorizer: Colorizer) -> None:
        """Allow formatters to be callable."""
        self.write_prefix(stream, entry, options, colorizer)
