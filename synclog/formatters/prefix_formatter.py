"""
Default prefix formatter

Writes "[<timestamp> ][LEVEL]: [file:line]: " ahead of each message
"""

from typing import TextIO

from synclog.console.colorizer import Colorizer
from synclog.console.colors import TtyColor
from synclog.core.log_entry import LogEntry
from synclog.core.logger_config import LoggerOptions
from synclog.formatters.base_formatter import BaseFormatter


class PrefixFormatter(BaseFormatter):
    """
    Format the line prefix from the logger's options.

    Elements, each only when its flag is set:

    - timestamp: unix epoch seconds followed by a space
    - level tag: "[LEVEL]: ", color-wrapped when color is on
    - call site: "[file:line]: ", color-wrapped when color is on

    Each element has its own hook so subclasses can replace one of them.

    Example:
        class DateFormatter(PrefixFormatter):
            def write_timestamp(self, stream, entry, options, colorizer):
                stream.write(time.strftime("%H:%M:%S "))
    """

    def write_prefix(
        self,
        stream: TextIO,
        entry: LogEntry,
        options: LoggerOptions,
        colorizer: Colorizer
    ) -> None:
        if options.timestamp:
            self.write_timestamp(stream, entry, options, colorizer)
        self.write_level(stream, entry, options, colorizer)
        if options.call_site and entry.call_site is not None:
            self.write_call_site(stream, entry, options, colorizer)

    def write_timestamp(self, stream: TextIO, entry: LogEntry, options: LoggerOptions, colorizer: Colorizer) -> None:
        """Write raw epoch seconds and a separating space."""
        stream.write(f"{entry.epoch_seconds} ")

    def write_level(self, stream: TextIO, entry: LogEntry, options: LoggerOptions, colorizer: Colorizer) -> None:
        """Write the level tag."""
        tag = f"[{entry.level.display_name}]"
        if options.color:
            colorizer.apply(stream, TtyColor.RESET)
            if options.bright:
                colorizer.apply(stream, TtyColor.BRIGHT)
            colorizer.apply(stream, entry.level.color)
            stream.write(tag)
            colorizer.apply(stream, TtyColor.RESET)
            stream.write(": ")
        else:
            stream.write(f"{tag}: ")

    def write_call_site(self, stream: TextIO, entry: LogEntry, options: LoggerOptions, colorizer: Colorizer) -> None:
        """Write the caller's location."""
        site = entry.call_site
        if options.file_name and options.line_number:
            location = f"[{site.file}:{site.line}]"
        elif options.file_name:
            location = f"[{site.file}]"
        else:
            location = f"[{site.line}]"

        if options.color:
            colorizer.apply(stream, TtyColor.RESET)
            colorizer.apply(stream, TtyColor.WHITE)
            stream.write(location)
            colorizer.apply(stream, TtyColor.RESET)
            stream.write(": ")
        else:
            stream.write(f"{location}: ")

    def __repr__(self) -> str:
        """String representation."""
        return "PrefixFormatter()"
