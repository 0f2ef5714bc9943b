"""Logger builder pattern"""

import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, TextIO

from synclog.console.colorizer import Colorizer
from synclog.core.call_site import CallSiteResolver
from synclog.core.logger import Logger
from synclog.core.logger_config import LoggerConfig
from synclog.core.log_level import LogLevel
from synclog.formatters.base_formatter import BaseFormatter


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = replace(config) if config else LoggerConfig()
        self._options = self._config.options
        self._stream: Optional[TextIO] = None
        self._file_path: Optional[Path] = None
        self._file_mode = "a"
        self._encoding = "utf-8"
        self._tty_color_only = False
        self._formatter: Optional[BaseFormatter] = None
        self._colorizer: Optional[Colorizer] = None
        self._resolver: Optional[CallSiteResolver] = None

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._config.name = name
        return self

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set minimum log level (LogLevel or case-insensitive name)."""
        if isinstance(level, str):
            level = LogLevel.from_string(level)
        self._config.min_level = level
        return self

    def with_stream(self, stream: TextIO) -> "LoggerBuilder":
        """Write to an existing stream. The logger does not close it."""
        self._stream = stream
        self._file_path = None
        return self

    def with_console(self, colored: bool = True, force_color: bool = False) -> "LoggerBuilder":
        """
        Write to stderr.

        Args:
            colored: Use colors
            force_color: Use colors even when stderr is not a terminal
        """
        self._stream = sys.stderr
        self._file_path = None
        self._options = self._options.with_changes(color=colored)
        self._tty_color_only = colored and not force_color
        return self

    def with_file(self, filepath: str, mode: str = "a", encoding: str = "utf-8") -> "LoggerBuilder":
        """
        Write to a file. The logger opens it and closes it in close().

        Args:
            filepath: Path to log file; parent directories are created
            mode: File open mode (default: 'a' for append)
            encoding: File encoding (default: 'utf-8')
        """
        self._file_path = Path(filepath)
        self._file_mode = mode
        self._encoding = encoding
        self._stream = None
        return self

    def with_color(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable colored level tags."""
        self._options = self._options.with_changes(color=enabled)
        self._tty_color_only = False
        return self

    def with_bright(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable bright colors."""
        self._options = self._options.with_changes(bright=enabled)
        return self

    def with_timestamp(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable the epoch timestamp."""
        self._options = self._options.with_changes(timestamp=enabled)
        return self

    def with_call_site(self, file_name: bool = True, line_number: bool = True) -> "LoggerBuilder":
        """Include the caller's file and/or line in the prefix."""
        self._options = self._options.with_changes(file_name=file_name, line_number=line_number)
        return self

    def with_double_spacing(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable the blank line after each message."""
        self._options = self._options.with_changes(double_spacing=enabled)
        return self

    def with_quiet(self, enabled: bool = True) -> "LoggerBuilder":
        """Start with all output suppressed."""
        self._config.quiet = enabled
        return self

    def with_formatter(self, formatter: BaseFormatter) -> "LoggerBuilder":
        """
        Replace the prefix formatter.

        Args:
            formatter: Formatter instance (BaseFormatter subclass)

        Returns:
            Self for method chaining

        Example:
            class TimeFormatter(PrefixFormatter):
                def write_timestamp(self, stream, entry, options, colorizer):
                    stream.write(time.strftime("%H:%M:%S "))

            logger = (LoggerBuilder()
                .with_timestamp()
                .with_formatter(TimeFormatter())
                .build())
        """
        self._formatter = formatter
        return self

    def with_colorizer(self, colorizer: Colorizer) -> "LoggerBuilder":
        """Replace the color capability picked for the stream."""
        self._colorizer = colorizer
        return self

    def with_resolver(self, resolver: CallSiteResolver) -> "LoggerBuilder":
        """Replace the call-site resolver."""
        self._resolver = resolver
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        owns_stream = False
        if self._file_path is not None:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            stream = open(self._file_path, self._file_mode, encoding=self._encoding)
            owns_stream = True
        elif self._stream is not None:
            stream = self._stream
        else:
            stream = sys.stderr

        options = self._options
        if self._tty_color_only:
            options = options.with_changes(color=stream.isatty())

        logger = Logger(
            stream,
            options=options,
            min_level=self._config.min_level,
            formatter=self._formatter,
            colorizer=self._colorizer,
            resolver=self._resolver,
            name=self._config.name,
            owns_stream=owns_stream,
        )
        if self._config.quiet:
            logger.set_quiet(True)
        return logger
