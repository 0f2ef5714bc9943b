"""
Main Logger class - Synchronous thread-safe logger
"""

from __future__ import annotations
from typing import Optional, TextIO, Any
import threading
import time

from synclog.console.colorizer import Colorizer, select_colorizer
from synclog.core.call_site import CallSite, CallSiteResolver, FrameCallSiteResolver
from synclog.core.errors import CallSiteError, LoggerError, MessageFormatError, SinkWriteError
from synclog.core.log_entry import LogEntry
from synclog.core.log_level import LogLevel
from synclog.core.logger_config import LoggerOptions
from synclog.filters.level_filter import LevelFilter
from synclog.formatters.base_formatter import BaseFormatter
from synclog.formatters.prefix_formatter import PrefixFormatter


class Logger:
    """
    Leveled logger writing to a single stream.

    One instance may be shared by any number of threads. Each emission
    (prefix, body and optional blank line) is written while holding the
    stream lock, so lines from concurrent callers never interleave.
    """

    def __init__(
        self,
        stream: TextIO,
        options: Optional[LoggerOptions] = None,
        min_level: LogLevel = LogLevel.TRACE,
        formatter: Optional[BaseFormatter] = None,
        colorizer: Optional[Colorizer] = None,
        resolver: Optional[CallSiteResolver] = None,
        name: str = "logger",
        owns_stream: bool = False,
    ):
        """
        Initialize logger.

        Args:
            stream: Writable text stream (file, console, pipe)
            options: Prefix decoration flags (default: all off)
            min_level: Messages below this level are dropped
            formatter: Prefix formatter (default: PrefixFormatter)
            colorizer: Color capability (default: picked for the stream)
            resolver: Call-site resolver (default: FrameCallSiteResolver)
            name: Logger name
            owns_stream: Close the stream in close()
        """
        if stream is None:
            raise ValueError("stream is required")
        self.name = name
        self._stream = stream
        self._options = options or LoggerOptions()
        self._level_filter = LevelFilter(min_level)
        self._formatter = formatter or PrefixFormatter()
        self._colorizer = colorizer or select_colorizer(stream)
        self._resolver = resolver or FrameCallSiteResolver()
        self._owns_stream = owns_stream
        self._lock = threading.Lock()
        self._quiet = threading.Event()
        self._metrics = {"logged": 0, "failed": 0}

    @property
    def options(self) -> LoggerOptions:
        """Decoration flags (read-only)."""
        return self._options

    @property
    def level(self) -> LogLevel:
        """Minimum level that is emitted."""
        return self._level_filter.threshold

    @property
    def quiet(self) -> bool:
        """Whether all output is suppressed."""
        return self._quiet.is_set()

    @property
    def stream(self) -> TextIO:
        """Output stream."""
        return self._stream

    def set_level(self, level: LogLevel) -> None:
        """Set the minimum logging level."""
        self._level_filter.set_threshold(level)

    def set_quiet(self, quiet: bool) -> None:
        """Suppress (True) or restore (False) all output."""
        if quiet:
            self._quiet.set()
        else:
            self._quiet.clear()

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check if a message at this level would be emitted."""
        return not self._quiet.is_set() and self._level_filter.should_log(level)

    def log(self, level: LogLevel, message: str, *args: Any, stacklevel: int = 1) -> bool:
        """
        General purpose log function.

        The message is written verbatim, or rendered with str.format when
        args are given. No newline is appended; include one in the message.

        Args:
            level: Severity of the message
            message: Message text or format template
            *args: Positional format arguments
            stacklevel: Frames between the caller of interest and this
                        method; 1 means the direct caller

        Returns:
            True if the message was written, False if it was filtered out

        Raises:
            MessageFormatError: If the template does not match args
            SinkWriteError: If the stream rejected the output. Part of the
                            line may already have been written.
        """
        level = LogLevel(level)
        if not self.is_enabled_for(level):
            return False

        if args:
            try:
                body = message.format(*args)
            except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
                with self._lock:
                    self._metrics["failed"] += 1
                raise MessageFormatError(f"cannot format {message!r}: {e}") from e
        else:
            body = str(message)

        call_site = None
        if self._options.call_site:
            # Frame 0 is _locate, frame 1 is this method
            call_site = self._locate(stacklevel + 1)

        entry = LogEntry(level=level, message=body, timestamp=time.time(), call_site=call_site)

        with self._lock:
            try:
                self._formatter.write_prefix(self._stream, entry, self._options, self._colorizer)
                self._stream.write(entry.message)
                if self._options.double_spacing:
                    self._stream.write("\n")
                self._stream.flush()
            except (OSError, TypeError, ValueError) as e:
                # TypeError: binary streams reject str
                self._metrics["failed"] += 1
                raise SinkWriteError(f"failed to write log line: {e}") from e
            self._metrics["logged"] += 1
        return True

    def _locate(self, skip_frames: int) -> Optional[CallSite]:
        """Resolve the caller's location; None if it is unavailable."""
        try:
            return self._resolver.resolve(skip_frames)
        except CallSiteError:
            return None

    def _log_quietly(self, level: LogLevel, message: str, args: tuple) -> None:
        try:
            self.log(level, message, *args, stacklevel=3)
        except LoggerError:
            # Best-effort delivery; format and write failures are counted in get_metrics()
            pass

    def trace(self, message: str, *args: Any) -> None:
        """Log trace message."""
        self._log_quietly(LogLevel.TRACE, message, args)

    def debug(self, message: str, *args: Any) -> None:
        """Log debug message."""
        self._log_quietly(LogLevel.DEBUG, message, args)

    def info(self, message: str, *args: Any) -> None:
        """Log info message."""
        self._log_quietly(LogLevel.INFO, message, args)

    def warn(self, message: str, *args: Any) -> None:
        """Log warning message."""
        self._log_quietly(LogLevel.WARN, message, args)

    def error(self, message: str, *args: Any) -> None:
        """Log error message."""
        self._log_quietly(LogLevel.ERROR, message, args)

    def fatal(self, message: str, *args: Any) -> None:
        """Log fatal message."""
        self._log_quietly(LogLevel.FATAL, message, args)

    def flush(self) -> None:
        """Flush the output stream."""
        with self._lock:
            self._stream.flush()

    def close(self) -> None:
        """Flush, and close the stream if this logger opened it."""
        with self._lock:
            if getattr(self._stream, "closed", False):
                return
            self._stream.flush()
            if self._owns_stream:
                self._stream.close()

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._lock:
            return self._metrics.copy()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(name={self.name!r}, level={self.level.name}, options={self._options})"
