"""
Logger configuration management
"""

from dataclasses import dataclass, field, replace

from synclog.core.log_level import LogLevel


@dataclass(frozen=True)
class LoggerOptions:
    """
    Prefix decoration flags.

    Read-only once a logger is built; every flag defaults to off.
    """

    color: bool = False           # Wrap level tag and call site in color
    file_name: bool = False       # Include source file in prefix
    line_number: bool = False     # Include source line in prefix
    timestamp: bool = False       # Prepend unix epoch seconds
    double_spacing: bool = False  # Extra newline after each message
    bright: bool = False          # Bright variant of level colors

    @property
    def call_site(self) -> bool:
        """Whether the caller's location must be resolved."""
        return self.file_name or self.line_number

    def with_changes(self, **changes) -> "LoggerOptions":
        """Return a copy with the given flags replaced."""
        return replace(self, **changes)

    @classmethod
    def for_stream(cls, stream, **flags) -> "LoggerOptions":
        """
        Create options whose color flag follows the stream's terminal status.

        Args:
            stream: Output stream; color is enabled only if it is a TTY
            **flags: Other option flags

        Example:
            options = LoggerOptions.for_stream(sys.stderr, timestamp=True)
        """
        isatty = getattr(stream, "isatty", None)
        try:
            colored = bool(isatty and isatty())
        except ValueError:
            # Closed streams raise on isatty()
            colored = False
        return cls(color=colored, **flags)


@dataclass
class LoggerConfig:
    """Logger configuration."""

    name: str = "logger"
    min_level: LogLevel = LogLevel.INFO
    options: LoggerOptions = field(default_factory=LoggerOptions)
    quiet: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.min_level, str):
            self.min_level = LogLevel.from_string(self.min_level)
        if not isinstance(self.min_level, LogLevel):
            raise TypeError("min_level must be LogLevel enum")
        if not isinstance(self.options, LoggerOptions):
            raise TypeError("options must be LoggerOptions")

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            min_level=LogLevel.TRACE,
            options=LoggerOptions(color=True, file_name=True, line_number=True),
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            min_level=LogLevel.WARN,
            options=LoggerOptions(timestamp=True),
        )
