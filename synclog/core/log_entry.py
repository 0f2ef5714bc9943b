"""
Log entry data structure
"""

from dataclasses import dataclass, field
from typing import Optional
import time

from synclog.core.call_site import CallSite
from synclog.core.log_level import LogLevel


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains everything the prefix formatter needs for a single emission.
    The message is already rendered from its arguments.
    """

    level: LogLevel
    message: str
    timestamp: float = field(default_factory=time.time)
    call_site: Optional[CallSite] = None

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            self.message = str(self.message)

    @property
    def epoch_seconds(self) -> int:
        """Timestamp truncated to whole unix seconds."""
        return int(self.timestamp)

    def __str__(self) -> str:
        """String representation."""
        return f"[{self.level.display_name}]: {self.message}"
