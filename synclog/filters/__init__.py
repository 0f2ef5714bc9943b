"""
Log filters module

Decides which messages are emitted before any output work is done.
"""

from synclog.filters.base_filter import BaseFilter
from synclog.filters.level_filter import LevelFilter, should_log

__all__ = [
    "BaseFilter",
    "LevelFilter",
    "should_log",
]
