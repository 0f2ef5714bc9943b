"""
Log formatters module

Provides the prefix formatters that decorate each log line.
"""

from synclog.formatters.base_formatter import BaseFormatter
from synclog.formatters.prefix_formatter import PrefixFormatter

__all__ = [
    "BaseFormatter",
    "PrefixFormatter",
]
