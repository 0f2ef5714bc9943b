"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

synclog - A minimal thread-safe leveled logger for console and file output
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from synclog.core.logger import Logger
from synclog.core.logger_builder import LoggerBuilder
from synclog.core.log_entry import LogEntry
from synclog.core.log_level import LogLevel
from synclog.core.logger_config import LoggerConfig, LoggerOptions
from synclog.core.call_site import CallSite, CallSiteResolver, FrameCallSiteResolver
from synclog.core.errors import LoggerError, SinkWriteError, MessageFormatError, CallSiteError

# Import submodules (not all classes by default)
from synclog import console
from synclog import filters
from synclog import formatters

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "LoggerOptions",
    "CallSite",
    "CallSiteResolver",
    "FrameCallSiteResolver",
    "LoggerError",
    "SinkWriteError",
    "MessageFormatError",
    "CallSiteError",
    "console",
    "filters",
    "formatters",
]
