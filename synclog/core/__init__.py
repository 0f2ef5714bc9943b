"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Thread-safe leveled logger
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LoggerConfig, LoggerOptions: Configuration management
- CallSiteResolver: Caller location lookup
"""

from synclog.core.logger import Logger
from synclog.core.logger_builder import LoggerBuilder
from synclog.core.log_entry import LogEntry
from synclog.core.log_level import LogLevel
from synclog.core.logger_config import LoggerConfig, LoggerOptions
from synclog.core.call_site import CallSite, CallSiteResolver, FrameCallSiteResolver

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
]
