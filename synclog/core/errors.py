"""Logger exceptions"""


class LoggerError(Exception):
    """Base class for errors raised while emitting a log line."""


class SinkWriteError(LoggerError):
    """The output stream rejected a write or flush."""


class MessageFormatError(LoggerError, ValueError):
    """The message template could not be rendered with its arguments."""


class CallSiteError(LoggerError):
    """The caller's source location could not be resolved."""
