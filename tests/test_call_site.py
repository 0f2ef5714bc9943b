"""Tests for call-site resolution"""

import inspect
import io
from unittest.mock import Mock

import pytest

from synclog import CallSite, CallSiteError, FrameCallSiteResolver, Logger, LoggerOptions, LogLevel


def emit_through_helper(logger):
    logger.log(LogLevel.INFO, "helper\n", stacklevel=2)


class TestFrameCallSiteResolver:
    """Test stack walking."""

    def test_direct_caller(self):
        line = inspect.currentframe().f_lineno + 1
        site = FrameCallSiteResolver().resolve(0)
        assert site == CallSite(file="test_call_site.py", line=line, function="test_direct_caller")

    def test_skip_frames(self):
        def inner():
            return FrameCallSiteResolver().resolve(1)

        line = inspect.currentframe().f_lineno + 1
        site = inner()
        assert site.line == line
        assert site.function == "test_skip_frames"

    def test_full_path(self):
        site = FrameCallSiteResolver(full_path=True).resolve(0)
        assert site.file == inspect.currentframe().f_code.co_filename

    def test_too_deep(self):
        with pytest.raises(CallSiteError):
            FrameCallSiteResolver().resolve(100000)

    def test_negative(self):
        with pytest.raises(CallSiteError):
            FrameCallSiteResolver().resolve(-1)


class TestLoggerCallSite:
    """Test call-site segment in logger output."""

    def test_wrapper_reports_caller(self):
        stream = io.StringIO()
        logger = Logger(stream, LoggerOptions(file_name=True, line_number=True))

        line = inspect.currentframe().f_lineno + 1
        logger.info("here\n")

        assert stream.getvalue() == f"[INFO]: [test_call_site.py:{line}]: here\n"

    def test_log_reports_caller(self):
        stream = io.StringIO()
        logger = Logger(stream, LoggerOptions(line_number=True))

        line = inspect.currentframe().f_lineno + 1
        logger.log(LogLevel.WARN, "here\n")

        assert stream.getvalue() == f"[WARN]: [{line}]: here\n"

    def test_stacklevel(self):
        stream = io.StringIO()
        logger = Logger(stream, LoggerOptions(line_number=True))

        line = inspect.currentframe().f_lineno + 1
        emit_through_helper(logger)

        assert stream.getvalue() == f"[INFO]: [{line}]: helper\n"

    def test_resolution_failure_omits_segment(self):
        resolver = Mock()
        resolver.resolve.side_effect = CallSiteError("no frames")
        stream = io.StringIO()
        logger = Logger(stream, LoggerOptions(file_name=True, line_number=True), resolver=resolver)

        logger.error("still logged\n")

        assert stream.getvalue() == "[ERROR]: still logged\n"

    def test_not_resolved_when_filtered(self):
        resolver = Mock()
        logger = Logger(
            io.StringIO(),
            LoggerOptions(file_name=True),
            min_level=LogLevel.ERROR,
            resolver=resolver,
        )

        logger.debug("dropped\n")

        resolver.resolve.assert_not_called()

    def test_not_resolved_when_disabled(self):
        resolver = Mock()
        logger = Logger(io.StringIO(), LoggerOptions(color=True), resolver=resolver)

        logger.info("plain\n")

        resolver.resolve.assert_not_called()

    def test_custom_resolver(self):
        resolver = Mock()
        resolver.resolve.return_value = CallSite(file="worker.py", line=7)
        stream = io.StringIO()
        logger = Logger(stream, LoggerOptions(file_name=True, line_number=True), resolver=resolver)

        logger.info("x\n")

        assert stream.getvalue() == "[INFO]: [worker.py:7]: x\n"
