"""Tests for logger construction"""

import io
import sys

import pytest

from synclog import LoggerBuilder, LoggerConfig, LoggerOptions, LogLevel, Logger
from synclog.console import AnsiColorizer
from synclog.formatters import PrefixFormatter


class TestLoggerBuilder:
    """Test builder pattern."""

    def test_defaults(self):
        logger = LoggerBuilder().build()
        assert logger.name == "logger"
        assert logger.level == LogLevel.INFO
        assert logger.options == LoggerOptions()
        assert logger.stream is sys.stderr

    def test_builder_pattern(self):
        stream = io.StringIO()
        logger = (LoggerBuilder()
            .with_name("builder_test")
            .with_level(LogLevel.DEBUG)
            .with_stream(stream)
            .with_color()
            .with_bright()
            .with_timestamp()
            .with_call_site(file_name=True, line_number=False)
            .with_double_spacing()
            .build())

        assert logger.name == "builder_test"
        assert logger.level == LogLevel.DEBUG
        assert logger.options == LoggerOptions(
            color=True,
            bright=True,
            timestamp=True,
            file_name=True,
            line_number=False,
            double_spacing=True,
        )
        assert logger.stream is stream

    def test_from_config(self):
        stream = io.StringIO()
        logger = LoggerBuilder(LoggerConfig.production_config()).with_stream(stream).build()

        logger.info("dropped\n")
        logger.warn("kept\n")

        assert logger.options.timestamp is True
        assert stream.getvalue().endswith(" [WARN]: kept\n")

    def test_level_from_string(self):
        logger = LoggerBuilder().with_stream(io.StringIO()).with_level("warn").build()
        assert logger.level == LogLevel.WARN

    def test_invalid_level_name(self):
        with pytest.raises(ValueError):
            LoggerBuilder().with_level("verbose")

    def test_config_not_mutated(self):
        config = LoggerConfig.default()
        LoggerBuilder(config).with_name("other").with_level(LogLevel.FATAL).build()
        assert config.name == "logger"
        assert config.min_level == LogLevel.INFO

    def test_console_color_only_on_tty(self, monkeypatch):
        monkeypatch.setattr(sys, "stderr", io.StringIO())
        logger = LoggerBuilder().with_console(colored=True).build()
        assert logger.stream is sys.stderr
        assert logger.options.color is False

    def test_console_force_color(self, monkeypatch):
        monkeypatch.setattr(sys, "stderr", io.StringIO())
        logger = LoggerBuilder().with_console(colored=True, force_color=True).build()
        assert logger.options.color is True

    def test_quiet(self):
        stream = io.StringIO()
        logger = LoggerBuilder().with_stream(stream).with_quiet().build()

        logger.fatal("silenced\n")

        assert logger.quiet is True
        assert stream.getvalue() == ""

    def test_collaborators(self):
        formatter = PrefixFormatter()
        colorizer = AnsiColorizer()
        logger = (LoggerBuilder()
            .with_stream(io.StringIO())
            .with_formatter(formatter)
            .with_colorizer(colorizer)
            .build())
        assert logger._formatter is formatter
        assert logger._colorizer is colorizer

    def test_file_output(self, tmp_path):
        path = tmp_path / "logs" / "app.log"
        logger = (LoggerBuilder()
            .with_file(str(path))
            .with_level(LogLevel.TRACE)
            .with_color()
            .build())

        logger.error("boo!\n")
        logger.close()

        assert logger.stream.closed is True
        assert path.read_text(encoding="utf-8") == "\x1b[0m\x1b[31m[ERROR]\x1b[0m: boo!\n"

    def test_file_append(self, tmp_path):
        path = tmp_path / "app.log"
        for message in ("one\n", "two\n"):
            with LoggerBuilder().with_file(str(path)).build() as logger:
                logger.info(message)

        assert path.read_text(encoding="utf-8") == "[INFO]: one\n[INFO]: two\n"

    def test_returns_logger(self):
        assert isinstance(LoggerBuilder().with_stream(io.StringIO()).build(), Logger)
