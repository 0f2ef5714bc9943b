"""Tests for level filtering"""

import threading

import pytest

from synclog import LogLevel
from synclog.filters import BaseFilter, LevelFilter, should_log


class TestShouldLog:
    """Test the level comparison."""

    @pytest.mark.parametrize("threshold", list(LogLevel))
    def test_total_order(self, threshold):
        for level in LogLevel:
            assert should_log(level, threshold) is (level >= threshold)

    def test_equal_level_passes(self):
        assert should_log(LogLevel.WARN, LogLevel.WARN) is True


class TestLevelFilter:
    """Test LevelFilter."""

    def test_default_threshold(self):
        assert LevelFilter().threshold == LogLevel.TRACE

    def test_filtering(self):
        level_filter = LevelFilter(LogLevel.WARN)
        assert level_filter.should_log(LogLevel.INFO) is False
        assert level_filter.should_log(LogLevel.WARN) is True
        assert level_filter(LogLevel.FATAL) is True

    def test_set_threshold(self):
        level_filter = LevelFilter(LogLevel.ERROR)
        level_filter.set_threshold(LogLevel.DEBUG)
        assert level_filter.threshold == LogLevel.DEBUG
        assert level_filter.should_log(LogLevel.DEBUG) is True

    def test_threshold_from_int(self):
        assert LevelFilter(2).threshold == LogLevel.INFO

    def test_invalid_threshold(self):
        with pytest.raises(ValueError):
            LevelFilter(42)

    def test_concurrent_updates(self):
        level_filter = LevelFilter(LogLevel.TRACE)
        levels = list(LogLevel)

        def worker(i):
            for _ in range(200):
                level_filter.set_threshold(levels[i % len(levels)])
                level_filter.should_log(LogLevel.INFO)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(6)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert level_filter.threshold in levels

    def test_repr(self):
        assert repr(LevelFilter(LogLevel.INFO)) == "LevelFilter(threshold=INFO)"

    def test_is_base_filter(self):
        assert isinstance(LevelFilter(), BaseFilter)
