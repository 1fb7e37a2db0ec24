"""Tests for the trace module."""

import logging

from metaphone3 import Encoder
from metaphone3.trace import PRIMARY, SECONDARY, CollectingTracer, TraceEvent, logging_tracer


class TestCollectingTracer:
    """Tests for CollectingTracer."""

    def test_events(self):
        """Test one event per appended symbol."""
        tracer = CollectingTracer()
        Encoder(trace=tracer).encode("tom")
        assert tracer.events == [
            TraceEvent(PRIMARY, "T", 0, "T"),
            TraceEvent(SECONDARY, "T", 0, "T"),
            TraceEvent(PRIMARY, "M", 2, "M"),
            TraceEvent(SECONDARY, "M", 2, "M"),
        ]

    def test_symbols_by_channel(self):
        """Test symbols for each channel."""
        tracer = CollectingTracer()
        Encoder(trace=tracer).encode("Smith")
        assert "".join(tracer.symbols(PRIMARY)) == "SM0"
        assert "".join(tracer.symbols(SECONDARY)) == "XMT"

    def test_clear(self):
        """Test clear drops recorded events."""
        tracer = CollectingTracer()
        Encoder(trace=tracer).encode("tom")
        tracer.clear()
        assert tracer.events == []

    def test_format(self):
        """Test human readable lines."""
        tracer = CollectingTracer()
        Encoder(trace=tracer).encode("tom")
        lines = tracer.format()
        assert len(lines) == 4
        assert "+T" in lines[0]
        assert "primary" in lines[0]

    def test_no_tracer(self):
        """Test encoding without a tracer still works."""
        assert Encoder().encode("tom") == ("TM", "")


class TestTraceEvent:
    """Tests for TraceEvent dataclass."""

    def test_to_dict(self):
        """Test dictionary conversion."""
        event = TraceEvent(PRIMARY, "X", 3, "C")
        assert event.to_dict() == {
            "channel": "primary",
            "symbol": "X",
            "position": 3,
            "letter": "C",
        }


class TestLoggingTracer:
    """Tests for logging_tracer."""

    def test_logs_appends(self, caplog):
        """Test each append is logged at DEBUG."""
        caplog.set_level(logging.DEBUG, logger="metaphone3.trace")
        Encoder(trace=logging_tracer()).encode("tom")
        assert "append primary T at 0 (T)" in caplog.text
        assert "append secondary M at 2 (M)" in caplog.text

    def test_custom_logger(self, caplog):
        """Test a given logger and level are used."""
        logger = logging.getLogger("test.metaphone3")
        caplog.set_level(logging.INFO, logger="test.metaphone3")
        Encoder(trace=logging_tracer(logger, logging.INFO)).encode("tom")
        assert all(r.name == "test.metaphone3" for r in caplog.records)
        assert len(caplog.records) == 4
