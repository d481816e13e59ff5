"""
Unit tests for structured logging.
"""

import io
import json
import logging

from schema_datagen.shared.logging_config import configure_structured_logging
from schema_datagen.shared.logging_utils import StructuredLogger, get_structured_logger


def _records(caplog) -> list[dict]:
    return [json.loads(r.getMessage()) for r in caplog.records]


class TestStructuredLogger:
    """Test JSON record formatting."""

    def test_record_fields(self, caplog):
        """Should emit the event, correlation ID, bound context and extra fields."""
        log = get_structured_logger("test.structured", feed_id="FEED_1")

        with caplog.at_level(logging.INFO, logger="test.structured"):
            log.info("Live feed tick", tick=3)

        assert _records(caplog) == [
            {"event": "Live feed tick", "correlation_id": "none", "feed_id": "FEED_1", "tick": 3}
        ]

    def test_correlation_id(self, caplog):
        log = get_structured_logger("test.correlation")
        log.set_correlation_id("GEN_abc")
        try:
            with caplog.at_level(logging.INFO, logger="test.correlation"):
                log.warning("Generation request")
        finally:
            log.clear_correlation_id()

        assert _records(caplog)[0]["correlation_id"] == "GEN_abc"
        assert log.correlation_id is None

    def test_bind_does_not_mutate(self):
        base = StructuredLogger("test.bind")
        bound = base.bind(index="orders")
        assert base.context == {}
        assert bound.context == {"index": "orders"}

    def test_disabled_level_skipped(self, caplog):
        """Should not format records below the logger level."""
        log = get_structured_logger("test.level")
        with caplog.at_level(logging.WARNING, logger="test.level"):
            log.debug("hidden", payload=object())
        assert caplog.records == []

    def test_generated_ids(self):
        first = StructuredLogger.generate_correlation_id("FEED")
        assert first.startswith("FEED_")
        assert len(first) == len("FEED_") + 12
        assert first != StructuredLogger.generate_correlation_id("FEED")


class TestConfigureLogging:
    def test_level_and_stream(self):
        """Should route root logging to the given stream at the given level."""
        stream = io.StringIO()
        configure_structured_logging("warning", stream=stream)
        try:
            logging.getLogger("test.configure").info("dropped")
            logging.getLogger("test.configure").warning("kept")
            assert "kept" in stream.getvalue()
            assert "dropped" not in stream.getvalue()
            assert logging.getLogger("faker").level == logging.WARNING
        finally:
            configure_structured_logging("INFO")
