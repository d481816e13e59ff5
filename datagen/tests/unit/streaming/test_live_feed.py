"""
Unit tests for the live feed.
"""

from datetime import UTC, datetime, timedelta

import pytest

from schema_datagen.config.models import GeneratorConfig
from schema_datagen.generators.date_formats import to_epoch_millis
from schema_datagen.generators.movement import haversine_km
from schema_datagen.streaming import LiveFeed

NOW = datetime(2024, 3, 15, 12, 0, 0, tzinfo=UTC)

MAPPING = {
    "properties": {
        "vehicle_id": {"type": "keyword"},
        "reported_at": {"type": "date", "format": "epoch_millis"},
        "seen": {"type": "date"},
        "position": {"type": "geo_point"},
    }
}

# Roughly 1.11 km due east along the equator
SHORT_PATH = {
    "position": {
        "kind": "geo_path",
        "sourceLat": 0.0,
        "sourceLon": 0.0,
        "destLat": 0.0,
        "destLon": 0.01,
    }
}


@pytest.fixture
def config():
    return GeneratorConfig(
        seed=4,
        realtime={"interval_seconds": 1.0, "docs_per_tick": 3, "default_speed_kmh": 3600.0},
    )


class TestLiveFeed:
    """Test tick generation and movement."""

    def test_invalid_rule_is_ignored(self, config):
        """Should drop an invalid rule and keep generating the field normally."""
        rules = {"position": {**SHORT_PATH["position"], "speed": -5}}
        feed = LiveFeed(MAPPING, rules=rules, config=config)

        assert feed.rules == {}
        assert feed.path_rules == {}
        docs = feed.tick(NOW)
        assert all(set(doc["position"]) == {"lat", "lon"} for doc in docs)

    def test_dates_carry_tick_instant(self, config):
        """Should stamp every top-level date field with the tick instant."""
        feed = LiveFeed(MAPPING, config=config)

        docs = feed.tick(NOW)

        assert len(docs) == 3
        for doc in docs:
            assert doc["reported_at"] == to_epoch_millis(NOW)
            assert doc["seen"] == "2024-03-15T12:00:00.000Z"

    def test_clock_used_without_instant(self, config):
        later = NOW + timedelta(minutes=5)
        feed = LiveFeed(MAPPING, config=config, clock=lambda: later)
        assert feed.tick()[0]["reported_at"] == to_epoch_millis(later)

    def test_path_moves_then_restarts(self, config):
        """Should move one step per tick and restart from the source on arrival."""
        feed = LiveFeed(MAPPING, rules=SHORT_PATH, config=config)

        first = feed.tick(NOW)
        moved = first[0]["position"]
        assert haversine_km(0.0, 0.0, moved["lat"], moved["lon"]) == pytest.approx(1.0, abs=0.01)
        assert all(doc["position"] == moved for doc in first)

        second = feed.tick(NOW + timedelta(seconds=1))
        assert second[0]["position"] == {"lat": 0.0, "lon": 0.0}

        assert feed.ticks == 2

    def test_rule_speed_overrides_default(self, config):
        rules = {"position": {**SHORT_PATH["position"], "speed": 360.0}}
        feed = LiveFeed(MAPPING, rules=rules, config=config)

        moved = feed.tick(NOW)[0]["position"]

        assert haversine_km(0.0, 0.0, moved["lat"], moved["lon"]) == pytest.approx(0.1, abs=0.01)

    def test_reset(self, config):
        feed = LiveFeed(MAPPING, rules=SHORT_PATH, config=config)
        feed.tick(NOW)
        feed.reset()
        assert feed.positions == {"position": {"lat": 0.0, "lon": 0.0}}

    def test_other_fields_generate_normally(self, config):
        docs = LiveFeed(MAPPING, config=config).tick(NOW)
        assert all(isinstance(doc["vehicle_id"], str) for doc in docs)
        assert all(-90 <= doc["position"]["lat"] <= 90 for doc in docs)
