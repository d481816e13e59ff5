"""
Pytest configuration and fixtures for schema data generator tests.

Provides seeded random sources, sample mappings and an isolated
configuration for the API tests.
"""

import sys
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

# Ensure src/ is on sys.path for local test runs without installation
_SRC = Path(__file__).resolve().parents[1] / "src"
if _SRC.exists() and str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from schema_datagen.config.models import SEED_ENV_VAR, GeneratorConfig  # noqa: E402
from schema_datagen.generators.random_source import RandomSource  # noqa: E402
from schema_datagen.shared.models import TimeRange  # noqa: E402

FIXED_NOW = datetime(2024, 3, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def clear_seed_env(monkeypatch):
    """Keep a developer's SCHEMA_DATAGEN_SEED from leaking into tests."""
    monkeypatch.delenv(SEED_ENV_VAR, raising=False)


@pytest.fixture
def rng():
    """Seeded random source."""
    return RandomSource(seed=42)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def test_config():
    """Small, seeded configuration."""
    return GeneratorConfig(seed=42, default_count=5, max_count=500, chunk_size=10)


@pytest.fixture
def day_range():
    """The 24 hours before FIXED_NOW."""
    return TimeRange(start=FIXED_NOW - timedelta(days=1), end=FIXED_NOW)


@pytest.fixture
def sample_mapping():
    """Mapping touching every supported field type."""
    return {
        "properties": {
            "id": {"type": "keyword"},
            "name": {"type": "text"},
            "age": {"type": "integer"},
            "price": {"type": "float"},
            "active": {"type": "boolean"},
            "timestamp": {"type": "date", "format": "epoch_millis"},
            "created": {"type": "date"},
            "location": {"type": "geo_point"},
            "client_ip": {"type": "ip"},
            "address": {
                "properties": {
                    "city": {"type": "keyword"},
                    "zip": {"type": "keyword"},
                    "geo": {
                        "type": "object",
                        "properties": {"lat": {"type": "double"}, "lon": {"type": "double"}},
                    },
                }
            },
        }
    }


@pytest.fixture
def multilang_mapping():
    return {
        "properties": {
            "name_en": {"type": "keyword"},
            "name_ar": {"type": "keyword"},
            "name_fr": {"type": "keyword"},
            "city_en": {"type": "keyword"},
            "city_de": {"type": "keyword"},
            "description_en": {"type": "text"},
            "description_ar": {"type": "text"},
        }
    }
