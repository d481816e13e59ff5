"""
Unit tests for document and batch generation.
"""

from datetime import UTC, datetime, timedelta

import pytest
from prometheus_client import REGISTRY

from schema_datagen.config.models import GeneratorConfig
from schema_datagen.generators.date_formats import format_date, to_epoch_millis
from schema_datagen.generators.document_generator import DocumentGenerator
from schema_datagen.generators.random_source import RandomSource
from schema_datagen.shared.models import DateFormat

_hyp = pytest.importorskip("hypothesis")
given = _hyp.given
settings = _hyp.settings
st = _hyp.strategies

NOW = datetime(2024, 3, 15, 12, 0, 0, tzinfo=UTC)


def _keys(document: dict, prefix: str = "") -> set[str]:
    out = set()
    for key, value in document.items():
        path = f"{prefix}.{key}" if prefix else key
        out.add(path)
        if isinstance(value, dict) and not {"lat", "lon"} == set(value):
            out |= _keys(value, path)
    return out


_field_names = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=8)
_leaf_specs = st.sampled_from(
    ["keyword", "text", "long", "integer", "double", "boolean", "date", "ip", "geo_point"]
).map(lambda t: {"type": t})
_field_specs = st.recursive(
    _leaf_specs,
    lambda children: st.builds(
        lambda props, explicit: {"type": "object", "properties": props} if explicit else {"properties": props},
        st.dictionaries(_field_names, children, max_size=4),
        st.booleans(),
    ),
    max_leaves=12,
)
_mappings = st.dictionaries(_field_names, _field_specs, max_size=5).map(
    lambda props: {"properties": props}
)


def _assert_shape(document: dict, properties: dict) -> None:
    assert set(document) == set(properties)
    for key, spec in properties.items():
        if "properties" in spec:
            assert isinstance(document[key], dict)
            _assert_shape(document[key], spec["properties"])


@pytest.fixture
def generator():
    return DocumentGenerator(rng=RandomSource(seed=11), clock=lambda: NOW)


class TestGenerateOne:
    """Test single document generation."""

    def test_shape_matches_mapping(self, generator, sample_mapping):
        """Should produce exactly the mapping's fields at every level."""
        doc = generator.generate_one(sample_mapping)

        assert set(doc) == set(sample_mapping["properties"])
        assert set(doc["address"]) == {"city", "zip", "geo"}
        assert set(doc["address"]["geo"]) == {"lat", "lon"}

    def test_value_types(self, generator, sample_mapping):
        """Should generate values matching each field type."""
        doc = generator.generate_one(sample_mapping)

        assert isinstance(doc["id"], str)
        assert isinstance(doc["age"], int)
        assert isinstance(doc["price"], float)
        assert isinstance(doc["active"], bool)
        assert isinstance(doc["timestamp"], int)
        assert doc["created"].endswith("Z")
        assert set(doc["location"]) == {"lat", "lon"}
        assert isinstance(doc["address"]["geo"]["lat"], float)

    def test_empty_mapping(self, generator):
        """Should generate an empty document for an empty or missing mapping."""
        assert generator.generate_one({"properties": {}}) == {}
        assert generator.generate_one({}) == {}

    def test_raw_rules_are_parsed(self, generator, sample_mapping):
        """Should accept JSON rule objects keyed by path."""
        doc = generator.generate_one(
            sample_mapping,
            rules={
                "age": {"kind": "num_range", "min": 30, "max": 30},
                "address.city": {"kind": "manual", "value": "Springfield"},
            },
        )
        assert doc["age"] == 30
        assert doc["address"]["city"] == "Springfield"

    def test_invalid_rule_is_ignored(self, generator, sample_mapping):
        """Should drop an invalid rule, count it, and keep applying the valid ones."""

        def ignored():
            return REGISTRY.get_sample_value(
                "datagen_fields_degraded_total", {"reason": "invalid_rule"}
            ) or 0

        before = ignored()
        docs = generator.generate_many(
            sample_mapping,
            20,
            rules={
                "age": {"kind": "num_range", "min": 1},
                "address.city": {"kind": "manual", "value": "Springfield"},
            },
        )

        assert ignored() == before + 1
        assert all(isinstance(d["age"], int) for d in docs)
        assert all(d["address"]["city"] == "Springfield" for d in docs)

    def test_oversized_geohash_precision(self, generator):
        """Should honor geohash precisions beyond the usual twelve characters."""
        doc = generator.generate_one(
            {"properties": {"cell": {"type": "geo_point"}}},
            rules={"cell": {"kind": "geohash", "precision": 13}},
        )
        assert len(doc["cell"]) == 13

    def test_integer_id_with_geo_point(self, generator):
        """Should keep a plain integer id in the generic range next to a geo point."""
        mapping = {"properties": {"id": {"type": "integer"}, "location": {"type": "geo_point"}}}
        for doc in generator.generate_many(mapping, 200):
            assert 0 <= doc["id"] <= 1000


class TestGenerateMany:
    """Test batch generation."""

    def test_count(self, generator, sample_mapping):
        assert len(generator.generate_many(sample_mapping, 25)) == 25
        assert generator.generate_many(sample_mapping, 0) == []

    def test_negative_count(self, generator, sample_mapping):
        """Should reject a negative count."""
        with pytest.raises(ValueError):
            generator.generate_many(sample_mapping, -1)
        with pytest.raises(ValueError):
            list(generator.iter_documents(sample_mapping, -1))

    def test_seed_reproducibility(self, sample_mapping, day_range):
        """Should generate identical batches from identical seeds."""
        first = DocumentGenerator(GeneratorConfig(seed=99), clock=lambda: NOW)
        second = DocumentGenerator(GeneratorConfig(seed=99), clock=lambda: NOW)

        assert first.generate_many(sample_mapping, 10, day_range) == second.generate_many(
            sample_mapping, 10, day_range
        )

    def test_different_seeds_differ(self, sample_mapping, day_range):
        first = DocumentGenerator(GeneratorConfig(seed=1)).generate_many(sample_mapping, 5, day_range)
        second = DocumentGenerator(GeneratorConfig(seed=2)).generate_many(sample_mapping, 5, day_range)
        assert first != second

    def test_dates_stay_in_range(self, generator, sample_mapping, day_range):
        """Should keep every date inside the supplied window."""
        lo = to_epoch_millis(day_range.start)
        hi = to_epoch_millis(day_range.end)
        for doc in generator.generate_many(sample_mapping, 100, day_range):
            assert lo <= doc["timestamp"] <= hi

    def test_iter_documents(self, generator, sample_mapping):
        """Should lazily yield the requested number of documents."""
        docs = list(generator.iter_documents(sample_mapping, 3))
        assert len(docs) == 3
        assert all(_keys(d) >= {"id", "address.city"} for d in docs)


class TestGenerateWithTimestamps:
    """Test replaying sampled timestamps into a date field."""

    def test_pins_field_in_mapping_format(self, generator, sample_mapping):
        """Should render each timestamp in the field's declared format."""
        stamps = [NOW - timedelta(minutes=m) for m in (30, 20, 10)]

        docs = generator.generate_with_timestamps(sample_mapping, stamps)

        assert [d["timestamp"] for d in docs] == [to_epoch_millis(s) for s in stamps]

    def test_date_rule_format_wins(self, generator, sample_mapping):
        """Should use the format of a date rule on the pinned field."""
        docs = generator.generate_with_timestamps(
            sample_mapping,
            [NOW],
            rules={"created": {"kind": "date", "format": "yyyy-MM-dd"}},
            date_field="created",
        )
        assert docs[0]["created"] == "2024-03-15"

    def test_nested_field(self, generator):
        """Should pin a date nested inside an object."""
        mapping = {
            "properties": {
                "event": {"properties": {"at": {"type": "date", "format": "epoch_second"}}}
            }
        }
        docs = generator.generate_with_timestamps(mapping, [NOW], date_field="event.at")
        assert docs[0]["event"]["at"] == format_date(NOW, DateFormat.EPOCH_SECOND)

    def test_no_timestamps(self, generator, sample_mapping):
        assert generator.generate_with_timestamps(sample_mapping, []) == []


class TestShapeProperty:
    """Property-based checks of document shape against arbitrary nested mappings."""

    @settings(max_examples=60, deadline=None)
    @given(mapping=_mappings, count=st.integers(min_value=0, max_value=5), seed=st.integers(0, 2**32))
    def test_batch_preserves_nested_shape(self, mapping, count, seed):
        """Should return exactly count documents whose keys match the mapping at every level."""
        generator = DocumentGenerator(rng=RandomSource(seed=seed), clock=lambda: NOW)

        documents = generator.generate_many(mapping, count)

        assert len(documents) == count
        for document in documents:
            _assert_shape(document, mapping["properties"])
