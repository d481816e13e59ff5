"""
Unit tests for single field value generation.
"""

from datetime import UTC, datetime, timedelta

import pytest

from schema_datagen.generators import geohash
from schema_datagen.generators.date_formats import parse_date
from schema_datagen.generators.field_generator import (
    FieldValueGenerator,
    prepare_rules,
    resolve_rule,
)
from schema_datagen.generators.movement import haversine_km
from schema_datagen.generators.random_source import RandomSource, is_valid_ip
from schema_datagen.shared.models import (
    DateFormat,
    DateRule,
    GeoCityRule,
    GeohashRule,
    GeoNumberRule,
    GeoPathRule,
    GeoPointRule,
    ImagePathRule,
    IpRule,
    ManualRule,
    NumMaxRule,
    NumRangeRule,
    PhoneRule,
    PrefixRule,
    StringListRule,
    TimeRange,
)
from schema_datagen.sourcedata.gazetteer import CITIES

NOW = datetime(2024, 3, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def fields():
    return FieldValueGenerator(RandomSource(seed=7), clock=lambda: NOW)


class TestResolveRule:
    """Test rule lookup by path and bare name."""

    def test_full_path_wins(self):
        """Should prefer the dotted path over the bare field name."""
        by_path = ManualRule(value=1)
        by_name = ManualRule(value=2)
        rules = {"address.zip": by_path, "zip": by_name}
        assert resolve_rule(rules, "address.zip", "zip") is by_path
        assert resolve_rule(rules, "billing.zip", "zip") is by_name

    def test_no_rules(self):
        assert resolve_rule(None, "a", "a") is None
        assert resolve_rule({}, "a", "a") is None


class TestPrepareRules:
    """Test lenient rule preparation."""

    def test_drops_only_invalid_rules(self):
        """Should keep valid rules and drop the ones that fail validation."""
        kept = NumMaxRule(max=3)
        rules = prepare_rules(
            {
                "n": kept,
                "age": {"kind": "num_range", "min": 1},
                "city": {"kind": "teleport"},
                "zip": {"kind": "prefix", "prefix": "Z-"},
            }
        )
        assert set(rules) == {"n", "zip"}
        assert rules["n"] is kept
        assert isinstance(rules["zip"], PrefixRule)

    def test_empty(self):
        assert prepare_rules(None) == {}


class TestRulePrecedence:
    """Test how rules interact with field types."""

    @pytest.mark.parametrize(
        "spec", [{"type": "integer"}, {"type": "geo_point"}, {"type": "date"}, {"type": "mystery"}]
    )
    def test_manual_always_wins(self, fields, spec):
        """Should return a manual value verbatim for any field type."""
        assert fields.generate(spec, "x", ManualRule(value="fixed")) == "fixed"

    def test_mismatched_rule_is_ignored(self, fields):
        """Should ignore a numeric rule on a string field."""
        value = fields.generate({"type": "keyword"}, "code", NumRangeRule(min=1, max=2))
        assert isinstance(value, str)

    def test_unknown_type_yields_random_string(self, fields):
        """Should degrade unknown types to an 8 character string."""
        value = fields.generate({"type": "histogram"}, "h")
        assert isinstance(value, str)
        assert len(value) == 8

    def test_non_dict_properties(self, fields):
        """Should generate an empty object for malformed properties."""
        assert fields.generate_object("not-a-dict") == {}
        assert fields.generate({"type": "object", "properties": 3}, "obj") == {}


class TestNumbers:
    """Test numeric generation and range rules."""

    def test_num_range_bounds(self, fields):
        """Should keep every sample inside the inclusive range."""
        rule = NumRangeRule(min=10, max=20)
        values = [fields.generate({"type": "integer"}, "n", rule) for _ in range(10_000)]
        assert all(10 <= v <= 20 for v in values)
        assert all(isinstance(v, int) for v in values)
        assert {10, 20} <= set(values)

    def test_num_max_starts_at_zero(self, fields):
        """Should default the lower bound of num_max to zero."""
        rule = NumMaxRule(max=5.5)
        values = [fields.generate({"type": "double"}, "d", rule) for _ in range(10_000)]
        assert all(0 <= v <= 5.5 for v in values)
        assert all(isinstance(v, float) for v in values)

    def test_reversed_bounds(self, fields):
        """Should accept bounds given in the wrong order."""
        rule = NumRangeRule(min=50, max=40)
        values = [fields.generate({"type": "long"}, "n", rule) for _ in range(500)]
        assert all(40 <= v <= 50 for v in values)

    def test_geo_number_on_float(self, fields):
        """Should apply a geo_number rule to a plain float field."""
        rule = GeoNumberRule(axis="lon", min=54.0, max=56.0)
        values = [fields.generate({"type": "float"}, "lon", rule) for _ in range(1000)]
        assert all(54.0 <= v <= 56.0 for v in values)

    def test_integer_range_without_integers(self, fields):
        """Should round the midpoint when no integer lies inside the range."""
        rule = NumRangeRule(min=1.2, max=1.4)
        assert fields.generate({"type": "integer"}, "n", rule) == 1

    def test_name_heuristic(self, fields):
        """Should use the age heuristic without a rule."""
        values = [fields.generate({"type": "integer"}, "age") for _ in range(500)]
        assert all(1 <= v <= 100 for v in values)

    def test_bare_id_uses_generic_range(self, fields):
        """Should not widen a field called plainly id."""
        values = [fields.generate({"type": "integer"}, "id") for _ in range(500)]
        assert all(0 <= v <= 1000 for v in values)


class TestStrings:
    """Test string rules."""

    def test_prefix(self, fields):
        """Should append ten random characters to the prefix."""
        value = fields.generate({"type": "keyword"}, "sku", PrefixRule(prefix="SKU-"))
        assert value.startswith("SKU-")
        assert len(value) == 14

    def test_string_list(self, fields):
        """Should pick from the list, or return empty for an empty list."""
        rule = StringListRule(values=["a", "b", "c"])
        assert {fields.generate({"type": "keyword"}, "s", rule) for _ in range(200)} <= {"a", "b", "c"}
        assert fields.generate({"type": "keyword"}, "s", StringListRule(values=[])) == ""

    def test_phone_rule(self, fields):
        """Should render a number with the country calling code."""
        value = fields.generate({"type": "keyword"}, "contact", PhoneRule(country="gb"))
        assert value.startswith("+44")

    def test_unknown_phone_country_falls_back(self, fields):
        """Should fall back to the US plan for unknown countries."""
        value = fields.generate({"type": "keyword"}, "contact", PhoneRule(country="ZZ"))
        assert value.startswith("+1")

    @pytest.mark.parametrize(
        "rule,check",
        [
            (ImagePathRule(mode="static", path="/img/a.png"), lambda v: v == "/img/a.png"),
            (ImagePathRule(mode="list", values=["x.png"]), lambda v: v == "x.png"),
            (
                ImagePathRule(mode="random", base="/cdn", ext="webp"),
                lambda v: v.startswith("/cdn/") and v.endswith(".webp") and len(v) == 22,
            ),
            (ImagePathRule(mode="static"), lambda v: v == ""),
        ],
    )
    def test_image_path_modes(self, fields, rule, check):
        """Should honour each image path mode."""
        assert check(fields.generate({"type": "keyword"}, "image", rule))

    def test_untyped_field_is_keyword(self, fields):
        """Should treat a spec without a type as a keyword."""
        assert isinstance(fields.generate({}, "whatever"), str)


class TestGeo:
    """Test geo_point, geohash and path rules."""

    def test_geo_point_box(self, fields):
        """Should keep points inside the box."""
        rule = GeoPointRule(lat_min=24.0, lat_max=25.5, lon_min=54.0, lon_max=56.0)
        for _ in range(10_000):
            point = fields.generate({"type": "geo_point"}, "loc", rule)
            assert 24.0 <= point["lat"] <= 25.5
            assert 54.0 <= point["lon"] <= 56.0

    def test_random_point(self, fields):
        """Should draw valid coordinates without a rule."""
        point = fields.generate({"type": "geo_point"}, "loc")
        assert -90 <= point["lat"] <= 90
        assert -180 <= point["lon"] <= 180

    def test_known_city(self, fields):
        """Should return the gazetteer coordinate of the city."""
        city = CITIES[0]
        point = fields.generate({"type": "geo_point"}, "loc", GeoCityRule(city=city.name))
        assert point == {"lat": city.lat, "lon": city.lon}

    def test_unknown_city(self, fields):
        """Should fall back to some gazetteer city."""
        point = fields.generate({"type": "geo_point"}, "loc", GeoCityRule(city="Atlantis"))
        assert point in [c.as_point() for c in CITIES]

    def test_geohash_rule(self, fields):
        """Should return a geohash string of the requested length."""
        value = fields.generate({"type": "geo_point"}, "loc", GeohashRule(precision=5))
        assert len(value) == 5
        assert set(value) <= set(geohash.BASE32)

    def test_geo_path_point_lies_on_route(self, fields):
        """Should place the point on the great circle between the endpoints."""
        rule = GeoPathRule(source_lat=25.25, source_lon=55.36, dest_lat=51.47, dest_lon=-0.45)
        total = haversine_km(rule.source_lat, rule.source_lon, rule.dest_lat, rule.dest_lon)
        for _ in range(50):
            point = fields.generate({"type": "geo_point"}, "loc", rule)
            via = haversine_km(rule.source_lat, rule.source_lon, point["lat"], point["lon"]) + haversine_km(
                point["lat"], point["lon"], rule.dest_lat, rule.dest_lon
            )
            assert via == pytest.approx(total, abs=0.5)


class TestIp:
    def test_default_ipv4(self, fields):
        value = fields.generate({"type": "ip"}, "client_ip")
        assert value.count(".") == 3
        assert is_valid_ip(value)

    def test_ipv6_rule(self, fields):
        """Should honour the version of an ip rule."""
        value = fields.generate({"type": "ip"}, "client_ip", IpRule(version="v6"))
        assert ":" in value
        assert is_valid_ip(value)


class TestDates:
    """Test date sampling and serialization."""

    def test_default_window(self, fields):
        """Should sample ISO strings from the last 24 hours by default."""
        for _ in range(200):
            value = fields.generate({"type": "date"}, "created")
            instant = parse_date(value, DateFormat.ISO)
            assert NOW - timedelta(hours=24) <= instant <= NOW

    def test_mapping_format(self, fields):
        """Should serialize in the format declared by the mapping."""
        value = fields.generate({"type": "date", "format": "epoch_millis"}, "ts")
        assert isinstance(value, int)

    def test_date_rule_range_and_format(self, fields):
        """Should use the rule's own range and format."""
        window = TimeRange(
            start=datetime(2020, 1, 1, tzinfo=UTC), end=datetime(2020, 1, 31, tzinfo=UTC)
        )
        rule = DateRule(format=DateFormat.YEAR_MONTH_DAY, range=window)
        for _ in range(200):
            value = fields.generate({"type": "date"}, "day", rule)
            assert "2020-01-01" <= value <= "2020-01-31"

    def test_inverted_range_is_swapped(self, fields):
        """Should sample inside a range given end-first."""
        inverted = TimeRange(start=NOW, end=NOW - timedelta(hours=1))
        for _ in range(100):
            instant = fields.sample_instant(inverted)
            assert NOW - timedelta(hours=1) <= instant <= NOW

    def test_point_range(self, fields):
        """Should return exactly the instant of a zero-width range."""
        assert fields.sample_instant(TimeRange(start=NOW, end=NOW)) == NOW

    def test_range_before_epoch(self, fields):
        """Should keep epoch values inside a range that lies before 1970."""
        window = TimeRange(
            start=datetime(1959, 12, 31, 23, 0, tzinfo=UTC),
            end=datetime(1960, 1, 1, tzinfo=UTC),
        )
        rule = DateRule(format=DateFormat.EPOCH_MILLIS, range=window)
        for _ in range(2000):
            value = fields.generate({"type": "date"}, "born", rule)
            assert -315_622_800_000 <= value <= -315_619_200_000

    def test_non_string_mapping_format(self, fields):
        """Should fall back to ISO when the mapping's format is not a string."""
        value = fields.generate({"type": "date", "format": 123}, "d")
        assert isinstance(value, str)
        assert value.endswith("Z")
