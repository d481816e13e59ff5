"""
Unit tests for mapping normalization, flattening, merging and diffing.
"""

import pytest

from schema_datagen.mapping.utils import (
    diff,
    effective_type,
    extract_any_mapping,
    extract_mapping_from_response,
    flatten,
    list_fields_by_type,
    merge_properties,
    normalize_mapping,
)
from schema_datagen.shared.exceptions import MappingError
from schema_datagen.shared.models import FieldType

_hyp = pytest.importorskip("hypothesis")
given = _hyp.given
st = _hyp.strategies

NESTED = {
    "properties": {
        "user": {
            "properties": {
                "name": {"type": "keyword"},
                "born": {"type": "date", "format": "epoch_millis"},
            }
        },
        "score": {"type": "float"},
    }
}


class TestEffectiveType:
    @pytest.mark.parametrize(
        "spec,expected",
        [
            ({"type": "long"}, "long"),
            ({"properties": {}}, "object"),
            ({}, "keyword"),
            ("oops", None),
        ],
    )
    def test_effective_type(self, spec, expected):
        """Should infer object and keyword when no type is declared."""
        assert effective_type(spec) == expected


class TestFlatten:
    """Test flattening into dotted paths."""

    def test_objects_before_children(self):
        """Should list object fields ahead of their children in traversal order."""
        assert list(flatten(NESTED).items()) == [
            ("user", "object"),
            ("user.name", "keyword"),
            ("user.born", "date [epoch_millis]"),
            ("score", "float"),
        ]

    def test_date_without_format(self):
        assert flatten({"properties": {"d": {"type": "date"}}}) == {"d": "date"}

    def test_skips_malformed_specs(self):
        assert flatten({"properties": {"bad": 1, "ok": {"type": "ip"}}}) == {"ok": "ip"}

    def test_empty(self):
        assert flatten({}) == {}


class TestDiff:
    """Test mapping comparison."""

    def test_identical(self):
        assert diff(NESTED, NESTED).is_empty

    def test_added_removed_changed(self):
        """Should report path level additions, removals and type changes."""
        new = {
            "properties": {
                "user": {
                    "properties": {
                        "name": {"type": "text"},
                        "born": {"type": "date", "format": "yyyy-MM-dd"},
                        "email": {"type": "keyword"},
                    }
                },
            }
        }

        result = diff(NESTED, new)

        assert result.added == ["user.email"]
        assert result.removed == ["score"]
        assert [(c.field, c.from_type, c.to_type) for c in result.changed] == [
            ("user.name", "keyword", "text"),
            ("user.born", "date [epoch_millis]", "date [yyyy-MM-dd]"),
        ]

    @given(
        st.dictionaries(
            st.text(alphabet="abc", min_size=1, max_size=3),
            st.sampled_from(["keyword", "long", "date"]),
            max_size=6,
        ),
        st.dictionaries(
            st.text(alphabet="abc", min_size=1, max_size=3),
            st.sampled_from(["keyword", "long", "date"]),
            max_size=6,
        ),
    )
    def test_diff_is_antisymmetric(self, left, right):
        """Should swap added and removed when the arguments are swapped."""
        a = {"properties": {k: {"type": t} for k, t in left.items()}}
        b = {"properties": {k: {"type": t} for k, t in right.items()}}

        forward = diff(a, b)
        backward = diff(b, a)

        assert sorted(forward.added) == sorted(backward.removed)
        assert sorted(forward.removed) == sorted(backward.added)
        assert sorted(c.field for c in forward.changed) == sorted(c.field for c in backward.changed)


class TestMerge:
    def test_recursive_merge(self):
        """Should merge shared objects and let the second source win conflicts."""
        base = {"a": {"type": "keyword"}, "o": {"properties": {"x": {"type": "long"}}}}
        other = {"a": {"type": "text"}, "o": {"properties": {"y": {"type": "ip"}}}}

        merged = merge_properties(base, other)

        assert merged["a"] == {"type": "text"}
        assert set(merged["o"]["properties"]) == {"x", "y"}
        assert "y" not in base["o"]["properties"]


class TestNormalize:
    """Test accepted mapping source shapes."""

    PROPS = {"name": {"type": "keyword"}}

    @pytest.mark.parametrize(
        "raw",
        [
            {"properties": PROPS},
            {"mappings": {"properties": PROPS}},
            {"logs-2024": {"mappings": {"properties": PROPS}}},
            PROPS,
        ],
    )
    def test_shapes(self, raw):
        """Should reduce every supported shape to a properties wrapper."""
        assert normalize_mapping(raw) == {"properties": self.PROPS}

    @pytest.mark.parametrize("raw", [None, [], {}, {"a": 1}])
    def test_unusable_lenient(self, raw):
        assert normalize_mapping(raw) == {"properties": {}}

    def test_unusable_strict(self):
        """Should raise when strict and nothing usable is found."""
        with pytest.raises(MappingError):
            normalize_mapping({"a": 1}, strict=True)


class TestExtract:
    RESPONSE = {
        "logs-1": {"mappings": {"properties": {"a": {"type": "keyword"}}}},
        "logs-2": {"mappings": {"properties": {"b": {"type": "long"}}}},
    }

    def test_single_index(self):
        assert extract_mapping_from_response(self.RESPONSE, "logs-2") == {
            "properties": {"b": {"type": "long"}}
        }
        assert extract_mapping_from_response(self.RESPONSE, "missing") is None

    def test_union_of_indices(self):
        """Should merge the mappings of every index in the response."""
        merged = extract_any_mapping(self.RESPONSE)
        assert set(merged["properties"]) == {"a", "b"}
        assert extract_any_mapping({"x": 1}) is None


class TestListFieldsByType:
    def test_top_level_only(self, sample_mapping):
        """Should list top-level fields of the given type."""
        assert list_fields_by_type(sample_mapping, FieldType.DATE) == ["timestamp", "created"]
        assert list_fields_by_type(sample_mapping, "geo_point") == ["location"]
        assert list_fields_by_type(sample_mapping, "double") == []
