"""
Unit tests for date format detection, formatting and parsing.
"""

from datetime import UTC, datetime

import pytest

from schema_datagen.generators.date_formats import (
    CANONICAL_SCHEMA_FORMATS,
    date_format_for_field,
    detect_format,
    format_date,
    parse_date,
)
from schema_datagen.shared.models import DateFormat, DateRule

INSTANT = datetime(2023, 11, 14, 22, 13, 20, 123000, tzinfo=UTC)
BEFORE_EPOCH = datetime(1969, 12, 31, 23, 59, 59, 500000, tzinfo=UTC)
LONG_BEFORE_EPOCH = datetime(1959, 12, 31, 23, 59, 59, 582000, tzinfo=UTC)


class TestDetectFormat:
    """Test mapping of schema format strings to tags."""

    @pytest.mark.parametrize(
        "schema_format,expected",
        [
            ("epoch_millis", DateFormat.EPOCH_MILLIS),
            ("epoch_second", DateFormat.EPOCH_SECOND),
            ("strict_date_optional_time", DateFormat.ISO),
            ("yyyy-MM-dd", DateFormat.YEAR_MONTH_DAY),
            ("MM/dd/yy", DateFormat.MONTH_DAY_YEAR_SHORT),
            ("yyyy/MM/dd", DateFormat.YEAR_MONTH_DAY_SLASH),
            ("dd-MM-yyyy", DateFormat.DAY_MONTH_YEAR),
            ("dd/MM/yyyy", DateFormat.DAY_MONTH_YEAR_SLASH),
            ("yyyy-MM-dd HH:mm:ss", DateFormat.DATETIME),
        ],
    )
    def test_known_formats(self, schema_format, expected):
        """Should recognise each canonical format."""
        assert detect_format(schema_format) == expected

    def test_missing_format_is_iso(self):
        """Should default to ISO when no format is declared."""
        assert detect_format(None) == DateFormat.ISO
        assert detect_format("") == DateFormat.ISO

    def test_unknown_format_is_iso(self):
        """Should default to ISO for unrecognised formats."""
        assert detect_format("basic_week_date") == DateFormat.ISO

    @pytest.mark.parametrize("schema_format", [123, ["epoch_millis"], {"f": 1}])
    def test_non_string_format_is_iso(self, schema_format):
        """Should default to ISO when the declared format is not a string."""
        assert detect_format(schema_format) == DateFormat.ISO

    def test_canonical_strings_detect_back(self):
        """Should detect every canonical schema string as its own tag."""
        for tag, schema_format in CANONICAL_SCHEMA_FORMATS.items():
            assert detect_format(schema_format) == tag


class TestFormatDate:
    """Test rendering instants."""

    def test_epoch_second(self):
        """Should render whole seconds since the epoch as an integer."""
        value = datetime.fromtimestamp(1_700_000_000, tz=UTC)
        assert format_date(value, DateFormat.EPOCH_SECOND) == 1_700_000_000

    def test_epoch_millis(self):
        """Should render milliseconds as an integer."""
        assert format_date(INSTANT, "epoch_millis") == 1_700_000_000_123

    def test_before_epoch_is_negative(self):
        """Should floor instants before 1970 to negative epoch values."""
        assert format_date(BEFORE_EPOCH, DateFormat.EPOCH_MILLIS) == -500
        assert format_date(BEFORE_EPOCH, DateFormat.EPOCH_SECOND) == -1
        assert format_date(LONG_BEFORE_EPOCH, DateFormat.EPOCH_MILLIS) == -315_619_200_418

    def test_iso(self):
        """Should render ISO with milliseconds and a Z suffix."""
        assert format_date(INSTANT, DateFormat.ISO) == "2023-11-14T22:13:20.123Z"

    @pytest.mark.parametrize(
        "tag,expected",
        [
            (DateFormat.YEAR_MONTH_DAY, "2023-11-14"),
            (DateFormat.MONTH_DAY_YEAR_SHORT, "11/14/23"),
            (DateFormat.YEAR_MONTH_DAY_SLASH, "2023/11/14"),
            (DateFormat.DAY_MONTH_YEAR, "14-11-2023"),
            (DateFormat.DAY_MONTH_YEAR_SLASH, "14/11/2023"),
            (DateFormat.DATETIME, "2023-11-14 22:13:20"),
        ],
    )
    def test_zero_padded_layouts(self, tag, expected):
        """Should render zero-padded calendar layouts."""
        assert format_date(INSTANT, tag) == expected

    def test_naive_datetime_is_utc(self):
        """Should treat naive datetimes as UTC."""
        naive = datetime(2024, 1, 2, 3, 4, 5)
        assert format_date(naive, DateFormat.DATETIME) == "2024-01-02 03:04:05"


class TestParseDate:
    """Test parsing rendered values back."""

    @pytest.mark.parametrize("instant", [INSTANT, BEFORE_EPOCH, LONG_BEFORE_EPOCH])
    @pytest.mark.parametrize("tag", [DateFormat.ISO, DateFormat.EPOCH_MILLIS])
    def test_millisecond_round_trip(self, tag, instant):
        """Should recover the exact instant for millisecond formats."""
        assert parse_date(format_date(instant, tag), tag) == instant

    @pytest.mark.parametrize("instant", [INSTANT, BEFORE_EPOCH, LONG_BEFORE_EPOCH])
    def test_epoch_second_round_trip(self, instant):
        """Should recover the instant truncated to the second."""
        parsed = parse_date(format_date(instant, DateFormat.EPOCH_SECOND), DateFormat.EPOCH_SECOND)
        assert parsed == instant.replace(microsecond=0)

    def test_date_only_is_midnight(self):
        """Should parse date-only layouts at midnight UTC."""
        parsed = parse_date("2023-11-14", DateFormat.YEAR_MONTH_DAY)
        assert parsed == datetime(2023, 11, 14, tzinfo=UTC)

    def test_mismatched_layout(self):
        """Should raise ValueError for a value in another layout."""
        with pytest.raises(ValueError):
            parse_date("14/11/2023", DateFormat.YEAR_MONTH_DAY)


class TestDateFormatForField:
    """Test resolving the serialization of a field."""

    mapping = {
        "properties": {
            "ts": {"type": "date", "format": "epoch_second"},
            "meta": {"properties": {"seen": {"type": "date", "format": "dd/MM/yyyy"}}},
            "name": {"type": "keyword"},
        }
    }

    def test_top_level_field(self):
        """Should use the declared format of a top-level date."""
        assert date_format_for_field(self.mapping, "ts") == DateFormat.EPOCH_SECOND

    def test_nested_field(self):
        """Should walk dotted paths into objects."""
        assert date_format_for_field(self.mapping, "meta.seen") == DateFormat.DAY_MONTH_YEAR_SLASH

    def test_rule_wins(self):
        """Should prefer a date rule's format over the mapping."""
        rule = DateRule(format=DateFormat.YEAR_MONTH_DAY)
        assert date_format_for_field(self.mapping, "ts", rule) == DateFormat.YEAR_MONTH_DAY

    def test_unresolved_path_is_iso(self):
        """Should fall back to ISO for non-date or missing paths."""
        assert date_format_for_field(self.mapping, "name") == DateFormat.ISO
        assert date_format_for_field(self.mapping, "missing.path") == DateFormat.ISO
