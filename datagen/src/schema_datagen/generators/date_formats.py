"""
Date format detection and rendering.

Maps a schema-declared date format string (cluster date-format syntax,
possibly ``||``-delimited alternatives) to a canonical DateFormat tag and
renders instants in that representation. All layouts are rendered in UTC.
"""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from ..mapping.utils import properties_of
from ..shared.metrics import record_degraded
from ..shared.models import DateFormat, DateRule

logger = logging.getLogger(__name__)

# Schema format token (lower-cased) -> canonical tag
_EXACT_TOKENS: dict[str, DateFormat] = {
    "epoch_millis": DateFormat.EPOCH_MILLIS,
    "epoch_second": DateFormat.EPOCH_SECOND,
    "strict_date_optional_time": DateFormat.ISO,
    "date_optional_time": DateFormat.ISO,
    "strict_date_optional_time_nanos": DateFormat.ISO,
    "yyyy-mm-dd": DateFormat.YEAR_MONTH_DAY,
    "strict_date": DateFormat.YEAR_MONTH_DAY,
    "date": DateFormat.YEAR_MONTH_DAY,
    "mm/dd/yy": DateFormat.MONTH_DAY_YEAR_SHORT,
    "yyyy/mm/dd": DateFormat.YEAR_MONTH_DAY_SLASH,
    "dd-mm-yyyy": DateFormat.DAY_MONTH_YEAR,
    "dd/mm/yyyy": DateFormat.DAY_MONTH_YEAR_SLASH,
}

# Canonical schema string for each tag (detect_format inverts this table)
CANONICAL_SCHEMA_FORMATS: dict[DateFormat, str] = {
    DateFormat.ISO: "strict_date_optional_time",
    DateFormat.EPOCH_MILLIS: "epoch_millis",
    DateFormat.EPOCH_SECOND: "epoch_second",
    DateFormat.YEAR_MONTH_DAY: "yyyy-MM-dd",
    DateFormat.MONTH_DAY_YEAR_SHORT: "MM/dd/yy",
    DateFormat.YEAR_MONTH_DAY_SLASH: "yyyy/MM/dd",
    DateFormat.DAY_MONTH_YEAR: "dd-MM-yyyy",
    DateFormat.DAY_MONTH_YEAR_SLASH: "dd/MM/yyyy",
    DateFormat.DATETIME: "yyyy-MM-dd HH:mm:ss",
}

_STRFTIME_LAYOUTS: dict[DateFormat, str] = {
    DateFormat.YEAR_MONTH_DAY: "%Y-%m-%d",
    DateFormat.MONTH_DAY_YEAR_SHORT: "%m/%d/%y",
    DateFormat.YEAR_MONTH_DAY_SLASH: "%Y/%m/%d",
    DateFormat.DAY_MONTH_YEAR: "%d-%m-%Y",
    DateFormat.DAY_MONTH_YEAR_SLASH: "%d/%m/%Y",
    DateFormat.DATETIME: "%Y-%m-%d %H:%M:%S",
}


def detect_format(schema_format: Any) -> DateFormat:
    """
    Map a schema date format string to a canonical tag.

    Only the first ``||`` alternative is consulted. Unrecognized formats,
    and values that are not strings at all, default to ISO-8601.
    """
    if not schema_format:
        return DateFormat.ISO
    if not isinstance(schema_format, str):
        logger.debug(f"Non-string date format {schema_format!r}, using ISO-8601")
        record_degraded("malformed_date_format")
        return DateFormat.ISO

    first = schema_format.lower().split("||")[0].strip()

    tag = _EXACT_TOKENS.get(first)
    if tag is not None:
        return tag

    if "yyyy-mm-dd" in first and "hh:mm:ss" in first:
        return DateFormat.DATETIME

    logger.debug(f"Unrecognized date format {schema_format!r}, using ISO-8601")
    return DateFormat.ISO


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MILLI = timedelta(milliseconds=1)


def to_epoch_millis(value: datetime) -> int:
    """Milliseconds since the epoch, floored (instants before 1970 are negative)."""
    return (_as_utc(value) - _EPOCH) // _ONE_MILLI


def from_epoch_millis(millis: int) -> datetime:
    return _EPOCH + timedelta(milliseconds=int(millis))


def format_date(value: datetime, tag: DateFormat | str) -> int | str:
    """
    Render an instant in the representation named by ``tag``.

    Epoch tags return integers; every other tag returns a zero-padded string.
    ISO output carries millisecond precision and a ``Z`` suffix.
    """
    tag = DateFormat(tag)
    value = _as_utc(value)

    if tag is DateFormat.EPOCH_MILLIS:
        return to_epoch_millis(value)
    if tag is DateFormat.EPOCH_SECOND:
        return to_epoch_millis(value) // 1000

    layout = _STRFTIME_LAYOUTS.get(tag)
    if layout is not None:
        return value.strftime(layout)

    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_date(value: Any, tag: DateFormat | str) -> datetime:
    """
    Parse a value produced by ``format_date`` back into a UTC instant.

    Date-only layouts come back at midnight; two-digit years follow
    strptime's pivot.

    Raises:
        ValueError: If the value does not match the layout
    """
    tag = DateFormat(tag)

    if tag is DateFormat.EPOCH_MILLIS:
        return from_epoch_millis(int(value))
    if tag is DateFormat.EPOCH_SECOND:
        return _EPOCH + timedelta(seconds=int(value))

    layout = _STRFTIME_LAYOUTS.get(tag)
    if layout is not None:
        return datetime.strptime(str(value), layout).replace(tzinfo=UTC)

    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return _as_utc(datetime.fromisoformat(text))


def date_format_for_field(
    mapping: dict[str, Any], field_path: str, rule: Any = None
) -> DateFormat:
    """
    Resolve the serialization of a date field.

    An explicit date rule wins; otherwise the format is detected from the
    field's declaration in the mapping. Paths that do not resolve to a date
    field fall back to ISO.
    """
    if isinstance(rule, DateRule):
        return rule.format

    props = properties_of(mapping)
    parts = field_path.split(".")
    for i, part in enumerate(parts):
        spec = props.get(part)
        if not isinstance(spec, dict):
            return DateFormat.ISO
        if i == len(parts) - 1:
            if spec.get("type") == "date":
                return detect_format(spec.get("format"))
            return DateFormat.ISO
        props = spec.get("properties")
        if not isinstance(props, dict):
            return DateFormat.ISO

    return DateFormat.ISO
