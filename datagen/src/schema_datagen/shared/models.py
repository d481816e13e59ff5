"""
Core data models for the schema data generator.

This module contains the schema field types, the closed union of per-field
generation rules, time ranges, and the small result records returned by the
movement simulator, the mapping differ and the bulk boundary.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

from .exceptions import InvalidRuleError

# ================================
# SCHEMA TYPES
# ================================


class FieldType(str, Enum):
    """Field types understood by the generator."""

    KEYWORD = "keyword"
    TEXT = "text"
    DATE = "date"
    FLOAT = "float"
    DOUBLE = "double"
    INTEGER = "integer"
    SHORT = "short"
    LONG = "long"
    BOOLEAN = "boolean"
    GEO_POINT = "geo_point"
    IP = "ip"
    OBJECT = "object"


STRING_TYPES = frozenset({FieldType.KEYWORD, FieldType.TEXT})
FLOAT_TYPES = frozenset({FieldType.FLOAT, FieldType.DOUBLE})
INTEGER_TYPES = frozenset({FieldType.INTEGER, FieldType.SHORT, FieldType.LONG})


class DateFormat(str, Enum):
    """Canonical date serialization tags."""

    ISO = "iso"
    EPOCH_MILLIS = "epoch_millis"
    EPOCH_SECOND = "epoch_second"
    YEAR_MONTH_DAY = "yyyy-MM-dd"
    MONTH_DAY_YEAR_SHORT = "MM/dd/yy"
    YEAR_MONTH_DAY_SLASH = "yyyy/MM/dd"
    DAY_MONTH_YEAR = "dd-MM-yyyy"
    DAY_MONTH_YEAR_SLASH = "dd/MM/yyyy"
    DATETIME = "yyyy-MM-dd HH:mm:ss"


# ================================
# TIME RANGE
# ================================


class TimeRange(BaseModel):
    """Inclusive interval of instants used for date sampling."""

    model_config = ConfigDict(frozen=True)

    start: datetime = Field(..., description="Start of the interval")
    end: datetime = Field(..., description="End of the interval")

    @field_validator("start", "end")
    @classmethod
    def require_timezone(cls, v: datetime) -> datetime:
        """Naive datetimes are interpreted as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    @property
    def is_inverted(self) -> bool:
        return self.end < self.start

    def ordered(self) -> "TimeRange":
        """Return this range with its bounds in ascending order."""
        if self.is_inverted:
            return TimeRange(start=self.end, end=self.start)
        return self


# ================================
# FIELD RULES
# ================================


class _RuleBase(BaseModel):
    """Shared configuration for rule variants (camelCase JSON aliases)."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class DateRule(_RuleBase):
    kind: Literal["date"] = "date"
    format: DateFormat = DateFormat.ISO
    range: TimeRange | None = None


class GeoPointRule(_RuleBase):
    kind: Literal["geo_point"] = "geo_point"
    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float


class GeoNumberRule(_RuleBase):
    kind: Literal["geo_number"] = "geo_number"
    axis: Literal["lat", "lon"] = "lat"
    min: float
    max: float


class NumRangeRule(_RuleBase):
    kind: Literal["num_range"] = "num_range"
    min: float
    max: float


class NumMaxRule(_RuleBase):
    kind: Literal["num_max"] = "num_max"
    max: float
    min: float = 0


class StringListRule(_RuleBase):
    kind: Literal["string_list"] = "string_list"
    values: list[str] = Field(default_factory=list)


class ImagePathRule(_RuleBase):
    kind: Literal["image_path"] = "image_path"
    mode: Literal["static", "list", "random"] = "random"
    path: str | None = None
    values: list[str] = Field(default_factory=list)
    base: str = "/images"
    ext: str = "jpg"


class IpRule(_RuleBase):
    kind: Literal["ip"] = "ip"
    version: Literal["v4", "v6"] = "v4"


class PrefixRule(_RuleBase):
    kind: Literal["prefix"] = "prefix"
    prefix: str


class PhoneRule(_RuleBase):
    kind: Literal["phone"] = "phone"
    country: str = "US"

    @field_validator("country")
    @classmethod
    def upper_country(cls, v: str) -> str:
        return v.upper()


class ManualRule(_RuleBase):
    kind: Literal["manual"] = "manual"
    value: Any = None


class GeohashRule(_RuleBase):
    kind: Literal["geohash"] = "geohash"
    precision: int = Field(7, ge=1)


class GeoCityRule(_RuleBase):
    kind: Literal["geo_city"] = "geo_city"
    city: str


class GeoPathRule(_RuleBase):
    kind: Literal["geo_path"] = "geo_path"
    source_lat: float
    source_lon: float
    dest_lat: float
    dest_lon: float
    speed: float | None = Field(None, gt=0, description="Travel speed in km/h")


FieldRule = Annotated[
    Union[
        DateRule,
        GeoPointRule,
        GeoNumberRule,
        NumRangeRule,
        NumMaxRule,
        StringListRule,
        ImagePathRule,
        IpRule,
        PrefixRule,
        PhoneRule,
        ManualRule,
        GeohashRule,
        GeoCityRule,
        GeoPathRule,
    ],
    Field(discriminator="kind"),
]

FieldRules = dict[str, FieldRule]

_rules_adapter = TypeAdapter(FieldRules)
_rule_adapter = TypeAdapter(FieldRule)


def parse_rule(raw: Any, field_path: str | None = None) -> FieldRule:
    """Validate a single rule object (already-built rules pass through)."""
    if isinstance(raw, BaseModel):
        return raw
    try:
        return _rule_adapter.validate_python(raw)
    except ValidationError as e:
        raise InvalidRuleError(
            "Invalid field rule",
            field_path=field_path,
            invalid_value=raw,
            validation_errors=[err["msg"] for err in e.errors()],
        ) from e


def parse_rules(raw: dict[str, Any] | None) -> FieldRules:
    """
    Validate a JSON rule object keyed by dotted field path.

    Args:
        raw: Mapping of field path to a rule object with a ``kind`` tag

    Returns:
        Dictionary mapping field path to a typed rule

    Raises:
        InvalidRuleError: If any rule fails validation
    """
    if not raw:
        return {}
    return {path: parse_rule(rule, field_path=path) for path, rule in raw.items()}


# ================================
# RESULT RECORDS
# ================================


@dataclass(frozen=True)
class GeoStep:
    """Result of advancing a moving entity by one tick."""

    lat: float
    lon: float
    arrived: bool

    def as_point(self) -> dict[str, float]:
        return {"lat": self.lat, "lon": self.lon}


@dataclass(frozen=True)
class TypeChange:
    """A field whose type tag differs between two mappings."""

    field: str
    from_type: str | None
    to_type: str | None


@dataclass
class MappingDiff:
    """Structural difference between two mappings."""

    added: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    changed: list[TypeChange] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.removed or self.changed)


@dataclass(frozen=True)
class BulkProgress:
    """Progress report handed back by the bulk boundary after each chunk."""

    processed: int
    total: int
    succeeded: int
    failed: int
    chunk_index: int
    chunk_count: int
    cancelled: bool = False
