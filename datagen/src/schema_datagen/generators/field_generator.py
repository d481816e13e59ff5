"""
Field value generation.

FieldValueGenerator turns one field spec (plus an optional rule) into a
value, recursing into object fields. Generation never raises for a
malformed spec or rule: the field degrades to a default value, the
degradation is logged and counted, and the batch carries on.
"""

import logging
import math
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from ..mapping.utils import effective_type
from ..shared.exceptions import InvalidRuleError
from ..shared.metrics import record_degraded
from ..shared.models import (
    FLOAT_TYPES,
    INTEGER_TYPES,
    STRING_TYPES,
    DateRule,
    FieldRule,
    FieldRules,
    FieldType,
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
    parse_rule,
)
from ..sourcedata.gazetteer import CITIES, find_city
from . import geohash, heuristics
from .date_formats import detect_format, format_date, from_epoch_millis, to_epoch_millis
from .identifiers import PHONE_TEMPLATES, random_phone
from .movement import point_along_path
from .multilang import (
    DEFAULT_LANGUAGE,
    LanguageContext,
    detect_language_field,
    render_translated,
)
from .random_source import RandomSource

logger = logging.getLogger(__name__)

# Rules that decide the value of a string field themselves
_STRING_RULES = (ManualRule, PrefixRule, PhoneRule, StringListRule, ImagePathRule)

_STRING_TYPE_VALUES = {t.value for t in STRING_TYPES}


def prepare_rules(raw: dict[str, Any] | None) -> FieldRules:
    """
    Validate rules one by one, dropping the ones that fail.

    A dropped rule is logged and counted; its field then generates as if it
    had no rule. Already-built rule models pass through unchanged.
    """
    parsed: FieldRules = {}
    for path, rule in (raw or {}).items():
        try:
            parsed[path] = parse_rule(rule, field_path=path)
        except InvalidRuleError as e:
            logger.warning(f"Ignoring invalid rule for '{path}': {e}")
            record_degraded("invalid_rule")
    return parsed


def resolve_rule(rules: FieldRules | None, path: str, key: str) -> FieldRule | None:
    """Rule for a field: full dotted path first, then the bare field name."""
    if not rules:
        return None
    rule = rules.get(path)
    if rule is None:
        rule = rules.get(key)
    return rule


def _utcnow() -> datetime:
    return datetime.now(UTC)


class FieldValueGenerator:
    """
    Type-dispatched generator for single field values.

    A ``manual`` rule always wins; otherwise the field's effective type
    selects the generator and type-compatible rules take precedence over
    name-based heuristics. Rules of a kind that does not fit the field type
    are ignored.
    """

    def __init__(
        self,
        rng: RandomSource,
        clock: Callable[[], datetime] = _utcnow,
        default_lookback: timedelta = timedelta(hours=24),
    ):
        """
        Initialize the field generator.

        Args:
            rng: Random source for every draw
            clock: Returns "now" for the default date window
            default_lookback: Width of the default date window ending now
        """
        self.rng = rng
        self.clock = clock
        self.default_lookback = default_lookback

    # ================================
    # OBJECTS
    # ================================

    def prepare_language_context(
        self,
        properties: dict[str, Any],
        base_path: str,
        rules: FieldRules | None,
    ) -> LanguageContext:
        """
        Build the language state for one properties level.

        Assigns one seed per language family, then renders the default
        language member of each family up front so the other members can
        refer to it.
        """
        context = LanguageContext(self.rng)

        for key in properties:
            language_field = detect_language_field(key)
            if language_field is not None:
                context.assign_seed(language_field.base_name)

        for key, spec in properties.items():
            language_field = detect_language_field(key)
            if language_field is None or language_field.lang != DEFAULT_LANGUAGE:
                continue
            if effective_type(spec) not in _STRING_TYPE_VALUES:
                continue
            path = f"{base_path}.{key}" if base_path else key
            if isinstance(resolve_rule(rules, path, key), _STRING_RULES):
                continue
            value = render_translated(language_field.base_name, language_field.lang, context)
            if value is not None:
                context.english_values[language_field.base_name] = value

        return context

    def generate_object(
        self,
        properties: Any,
        base_path: str = "",
        rules: FieldRules | None = None,
        time_range: TimeRange | None = None,
    ) -> dict[str, Any]:
        """
        Generate every field of one properties level.

        Args:
            properties: ``{name: field spec}`` of this level
            base_path: Dotted path of the enclosing object ("" at top level)
            rules: Rules keyed by dotted path or bare field name
            time_range: Default window for date fields

        Returns:
            Dictionary with exactly the keys of ``properties``
        """
        if not isinstance(properties, dict):
            logger.debug(f"Non-object properties at '{base_path}', generating empty object")
            record_degraded("malformed_properties")
            return {}

        context = self.prepare_language_context(properties, base_path, rules)

        out: dict[str, Any] = {}
        for key, spec in properties.items():
            path = f"{base_path}.{key}" if base_path else key
            rule = resolve_rule(rules, path, key)
            out[key] = self.generate(spec, path, rule, time_range, context, rules)
        return out

    # ================================
    # DISPATCH
    # ================================

    def generate(
        self,
        field_spec: Any,
        path: str,
        rule: FieldRule | None = None,
        time_range: TimeRange | None = None,
        language_context: LanguageContext | None = None,
        rules: FieldRules | None = None,
    ) -> Any:
        """
        Generate the value of one field.

        Args:
            field_spec: ``{"type"?, "format"?, "properties"?}``
            path: Dotted path of the field
            rule: Rule resolved for this field, if any
            time_range: Default window for date fields
            language_context: Language state of the enclosing level
            rules: All rules, used when recursing into object fields

        Returns:
            The generated value; never raises for malformed input
        """
        if isinstance(rule, ManualRule):
            return rule.value

        key = path.rsplit(".", 1)[-1]
        type_tag = effective_type(field_spec)

        try:
            field_type = FieldType(type_tag)
        except ValueError:
            logger.debug(f"Unknown type {type_tag!r} for '{path}', generating random string")
            record_degraded("unknown_type")
            return self.rng.rand_string(8)

        if field_type in STRING_TYPES:
            return self._generate_string(key, rule, language_context)
        if field_type == FieldType.DATE:
            return self._generate_date(field_spec, path, rule, time_range)
        if field_type in INTEGER_TYPES or field_type in FLOAT_TYPES:
            return self._generate_number(key, path, rule, field_type in INTEGER_TYPES)
        if field_type == FieldType.BOOLEAN:
            return heuristics.guess_boolean(self.rng, key)
        if field_type == FieldType.GEO_POINT:
            return self._generate_geo_point(path, rule)
        if field_type == FieldType.IP:
            if isinstance(rule, IpRule):
                return self.rng.rand_ip(rule.version)
            return self.rng.rand_ipv4()

        return self.generate_object(field_spec.get("properties"), path, rules, time_range)

    # ================================
    # STRINGS
    # ================================

    def _generate_string(
        self,
        key: str,
        rule: FieldRule | None,
        language_context: LanguageContext | None,
    ) -> str:
        if isinstance(rule, PrefixRule):
            return f"{rule.prefix}{self.rng.rand_string(10)}"

        if isinstance(rule, PhoneRule):
            if rule.country not in PHONE_TEMPLATES:
                record_degraded("unknown_phone_country")
            return random_phone(self.rng, rule.country)

        if isinstance(rule, StringListRule):
            return self.rng.choice(rule.values) if rule.values else ""

        if isinstance(rule, ImagePathRule):
            return self._image_path(rule)

        language_field = detect_language_field(key)
        if language_field is not None and language_context is not None:
            translated = render_translated(
                language_field.base_name, language_field.lang, language_context
            )
            if translated is not None:
                return translated

        guessed = self._apply_heuristic(heuristics.guess_string, key)
        if guessed is not None:
            return guessed

        return self.rng.rand_string(10)

    def _image_path(self, rule: ImagePathRule) -> str:
        if rule.mode == "static":
            return rule.path or ""
        if rule.mode == "list":
            return self.rng.choice(rule.values) if rule.values else ""
        return f"{rule.base}/{self.rng.rand_string(12)}.{rule.ext}"

    def _apply_heuristic(self, guess: Callable[..., Any], key: str, *args: Any) -> Any:
        try:
            result = guess(self.rng, key, *args)
        except AttributeError as e:
            # Faker locales do not all ship every provider
            logger.debug(f"Heuristic unavailable for '{key}' in locale {self.rng.locale}: {e}")
            record_degraded("provider_unavailable")
            return None
        if result is None:
            return None
        return result[1]

    # ================================
    # DATES
    # ================================

    def default_time_range(self) -> TimeRange:
        now = self.clock()
        return TimeRange(start=now - self.default_lookback, end=now)

    def sample_instant(self, time_range: TimeRange | None) -> datetime:
        """Uniform instant (millisecond resolution) inside the window."""
        window = time_range or self.default_time_range()
        if window.is_inverted:
            logger.warning(
                f"Inverted time range {window.start.isoformat()} > "
                f"{window.end.isoformat()}, swapping bounds"
            )
            record_degraded("inverted_time_range")
            window = window.ordered()
        start_ms = to_epoch_millis(window.start)
        end_ms = to_epoch_millis(window.end)
        return from_epoch_millis(self.rng.rand_int(start_ms, end_ms))

    def _generate_date(
        self,
        field_spec: dict[str, Any],
        path: str,
        rule: FieldRule | None,
        time_range: TimeRange | None,
    ) -> int | str:
        if isinstance(rule, DateRule):
            instant = self.sample_instant(rule.range or time_range)
            return format_date(instant, rule.format)
        instant = self.sample_instant(time_range)
        return format_date(instant, detect_format(field_spec.get("format")))

    # ================================
    # NUMBERS
    # ================================

    def _generate_number(
        self,
        key: str,
        path: str,
        rule: FieldRule | None,
        is_integer: bool,
    ) -> int | float:
        bounds = _rule_bounds(rule)
        if bounds is not None:
            lo, hi = min(bounds), max(bounds)
            if not is_integer:
                return self.rng.rand_float(lo, hi)
            lo_int, hi_int = math.ceil(lo), math.floor(hi)
            if lo_int > hi_int:
                logger.debug(f"No integer inside [{lo}, {hi}] for '{path}', rounding midpoint")
                record_degraded("empty_integer_range")
                return round((lo + hi) / 2)
            return self.rng.rand_int(lo_int, hi_int)

        guessed = self._apply_heuristic(heuristics.guess_number, key, is_integer)
        if guessed is not None:
            return guessed

        if is_integer:
            return self.rng.rand_int(0, 1000)
        return self.rng.rand_float(0, 1000)

    # ================================
    # GEO
    # ================================

    def _random_point(self) -> dict[str, float]:
        return {"lat": self.rng.rand_float(-90, 90), "lon": self.rng.rand_float(-180, 180)}

    def _generate_geo_point(self, path: str, rule: FieldRule | None) -> dict[str, float] | str:
        if isinstance(rule, GeoPointRule):
            return {
                "lat": self.rng.rand_float(rule.lat_min, rule.lat_max),
                "lon": self.rng.rand_float(rule.lon_min, rule.lon_max),
            }

        if isinstance(rule, GeoCityRule):
            city = find_city(rule.city)
            if city is None:
                logger.debug(f"Unknown city {rule.city!r} for '{path}', picking a random one")
                record_degraded("unknown_city")
                city = self.rng.choice(CITIES)
            return city.as_point()

        if isinstance(rule, GeohashRule):
            point = self._random_point()
            return geohash.encode(point["lat"], point["lon"], rule.precision)

        if isinstance(rule, GeoPathRule):
            lat, lon = point_along_path(
                rule.source_lat,
                rule.source_lon,
                rule.dest_lat,
                rule.dest_lon,
                self.rng.random(),
            )
            return {"lat": round(lat, 6), "lon": round(lon, 6)}

        return self._random_point()


def _rule_bounds(rule: FieldRule | None) -> tuple[float, float] | None:
    if isinstance(rule, (GeoNumberRule, NumRangeRule, NumMaxRule)):
        return rule.min, rule.max
    return None
