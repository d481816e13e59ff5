"""
Live feed of freshly stamped documents.

LiveFeed produces a small batch of documents per tick: top-level date
fields carry the tick instant and every ``geo_path`` field reports the
current position of an entity travelling from its source to its
destination. The timer belongs to the caller; ``tick`` is synchronous.
"""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from ..config.models import GeneratorConfig
from ..generators.date_formats import date_format_for_field, format_date
from ..generators.document_generator import DocumentGenerator
from ..generators.field_generator import prepare_rules
from ..generators.movement import step
from ..mapping.utils import list_fields_by_type
from ..shared.logging_utils import StructuredLogger, get_structured_logger
from ..shared.metrics import realtime_ticks_total
from ..shared.models import (
    FieldRule,
    FieldType,
    GeoPathRule,
    ManualRule,
    TimeRange,
)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class LiveFeed:
    """
    Periodic document producer with moving geo points.

    Attributes:
        positions: Current ``{"lat", "lon"}`` of every geo_path rule, keyed
            like the rule itself
        ticks: Number of ticks executed so far
        feed_id: Identifier attached to every log record of this feed
    """

    def __init__(
        self,
        mapping: dict[str, Any],
        rules: dict[str, Any] | None = None,
        config: GeneratorConfig | None = None,
        generator: DocumentGenerator | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """
        Initialize the live feed.

        Args:
            mapping: ``{"properties": {...}}``
            rules: Rules keyed by dotted path or bare field name
            config: Generator configuration (its ``realtime`` section sets
                the tick interval, batch size and default speed)
            generator: Document generator to reuse (built from config when
                omitted)
            clock: Returns "now" when ``tick`` is called without an instant
        """
        self.mapping = mapping
        self.config = config or (generator.config if generator else GeneratorConfig())
        self.generator = generator or DocumentGenerator(self.config)
        self.clock = clock
        self.rules = prepare_rules(rules)

        self.date_fields = list_fields_by_type(mapping, FieldType.DATE)
        self.path_rules: dict[str, GeoPathRule] = {
            key: rule for key, rule in self.rules.items() if isinstance(rule, GeoPathRule)
        }
        self.positions: dict[str, dict[str, float]] = {}
        self.ticks = 0
        self.reset()

        self.feed_id = StructuredLogger.generate_correlation_id("FEED")
        self.log = get_structured_logger(__name__, feed_id=self.feed_id)

    def reset(self) -> None:
        """Put every moving entity back on its path source."""
        self.positions = {
            key: {"lat": rule.source_lat, "lon": rule.source_lon}
            for key, rule in self.path_rules.items()
        }

    def _advance(self) -> None:
        realtime = self.config.realtime
        for key, rule in self.path_rules.items():
            current = self.positions.get(key) or {
                "lat": rule.source_lat,
                "lon": rule.source_lon,
            }
            speed = rule.speed or realtime.default_speed_kmh
            moved = step(
                current["lat"],
                current["lon"],
                rule.dest_lat,
                rule.dest_lon,
                speed,
                realtime.interval_seconds,
            )
            if moved.arrived:
                self.log.debug("Entity arrived, restarting from source", field=key)
                self.positions[key] = {"lat": rule.source_lat, "lon": rule.source_lon}
            else:
                self.positions[key] = moved.as_point()

    def tick_rules(self, now: datetime) -> dict[str, FieldRule]:
        """Rules for one tick: date fields pinned to ``now``, moving points pinned to their position."""
        tick_rules: dict[str, FieldRule] = dict(self.rules)
        for field in self.date_fields:
            tag = date_format_for_field(self.mapping, field, self.rules.get(field))
            tick_rules[field] = ManualRule(value=format_date(now, tag))
        for key, position in self.positions.items():
            tick_rules[key] = ManualRule(value=dict(position))
        return tick_rules

    def tick(self, now: datetime | None = None) -> list[dict[str, Any]]:
        """
        Execute one tick.

        Moves every geo_path entity one step (an entity reaching its
        destination restarts from its source) and generates
        ``realtime.docs_per_tick`` documents stamped with ``now``.

        Args:
            now: Tick instant (the clock when omitted)

        Returns:
            The documents of this tick
        """
        now = now or self.clock()
        self._advance()

        documents = self.generator.generate_many(
            self.mapping,
            self.config.realtime.docs_per_tick,
            time_range=TimeRange(start=now, end=now),
            rules=self.tick_rules(now),
        )

        self.ticks += 1
        realtime_ticks_total.inc()
        self.log.info(
            "Live feed tick",
            tick=self.ticks,
            documents=len(documents),
            moving_entities=len(self.positions),
        )
        return documents
