"""
Document and corpus generation.

DocumentGenerator drives FieldValueGenerator across a mapping to build one
document, repeats it to build a batch, and replays externally sampled
timestamp sequences into a named date field.
"""

import logging
import time
from collections.abc import Callable, Iterable, Iterator
from datetime import UTC, datetime, timedelta
from typing import Any

from ..config.models import GeneratorConfig
from ..shared.metrics import documents_generated_total, generation_duration_seconds
from ..shared.models import FieldRules, ManualRule, TimeRange
from .date_formats import date_format_for_field, format_date
from .field_generator import FieldValueGenerator, prepare_rules
from .random_source import RandomSource

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class DocumentGenerator:
    """
    Generates documents shaped exactly like a mapping.

    Documents are independent of each other: there is no uniqueness
    guarantee and no state carried between calls besides the random source.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        rng: RandomSource | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """
        Initialize the document generator.

        Args:
            config: Generator configuration (defaults when omitted)
            rng: Random source; built from ``config.seed`` and
                ``config.locale`` when omitted
            clock: Returns "now" for the default date window
        """
        self.config = config or GeneratorConfig()
        self.rng = rng or RandomSource(self.config.seed, locale=self.config.locale)
        self.fields = FieldValueGenerator(
            self.rng,
            clock=clock,
            default_lookback=timedelta(hours=self.config.default_lookback_hours),
        )

    @staticmethod
    def _prepare_rules(rules: dict[str, Any] | None) -> FieldRules:
        # Accepts typed rules or raw JSON rule objects; invalid ones are dropped
        return prepare_rules(rules)

    def _generate(
        self,
        mapping: dict[str, Any],
        time_range: TimeRange | None,
        rules: FieldRules,
    ) -> dict[str, Any]:
        properties = mapping.get("properties") if isinstance(mapping, dict) else None
        return self.fields.generate_object(properties, "", rules, time_range)

    def generate_one(
        self,
        mapping: dict[str, Any],
        time_range: TimeRange | None = None,
        rules: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Generate a single document.

        Args:
            mapping: ``{"properties": {...}}``
            time_range: Default window for date fields (last 24h when None)
            rules: Rules keyed by dotted path or bare field name

        Returns:
            Document with exactly the mapping's fields
        """
        document = self._generate(mapping, time_range, self._prepare_rules(rules))
        documents_generated_total.labels(mode="single").inc()
        return document

    def iter_documents(
        self,
        mapping: dict[str, Any],
        count: int,
        time_range: TimeRange | None = None,
        rules: dict[str, Any] | None = None,
    ) -> Iterator[dict[str, Any]]:
        """Lazily generate ``count`` documents (rules are validated once)."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        parsed = self._prepare_rules(rules)
        for _ in range(count):
            document = self._generate(mapping, time_range, parsed)
            documents_generated_total.labels(mode="stream").inc()
            yield document

    def generate_many(
        self,
        mapping: dict[str, Any],
        count: int,
        time_range: TimeRange | None = None,
        rules: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """
        Generate a batch of ``count`` documents.

        Raises:
            ValueError: If count is negative
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        parsed = self._prepare_rules(rules)

        started = time.perf_counter()
        documents = [self._generate(mapping, time_range, parsed) for _ in range(count)]
        generation_duration_seconds.observe(time.perf_counter() - started)
        documents_generated_total.labels(mode="batch").inc(len(documents))
        logger.debug(f"Generated {len(documents)} documents")
        return documents

    def generate_with_timestamps(
        self,
        mapping: dict[str, Any],
        timestamps: Iterable[datetime],
        rules: dict[str, Any] | None = None,
        date_field: str = "timestamp",
    ) -> list[dict[str, Any]]:
        """
        One document per timestamp, with ``date_field`` pinned to it.

        The timestamp is rendered in the field's serialization (its date
        rule's format, else the format declared in the mapping) and
        injected as a manual rule; every other field generates normally.

        Args:
            mapping: ``{"properties": {...}}``
            timestamps: Instants, e.g. from ``sample_timestamps``
            rules: Rules keyed by dotted path or bare field name
            date_field: Dotted path of the date field to override
        """
        parsed = self._prepare_rules(rules)
        tag = date_format_for_field(mapping, date_field, parsed.get(date_field))

        started = time.perf_counter()
        documents = []
        for instant in timestamps:
            doc_rules = {**parsed, date_field: ManualRule(value=format_date(instant, tag))}
            documents.append(self._generate(mapping, None, doc_rules))

        generation_duration_seconds.observe(time.perf_counter() - started)
        documents_generated_total.labels(mode="timestamps").inc(len(documents))
        return documents
