"""
Generators for schema-driven synthetic documents.

Leaf primitives (random source, geohash, movement, date formats) support the
field value generator, which the document generator drives across a mapping.
"""

from .date_formats import detect_format, format_date, parse_date
from .document_generator import DocumentGenerator
from .field_generator import FieldValueGenerator
from .random_source import RandomSource
from .timestamp_sampler import Distribution, Granularity, sample_timestamps

__all__ = [
    "DocumentGenerator",
    "FieldValueGenerator",
    "RandomSource",
    "Distribution",
    "Granularity",
    "sample_timestamps",
    "detect_format",
    "format_date",
    "parse_date",
]
