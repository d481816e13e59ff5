"""
Document format writers for export functionality.

This module provides a unified interface for writing document DataFrames
to CSV or JSON with support for partitioned outputs.
"""

from schema_datagen.services.writers.base_writer import BaseWriter
from schema_datagen.services.writers.csv_writer import CSVWriter
from schema_datagen.services.writers.json_writer import JSONWriter

__all__ = [
    "BaseWriter",
    "CSVWriter",
    "JSONWriter",
]
