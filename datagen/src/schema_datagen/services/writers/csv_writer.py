"""
CSV format writer implementation.

Nested objects and arrays are expected to arrive already JSON-encoded in a
single cell (see ``ExportService.documents_to_frame``), so every document
stays one row.
"""

import logging
from pathlib import Path

import pandas as pd

from schema_datagen.services.writers.base_writer import BaseWriter

logger = logging.getLogger(__name__)


class CSVWriter(BaseWriter):
    """CSV format writer with partitioning support."""

    extension = "csv"

    def __init__(self, index: bool = False, **default_kwargs):
        """
        Initialize CSV writer.

        Args:
            index: Whether to write row indices (default: False)
            **default_kwargs: Default arguments passed to pandas to_csv()
        """
        self.index = index
        self.default_kwargs = default_kwargs

    def _write_kwargs(self, kwargs: dict) -> dict:
        write_kwargs = {**self.default_kwargs, **kwargs}
        if "index" not in write_kwargs:
            write_kwargs["index"] = self.index
        return write_kwargs

    def write(self, df: pd.DataFrame, output_path: Path, **kwargs) -> None:
        """
        Write DataFrame to a single CSV file.

        Raises:
            ValueError: If DataFrame is empty
            IOError: If file cannot be written
        """
        if df.empty:
            raise ValueError("Cannot write empty DataFrame")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            df.to_csv(output_path, **self._write_kwargs(kwargs))
            logger.info(f"Wrote {len(df):,} documents to {output_path}")
        except Exception as e:
            logger.error(f"Failed to write CSV to {output_path}: {e}")
            raise OSError(f"Failed to write CSV file: {e}") from e

    def render(self, df: pd.DataFrame, **kwargs) -> str:
        if df.empty and len(df.columns) == 0:
            return ""
        return df.to_csv(**self._write_kwargs(kwargs))
