"""
JSON format writer implementation.

Writes documents either as one JSON array or as newline-delimited JSON
(one document per line), keeping nested objects intact.
"""

import logging
from pathlib import Path

import pandas as pd

from schema_datagen.services.writers.base_writer import BaseWriter

logger = logging.getLogger(__name__)


class JSONWriter(BaseWriter):
    """JSON array / NDJSON writer."""

    def __init__(self, lines: bool = False):
        """
        Initialize JSON writer.

        Args:
            lines: Write newline-delimited JSON instead of a single array
        """
        self.lines = lines
        self.extension = "ndjson" if lines else "json"

    def render(self, df: pd.DataFrame, **kwargs) -> str:
        if df.empty:
            return "" if self.lines else "[]"
        body = df.to_json(orient="records", lines=self.lines, force_ascii=False, **kwargs)
        if self.lines and not body.endswith("\n"):
            body += "\n"
        return body

    def write(self, df: pd.DataFrame, output_path: Path, **kwargs) -> None:
        """
        Write DataFrame to a single JSON file.

        Raises:
            ValueError: If DataFrame is empty
            IOError: If file cannot be written
        """
        if df.empty:
            raise ValueError("Cannot write empty DataFrame")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            output_path.write_text(self.render(df, **kwargs), encoding="utf-8")
            logger.info(f"Wrote {len(df):,} documents to {output_path}")
        except Exception as e:
            logger.error(f"Failed to write JSON to {output_path}: {e}")
            raise OSError(f"Failed to write JSON file: {e}") from e
