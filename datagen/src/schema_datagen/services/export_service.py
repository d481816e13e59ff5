"""
Export service orchestrator for generated documents.

The ExportService turns a batch of documents into a pandas DataFrame and
hands it to a format writer, either into files (optionally partitioned by
a column) or into an in-memory body for HTTP responses.

Usage:
    from pathlib import Path
    from schema_datagen.services import ExportService

    service = ExportService(base_dir=Path("exports"))
    docs = generator.generate_many(mapping, 1000)

    # CSV file, one row per document
    path = service.export_documents(docs, format="csv", name="orders")

    # NDJSON partitioned by status
    paths = service.export_documents(
        docs, format="ndjson", name="orders", partition_by="status"
    )
"""

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Literal

import pandas as pd

from schema_datagen.services.writers import BaseWriter, CSVWriter, JSONWriter

logger = logging.getLogger(__name__)

ExportFormat = Literal["csv", "json", "ndjson"]


def _stringify_cell(value: Any) -> Any:
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return value


class ExportService:
    """
    Document export orchestrator.

    Attributes:
        base_dir: Directory that relative export paths resolve against
    """

    def __init__(self, base_dir: Path | None = None):
        self.base_dir = Path(base_dir) if base_dir is not None else Path("exports")
        logger.debug(f"ExportService initialized with base_dir: {self.base_dir}")

    def _get_writer(self, format: ExportFormat) -> BaseWriter:
        """
        Get appropriate writer instance for the specified format.

        Raises:
            ValueError: If the format is not supported
        """
        if format == "csv":
            return CSVWriter(index=False)
        elif format == "json":
            return JSONWriter(lines=False)
        elif format == "ndjson":
            return JSONWriter(lines=True)
        raise ValueError(f"Unsupported format: {format}")

    @staticmethod
    def documents_to_frame(
        documents: Iterable[dict[str, Any]],
        stringify_nested: bool = True,
    ) -> pd.DataFrame:
        """
        Build a DataFrame with one row per document.

        Columns are the union of top-level keys in first-seen order; a
        document missing a key gets an empty cell.

        Args:
            documents: Generated documents
            stringify_nested: JSON-encode object and array values into one
                cell (needed for flat formats such as CSV)
        """
        rows = list(documents)
        columns: dict[str, None] = {}
        for row in rows:
            for key in row:
                columns.setdefault(key, None)

        if stringify_nested:
            rows = [{k: _stringify_cell(v) for k, v in row.items()} for row in rows]

        return pd.DataFrame.from_records(rows, columns=list(columns))

    def render(self, documents: Iterable[dict[str, Any]], format: ExportFormat = "csv") -> str:
        """Serialize documents to a string body in the given format."""
        writer = self._get_writer(format)
        df = self.documents_to_frame(documents, stringify_nested=format == "csv")
        return writer.render(df)

    def export_documents(
        self,
        documents: Iterable[dict[str, Any]],
        format: ExportFormat = "csv",
        name: str = "documents",
        partition_by: str | None = None,
    ) -> Path | list[Path]:
        """
        Write documents to disk.

        Args:
            documents: Generated documents
            format: "csv", "json" or "ndjson"
            name: Base file name (without extension)
            partition_by: Top-level field to partition files by

        Returns:
            The written file, or the list of partition files

        Raises:
            ValueError: If there is nothing to write or the format is unknown
            OSError: If a file cannot be written
        """
        writer = self._get_writer(format)
        df = self.documents_to_frame(documents, stringify_nested=format == "csv")

        if df.empty:
            raise ValueError("No documents to export")

        if partition_by:
            logger.info(
                f"Exporting {len(df):,} documents to {self.base_dir} "
                f"partitioned by '{partition_by}' ({format})"
            )
            return writer.write_partitioned(df, self.base_dir, partition_by, table_name=name)

        output_path = self.base_dir / f"{name}.{writer.extension}"
        writer.write(df, output_path)
        return output_path
