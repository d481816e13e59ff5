"""
Abstract base class for document export writers.

This module defines the interface that all format writers must implement,
providing a consistent API for writing document DataFrames to files or to
an in-memory body.
"""

from abc import ABC, abstractmethod
from pathlib import Path

import pandas as pd


class BaseWriter(ABC):
    """
    Abstract base class for document export writers.

    Defines the interface for writing pandas DataFrames (one row per
    document) to a single file, to partitioned files, or to a string.
    """

    extension: str = "dat"

    @abstractmethod
    def write(self, df: pd.DataFrame, output_path: Path, **kwargs) -> None:
        """
        Write a DataFrame to a single file.

        Args:
            df: DataFrame to write
            output_path: Path where the file should be written
            **kwargs: Additional format-specific options

        Raises:
            ValueError: If DataFrame is empty
            IOError: If file cannot be written
        """
        pass

    @abstractmethod
    def render(self, df: pd.DataFrame, **kwargs) -> str:
        """
        Serialize a DataFrame to a string (e.g. an HTTP response body).

        Args:
            df: DataFrame to serialize (may be empty)
            **kwargs: Additional format-specific options
        """
        pass

    def write_partitioned(
        self,
        df: pd.DataFrame,
        output_dir: Path,
        partition_col: str,
        table_name: str | None = None,
        **kwargs,
    ) -> list[Path]:
        """
        Write a DataFrame partitioned by a column value.

        Creates subdirectories for each unique partition value and writes
        separate files for each partition. Follows the format:
        <output_dir>/<partition_col>=<value>/<table_name>_<value>.<ext>

        Args:
            df: DataFrame to write
            output_dir: Base directory for partitioned output
            partition_col: Column name to partition by
            table_name: Optional table name for file naming (defaults to 'data')
            **kwargs: Additional format-specific options

        Returns:
            List of paths to created files

        Raises:
            ValueError: If DataFrame is empty or partition column doesn't exist
            IOError: If files cannot be written
        """
        if df.empty:
            raise ValueError("Cannot write empty DataFrame")

        if partition_col not in df.columns:
            raise ValueError(
                f"Partition column '{partition_col}' not found in DataFrame"
            )

        table_name = table_name or "data"
        created_files: list[Path] = []

        for partition_value, partition_df in df.groupby(partition_col, sort=True):
            partition_dir = output_dir / f"{partition_col}={partition_value}"
            output_file = partition_dir / f"{table_name}_{partition_value}.{self.extension}"
            self.write(partition_df, output_file, **kwargs)
            created_files.append(output_file)

        return created_files
