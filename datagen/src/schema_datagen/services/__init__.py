"""Export and bulk-loading services for generated documents."""

from schema_datagen.services.bulk import build_bulk_body, clamp_chunk_size, iter_chunks, run_bulk
from schema_datagen.services.export_service import ExportService

__all__ = [
    "ExportService",
    "build_bulk_body",
    "clamp_chunk_size",
    "iter_chunks",
    "run_bulk",
]
