"""
Source data for schema-driven generation.

This module provides curated, synthetic reference data:

    sourcedata/
    ├── gazetteer.py      # CITIES, SEAPORTS, VEHICLE_LOCATIONS (named coordinates)
    ├── vocabulary.py     # Closed value lists for the name-based heuristics
    └── translations.py   # Parallel per-language tables for multi-language fields
"""

from schema_datagen.sourcedata.gazetteer import (
    CITIES,
    SEAPORTS,
    VEHICLE_LOCATIONS,
    WAREHOUSES,
    Place,
    find_city,
)

__all__ = [
    "CITIES",
    "SEAPORTS",
    "VEHICLE_LOCATIONS",
    "WAREHOUSES",
    "Place",
    "find_city",
]
