"""Mapping normalization, flattening, merging and diffing."""

from .utils import (
    diff,
    effective_type,
    extract_any_mapping,
    extract_mapping_from_response,
    flatten,
    list_fields_by_type,
    merge_properties,
    normalize_mapping,
    properties_of,
)

__all__ = [
    "diff",
    "effective_type",
    "extract_any_mapping",
    "extract_mapping_from_response",
    "flatten",
    "list_fields_by_type",
    "merge_properties",
    "normalize_mapping",
    "properties_of",
]
