"""
Schema Data Generator

A schema-driven synthetic document generator supporting:
- Type-dispatched field generation from search-engine index mappings
- Per-field generation rules (ranges, lists, geo, dates, manual values)
- Multi-language field families that describe the same entity
- Moving-entity simulation along great-circle paths
- Mapping flattening, merging and structural diffing
"""

__version__ = "1.0.0"
__author__ = "Schema DataGen"
