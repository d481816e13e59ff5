"""
Pydantic models for FastAPI requests and responses.

This module contains the request and response models for the schema data
generator API: document generation, mapping tools, geo helpers, date
format detection and the shared error envelopes.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..generators.timestamp_sampler import Distribution, Granularity
from ..shared.models import DateFormat, TimeRange

# ================================
# GENERATION REQUEST MODELS
# ================================


class GenerateRequest(BaseModel):
    """Request model for document generation."""

    model_config = ConfigDict(populate_by_name=True)

    mapping: dict[str, Any] = Field(
        ...,
        description=(
            "Mapping source: a mapping, a mappings wrapper, a get-mapping "
            "response or a bare properties object"
        ),
        examples=[{"properties": {"name": {"type": "keyword"}, "age": {"type": "integer"}}}],
    )
    count: int | None = Field(
        None, ge=0, description="Number of documents (config default when omitted)"
    )
    time_range: TimeRange | None = Field(
        None,
        alias="range",
        description="Default window for date fields (last 24h when omitted)",
    )
    rules: dict[str, Any] | None = Field(
        None,
        description="Field rules keyed by dotted path or bare field name",
        examples=[{"age": {"kind": "num_range", "min": 18, "max": 65}}],
    )
    seed: int | None = Field(
        None, ge=0, le=2**32 - 1, description="Seed for a reproducible batch"
    )


class TimestampGenerateRequest(BaseModel):
    """Request model for generation along a sampled timestamp sequence."""

    mapping: dict[str, Any] = Field(..., description="Mapping source")
    start: datetime = Field(..., description="Start of the sampled window")
    end: datetime = Field(..., description="End of the sampled window")
    granularity: Granularity = Field(
        Granularity.HOUR, description="Step size of the timestamp walk"
    )
    rate: float = Field(..., ge=0, description="Events per step (mean for poisson)")
    distribution: Distribution = Field(
        Distribution.UNIFORM, description="Per-step count model"
    )
    date_field: str = Field(
        "timestamp", min_length=1, description="Dotted path of the date field to pin"
    )
    rules: dict[str, Any] | None = Field(None, description="Field rules")
    seed: int | None = Field(None, ge=0, le=2**32 - 1)


class ExportRequest(GenerateRequest):
    """Request model for generating straight into an export format."""


# ================================
# MAPPING / GEO / DATE REQUEST MODELS
# ================================


class MappingRequest(BaseModel):
    """Request carrying a single mapping source."""

    mapping: dict[str, Any] = Field(..., description="Mapping source")


class MappingDiffRequest(BaseModel):
    """Request model for comparing two mappings."""

    old: dict[str, Any] = Field(..., description="Previous mapping source")
    new: dict[str, Any] = Field(..., description="Current mapping source")


class GeoStepRequest(BaseModel):
    """Request model for advancing a moving entity one tick."""

    current_lat: float = Field(..., ge=-90, le=90)
    current_lon: float = Field(..., ge=-180, le=180)
    dest_lat: float = Field(..., ge=-90, le=90)
    dest_lon: float = Field(..., ge=-180, le=180)
    speed_kmh: float | None = Field(
        None, gt=0, description="Travel speed (configured default when omitted)"
    )
    interval_seconds: float | None = Field(
        None, gt=0, description="Tick length (configured interval when omitted)"
    )


class GeohashRequest(BaseModel):
    """Request model for geohash encoding."""

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
    precision: int | None = Field(
        None, ge=1, le=12, description="Geohash length (configured default when omitted)"
    )


class DateDetectRequest(BaseModel):
    """Request model for date format detection."""

    format: str | None = Field(
        None,
        description="Schema date format string",
        examples=["epoch_millis", "yyyy-MM-dd||epoch_millis"],
    )


# ================================
# RESPONSE MODELS
# ================================


class GenerateResponse(BaseModel):
    """Response model for generated documents."""

    count: int = Field(..., ge=0, description="Number of documents returned")
    documents: list[dict[str, Any]] = Field(..., description="Generated documents")


class FieldTypeEntry(BaseModel):
    path: str
    type: str | None


class FlattenResponse(BaseModel):
    """Response model for a flattened mapping."""

    fields: list[FieldTypeEntry] = Field(..., description="Fields in traversal order")


class TypeChangeEntry(BaseModel):
    field: str
    from_type: str | None
    to_type: str | None


class MappingDiffResponse(BaseModel):
    """Response model for a mapping comparison."""

    added: list[str]
    removed: list[str]
    changed: list[TypeChangeEntry]
    identical: bool = Field(..., description="True when the mappings match")


class GeoStepResponse(BaseModel):
    lat: float
    lon: float
    arrived: bool
    remaining_km: float = Field(..., ge=0, description="Distance left to the destination")


class GeohashResponse(BaseModel):
    geohash: str
    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float


class DateDetectResponse(BaseModel):
    """Response model for date format detection."""

    tag: DateFormat = Field(..., description="Canonical format tag")
    canonical_format: str = Field(..., description="Canonical schema format string")
    example: int | str = Field(..., description="Current instant in this format")


class HealthCheckResponse(BaseModel):
    """Response model for health checks."""

    status: str = Field(..., description="Overall health status")
    timestamp: datetime = Field(..., description="Health check timestamp")
    version: str = Field(..., description="Application version")
    checks: dict[str, dict[str, Any]] = Field(
        ..., description="Individual component health checks"
    )


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str = Field(..., description="Error type or code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(None, description="Additional error details")
    timestamp: datetime = Field(..., description="Error timestamp")


class ValidationErrorResponse(BaseModel):
    """Response model for validation errors."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="General error message")
    field_errors: list[dict[str, Any]] = Field(
        ..., description="Detailed field validation errors"
    )
    timestamp: datetime = Field(..., description="Error timestamp")
