"""
FastAPI router for generation and schema tooling endpoints.

Documents are generated synchronously inside the request; counts are
bounded by ``max_count`` from the configuration.
"""

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response

from ..config.models import GeneratorConfig
from ..generators import geohash
from ..generators.date_formats import CANONICAL_SCHEMA_FORMATS, detect_format, format_date
from ..generators.document_generator import DocumentGenerator
from ..generators.movement import haversine_km, step
from ..generators.timestamp_sampler import estimate_timestamp_count, sample_timestamps
from ..mapping.utils import diff, flatten, normalize_mapping
from ..services.export_service import ExportService
from ..shared.dependencies import (
    generator_for_request,
    get_config,
    get_export_service,
    get_generator,
    validate_count,
)
from ..shared.exceptions import InvalidRuleError
from ..shared.logging_utils import get_structured_logger
from ..shared.models import FieldRules, TimeRange, parse_rules
from .models import (
    DateDetectRequest,
    DateDetectResponse,
    ExportRequest,
    FieldTypeEntry,
    FlattenResponse,
    GenerateRequest,
    GenerateResponse,
    GeohashRequest,
    GeohashResponse,
    GeoStepRequest,
    GeoStepResponse,
    MappingDiffRequest,
    MappingDiffResponse,
    MappingRequest,
    TimestampGenerateRequest,
    TypeChangeEntry,
)

logger = logging.getLogger(__name__)
log = get_structured_logger(__name__)

router = APIRouter(prefix="/api")


def _invalid_rules(e: InvalidRuleError) -> HTTPException:
    logger.warning(f"Rejected rules: {e}")
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


def _strict_rules(raw: dict | None) -> FieldRules:
    # The generator drops bad rules; API callers get a 400 instead
    try:
        return parse_rules(raw)
    except InvalidRuleError as e:
        raise _invalid_rules(e)


def _too_many_timestamps(produced: float, limit: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"Sampling would produce {produced:.0f} timestamps, more than the limit of {limit}",
    )


# ================================
# GENERATION ENDPOINTS
# ================================


@router.post(
    "/generate",
    response_model=GenerateResponse,
    tags=["Generation"],
    summary="Generate documents from a mapping",
)
async def generate_documents(
    request: GenerateRequest,
    config: GeneratorConfig = Depends(get_config),
    shared: DocumentGenerator = Depends(get_generator),
):
    """
    Generate ``count`` documents shaped like the mapping.

    Example:
        POST /api/generate
        {
            "mapping": {"properties": {"age": {"type": "integer"}}},
            "count": 10,
            "rules": {"age": {"kind": "num_range", "min": 18, "max": 65}},
            "seed": 42
        }
    """
    count = validate_count(request.count, config)
    mapping = normalize_mapping(request.mapping)
    rules = _strict_rules(request.rules)
    generator = generator_for_request(config, shared, request.seed)

    log.set_correlation_id(log.generate_correlation_id())
    log.info(
        "Generation request",
        count=count,
        fields=len(mapping["properties"]),
        seeded=request.seed is not None,
    )

    try:
        documents = generator.generate_many(
            mapping, count, time_range=request.time_range, rules=rules
        )
    finally:
        log.clear_correlation_id()

    return GenerateResponse(count=len(documents), documents=documents)


@router.post(
    "/generate/timestamps",
    response_model=GenerateResponse,
    tags=["Generation"],
    summary="Generate documents along a sampled timestamp sequence",
)
async def generate_with_timestamps(
    request: TimestampGenerateRequest,
    config: GeneratorConfig = Depends(get_config),
    shared: DocumentGenerator = Depends(get_generator),
):
    """Sample timestamps over the window and pin ``date_field`` of one document to each."""
    mapping = normalize_mapping(request.mapping)
    rules = _strict_rules(request.rules)
    time_range = TimeRange(start=request.start, end=request.end)

    expected = estimate_timestamp_count(
        time_range, request.granularity, request.rate, request.distribution
    )
    if expected > config.max_count:
        raise _too_many_timestamps(expected, config.max_count)

    generator = generator_for_request(config, shared, request.seed)
    timestamps = sample_timestamps(
        generator.rng,
        time_range,
        request.granularity,
        request.rate,
        request.distribution,
        limit=config.max_count,
    )
    if len(timestamps) > config.max_count:
        raise _too_many_timestamps(len(timestamps), config.max_count)

    documents = generator.generate_with_timestamps(
        mapping, timestamps, rules=rules, date_field=request.date_field
    )

    log.info(
        "Timestamp generation request",
        documents=len(documents),
        granularity=request.granularity.value,
        distribution=request.distribution.value,
    )
    return GenerateResponse(count=len(documents), documents=documents)


# ================================
# MAPPING ENDPOINTS
# ================================


@router.post("/mapping/flatten", response_model=FlattenResponse, tags=["Mapping"])
async def flatten_mapping(request: MappingRequest):
    """Every field path with its type tag, objects before their children."""
    flat = flatten(normalize_mapping(request.mapping))
    return FlattenResponse(
        fields=[FieldTypeEntry(path=path, type=type_tag) for path, type_tag in flat.items()]
    )


@router.post("/mapping/diff", response_model=MappingDiffResponse, tags=["Mapping"])
async def diff_mappings(request: MappingDiffRequest):
    """Added, removed and retyped fields between two mappings."""
    result = diff(normalize_mapping(request.old), normalize_mapping(request.new))
    return MappingDiffResponse(
        added=result.added,
        removed=result.removed,
        changed=[
            TypeChangeEntry(field=c.field, from_type=c.from_type, to_type=c.to_type)
            for c in result.changed
        ],
        identical=result.is_empty,
    )


# ================================
# GEO / DATE ENDPOINTS
# ================================


@router.post("/geo/step", response_model=GeoStepResponse, tags=["Geo"])
async def geo_step(
    request: GeoStepRequest,
    config: GeneratorConfig = Depends(get_config),
):
    """Advance a position one tick toward its destination."""
    speed = request.speed_kmh or config.realtime.default_speed_kmh
    interval = request.interval_seconds or config.realtime.interval_seconds
    moved = step(
        request.current_lat,
        request.current_lon,
        request.dest_lat,
        request.dest_lon,
        speed,
        interval,
    )
    remaining = 0.0 if moved.arrived else haversine_km(
        moved.lat, moved.lon, request.dest_lat, request.dest_lon
    )
    return GeoStepResponse(
        lat=moved.lat, lon=moved.lon, arrived=moved.arrived, remaining_km=remaining
    )


@router.post("/geo/geohash", response_model=GeohashResponse, tags=["Geo"])
async def geo_geohash(
    request: GeohashRequest,
    config: GeneratorConfig = Depends(get_config),
):
    """Encode a coordinate and return the bounds of its cell."""
    precision = request.precision or config.geohash_precision
    code = geohash.encode(request.lat, request.lon, precision)
    lat_min, lat_max, lon_min, lon_max = geohash.decode_bounds(code)
    return GeohashResponse(
        geohash=code, lat_min=lat_min, lat_max=lat_max, lon_min=lon_min, lon_max=lon_max
    )


@router.post("/dates/detect", response_model=DateDetectResponse, tags=["Dates"])
async def detect_date_format(request: DateDetectRequest):
    """Canonical tag for a schema date format string (ISO when unrecognised)."""
    tag = detect_format(request.format)
    return DateDetectResponse(
        tag=tag,
        canonical_format=CANONICAL_SCHEMA_FORMATS[tag],
        example=format_date(datetime.now(UTC), tag),
    )


# ================================
# EXPORT ENDPOINTS
# ================================


@router.post(
    "/export/csv",
    tags=["Export"],
    summary="Generate documents as CSV",
    response_class=Response,
)
async def export_csv(
    request: ExportRequest,
    config: GeneratorConfig = Depends(get_config),
    shared: DocumentGenerator = Depends(get_generator),
    service: ExportService = Depends(get_export_service),
):
    """One CSV row per document; nested objects and arrays are JSON-encoded into a cell."""
    count = validate_count(request.count, config)
    rules = _strict_rules(request.rules)
    generator = generator_for_request(config, shared, request.seed)

    documents = generator.generate_many(
        normalize_mapping(request.mapping),
        count,
        time_range=request.time_range,
        rules=rules,
    )

    body = service.render(documents, format="csv")
    logger.info(f"Exported {len(documents)} documents as CSV")
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="documents.csv"'},
    )
