"""
Main FastAPI application entry point for the schema data generator.

This module creates and configures the FastAPI application with all routes,
middleware, exception handlers, and startup/shutdown events.
"""

import logging
import traceback
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from . import __version__
from .api.models import ErrorResponse, HealthCheckResponse, ValidationErrorResponse
from .api.router import router as generation_router
from .config.models import GeneratorConfig
from .shared.dependencies import get_config, update_config
from .shared.exceptions import SchemaDataGenException
from .shared.logging_config import configure_structured_logging
from .sourcedata.gazetteer import CITIES

logger = logging.getLogger(__name__)

APP_NAME = "Schema Data Generator API"
APP_VERSION = __version__
APP_DESCRIPTION = """
**Schema Data Generator API** produces synthetic documents shaped like a search-engine index mapping.

## Features
- Generate documents with per-field rules (ranges, lists, geo boxes, cities, paths, dates)
- Pin a date field to a sampled (uniform or Poisson) timestamp sequence
- Flatten and diff mappings
- Geohash encoding and great-circle movement steps
- CSV export

All generated data is **synthetic and fictitious**.
"""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown events."""
    try:
        config = await get_config()
        configure_structured_logging(level=config.log_level)
        logger.info(f"Starting {APP_NAME} v{APP_VERSION} (locale={config.locale})")
    except HTTPException as e:
        configure_structured_logging(level="INFO")
        logger.error(f"Starting without configuration: {e.detail}")

    yield

    logger.info("Application shutdown completed")


app = FastAPI(
    title=APP_NAME,
    version=APP_VERSION,
    description=APP_DESCRIPTION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)


def _error_content(response: ErrorResponse | ValidationErrorResponse) -> dict:
    content = response.model_dump()
    content["timestamp"] = content["timestamp"].isoformat()
    return content


# ================================
# EXCEPTION HANDLERS
# ================================


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent error format."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url} failed: {exc.detail}")

    error_response = ErrorResponse(
        error=f"HTTP_{exc.status_code}",
        message=str(exc.detail),
        timestamp=datetime.now(UTC),
    )
    return JSONResponse(status_code=exc.status_code, content=_error_content(error_response))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request validation errors with detailed field information."""
    logger.warning(f"Validation error for {request.method} {request.url}: {exc.errors()}")

    field_errors = []
    for error in exc.errors():
        field_errors.append(
            {
                "field": " -> ".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            }
        )

    error_response = ValidationErrorResponse(
        error="VALIDATION_ERROR",
        message="Request validation failed",
        field_errors=field_errors,
        timestamp=datetime.now(UTC),
    )
    return JSONResponse(
        status_code=422,
        content=_error_content(error_response),
    )


@app.exception_handler(SchemaDataGenException)
async def datagen_exception_handler(request: Request, exc: SchemaDataGenException):
    """Input errors raised by the generator library."""
    logger.warning(f"{type(exc).__name__} for {request.method} {request.url}: {exc}")

    error_response = ErrorResponse(
        error=type(exc).__name__.upper(),
        message=str(exc),
        timestamp=datetime.now(UTC),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content=_error_content(error_response)
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.error(f"Unhandled exception: {exc}")
    logger.error(traceback.format_exc())

    error_response = ErrorResponse(
        error="INTERNAL_SERVER_ERROR",
        message="An unexpected error occurred",
        details={"exception_type": type(exc).__name__},
        timestamp=datetime.now(UTC),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_content(error_response),
    )


# ================================
# MIDDLEWARE
# ================================


@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    """Log all requests and responses."""
    start_time = datetime.now(UTC)
    response = await call_next(request)
    duration = (datetime.now(UTC) - start_time).total_seconds()
    logger.info(
        f"{request.method} {request.url.path} - "
        f"Status: {response.status_code} - "
        f"Duration: {duration:.3f}s"
    )
    return response


# ================================
# CORE ROUTES
# ================================


@app.get(
    "/health",
    response_model=HealthCheckResponse,
    summary="Health check",
)
async def health_check():
    """Health of the configuration and the bundled reference data."""
    checks = {}
    overall_status = "healthy"

    try:
        config = await get_config()
        checks["configuration"] = {
            "status": "healthy",
            "message": "Configuration loaded successfully",
            "locale": config.locale,
        }
    except HTTPException as e:
        checks["configuration"] = {"status": "unhealthy", "error": str(e.detail)}
        overall_status = "unhealthy"

    checks["gazetteer"] = {
        "status": "healthy" if CITIES else "degraded",
        "cities": len(CITIES),
    }
    if not CITIES and overall_status == "healthy":
        overall_status = "degraded"

    return HealthCheckResponse(
        status=overall_status,
        timestamp=datetime.now(UTC),
        version=APP_VERSION,
        checks=checks,
    )


@app.get(
    "/metrics",
    summary="Prometheus metrics",
    tags=["Monitoring"],
)
async def prometheus_metrics():
    """Metrics in Prometheus exposition format for scraping."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


# ================================
# CONFIGURATION ROUTES
# ================================


@app.get("/api/config", summary="Get configuration")
async def get_current_config(config: GeneratorConfig = Depends(get_config)):
    return config.model_dump()


@app.put("/api/config", summary="Update configuration")
async def update_current_config(new_config: GeneratorConfig):
    """Replace the in-memory configuration (the shared generator is rebuilt)."""
    await update_config(new_config)
    return {
        "message": "Configuration updated successfully",
        "timestamp": datetime.now(UTC),
    }


app.include_router(generation_router)


# ================================
# DEVELOPMENT SERVER
# ================================


def run_dev_server():
    """Run the development server."""
    import uvicorn

    uvicorn.run(
        "schema_datagen.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )


if __name__ == "__main__":
    run_dev_server()
