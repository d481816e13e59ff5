"""
FastAPI dependencies for the schema data generator.

This module holds the process-wide configuration and generator instances
and the request validation helpers shared by the API routers.
"""

import logging
import threading

from fastapi import Depends, HTTPException, status

from ..config.models import GeneratorConfig
from ..config.settings import load_config
from ..generators.document_generator import DocumentGenerator
from ..generators.random_source import RandomSource
from ..services.export_service import ExportService

logger = logging.getLogger(__name__)


# Global instances (initialized lazily or on startup)
_config: GeneratorConfig | None = None
_generator: DocumentGenerator | None = None
_generator_lock = threading.Lock()


async def get_config() -> GeneratorConfig:
    """Get the current generator configuration."""
    global _config
    if _config is None:
        try:
            _config = load_config()
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Failed to load configuration: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Configuration could not be loaded: {e}",
            )
    return _config


async def update_config(new_config: GeneratorConfig) -> None:
    """Replace the global configuration and drop the shared generator."""
    global _config, _generator
    _config = new_config
    with _generator_lock:
        _generator = None


def reset_state() -> None:
    """Forget the cached configuration and generator."""
    global _config, _generator
    _config = None
    with _generator_lock:
        _generator = None


async def get_generator(
    config: GeneratorConfig = Depends(get_config),
) -> DocumentGenerator:
    """Shared document generator built from the current configuration."""
    global _generator
    with _generator_lock:
        if _generator is None:
            _generator = DocumentGenerator(config)
        return _generator


def generator_for_request(
    config: GeneratorConfig,
    shared: DocumentGenerator,
    seed: int | None,
) -> DocumentGenerator:
    """A freshly seeded generator when the request pins a seed, else the shared one."""
    if seed is None:
        return shared
    return DocumentGenerator(config, rng=RandomSource(seed, locale=config.locale))


async def get_export_service() -> ExportService:
    return ExportService()


# ================================
# REQUEST VALIDATION
# ================================


def validate_count(count: int | None, config: GeneratorConfig) -> int:
    """Resolve a requested document count against the configured limits."""
    if count is None:
        return config.default_count
    if count < 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="count must be zero or positive",
        )
    if count > config.max_count:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"count cannot exceed {config.max_count}",
        )
    return count
