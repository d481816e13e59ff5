"""Configuration models and loading for the schema data generator."""

from .models import GeneratorConfig, RealtimeConfig
from .settings import create_default_config, load_config

__all__ = [
    "GeneratorConfig",
    "RealtimeConfig",
    "create_default_config",
    "load_config",
]
