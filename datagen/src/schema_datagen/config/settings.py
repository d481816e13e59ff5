"""
Configuration loading and management for the schema data generator.

This module provides utilities for loading, validating, and managing
configuration settings.
"""

from pathlib import Path

from .models import GeneratorConfig


def load_config(
    config_path: str | Path | None = None,
    config_name: str = "config.json",
    required: bool = False,
) -> GeneratorConfig:
    """
    Load configuration from file with intelligent path resolution.

    Args:
        config_path: Explicit path to config file or directory containing config
        config_name: Name of config file (default: "config.json")
        required: Raise when no file is found instead of using defaults

    Returns:
        GeneratorConfig: Loaded and validated configuration

    Raises:
        FileNotFoundError: If required and no configuration file is found
        ValueError: If configuration is invalid
    """
    if config_path is None:
        search_paths = [
            Path.cwd() / config_name,
            Path.cwd() / "config" / config_name,
            Path(__file__).parent.parent.parent.parent / config_name,
        ]

        for path in search_paths:
            if path.exists():
                config_path = path
                break
        else:
            if required:
                raise FileNotFoundError(
                    f"Configuration file '{config_name}' not found in any of: "
                    f"{[str(p) for p in search_paths]}"
                )
            return GeneratorConfig()

    config_path = Path(config_path)

    if config_path.is_dir():
        config_path = config_path / config_name

    return GeneratorConfig.from_file(config_path)


def create_default_config(output_path: str | Path) -> GeneratorConfig:
    """
    Create a default configuration file with standard values.

    Args:
        output_path: Where to save the default config file

    Returns:
        GeneratorConfig: The default configuration
    """
    default_config = GeneratorConfig(
        seed=42,
        default_count=100,
        chunk_size=1000,
        realtime={
            "interval_seconds": 5.0,
            "docs_per_tick": 1,
            "default_speed_kmh": 500.0,
        },
    )

    default_config.to_file(output_path)
    return default_config
