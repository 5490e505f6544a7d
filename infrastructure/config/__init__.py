"""
Configuration management: models and loading.

Handles:
- BuildConfig: URLs, override/output locations, logging levels
- Environment variable overrides
- Curated override files (hazards, regulatory)

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import (
    load_build_config,
    load_hazard_overrides,
    load_regulatory_overrides,
)
from infrastructure.config.models import BuildConfig

__all__ = [
    "BuildConfig",
    "load_build_config",
    "load_hazard_overrides",
    "load_regulatory_overrides",
]
