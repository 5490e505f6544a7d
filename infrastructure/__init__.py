"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, environment, override files)
- Remote taxonomy fetching (Open Food Facts over HTTP)
- Filesystem JSON helpers
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import (
    BuildConfig,
    load_build_config,
    load_hazard_overrides,
    load_regulatory_overrides,
)
from infrastructure.sources import TaxonomyClient, TaxonomyFetchError

__all__ = [
    # Configuration (most commonly used)
    "load_build_config",
    "BuildConfig",
    # Overrides
    "load_hazard_overrides",
    "load_regulatory_overrides",
    # Taxonomy source
    "TaxonomyClient",
    "TaxonomyFetchError",
]
