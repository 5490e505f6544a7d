"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the catalog build workflow.
"""

from application.pipeline import (
    build_hazard_items,
    build_ingredient_items,
    build_regulatory_items,
    iter_english_entries,
    run_pipeline,
)
from application.serialize import make_envelope, write_catalog

__all__ = [
    # Main workflow
    "run_pipeline",
    # Catalog builders
    "build_hazard_items",
    "build_regulatory_items",
    "build_ingredient_items",
    "iter_english_entries",
    # Serialization
    "make_envelope",
    "write_catalog",
]
