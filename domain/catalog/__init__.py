"""
Catalog building: alias extraction, hazard classification, item builders.

This module turns Open Food Facts taxonomy entries and curated overrides into catalog items.
All functions in this module are pure (no file I/O).
"""

from domain.catalog.aliases import (
    ENGLISH_PREFIX,
    enumber_aliases,
    enumber_from_tag,
    extract_english_aliases,
    is_english_tag,
    strip_namespace,
)
from domain.catalog.builders import (
    partially_hydrogenated_oils_item,
    to_hazard_item,
    to_ingredient_item,
    to_regulatory_item,
)
from domain.catalog.hazards import HazardOverrides
from domain.catalog.overrides import parse_hazard_overrides, parse_regulatory_overrides

__all__ = [
    "ENGLISH_PREFIX",
    "HazardOverrides",
    "enumber_aliases",
    "enumber_from_tag",
    "extract_english_aliases",
    "is_english_tag",
    "strip_namespace",
    "to_hazard_item",
    "to_ingredient_item",
    "to_regulatory_item",
    "partially_hydrogenated_oils_item",
    "parse_hazard_overrides",
    "parse_regulatory_overrides",
]
