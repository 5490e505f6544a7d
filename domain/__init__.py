"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for catalog items and the versioned envelope
- catalog: Alias extraction, hazard classification and item builders
"""

from domain.schemas import CatalogEnvelope, HazardItem, IngredientItem, RegulatoryItem

__all__ = [
    "CatalogEnvelope",
    "HazardItem",
    "IngredientItem",
    "RegulatoryItem",
]
