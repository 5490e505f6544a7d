"""Pydantic models for the generated catalogs."""

from typing import Any, Literal

from pydantic import BaseModel, Field

HazardLevel = Literal["avoid", "caution", "info"]

CATALOG_VERSION = 1


class HazardItem(BaseModel):
    """Single entry of the hazard catalog."""

    key: str = Field(..., description="Lowercase canonical name.")
    aliases: list[str] = Field(default_factory=list)
    enumbers: list[str] = Field(default_factory=list, description="Upper-cased E-number codes, e.g. 'E171'.")
    hazard_level: HazardLevel = "info"
    note: str = ""


class IngredientItem(BaseModel):
    """Single entry of the ingredient catalog.

    `summary` and `detail` are filled in later by the editorial process, never here.
    """

    key: str
    aliases: list[str] = Field(default_factory=list)
    enumbers: list[str] = Field(default_factory=list)
    summary: str = ""
    detail: str = ""
    references: list[str] = Field(default_factory=list)


class RegulatoryItem(BaseModel):
    """Single entry of the regulatory catalog (region id -> status/detail)."""

    key: str
    aliases: list[Any] = Field(default_factory=list)
    enumbers: list[Any] = Field(default_factory=list)
    regions: dict[str, Any] = Field(default_factory=dict)


class CatalogEnvelope(BaseModel):
    """Wrapper written around every catalog file."""

    version: int = CATALOG_VERSION
    items: list[dict[str, Any]] = Field(default_factory=list)

    @classmethod
    def wrap(cls, items: list[BaseModel]) -> "CatalogEnvelope":
        return cls(items=[item.model_dump(mode="json") for item in items])
