"""Assemble catalog items from taxonomy entries and override records."""

from typing import Any

from domain.catalog.aliases import (
    english_display_name,
    enumber_from_tag,
    extract_english_aliases,
    strip_namespace,
)
from domain.catalog.hazards import HazardOverrides
from domain.schemas import HazardItem, IngredientItem, RegulatoryItem

INGREDIENT_REFERENCES = ["Open Food Facts ingredient taxonomy"]

PHO_KEY = "partially hydrogenated oils"
PHO_NOTE_TAG = "en:partially-hydrogenated-oils"
PHO_ALIASES = ["partially hydrogenated oil", "industrial trans fat", "phos", "trans fat"]


def normalize_key(s: str | None) -> str:
    return (s or "").strip().lower()


def canonical_key(tag: str, entry: Any, aliases: list[str]) -> str:
    """English display name, else first alias, else the bare tag - lower-cased."""
    name = english_display_name(entry) or (aliases[0] if aliases else None) or strip_namespace(tag)
    return normalize_key(name)


def _enumbers(tag: str) -> list[str]:
    return [code.upper() for code in enumber_from_tag(tag)]


def to_hazard_item(tag: str, entry: Any, overrides: HazardOverrides) -> HazardItem:
    aliases = extract_english_aliases(tag, entry)
    return HazardItem(
        key=canonical_key(tag, entry, aliases),
        aliases=aliases,
        enumbers=_enumbers(tag),
        hazard_level=overrides.classify(tag),
        note=overrides.note_for(tag),
    )


def to_ingredient_item(tag: str, entry: Any) -> IngredientItem:
    aliases = extract_english_aliases(tag, entry)
    return IngredientItem(
        key=canonical_key(tag, entry, aliases),
        aliases=aliases,
        enumbers=_enumbers(tag),
        summary="",
        detail="",
        references=list(INGREDIENT_REFERENCES),
    )


def to_regulatory_item(record: dict[str, Any]) -> RegulatoryItem:
    """
    Shape a curated regulatory record into a catalog item.

    The record is trusted as authored: no alias or code extraction, only
    missing arrays/mappings are defaulted and a lowercase key derived.
    """
    aliases = record.get("aliases") or []
    first_alias = aliases[0] if aliases and isinstance(aliases[0], str) else None
    return RegulatoryItem(
        key=normalize_key(first_alias or strip_namespace(record["tag"])),
        aliases=list(aliases),
        enumbers=list(record.get("enumbers") or []),
        regions=dict(record.get("regions") or {}),
    )


def partially_hydrogenated_oils_item(overrides: HazardOverrides) -> HazardItem:
    """Synthetic hazard record; PHOs have no tag of their own in the additive taxonomy."""
    return HazardItem(
        key=PHO_KEY,
        aliases=list(PHO_ALIASES),
        enumbers=[],
        hazard_level="avoid",
        note=overrides.note_for(PHO_NOTE_TAG),
    )
