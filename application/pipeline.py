"""Build pipeline: overrides + taxonomies -> three versioned catalogs."""

import logging
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from application.constants import (
    PHO_MARKER,
    STAGE_HAZARDS,
    STAGE_INGREDIENTS,
    STAGE_OVERRIDES,
    STAGE_REGULATORY,
    STAGE_WRITE,
)
from application.serialize import write_catalog
from domain.catalog import (
    HazardOverrides,
    is_english_tag,
    partially_hydrogenated_oils_item,
    to_hazard_item,
    to_ingredient_item,
    to_regulatory_item,
)
from domain.schemas import HazardItem, IngredientItem, RegulatoryItem
from infrastructure.config import BuildConfig, load_hazard_overrides, load_regulatory_overrides
from infrastructure.observability import set_log_context
from infrastructure.sources import TaxonomyClient

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", HazardItem, IngredientItem)


def iter_english_entries(taxonomy: dict[str, Any]) -> Iterator[tuple[str, Any]]:
    """Yield (tag, entry) pairs in document order, skipping non-English tags."""
    skipped = 0
    for tag, entry in taxonomy.items():
        if not is_english_tag(tag):
            skipped += 1
            continue
        yield tag, entry
    logger.debug("Skipped %d non-English tags", skipped)


def _build_items(taxonomy: dict[str, Any], make: Callable[[str, Any], ItemT]) -> list[ItemT]:
    items: list[ItemT] = []
    for tag, entry in iter_english_entries(taxonomy):
        item = make(tag, entry)
        if not item.key:
            logger.warning("Tag %r yields no usable name; skipped", tag)
            continue
        items.append(item)
    return items


def build_hazard_items(additives: dict[str, Any], overrides: HazardOverrides) -> list[HazardItem]:
    """
    One hazard item per English additive tag, plus the synthetic
    partially-hydrogenated-oils record when no existing key covers it.
    """
    items = _build_items(additives, lambda tag, entry: to_hazard_item(tag, entry, overrides))

    if not any(PHO_MARKER in item.key for item in items):
        items.append(partially_hydrogenated_oils_item(overrides))
    else:
        logger.info("Taxonomy already has a partially hydrogenated oils record; synthetic record not added")

    levels = {level: sum(1 for i in items if i.hazard_level == level) for level in ("avoid", "caution", "info")}
    logger.info(
        "Built %d hazard items (avoid=%d, caution=%d, info=%d)",
        len(items),
        levels["avoid"],
        levels["caution"],
        levels["info"],
    )
    return items


def build_regulatory_items(records: list[dict[str, Any]]) -> list[RegulatoryItem]:
    items = [to_regulatory_item(record) for record in records]
    logger.info("Built %d regulatory items", len(items))
    return items


def build_ingredient_items(ingredients: dict[str, Any]) -> list[IngredientItem]:
    items = _build_items(ingredients, to_ingredient_item)
    logger.info("Built %d ingredient items", len(items))
    return items


def run_pipeline(cfg: BuildConfig, client: TaxonomyClient) -> dict[str, int]:
    """
    Run the full build.

    Steps:
    - Load both override files (fails before any network call if missing).
    - Fetch additives, build hazard items; build regulatory items.
    - Fetch ingredients, build ingredient items.
    - Write the three catalogs.

    Every fetch happens before the first write, so a failed download leaves
    no output from this run. A failed write can still leave earlier catalogs
    in place.

    Returns:
        Mapping of output path -> number of items written
    """
    set_log_context(stage=STAGE_OVERRIDES)
    hazard_overrides = load_hazard_overrides(cfg)
    regulatory_records = load_regulatory_overrides(cfg)

    set_log_context(stage=STAGE_HAZARDS)
    additives = client.fetch_taxonomy(cfg.additives_url)
    hazard_items = build_hazard_items(additives, hazard_overrides)
    del additives

    set_log_context(stage=STAGE_REGULATORY)
    regulatory_items = build_regulatory_items(regulatory_records)

    set_log_context(stage=STAGE_INGREDIENTS)
    ingredients = client.fetch_taxonomy(cfg.ingredients_url)
    ingredient_items = build_ingredient_items(ingredients)
    del ingredients

    set_log_context(stage=STAGE_WRITE)
    outputs = [
        (cfg.hazards_path, hazard_items),
        (cfg.regulatory_path, regulatory_items),
        (cfg.ingredients_path, ingredient_items),
    ]
    summary: dict[str, int] = {}
    for path, items in outputs:
        write_catalog(path, items)
        summary[str(path)] = len(items)
    return summary
