"""Parse curated override documents from already-decoded JSON."""

from typing import Any

from domain.catalog.hazards import HazardOverrides

# regulatory record field -> (required container type, description)
_RECORD_FIELDS: dict[str, tuple[type, str]] = {
    "aliases": (list, "a list"),
    "enumbers": (list, "a list"),
    "regions": (dict, "a mapping"),
}


def _section(data: dict[str, Any], name: str, kind: type, what: str, source: str) -> Any:
    """Return data[name], defaulting only a missing or null value to an empty `kind`."""
    value = data.get(name)
    if value is None:
        return kind()
    if not isinstance(value, kind):
        raise ValueError(f"{source}: '{name}' must be {what}, got {type(value).__name__}")
    return value


def parse_hazard_overrides(data: Any) -> HazardOverrides:
    """
    Parse the hazard override document into a HazardOverrides object.

    This is a pure function - it does NOT perform file I/O.
    Reading the file happens in infrastructure.config.loader.

    Args:
        data: Decoded `{avoid: [...], caution: [...], notes: {...}}` document

    Returns:
        HazardOverrides with missing sections defaulted to empty

    Raises:
        ValueError: If the document or one of its sections has the wrong container type
    """
    if not isinstance(data, dict):
        raise ValueError(f"Hazard overrides must be a JSON object, got {type(data).__name__}")

    avoid = _section(data, "avoid", list, "a list", "hazard overrides")
    caution = _section(data, "caution", list, "a list", "hazard overrides")
    notes = _section(data, "notes", dict, "a mapping", "hazard overrides")

    return HazardOverrides(
        avoid=[str(t) for t in avoid],
        caution=[str(t) for t in caution],
        notes={str(k): str(v) for k, v in notes.items() if v is not None},
    )


def parse_regulatory_overrides(data: Any) -> list[dict[str, Any]]:
    """
    Return the curated regulatory records.

    Records are passed through as authored. Each needs a string `tag`;
    `aliases`/`enumbers` must be lists and `regions` a mapping when present.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Regulatory overrides must be a JSON object, got {type(data).__name__}")

    items = _section(data, "items", list, "a list", "regulatory overrides")

    records: list[dict[str, Any]] = []
    for i, record in enumerate(items):
        if not isinstance(record, dict) or not isinstance(record.get("tag"), str):
            raise ValueError(f"regulatory overrides: item {i} must be an object with a string 'tag'")
        for name, (kind, what) in _RECORD_FIELDS.items():
            _section(record, name, kind, what, f"regulatory overrides: item {i}")
        records.append(record)
    return records
