"""Alias and E-number extraction from Open Food Facts taxonomy entries."""

import re
from typing import Any

ENGLISH_PREFIX = "en:"

# "en:e171", "en:e150a" -> code group "171" / "150a"
_ENUMBER_TAG_RE = re.compile(r":e(\d+[a-z]?)$", re.IGNORECASE)
# tag-derived fallbacks that are just a bare code ("e171", "330")
_BARE_CODE_RE = re.compile(r"^[a-z]?\d+$", re.IGNORECASE)
_NAMESPACE_RE = re.compile(r"^[^:]*:")


def is_english_tag(tag: str) -> bool:
    return tag.startswith(ENGLISH_PREFIX)


def strip_namespace(tag: str) -> str:
    """Drop the language prefix: "en:titanium-dioxide" -> "titanium-dioxide"."""
    return _NAMESPACE_RE.sub("", tag, count=1)


def english_display_name(entry: Any) -> str | None:
    """
    Return the English display name of a taxonomy entry, if any.

    Entries carry either a localized mapping (`{"name": {"en": "..."}}`) or,
    occasionally, a bare string (`{"name": "..."}`).
    """
    if not isinstance(entry, dict):
        return None
    name = entry.get("name")
    if isinstance(name, dict):
        value = name.get("en")
        return value if isinstance(value, str) and value.strip() else None
    if isinstance(name, str) and name.strip():
        return name
    return None


def english_synonyms(entry: Any) -> list[str]:
    if not isinstance(entry, dict):
        return []
    synonyms = entry.get("synonyms")
    if not isinstance(synonyms, dict):
        return []
    values = synonyms.get("en")
    if not isinstance(values, list):
        return []
    return [s for s in values if isinstance(s, str) and s]


def enumber_aliases(tag: str) -> list[str]:
    """
    E-number spellings for a regulatory additive tag.

    Upper-case variants upper-case the whole code and lower-case variants
    lower-case it, so a lettered code gives "E150A" and "e150a" (never "e150A").

    Examples:
        >>> enumber_aliases("en:e171")
        ['E171', 'E-171', 'e171', 'e-171']
        >>> enumber_aliases("en:e150a")
        ['E150A', 'E-150A', 'e150a', 'e-150a']
        >>> enumber_aliases("en:titanium-dioxide")
        []
    """
    m = _ENUMBER_TAG_RE.search(tag)
    if not m:
        return []
    upper = m.group(1).upper()
    lower = m.group(1).lower()
    return [f"E{upper}", f"E-{upper}", f"e{lower}", f"e-{lower}"]


def enumber_from_tag(tag: str) -> list[str]:
    """Return the lowercase E-number code embedded in the tag ("en:e150a" -> ["e150a"]), or []."""
    m = _ENUMBER_TAG_RE.search(tag)
    return [f"e{m.group(1).lower()}"] if m else []


def humanize_tag(tag: str) -> str | None:
    """
    Fallback alias derived from the tag itself.

    Returns None when the stripped tag is empty or only looks like a code.
    """
    text = strip_namespace(tag).replace("-", " ")
    if not text or _BARE_CODE_RE.match(text):
        return None
    return text


def extract_english_aliases(tag: str, entry: Any) -> list[str]:
    """
    Collect the English aliases of a taxonomy entry.

    Order matters to consumers picking a "best display name":
    display name, synonyms, E-number variants, tag-derived fallback.
    Strings are trimmed, empties dropped and exact duplicates removed,
    keeping the first occurrence.
    """
    candidates: list[str] = []

    display = english_display_name(entry)
    if display:
        candidates.append(display)
    candidates.extend(english_synonyms(entry))
    candidates.extend(enumber_aliases(tag))

    fallback = humanize_tag(tag)
    if fallback:
        candidates.append(fallback)

    seen: set[str] = set()
    aliases: list[str] = []
    for raw in candidates:
        s = raw.strip()
        if not s or s in seen:
            continue
        seen.add(s)
        aliases.append(s)
    return aliases
