import pytest

from domain.catalog.aliases import (
    english_display_name,
    enumber_aliases,
    enumber_from_tag,
    extract_english_aliases,
    humanize_tag,
    is_english_tag,
    strip_namespace,
)


@pytest.mark.parametrize(
    ("tag", "code"),
    [
        ("en:e171", "e171"),
        ("en:E330", "e330"),
        ("en:e150a", "e150a"),
        ("fr:e1400", "e1400"),
    ],
)
def test_enumber_from_tag_extracts_lowercase_code(tag: str, code: str) -> None:
    assert enumber_from_tag(tag) == [code]


@pytest.mark.parametrize("tag", ["en:titanium-dioxide", "en:e", "en:e171-extra", "en:vitamin-e", "e171"])
def test_non_code_tags_yield_no_codes_or_enumber_aliases(tag: str) -> None:
    assert enumber_from_tag(tag) == []
    assert enumber_aliases(tag) == []


def test_enumber_aliases_cover_case_and_hyphen_variants() -> None:
    assert enumber_aliases("en:e171") == ["E171", "E-171", "e171", "e-171"]
    assert enumber_aliases("en:e150a") == ["E150A", "E-150A", "e150a", "e-150a"]


def test_display_name_accepts_nested_or_bare_string() -> None:
    assert english_display_name({"name": {"en": "Titanium dioxide"}}) == "Titanium dioxide"
    assert english_display_name({"name": "Curcumin"}) == "Curcumin"
    assert english_display_name({"name": {"fr": "Dioxyde de titane"}}) is None
    assert english_display_name(None) is None
    assert english_display_name({"name": 42}) is None


def test_humanize_tag_drops_bare_codes() -> None:
    assert humanize_tag("en:titanium-dioxide") == "titanium dioxide"
    assert humanize_tag("en:e171") is None
    assert humanize_tag("en:330") is None
    assert humanize_tag("en:") is None
    # trailing letter makes it more than a bare code
    assert humanize_tag("en:e150a") == "e150a"


def test_namespace_helpers() -> None:
    assert strip_namespace("en:sugar") == "sugar"
    assert strip_namespace("sugar") == "sugar"
    assert is_english_tag("en:sugar")
    assert not is_english_tag("fr:sucre")
    assert not is_english_tag("english:sugar")


def test_aliases_follow_display_synonym_code_fallback_order() -> None:
    entry = {
        "name": {"en": "Titanium dioxide"},
        "synonyms": {"en": ["Titanium dioxide", "CI 77891"], "fr": ["dioxyde de titane"]},
    }
    assert extract_english_aliases("en:e171", entry) == [
        "Titanium dioxide",
        "CI 77891",
        "E171",
        "E-171",
        "e171",
        "e-171",
    ]


def test_aliases_include_tag_fallback_for_named_tags() -> None:
    entry = {"name": {"en": "Sea salt"}}
    assert extract_english_aliases("en:sea-salt", entry) == ["Sea salt", "sea salt"]


def test_aliases_are_trimmed_deduplicated_and_non_empty() -> None:
    entry = {
        "name": {"en": "  Sugar "},
        "synonyms": {"en": ["Sugar", "", "   ", "sucrose", None, "sucrose", 7]},
    }
    aliases = extract_english_aliases("en:sugar", entry)
    assert aliases == ["Sugar", "sucrose", "sugar"]
    assert len(aliases) == len(set(aliases))
    assert all(a and a == a.strip() for a in aliases)


def test_aliases_tolerate_missing_or_malformed_fields() -> None:
    assert extract_english_aliases("en:e330", {}) == ["E330", "E-330", "e330", "e-330"]
    assert extract_english_aliases("en:cocoa-butter", None) == ["cocoa butter"]
    assert extract_english_aliases("en:cocoa-butter", {"synonyms": {"en": "cocoa"}}) == ["cocoa butter"]
    assert extract_english_aliases("en:cocoa-butter", {"synonyms": ["cocoa"]}) == ["cocoa butter"]
