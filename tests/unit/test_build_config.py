from pathlib import Path

import pytest
from pydantic import ValidationError

from infrastructure.config import BuildConfig, load_build_config
from infrastructure.constants import OFF_ADDITIVES_URL, OFF_INGREDIENTS_URL, USER_AGENT


def test_defaults_when_config_file_is_absent(tmp_path: Path) -> None:
    cfg = load_build_config(tmp_path / "missing.yaml", env={})

    assert cfg.additives_url == OFF_ADDITIVES_URL
    assert cfg.ingredients_url == OFF_INGREDIENTS_URL
    assert cfg.user_agent == USER_AGENT
    assert cfg.timeout_s is None
    assert cfg.hazard_overrides_path == Path("overrides/hazards.overrides.json")
    assert cfg.regulatory_overrides_path == Path("overrides/regulatory.overrides.json")
    assert cfg.hazards_path == Path("v1/hazards.json")
    assert cfg.regulatory_path == Path("v1/regulatory.json")
    assert cfg.ingredients_path == Path("v1/ingredients.json")


def test_yaml_values_are_applied(tmp_path: Path) -> None:
    path = tmp_path / "build.yaml"
    path.write_text("output_dir: out\nconsole_level: debug\ntimeout_s: 30\n", encoding="utf-8")

    cfg = load_build_config(path, env={})

    assert cfg.output_dir == Path("out")
    assert cfg.console_level == "DEBUG"
    assert cfg.timeout_s == 30


def test_empty_yaml_means_defaults(tmp_path: Path) -> None:
    path = tmp_path / "build.yaml"
    path.write_text("", encoding="utf-8")
    assert load_build_config(path, env={}).model_dump() == BuildConfig().model_dump()


def test_env_overrides_yaml(tmp_path: Path) -> None:
    path = tmp_path / "build.yaml"
    path.write_text("user_agent: from-yaml/1.0\n", encoding="utf-8")

    cfg = load_build_config(
        path,
        env={
            "CATALOG_USER_AGENT": "from-env/2.0",
            "CATALOG_ADDITIVES_URL": "http://mirror.local/additives.json",
            "CATALOG_OUTPUT_DIR": "build/v1",
            "CATALOG_INGREDIENTS_URL": "",
        },
    )

    assert cfg.user_agent == "from-env/2.0"
    assert cfg.additives_url == "http://mirror.local/additives.json"
    assert cfg.output_dir == Path("build/v1")
    assert cfg.ingredients_url == OFF_INGREDIENTS_URL


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    path = tmp_path / "build.yaml"
    path.write_text("additive_url: typo\n", encoding="utf-8")
    with pytest.raises(ValueError, match="additive_url"):
        load_build_config(path, env={})


def test_non_mapping_yaml_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "build.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_build_config(path, env={})


def test_invalid_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        BuildConfig(console_level="LOUD")
