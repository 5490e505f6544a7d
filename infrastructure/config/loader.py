"""Configuration and override loading from disk."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from domain.catalog.hazards import HazardOverrides
from domain.catalog.overrides import parse_hazard_overrides, parse_regulatory_overrides
from infrastructure.config.models import BuildConfig
from infrastructure.constants import (
    BUILD_CONFIG_FILE,
    ENV_ADDITIVES_URL,
    ENV_INGREDIENTS_URL,
    ENV_OUTPUT_DIR,
    ENV_USER_AGENT,
)
from infrastructure.io import ensure_exists, read_json

logger = logging.getLogger(__name__)

# env var -> BuildConfig field
ENV_OVERRIDES: dict[str, str] = {
    ENV_ADDITIVES_URL: "additives_url",
    ENV_INGREDIENTS_URL: "ingredients_url",
    ENV_USER_AGENT: "user_agent",
    ENV_OUTPUT_DIR: "output_dir",
}


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # an empty file is a valid "all defaults" config
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_build_config(
    path: Path = BUILD_CONFIG_FILE,
    env: Mapping[str, str] | None = None,
) -> BuildConfig:
    """
    Load build.yaml (if present) and apply environment overrides.

    The config file is optional: without it every field keeps its default.

    Args:
        path: Path to the YAML config file
        env: Environment mapping (defaults to os.environ)

    Returns:
        Fully-resolved BuildConfig
    """
    env = os.environ if env is None else env

    raw: dict[str, Any] = {}
    if path.exists():
        raw = _load_yaml(path)
        logger.debug("Loaded build config from %s", path)
    else:
        logger.debug("No build config at %s; using defaults", path)

    unknown = sorted(set(raw) - set(BuildConfig.model_fields))
    if unknown:
        raise ValueError(f"Unknown keys in {path}: {unknown}")

    for var, field in ENV_OVERRIDES.items():
        value = env.get(var)
        if value:
            raw[field] = value
            logger.debug("Config %s overridden from $%s", field, var)

    return BuildConfig(**raw)


def load_hazard_overrides(cfg: BuildConfig) -> HazardOverrides:
    """
    Read the hazard override file, then delegate parsing to the domain layer.

    Raises:
        FileNotFoundError: If the override file is missing
        json.JSONDecodeError: If the file is not valid JSON
        ValueError: If a section has the wrong container type
    """
    path = cfg.hazard_overrides_path
    ensure_exists(path, "hazard overrides")
    overrides = parse_hazard_overrides(read_json(path))

    for tag in overrides.collisions:
        logger.warning("Tag %s is listed under both 'avoid' and 'caution'; it will be classified 'avoid'", tag)

    logger.info(
        "Loaded hazard overrides from %s (avoid=%d, caution=%d, notes=%d)",
        path,
        len(overrides.avoid),
        len(overrides.caution),
        len(overrides.notes),
    )
    return overrides


def load_regulatory_overrides(cfg: BuildConfig) -> list[dict[str, Any]]:
    """Read the regulatory override file and return its curated records."""
    path = cfg.regulatory_overrides_path
    ensure_exists(path, "regulatory overrides")
    records = parse_regulatory_overrides(read_json(path))
    logger.info("Loaded regulatory overrides from %s (%d records)", path, len(records))
    return records
