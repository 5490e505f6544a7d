"""Configuration models (Pydantic classes)."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from infrastructure.constants import (
    HAZARD_OVERRIDES_FILENAME,
    OFF_ADDITIVES_URL,
    OFF_INGREDIENTS_URL,
    OUTPUT_DIR,
    OVERRIDES_DIR,
    REGULATORY_OVERRIDES_FILENAME,
    USER_AGENT,
)


class BuildConfig(BaseModel):
    """
    Build configuration.
    - Loaded from configs/build.yaml (optional; defaults otherwise)
    - Selected fields overridden from the environment by the loader
    - Paths are relative to the invocation working directory
    """

    # Remote taxonomies
    additives_url: str = Field(default=OFF_ADDITIVES_URL, description="Open Food Facts additive taxonomy.")
    ingredients_url: str = Field(default=OFF_INGREDIENTS_URL, description="Open Food Facts ingredient taxonomy.")
    user_agent: str = Field(default=USER_AGENT, description="User-Agent header sent with every fetch.")
    timeout_s: float | None = Field(
        default=None,
        description="HTTP timeout in seconds. None keeps the transport default.",
    )

    # Curated overrides
    overrides_dir: Path = Field(default_factory=lambda: OVERRIDES_DIR)
    hazard_overrides_file: str = HAZARD_OVERRIDES_FILENAME
    regulatory_overrides_file: str = REGULATORY_OVERRIDES_FILENAME

    # Outputs
    output_dir: Path = Field(default_factory=lambda: OUTPUT_DIR)
    hazards_filename: str = "hazards.json"
    regulatory_filename: str = "regulatory.json"
    ingredients_filename: str = "ingredients.json"

    # Logging
    log_file: Path | None = None
    console_level: str = "INFO"
    file_level: str = "DEBUG"

    @field_validator("console_level", "file_level")
    @classmethod
    def _check_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @field_validator("user_agent")
    @classmethod
    def _check_user_agent(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("user_agent must not be empty")
        return v.strip()

    @property
    def hazard_overrides_path(self) -> Path:
        return self.overrides_dir / self.hazard_overrides_file

    @property
    def regulatory_overrides_path(self) -> Path:
        return self.overrides_dir / self.regulatory_overrides_file

    @property
    def hazards_path(self) -> Path:
        return self.output_dir / self.hazards_filename

    @property
    def regulatory_path(self) -> Path:
        return self.output_dir / self.regulatory_filename

    @property
    def ingredients_path(self) -> Path:
        return self.output_dir / self.ingredients_filename
