from pathlib import Path

# Repo-root conventional directories/files (overrideable via configs/build.yaml)
CONFIG_DIR = Path("configs")
BUILD_CONFIG_FILE = CONFIG_DIR / "build.yaml"

OVERRIDES_DIR = Path("overrides")
HAZARD_OVERRIDES_FILENAME = "hazards.overrides.json"
REGULATORY_OVERRIDES_FILENAME = "regulatory.overrides.json"

OUTPUT_DIR = Path("v1")

OFF_ADDITIVES_URL = "https://static.openfoodfacts.org/data/taxonomies/additives.json"
OFF_INGREDIENTS_URL = "https://static.openfoodfacts.org/data/taxonomies/ingredients.json"
USER_AGENT = "clean-plate-data-builder/1.0"

# Environment variable overrides
ENV_ADDITIVES_URL = "CATALOG_ADDITIVES_URL"
ENV_INGREDIENTS_URL = "CATALOG_INGREDIENTS_URL"
ENV_USER_AGENT = "CATALOG_USER_AGENT"
ENV_OUTPUT_DIR = "CATALOG_OUTPUT_DIR"
