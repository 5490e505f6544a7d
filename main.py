"""
Entrypoint for the food catalog build.

This script performs the following steps:
- loads .env and configs/build.yaml (both optional)
- loads the curated hazard and regulatory overrides
- downloads the Open Food Facts additive and ingredient taxonomies
- builds the hazard, regulatory and ingredient catalogs
- writes v1/hazards.json, v1/regulatory.json, v1/ingredients.json
- logs a per-file summary

It takes no arguments; all paths are relative to the working directory.
Exit status is 0 on success and 1 on any failure.
"""

import logging
import sys
from datetime import datetime

from dotenv import load_dotenv

from application import run_pipeline
from infrastructure.config import load_build_config
from infrastructure.observability import clear_stage_context, configure_logging, make_run_tag, set_log_context
from infrastructure.sources import TaxonomyClient

logger = logging.getLogger(__name__)


def main() -> int:
    # Console logging first so config errors are reported too
    configure_logging()

    try:
        load_dotenv(override=False)
        cfg = load_build_config()

        configure_logging(
            log_file=cfg.log_file,
            console_level=getattr(logging, cfg.console_level),
            file_level=getattr(logging, cfg.file_level),
        )

        run_id = datetime.now().strftime("%Y%m%d_%H%M%S")
        set_log_context(run_id_full=run_id)
        logger.info("Starting build: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))

        with TaxonomyClient.from_cfg(cfg) as client:
            summary = run_pipeline(cfg, client)
    except Exception as e:
        logger.exception("Build failed: %s", e)
        return 1

    clear_stage_context()
    logger.info("Built:")
    for path, count in summary.items():
        logger.info("  - %s (%d entries)", path, count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
