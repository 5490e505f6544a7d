"""
Observability: build logging with run/stage context.

Provides:
- Run tag and pipeline stage stamped on every log line
- Optional rotating log file
- Quieted HTTP client loggers
"""

from infrastructure.observability.logging import (
    clear_stage_context,
    configure_logging,
    make_run_tag,
    set_log_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "clear_stage_context",
    "make_run_tag",
]
