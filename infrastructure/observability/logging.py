"""
Build logging.

Every line carries the run tag (r=) and the pipeline stage it was emitted
from (s=), injected from contextvars. Console output always; a rotating
log file when `log_file` is configured.
"""

import contextvars
import hashlib
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

cv_run_tag = contextvars.ContextVar("run_tag", default="-")
cv_stage = contextvars.ContextVar("stage", default="-")

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] r=%(run)s s=%(stage)s | %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | r=%(run)s s=%(stage)s | %(message)s"

# HTTP client libraries log every request at INFO
QUIET_LOGGERS = ("httpx", "httpcore")


def make_run_tag(run_id: str, length: int = 8) -> str:
    """Short, stable BLAKE2s tag for a run id."""
    return hashlib.blake2s(run_id.encode("utf-8"), digest_size=8).hexdigest()[:length]


class ContextInjectFilter(logging.Filter):
    """Copy the run tag and stage onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run = cv_run_tag.get() or "-"
        record.stage = cv_stage.get() or "-"
        return True


def set_log_context(*, run_id_full: str | None = None, stage: str | None = None) -> None:
    if run_id_full is not None:
        cv_run_tag.set(make_run_tag(str(run_id_full)))
    if stage is not None:
        cv_stage.set(str(stage))


def clear_stage_context() -> None:
    cv_stage.set("-")


def _attach(root: logging.Logger, handler: logging.Handler, level: int, fmt: str, datefmt: str) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    handler.addFilter(ContextInjectFilter())
    root.addHandler(handler)


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,
    backup_count: int = 5,
) -> None:
    """
    (Re)configure the root logger.

    Safe to call more than once: previous handlers are dropped, so the
    entry point can log config errors before the config is known.

    Args:
        log_file: Rotating log file, or None for console only
        console_level: Minimum console level
        file_level: Minimum file level
        max_bytes: Rotation size
        backup_count: Rotated files to keep
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # handlers filter by level

    _attach(root, logging.StreamHandler(), console_level, CONSOLE_FORMAT, "%H:%M:%S")

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        _attach(root, fh, file_level, FILE_FORMAT, "%Y-%m-%d %H:%M:%S")

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Logging configured (console=%s, file=%s)",
        logging.getLevelName(console_level),
        log_file if log_file is not None else "None",
    )
