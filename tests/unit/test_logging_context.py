import logging
from pathlib import Path

from infrastructure.observability import clear_stage_context, configure_logging, make_run_tag, set_log_context
from infrastructure.observability.logging import ContextInjectFilter


def _record() -> logging.LogRecord:
    return logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)


def test_run_tag_is_stable_and_short() -> None:
    assert make_run_tag("20261019_101500") == make_run_tag("20261019_101500")
    assert len(make_run_tag("20261019_101500")) == 8
    assert make_run_tag("a") != make_run_tag("b")


def test_filter_stamps_run_and_stage() -> None:
    set_log_context(run_id_full="20261019_101500", stage="hazards")
    record = _record()

    assert ContextInjectFilter().filter(record) is True
    assert record.run == make_run_tag("20261019_101500")
    assert record.stage == "hazards"

    clear_stage_context()
    record = _record()
    ContextInjectFilter().filter(record)
    assert record.stage == "-"
    assert record.run == make_run_tag("20261019_101500")


def test_configure_logging_writes_stage_to_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    log_file = tmp_path / "logs" / "build.log"
    try:
        configure_logging(log_file=log_file, console_level=logging.WARNING)
        set_log_context(stage="write")
        logging.getLogger("catalog.test").info("hello")
        for h in root.handlers:
            h.flush()
    finally:
        for h in root.handlers:
            h.close()
        root.handlers[:] = handlers
        root.setLevel(level)
        clear_stage_context()

    text = log_file.read_text(encoding="utf-8")
    assert "s=write | hello" in text
    assert "catalog.test" in text
