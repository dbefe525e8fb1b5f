# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

from task_journal.logging_setup import LOG_FILE_NAME, _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_app_logs_and_drops_library_noise() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("task_journal.tasks.task_store", logging.DEBUG))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))


def test_file_handler_writes_debug_logs(tmp_path: Path) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.ERROR)

    assert log_file == tmp_path / "logs" / LOG_FILE_NAME
    logging.getLogger("task_journal.test").debug("hello from test")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "hello from test" in log_file.read_text(encoding="utf-8")


def test_without_file_logging_no_dir_is_created(tmp_path: Path) -> None:
    assert setup_logging(log_dir=tmp_path / "logs", log_to_file=False) is None
    assert not (tmp_path / "logs").exists()
    assert len(logging.getLogger().handlers) == 1
