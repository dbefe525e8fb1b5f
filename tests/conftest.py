# tests/conftest.py

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

import pytest

from task_journal.config import Settings
from task_journal.tasks.task_models import Task


FIXED_TS = 1_700_000_000


def _make_task(text: str, ts: int = FIXED_TS) -> Task:
    return Task(text=text, created_at=datetime.fromtimestamp(ts, tz=UTC))


@pytest.fixture()
def make_task():
    """Build tasks with a fixed timestamp, so listings are deterministic."""
    return _make_task


@pytest.fixture()
def journal_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing everything at tmp_path.

    File logging is off so CLI tests do not leave journal.log behind.
    """
    data_dir = tmp_path / "data"
    return Settings(
        app_name="journal",
        log_level="WARNING",
        log_file_enabled=False,
        data_dir=data_dir,
        journal_path=data_dir / "tasks.json",
    )


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """setup_logging() replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    for h in saved_handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(saved_level)
    logging.captureWarnings(False)
