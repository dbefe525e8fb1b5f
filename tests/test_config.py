# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_journal.config import Settings, get_settings

ENV_NAMES = (
    "JOURNAL_APP_NAME",
    "JOURNAL_LOG_LEVEL",
    "JOURNAL_LOG_FILE_ENABLED",
    "JOURNAL_DATA_DIR",
    "JOURNAL_PATH",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    s = Settings.from_env()

    assert s.app_name == "journal"
    assert s.log_level == "WARNING"
    assert s.log_file_enabled is True
    assert s.data_dir == Path(".local/journal")
    assert s.journal_path == Path(".local/journal/tasks.json")


def test_journal_path_follows_data_dir(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("JOURNAL_DATA_DIR", str(tmp_path))

    assert Settings.from_env().journal_path == tmp_path / "tasks.json"


def test_overrides(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("JOURNAL_PATH", str(tmp_path / "mine.json"))
    clean_env.setenv("JOURNAL_LOG_LEVEL", "debug")
    clean_env.setenv("JOURNAL_LOG_FILE_ENABLED", "off")
    clean_env.setenv("JOURNAL_APP_NAME", "todo")

    s = Settings.from_env()

    assert s.journal_path == tmp_path / "mine.json"
    assert s.log_level == "DEBUG"
    assert s.log_file_enabled is False
    assert s.app_name == "todo"


def test_blank_path_falls_back_to_default(clean_env) -> None:
    clean_env.setenv("JOURNAL_PATH", "  ")

    assert Settings.from_env().journal_path == Path(".local/journal/tasks.json")


def test_get_settings_returns_shared_instance() -> None:
    assert get_settings() is get_settings()
