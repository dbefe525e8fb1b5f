# src/task_journal/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing here touches the journal file; the CLI decides when to create dirs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "JOURNAL"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file_enabled: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    journal_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "journal").strip() or "journal"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_file_enabled = _env_bool(_k("LOG_FILE_ENABLED"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/journal"))
        journal_path = _env_path(_k("PATH"), data_dir / "tasks.json")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file_enabled=log_file_enabled,
            data_dir=data_dir,
            journal_path=journal_path,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
