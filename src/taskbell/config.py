# src/taskbell/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the CLI ("settings layer").
- The core (TaskStore, scheduler) never reads settings itself; the
  composition root passes explicit values in.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKBELL"


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


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


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

    # ---- Front-end switches ----
    console_enabled: bool
    reminders_enabled: bool
    label_locale: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_db_path: Path
    storage_key: str

    # ---- Reminder tuning ----
    reminder_poll_seconds: float
    reminder_max_pending: int

    @staticmethod
    def from_env(*, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv(override=False)

        app_name = _env(_k("APP_NAME"), "taskbell").strip() or "taskbell"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)
        reminders_enabled = _env_bool(_k("REMINDERS_ENABLED"), True)
        label_locale = _env(_k("LABEL_LOCALE"), "en").strip().lower() or "en"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskbell"))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.sqlite3")
        storage_key = _env(_k("STORAGE_KEY"), "task_list").strip() or "task_list"

        reminder_poll_seconds = _env_float(_k("REMINDER_POLL_SECONDS"), 15.0)
        reminder_max_pending = _env_int(_k("REMINDER_MAX_PENDING"), 64)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            reminders_enabled=reminders_enabled,
            label_locale=label_locale,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            storage_key=storage_key,
            reminder_poll_seconds=reminder_poll_seconds,
            reminder_max_pending=reminder_max_pending,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
