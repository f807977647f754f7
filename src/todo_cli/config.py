# src/todo_cli/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required: every value has a local default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
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
    log_dir: Path

    # ---- Storage ----
    tasks_path: Path

    # ---- Notifications ----
    notifications_enabled: bool
    notification_title: str
    notification_timeout: int

    # ---- One-shot mode ----
    wait_for_reminders: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/todo"))

        # Relative on purpose: the task list lives in the working directory.
        tasks_path = _env_path(_k("TASKS_PATH"), Path("tasks.json"))

        notifications_enabled = _env_bool(_k("NOTIFICATIONS"), True)
        notification_title = _env(_k("NOTIFICATION_TITLE"), "Todo Reminder").strip() or "Todo Reminder"
        notification_timeout = max(1, _env_int(_k("NOTIFICATION_TIMEOUT"), 10))

        wait_for_reminders = _env_bool(_k("WAIT_FOR_REMINDERS"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            tasks_path=tasks_path,
            notifications_enabled=notifications_enabled,
            notification_title=notification_title,
            notification_timeout=notification_timeout,
            wait_for_reminders=wait_for_reminders,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
