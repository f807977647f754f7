# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_cli.core.state import AppState
from todo_cli.tasks.task_store import TaskStore

from .fakes import FakeScheduler


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the entry point.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="todo",
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        # Paths (tmp per test run)
        tasks_path=tmp_path / "tasks.json",
        # Notifications
        notifications_enabled=False,
        notification_title="Todo Reminder",
        notification_timeout=1,
        # One-shot mode returns right after the command unless a test opts in.
        wait_for_reminders=False,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def output() -> list[str]:
    """Everything the app emitted, one entry per emit() call."""
    return []


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, output: list[str]) -> AppState:
    """
    AppState wired with a recording scheduler.

    NOTE: the real TaskStore is kept because the file format is part of
    what we want to test.
    """
    return AppState(
        settings=settings,
        task_store=store,
        scheduler=FakeScheduler(),
        emit=output.append,
    )
