# src/todo_cli/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .ports import ReminderSink, TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: object

    task_store: TaskRepo
    scheduler: ReminderSink

    # Where command output and warnings go.
    emit: Callable[[str], None] = print
