# src/todo_cli/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by commands and the console session.

Commands depend on Protocols instead of concrete implementations, so tests can
swap the file store, the timer-based scheduler and the desktop notifier.
"""

from collections.abc import Iterable
from typing import Any, Protocol


class TaskRepo(Protocol):
    def read_tasks(self) -> list[Any]: ...
    def save_tasks(self, tasks: Iterable[Any]) -> None: ...


class Notifier(Protocol):
    """Desktop-side port: shows a reminder outside the terminal."""

    def notify(self, *, title: str, message: str, sound: bool = True) -> None: ...


class ReminderSink(Protocol):
    """
    Reminder scheduler as seen by commands and the entry point.

    `prompt` is re-printed after a fired reminder while the console session runs.
    """

    prompt: str | None

    @property
    def pending(self) -> int: ...
    @property
    def added(self) -> int: ...

    def schedule(self, task: Any, *, restored: bool = False) -> bool: ...
    def cancel(self, task: Any) -> bool: ...
    def cancel_all(self) -> None: ...
    def reschedule_all(self, store: TaskRepo) -> int: ...
    async def wait_idle(self, *, include_restored: bool = True) -> None: ...
