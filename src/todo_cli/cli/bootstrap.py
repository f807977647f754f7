# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes the settings and wires the
file store, the desktop notifier and the reminder scheduler into an AppState.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..config import get_settings
from ..connectors.desktop_notifier import DesktopNotifier
from ..core.ports import Notifier
from ..core.state import AppState
from ..tasks.task_scheduler import ReminderScheduler
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    notifier: Notifier | None = None,
    emit: Callable[[str], None] = print,
) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and notifier are injectable for tests; settings falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if notifier is None:
        notifier = DesktopNotifier(
            app_name=settings.app_name,
            timeout=settings.notification_timeout,
            enabled=settings.notifications_enabled,
        )

    scheduler = ReminderScheduler(notifier, title=settings.notification_title, emit=emit)
    store = TaskStore(settings.tasks_path)
    logger.debug("State ready tasks=%s", store.path)

    return AppState(settings=settings, task_store=store, scheduler=scheduler, emit=emit)
