# src/todo_cli/connectors/desktop_notifier.py

from __future__ import annotations

import logging

from plyer import notification

logger = logging.getLogger(__name__)


class DesktopNotifier:
    """
    Desktop notifications through plyer.

    plyer picks the platform backend (libnotify/dbus, Windows toast, macOS).
    It has no portable sound switch: `sound` is accepted for the port and
    only logged. Backends missing on headless machines raise; callers decide
    what to do with that.
    """

    def __init__(self, *, app_name: str = "todo", timeout: int = 10, enabled: bool = True) -> None:
        self._app_name = app_name
        self._timeout = int(timeout)
        self._enabled = enabled

    def notify(self, *, title: str, message: str, sound: bool = True) -> None:
        if not self._enabled:
            logger.debug("Notifications disabled; skipping %r", message)
            return

        logger.debug("Desktop notification title=%r sound=%s", title, sound)
        notification.notify(
            title=title,
            message=message,
            app_name=self._app_name,
            timeout=self._timeout,
        )
