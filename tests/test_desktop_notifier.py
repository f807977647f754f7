# tests/test_desktop_notifier.py

from __future__ import annotations

from types import SimpleNamespace

from todo_cli.connectors import desktop_notifier
from todo_cli.connectors.desktop_notifier import DesktopNotifier


def test_notify_goes_through_plyer(monkeypatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(desktop_notifier, "notification", SimpleNamespace(notify=lambda **kw: calls.append(kw)))

    DesktopNotifier(app_name="todo", timeout=7).notify(title="Todo Reminder", message="Call mom")

    assert calls == [{"title": "Todo Reminder", "message": "Call mom", "app_name": "todo", "timeout": 7}]


def test_disabled_notifier_does_nothing(monkeypatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(desktop_notifier, "notification", SimpleNamespace(notify=lambda **kw: calls.append(kw)))

    DesktopNotifier(enabled=False).notify(title="Todo Reminder", message="Call mom")

    assert calls == []
