# src/todo_cli/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(slots=True, frozen=True)
class Task:
    """
    One entry of the task list.

    Position in the list is the identity: there is no id column, the 1-based
    index shown by `list` is what `remove` expects.
    """

    text: str
    # UTC ISO-8601, e.g. "2026-10-19T15:00:00.000Z"
    reminder_time: str | None = None

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {"text": self.text}
        if self.reminder_time:
            out["reminderTime"] = self.reminder_time
        return out

    @classmethod
    def from_json(cls, raw: Any) -> Task | None:
        """Decode one stored entry; None if it does not match the schema."""
        if isinstance(raw, str):
            # Older reminder-less files stored bare strings.
            return cls(text=raw) if raw else None

        if not isinstance(raw, dict):
            return None

        text = raw.get("text")
        if not isinstance(text, str) or not text:
            return None

        reminder = raw.get("reminderTime")
        if reminder is not None:
            if not isinstance(reminder, str):
                return None
            try:
                datetime.fromisoformat(reminder)
            except ValueError:
                return None

        return cls(text=text, reminder_time=reminder or None)
