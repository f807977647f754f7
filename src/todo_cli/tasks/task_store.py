# src/todo_cli/tasks/task_store.py

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)


class StorageDecodeError(ValueError):
    """The task file exists but does not hold a task list."""


class TaskStore:
    """
    JSON file task store.

    The file is a pretty-printed JSON array of {"text", "reminderTime"?} objects.
    - no cache: every read goes to disk
    - every save rewrites the whole file in place (no temp file, no backup)
    - no locking: the last writer wins
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read_tasks(self) -> list[Task]:
        """
        Load the full task list.

        A missing file is an empty list. Anything unreadable raises StorageDecodeError.
        """
        if not self._path.exists():
            return []

        try:
            data = json.loads(self._path.read_text("utf-8"))
        except UnicodeDecodeError as e:
            raise StorageDecodeError(f"{self._path}: not UTF-8 ({e})") from e
        except json.JSONDecodeError as e:
            raise StorageDecodeError(f"{self._path}: invalid JSON ({e})") from e

        if not isinstance(data, list):
            raise StorageDecodeError(f"{self._path}: expected a JSON array, got {type(data).__name__}")

        tasks: list[Task] = []
        legacy = 0
        for pos, item in enumerate(data, start=1):
            task = Task.from_json(item)
            if task is None:
                raise StorageDecodeError(f"{self._path}: entry {pos} is not a task: {item!r}")
            if isinstance(item, str):
                legacy += 1
            tasks.append(task)

        if legacy:
            logger.info("Migrating %d legacy plain-string tasks from %s", legacy, self._path)

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save_tasks(self, tasks: Iterable[Task]) -> None:
        """Overwrite the file with the full list."""
        payload = [t.to_json() for t in tasks]
        if self._path.parent != Path("."):
            self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), "utf-8")
        logger.debug("Saved %d tasks to %s", len(payload), self._path)
