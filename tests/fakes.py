# tests/fakes.py

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field

from todo_cli.core.ports import TaskRepo
from todo_cli.tasks.task_models import Task


@dataclass(slots=True)
class SentNotification:
    title: str
    message: str
    sound: bool


@dataclass(slots=True)
class FakeNotifier:
    """
    Notifier that records instead of showing a popup.

    fail=True makes every call raise, like plyer on a headless machine.
    """

    sent: list[SentNotification] = field(default_factory=list)
    fail: bool = False

    def notify(self, *, title: str, message: str, sound: bool = True) -> None:
        if self.fail:
            raise NotImplementedError("no notification backend")
        self.sent.append(SentNotification(title=title, message=message, sound=sound))


@dataclass(slots=True)
class FakeScheduler:
    """
    Scheduler stand-in for command tests: records calls, arms nothing.
    """

    scheduled: list[Task] = field(default_factory=list)
    cancelled: list[Task] = field(default_factory=list)
    prompt: str | None = None

    @property
    def pending(self) -> int:
        return 0

    @property
    def added(self) -> int:
        return 0

    def schedule(self, task: Task, *, restored: bool = False) -> bool:
        self.scheduled.append(task)
        return True

    def cancel(self, task: Task) -> bool:
        self.cancelled.append(task)
        return task in self.scheduled

    def cancel_all(self) -> None:
        return

    def reschedule_all(self, store: TaskRepo) -> int:
        return sum(1 for t in store.read_tasks() if self.schedule(t))

    async def wait_idle(self, *, include_restored: bool = True) -> None:
        return


def scripted_lines(lines: Iterable[str]) -> Callable[[str], Awaitable[str]]:
    """LineReader that replays `lines`, then behaves like a closed stdin."""
    it = iter(lines)

    async def read_line(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line
