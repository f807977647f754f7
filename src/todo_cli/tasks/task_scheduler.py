# src/todo_cli/tasks/task_scheduler.py

from __future__ import annotations

"""
Reminder scheduler.

One timer per reminder on the process event loop:
- schedule() arms a loop.call_later() handle when the reminder is in the future,
- the callback prints a reminder line and asks the notifier for a desktop popup,
- reminders already in the past are dropped (the task keeps its reminderTime).

Everything runs on the event loop thread, so callbacks never overlap each other
or a command.
"""

import asyncio
import logging
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..core.ports import Notifier, TaskRepo
from .reminders import from_iso
from .task_models import Task

logger = logging.getLogger(__name__)

Emitter = Callable[[str], None]


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


@dataclass(slots=True)
class _Pending:
    task: Task
    # Re-armed from the store at startup rather than by this process's own add.
    restored: bool = False
    handle: asyncio.TimerHandle | None = None


class ReminderScheduler:
    def __init__(
        self,
        notifier: Notifier,
        *,
        title: str = "Todo Reminder",
        emit: Emitter = print,
        write: Emitter = _write_stdout,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._notifier = notifier
        self._title = title
        self._emit = emit
        self._write = write
        self._clock = clock
        self._pending: list[_Pending] = []
        self._idle: asyncio.Event | None = None

        # Set by the console session so a fired reminder re-prints its prompt.
        self.prompt: str | None = None

    @property
    def pending(self) -> int:
        return len(self._pending)

    @property
    def added(self) -> int:
        """Pending reminders armed by add in this process (not restored at startup)."""
        return sum(1 for e in self._pending if not e.restored)

    def schedule(self, task: Task, *, restored: bool = False) -> bool:
        """
        Arm a one-shot timer for task.reminder_time.

        Returns True if a timer was armed. Requires a running event loop.
        """
        if not task.reminder_time:
            return False

        try:
            due_ts = from_iso(task.reminder_time).timestamp()
        except ValueError:
            logger.warning("Task %r has an unreadable reminderTime %r", task.text, task.reminder_time)
            return False

        delay = due_ts - self._clock()
        if delay <= 0:
            logger.debug("Reminder for %r is in the past (%s); not scheduling", task.text, task.reminder_time)
            return False

        loop = asyncio.get_running_loop()
        entry = _Pending(task=task, restored=restored)
        entry.handle = loop.call_later(delay, self._fire, entry)
        self._pending.append(entry)
        logger.info("Reminder scheduled for %r in %.1fs", task.text, delay)
        return True

    def cancel(self, task: Task) -> bool:
        """Cancel one pending reminder equal to task. Returns False if none was pending."""
        for entry in self._pending:
            if entry.task == task:
                if entry.handle is not None:
                    entry.handle.cancel()
                self._pending.remove(entry)
                logger.info("Reminder cancelled for %r", task.text)
                self._wake_waiters()
                return True
        return False

    def reschedule_all(self, store: TaskRepo) -> int:
        """Arm timers for every stored task with a future reminder. Returns how many."""
        count = 0
        for task in store.read_tasks():
            if self.schedule(task, restored=True):
                count += 1
        logger.debug("Rescheduled %d reminders", count)
        return count

    def cancel_all(self) -> None:
        for entry in self._pending:
            if entry.handle is not None:
                entry.handle.cancel()
        self._pending.clear()
        self._wake_waiters()

    async def wait_idle(self, *, include_restored: bool = True) -> None:
        """
        Return once no reminder is pending (fired or cancelled).

        include_restored=False only waits for reminders armed by add.
        """
        while self.pending if include_restored else self.added:
            self._idle = asyncio.Event()
            await self._idle.wait()

    def _wake_waiters(self) -> None:
        # Waiters re-check their own condition after every wake-up.
        if self._idle is not None:
            self._idle.set()

    def _fire(self, entry: _Pending) -> None:
        if entry in self._pending:
            self._pending.remove(entry)

        task = entry.task
        logger.info("Reminder fired for %r", task.text)
        self._emit(f'\n⏰ Reminder: "{task.text}"')

        try:
            self._notifier.notify(title=self._title, message=task.text, sound=True)
        except Exception:
            logger.exception("Desktop notification failed for %r", task.text)

        if self.prompt:
            self._write(self.prompt)

        self._wake_waiters()
