# src/todo_cli/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.reminders import format_local, parse_reminder
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, list[str]], str | None]

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class _Command:
    handler: CommandHandler
    usage: str
    help_text: str
    interactive_only: bool


class CommandRegistry:
    """
    Command-name -> handler table shared by one-shot and interactive mode.

    A handler returns the reply text, or None when its arguments are missing,
    which callers report the same way as an unknown command.
    """

    def __init__(self) -> None:
        self._commands: dict[str, _Command] = {}
        self._order: list[str] = []

    def register(
        self,
        name: str,
        handler: CommandHandler,
        *,
        usage: str,
        help_text: str,
        aliases: list[str] | None = None,
        interactive_only: bool = False,
    ) -> None:
        cmd = _Command(handler=handler, usage=usage, help_text=help_text, interactive_only=interactive_only)
        key = name.lower()
        self._commands[key] = cmd
        self._order.append(key)
        for alias in aliases or []:
            self._commands[alias.lower()] = cmd

    def handle(self, state: AppState, argv: list[str], *, interactive: bool = False) -> str | None:
        """
        Run argv[0] with argv[1:] as arguments.
        Returns the reply, or None if argv is not a usable command.
        """
        if not argv:
            return None

        name = argv[0].lower()
        cmd = self._commands.get(name)
        if cmd is None or (cmd.interactive_only and not interactive):
            logger.debug("Unknown command %r", name)
            return None

        return cmd.handler(state, argv[1:])

    def build_help(self, *, interactive: bool = True) -> str:
        entries = [
            self._commands[name]
            for name in self._order
            if interactive or not self._commands[name].interactive_only
        ]
        width = max(len(c.usage) for c in entries) + 3
        lines = ["Commands:"]
        for c in entries:
            lines.append(f"  {c.usage.ljust(width)}{c.help_text}")
        if interactive:
            lines.append(f"  {'exit'.ljust(width)}Quit the app")
        return "\n".join(lines)

    def build_usage(self, prog: str = "todo") -> str:
        lines = ["Usage:"]
        for name in self._order:
            c = self._commands[name]
            if not c.interactive_only:
                lines.append(f"  {prog} {c.usage}")
        lines.append(f"  {prog}            # interactive mode")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_add(state: AppState, args: list[str]) -> str | None:
    """
    add <task> [reminder text...]

    The first argument is the task text, everything after it is the reminder.
    An unparsable reminder only warns: the task is still added.
    """
    if not args or not args[0].strip():
        return None

    text = args[0]
    reminder_input = " ".join(args[1:])

    tasks = state.task_store.read_tasks()
    reminder_time = parse_reminder(reminder_input, emit=state.emit)

    task = Task(text=text, reminder_time=reminder_time)
    if reminder_time:
        state.scheduler.schedule(task)

    tasks.append(task)
    state.task_store.save_tasks(tasks)
    logger.info("Task added at position %d (reminder=%s)", len(tasks), reminder_time)

    lines = [f'✅ Task "{text}" added!']
    if reminder_time:
        lines.append(f"⏰ Reminder set for {format_local(reminder_time)}")
    return "\n".join(lines)


def cmd_list(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.read_tasks()
    if not tasks:
        return "No tasks available."

    lines = ["📋 Your tasks:"]
    for i, task in enumerate(tasks, start=1):
        reminder = f" (Reminder: {format_local(task.reminder_time)})" if task.reminder_time else ""
        lines.append(f"{i}. {task.text}{reminder}")
    return "\n".join(lines)


def cmd_remove(state: AppState, args: list[str]) -> str | None:
    """remove <index>: 1-based, as shown by `list`. Also cancels the task's pending reminder."""
    if not args:
        return None

    try:
        index = int(args[0])
    except ValueError:
        return "Invalid task index!"

    tasks = state.task_store.read_tasks()
    if index < 1 or index > len(tasks):
        return "Invalid task index!"

    removed = tasks.pop(index - 1)
    state.task_store.save_tasks(tasks)
    state.scheduler.cancel(removed)
    logger.info("Task removed from position %d", index)

    return f'🗑️ Task "{removed.text}" removed!'


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


registry.register(
    "add",
    cmd_add,
    usage="add <task> [reminderTime]",
    help_text="Add a task with optional reminder",
)
registry.register("list", cmd_list, usage="list", help_text="List all tasks")
registry.register("remove", cmd_remove, usage="remove <index>", help_text="Remove a task")
registry.register(
    "help",
    cmd_help,
    usage="help",
    help_text="Show available commands",
    aliases=["?"],
    interactive_only=True,
)
