# src/todo_cli/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, re-arms stored reminders, then either:
- runs one command from argv (one-shot mode), or
- opens the `todo> ` prompt when argv is empty (interactive mode).
"""

from __future__ import annotations

import asyncio
import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry
from ..config import get_settings
from ..connectors.console_connector import LineReader, run_console_loop
from ..core.ports import Notifier
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def run(
    argv: list[str],
    *,
    settings=None,
    notifier: Notifier | None = None,
    read_line: LineReader | None = None,
) -> None:
    if settings is None:
        settings = get_settings()

    state = create_initial_state(settings=settings, notifier=notifier)
    scheduler = state.scheduler

    # The only startup side effect: timers for reminders still in the future.
    scheduler.reschedule_all(state.task_store)

    try:
        if not argv:
            await run_console_loop(state, read_line=read_line)
            return

        reply = registry.handle(state, argv)
        state.emit(reply if reply is not None else registry.build_usage())

        # Reminders restored from the store do not hold a one-shot command open.
        if getattr(settings, "wait_for_reminders", True) and scheduler.added:
            logger.info("Waiting for %d new reminder(s). Press Ctrl+C to stop.", scheduler.added)
            await scheduler.wait_idle(include_restored=False)
    finally:
        scheduler.cancel_all()


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    args = list(sys.argv[1:] if argv is None else argv)
    logger.debug("Starting %s argv=%s", settings.app_name, args)

    try:
        asyncio.run(run(args, settings=settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting.")
        print()


if __name__ == "__main__":
    main()
