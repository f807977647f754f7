# src/todo_cli/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
import shlex
import threading
from collections.abc import Awaitable, Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_store import StorageDecodeError

logger = logging.getLogger(__name__)

PROMPT = "todo> "
EXIT_COMMANDS = ("exit", "quit")

LineReader = Callable[[str], Awaitable[str]]


def _resolve(fut: asyncio.Future[str], line: str | None, exc: Exception | None) -> None:
    if fut.done():
        return
    if exc is not None:
        fut.set_exception(exc)
    else:
        fut.set_result(line or "")


async def read_stdin_line(prompt: str) -> str:
    """
    input() on a daemon thread, so reminder timers keep firing while we wait.

    Only the blocking read leaves the event loop thread; the line is handed back
    through the loop. EOFError is re-raised here.
    """
    loop = asyncio.get_running_loop()
    fut: asyncio.Future[str] = loop.create_future()

    def worker() -> None:
        try:
            line = input(prompt)
        except Exception as e:
            loop.call_soon_threadsafe(_resolve, fut, None, e)
        else:
            loop.call_soon_threadsafe(_resolve, fut, line, None)

    threading.Thread(target=worker, name="console-input", daemon=True).start()
    return await fut


def split_line(line: str) -> list[str]:
    """Shell-style split so quoted task text stays together; plain split if quotes are unbalanced."""
    try:
        return shlex.split(line)
    except ValueError:
        return line.split()


async def run_console_loop(state: AppState, *, read_line: LineReader | None = None) -> None:
    read_line = read_line or read_stdin_line
    emit = state.emit

    logger.info("Console session started.")
    emit("📌 Todo CLI started (type 'help' for commands)")
    state.scheduler.prompt = PROMPT

    try:
        while True:
            try:
                line = await read_line(PROMPT)
            except EOFError:
                logger.info("Console EOF received, exiting.")
                emit("")
                break

            argv = split_line(line.strip())
            if not argv:
                continue

            if argv[0].lower() in EXIT_COMMANDS:
                logger.info("Console exit command received.")
                emit("👋 Exiting todo app...")
                break

            try:
                reply = command_registry.handle(state, argv, interactive=True)
            except StorageDecodeError:
                raise
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply is None:
                reply = "Unknown command. Type 'help' for usage."
            emit(reply)
    finally:
        state.scheduler.prompt = None
        logger.info("Console session finished.")
