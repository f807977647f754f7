# src/todo_cli/tasks/reminders.py

"""
Reminder time handling.

Two parse strategies, first success wins:
1. natural language via dateparser ("tomorrow at 5pm", "in 10 minutes")
2. direct timestamp via datetime.fromisoformat ("2026-10-19T17:00")

Stored form is UTC ISO-8601 with milliseconds and a "Z" suffix.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

import dateparser

logger = logging.getLogger(__name__)

Emitter = Callable[[str], None]

_DATEPARSER_SETTINGS = {
    "PREFER_DATES_FROM": "future",
}


def _as_aware(dt: datetime) -> datetime:
    # Naive values are local wall-clock time.
    return dt.astimezone() if dt.tzinfo is None else dt


def to_iso(dt: datetime) -> str:
    utc = _as_aware(dt).astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def from_iso(value: str) -> datetime:
    """Parse a stored reminder time into an aware datetime."""
    return _as_aware(datetime.fromisoformat(value))


def format_local(value: str) -> str:
    return from_iso(value).astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _parse_natural(text: str, now: datetime | None) -> datetime | None:
    settings = dict(_DATEPARSER_SETTINGS)
    if now is not None:
        # RELATIVE_BASE is read as local wall-clock time.
        settings["RELATIVE_BASE"] = now.astimezone().replace(tzinfo=None) if now.tzinfo else now
    try:
        return dateparser.parse(text, settings=settings)
    except (ValueError, OverflowError, OSError):
        logger.debug("dateparser rejected %r", text, exc_info=True)
        return None


def _parse_direct(text: str) -> datetime | None:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def parse_reminder(
    text: str | None,
    *,
    now: datetime | None = None,
    emit: Emitter = print,
) -> str | None:
    """
    Resolve free text into a stored reminder time.

    Returns None for empty input (silently) and for unparsable input
    (after emitting a warning that quotes the input).
    """
    if not text or not text.strip():
        return None

    text = text.strip()

    dt = _parse_natural(text, now)
    if dt is None:
        dt = _parse_direct(text)

    iso: str | None = None
    if dt is not None:
        try:
            iso = to_iso(dt)
        except (ValueError, OverflowError, OSError):
            # Parsed, but outside what the local clock can represent (e.g. year 1).
            logger.debug("Reminder %r resolved to unusable %r", text, dt, exc_info=True)

    if iso is None:
        logger.warning("Could not parse reminder time: %r", text)
        emit(f'⚠️ Could not parse reminder time: "{text}"')
        return None

    logger.debug("Reminder %r resolved to %s", text, iso)
    return iso
