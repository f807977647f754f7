# tests/test_reminders.py

from __future__ import annotations

from datetime import datetime

import pytest

from todo_cli.tasks import reminders
from todo_cli.tasks.reminders import format_local, parse_reminder, to_iso


@pytest.mark.parametrize("text", [None, "", "   "])
def test_empty_input_returns_none_without_warning(text) -> None:
    out: list[str] = []
    assert parse_reminder(text, emit=out.append) is None
    assert out == []


def test_natural_language_is_resolved_against_now() -> None:
    now = datetime(2026, 10, 18, 9, 0)
    out: list[str] = []

    iso = parse_reminder("tomorrow at 5pm", now=now, emit=out.append)

    assert iso == to_iso(datetime(2026, 10, 19, 17, 0))
    assert out == []


def test_direct_timestamp_used_when_natural_language_fails(monkeypatch) -> None:
    monkeypatch.setattr(reminders.dateparser, "parse", lambda *a, **k: None)

    assert parse_reminder("2026-10-19T17:00:00+00:00", emit=lambda _: None) == "2026-10-19T17:00:00.000Z"


def test_timestamp_with_offset_is_stored_as_utc() -> None:
    assert parse_reminder("2026-10-19T17:00:00+00:00", emit=lambda _: None) == "2026-10-19T17:00:00.000Z"


def test_unparsable_input_warns_with_original_text() -> None:
    out: list[str] = []

    assert parse_reminder("blorp zzz", emit=out.append) is None
    assert out == ['⚠️ Could not parse reminder time: "blorp zzz"']


def test_to_iso_uses_milliseconds_and_z_suffix() -> None:
    iso = to_iso(datetime(2026, 10, 19, 17, 0, 5, 123456))
    assert iso.endswith("Z")
    assert len(iso.split(".")[-1]) == len("123Z")


def test_format_local_round_trips_local_wall_clock() -> None:
    assert format_local(to_iso(datetime(2026, 10, 19, 17, 0))) == "2026-10-19 17:00:00"


def test_time_outside_utc_range_is_a_parse_failure(monkeypatch) -> None:
    monkeypatch.setattr(reminders.dateparser, "parse", lambda *a, **k: None)
    out: list[str] = []

    assert parse_reminder("0001-01-01T00:00:00+14:00", emit=out.append) is None
    assert out == ['⚠️ Could not parse reminder time: "0001-01-01T00:00:00+14:00"']
