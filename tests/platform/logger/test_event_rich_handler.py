"""Tests for the ``EventRichHandler`` structured event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from querysync.platform.logging import EventRichHandler


def _make_handler() -> EventRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return EventRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with event extras for testing."""

    record = logging.LogRecord(
        name="querysync",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_message_formats_cache_key_segments() -> None:
    """Cache keys should render as slash-separated segments with timing."""

    handler = _make_handler()
    record = _build_record(
        cache_event="cache.query.success",
        cache_key=("locations", "42"),
        duration_ms=12.345,
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "Resolved locations/42" in plain
    assert "(12.35 ms)" in plain


def test_render_message_truncates_long_keys() -> None:
    """Keys longer than the segment limit should end with an ellipsis."""

    handler = _make_handler()
    record = _build_record(
        cache_event="cache.query.fetch",
        cache_key=("sessions", "today", "2026-10-19T00:00", "2026-10-19T23:59", "coach", "7"),
    )

    plain = handler.render_message(record, "").plain

    assert "sessions/today/2026-10-19T00:00/2026-10-19T23:59/…" in plain
    assert "coach" not in plain


def test_render_message_lists_invalidated_prefixes() -> None:
    handler = _make_handler()
    record = _build_record(
        cache_event="cache.invalidate",
        prefixes=[("locations",), ()],
        entry_count=3,
    )

    plain = handler.render_message(record, "").plain

    assert "Invalidated locations, *" in plain
    assert "entries=3" in plain


def test_render_message_describes_modal_events() -> None:
    handler = _make_handler()
    record = _build_record(cache_event="modal.open", modal_mode="edit", entity_id="42")

    plain = handler.render_message(record, "").plain

    assert "Opened modal edit #42" in plain


def test_render_message_includes_error_message() -> None:
    handler = _make_handler()
    record = _build_record(
        cache_event="cache.mutation.error",
        error_message="Requested resource was not found.",
        duration_ms=1.0,
    )

    plain = handler.render_message(record, "").plain

    assert "Mutation failed" in plain
    assert "Requested resource was not found." in plain


def test_render_message_falls_back_for_plain_records() -> None:
    """Records without an event should use the default Rich rendering."""

    handler = _make_handler()
    record = _build_record()

    rendered = handler.render_message(record, "Configuration loaded from config.toml")

    assert isinstance(rendered, Text)
    assert rendered.plain == "Configuration loaded from config.toml"
