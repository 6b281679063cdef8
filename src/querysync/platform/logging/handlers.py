"""Rich console handler for structured cache and modal events."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class EventRichHandler(RichHandler):
    """Custom Rich handler that renders ``cache_event`` records compactly."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "cache.query.fetch": ("⬇️", "blue"),
        "cache.query.attach": ("🔗", "cyan"),
        "cache.query.success": ("✅", "green"),
        "cache.query.error": ("⛔", "red"),
        "cache.invalidate": ("♻️", "yellow"),
        "cache.mutation.success": ("🎉", "green"),
        "cache.mutation.error": ("❌", "red"),
        "modal.open": ("📂", "magenta"),
        "modal.close": ("📁", "magenta"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "cache.query.fetch": "Fetching ",
        "cache.query.attach": "Joined in-flight ",
        "cache.query.success": "Resolved ",
        "cache.query.error": "Failed ",
        "cache.invalidate": "Invalidated ",
        "cache.mutation.success": "Mutation succeeded",
        "cache.mutation.error": "Mutation failed",
        "modal.open": "Opened modal ",
        "modal.close": "Closed modal ",
    }
    _KEY_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["tracebacks_show_locals"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_key(self, key: Sequence[object]) -> Text:
        """Format a cache key with coloured separators and ellipsis truncation."""

        parts = [str(segment) for segment in key]
        truncated = len(parts) > self._KEY_SEGMENT_LIMIT
        if truncated:
            parts = parts[: self._KEY_SEGMENT_LIMIT]

        text = Text()
        for index, part in enumerate(parts):
            if index:
                _ = text.append("/", style=Style(color="magenta"))
            _ = text.append(part, style=Style(color="white"))
        if truncated:
            _ = text.append("/…", style=Style(color="magenta"))
        if not parts:
            _ = text.append("*", style=Style(color="white"))
        return text

    def _render_event_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured events with dedicated styling."""

        event = getattr(record, "cache_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        label = self._EVENT_LABELS.get(event)
        if label:
            _ = body.append(label)

        if event.startswith("modal."):
            mode = getattr(record, "modal_mode", None)
            entity_id = getattr(record, "entity_id", None)
            if mode:
                _ = body.append(str(mode))
            if entity_id:
                _ = body.append(f" #{entity_id}")
        else:
            cache_key = getattr(record, "cache_key", None)
            if isinstance(cache_key, (tuple, list)):
                _ = body.append_text(self._format_key(cache_key))

            prefixes = getattr(record, "prefixes", None)
            if event == "cache.invalidate" and isinstance(prefixes, (tuple, list)):
                rendered = [self._format_key(prefix) for prefix in prefixes]
                for index, prefix_text in enumerate(rendered):
                    if index:
                        _ = body.append(", ")
                    _ = body.append_text(prefix_text)

        metrics: list[str] = []
        duration_ms = getattr(record, "duration_ms", None)
        if isinstance(duration_ms, (int, float)):
            metrics.append(f"{duration_ms:.2f} ms")
        count = getattr(record, "entry_count", None)
        if isinstance(count, int):
            metrics.append(f"entries={count}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            metrics.append(str(error_message))
        if metrics:
            _ = body.append(" (" + ", ".join(metrics) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for structured events."""

        event_text = self._render_event_message(record)
        if event_text is not None:
            return event_text

        return super().render_message(record, message)


__all__ = ["EventRichHandler"]
