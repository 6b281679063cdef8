"""Rich console notifier used as the CLI's toast surface."""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.text import Text


@final
class RichNotifier:
    """Print success, error and info notices to a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)

    def success(self, title: str, description: str | None = None) -> None:
        self._emit("✔", "green", title, description)

    def error(self, title: str, description: str | None = None) -> None:
        self._emit("✖", "red", title, description)

    def info(self, title: str, description: str | None = None) -> None:
        self._emit("ℹ", "blue", title, description)

    def _emit(self, icon: str, color: str, title: str, description: str | None) -> None:
        text = Text()
        _ = text.append(f"{icon} ", style=f"bold {color}")
        _ = text.append(title, style=color)
        if description:
            _ = text.append(f" ({description})", style="dim")
        self._console.print(text)


__all__ = ["RichNotifier"]
