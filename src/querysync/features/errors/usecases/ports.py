"""Ports for the errors feature."""

from __future__ import annotations

from typing import Protocol


class Notifier(Protocol):
    """Surface short user-facing messages (toasts, console lines)."""

    def success(self, title: str, description: str | None = None) -> None:
        ...

    def error(self, title: str, description: str | None = None) -> None:
        ...

    def info(self, title: str, description: str | None = None) -> None:
        ...
