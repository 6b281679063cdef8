"""Utilities for rendering classified errors."""

from __future__ import annotations

from rich import box
from rich.table import Table
from rich.text import Text

from querysync.features.errors import AppError


def build_error_table(error: AppError) -> Table:
    """Build a two-column table describing ``error``.

    Args:
        error: Classified error to render.

    Returns:
        Table: Rich table with one row per populated field.
    """
    table = Table(
        title="Classified Error",
        show_header=True,
        header_style="bold magenta",
        box=box.SIMPLE_HEAD,
    )
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("message", Text(error.message, style="red"))
    table.add_row("kind", error.kind.value)
    if error.status is not None:
        table.add_row("status", str(error.status))
    if error.code:
        table.add_row("code", error.code)

    flags = [
        name
        for name, enabled in (
            ("network", error.is_network_error),
            ("timeout", error.is_timeout),
            ("auth", error.is_auth_error),
        )
        if enabled
    ]
    if flags:
        table.add_row("flags", ", ".join(flags))

    if error.validation_errors:
        for field_name, message in error.validation_errors.items():
            table.add_row(f"field:{field_name}", message)

    return table


__all__ = ["build_error_table"]
