"""Display helpers for the CLI."""

from querysync.ui.cli.display.errors import build_error_table
from querysync.ui.cli.display.notifier import RichNotifier

__all__ = ["RichNotifier", "build_error_table"]
