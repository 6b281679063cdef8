"""Where: src/querysync/ui/cli/commands/classify.py
What: Classify a raw failure payload and print the result.
Why: Let operators check how a backend failure will surface in the portal.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from querysync.features.errors import AppError, classify
from querysync.ui.cli.args.options import ClassifyArgs
from querysync.ui.cli.display.errors import build_error_table


@final
class ClassifyCommand:
    """Render the :class:`AppError` produced for a JSON payload."""

    def __init__(self, args: ClassifyArgs, *, console: Console | None = None) -> None:
        self._args = args
        self._console = console or Console()

    def execute(self) -> AppError:
        error = classify(self._args.payload)
        self._console.print(build_error_table(error))
        return error
