"""Where: src/querysync/ui/cli/commands/modal.py
What: Apply modal read/open/close operations to a URL.
Why: Make deep links to entity modals easy to build and inspect.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from querysync.features.modal import MemoryLocation, ModalState, ModalStateResolver
from querysync.ui.cli.args.options import ModalArgs


@final
class ModalCommand:
    """Print the rewritten URL and the modal state it encodes."""

    def __init__(self, args: ModalArgs, *, console: Console | None = None) -> None:
        self._args = args
        self._console = console or Console()

    def execute(self) -> tuple[str, ModalState]:
        location = MemoryLocation(self._args.url)
        resolver = ModalStateResolver(
            self._args.id_param,
            location=location,
            modal_param=self._args.modal_param,
        )

        if self._args.action == "open":
            assert self._args.mode is not None
            state = resolver.open(self._args.entity_id, self._args.mode)
        elif self._args.action == "close":
            state = resolver.close()
        else:
            state = resolver.read()

        mode = state.mode.value if state.mode is not None else "-"
        status = "[green]open[/green]" if state.is_open else "[dim]closed[/dim]"
        self._console.print(location.url, markup=False, highlight=False)
        self._console.print(f"mode={mode} id={state.entity_id or '-'} {status}")
        return location.url, state
