"""Command execution package for CLI."""

from querysync.ui.cli.commands.classify import ClassifyCommand
from querysync.ui.cli.commands.fetch import FetchCommand
from querysync.ui.cli.commands.modal import ModalCommand

__all__ = [
    "ClassifyCommand",
    "FetchCommand",
    "ModalCommand",
]
