"""Command line argument handling package."""

from querysync.ui.cli.args.parser import ArgumentParser
from querysync.ui.cli.args.options import CLIArgs, ClassifyArgs, FetchArgs, ModalArgs

__all__ = ["ArgumentParser", "CLIArgs", "ClassifyArgs", "FetchArgs", "ModalArgs"]
