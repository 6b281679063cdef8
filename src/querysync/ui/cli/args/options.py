"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from querysync.features.modal import ModalMode


@final
@dataclass(slots=True)
class ClassifyArgs:
    """Command line arguments for the ``classify`` subcommand."""

    command: Literal["classify"]
    payload: object
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ModalArgs:
    """Command line arguments for the ``modal`` subcommand."""

    command: Literal["modal"]
    url: str
    id_param: str
    modal_param: str | None
    action: Literal["read", "open", "close"]
    entity_id: str | None
    mode: ModalMode | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class FetchArgs:
    """Command line arguments for the ``fetch`` subcommand."""

    command: Literal["fetch"]
    endpoint: str
    base_url: str
    token: str | None
    timeout: float
    verbose: bool
    quiet: bool


CLIArgs = ClassifyArgs | ModalArgs | FetchArgs

__all__ = ["CLIArgs", "ClassifyArgs", "FetchArgs", "ModalArgs"]
