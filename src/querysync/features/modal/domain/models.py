"""Modal modes and the URL-derived modal state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final


class ModalMode(str, Enum):
    """Interaction mode of the entity modal."""

    DETAILS = "details"
    EDIT = "edit"
    CREATE = "create"

    @staticmethod
    def parse(value: str | None) -> "ModalMode | None":
        """Translate a raw query-string value; unknown values mean no modal."""

        if value is None:
            return None
        for mode in ModalMode:
            if mode.value == value:
                return mode
        return None

    @staticmethod
    def from_user_input(value: "ModalMode | str") -> "ModalMode":
        """Translate caller input into a mode, rejecting unknown values."""

        if isinstance(value, ModalMode):
            return value
        mode = ModalMode.parse(value.strip().lower())
        if mode is None:
            valid: Final[str] = ", ".join(m.value for m in ModalMode)
            msg = f"Unsupported modal mode '{value}'. Valid options: {valid}"
            raise ValueError(msg)
        return mode


@dataclass(slots=True, frozen=True)
class ModalState:
    """Which entity modal is open and how; always derived from the URL."""

    mode: ModalMode | None = None
    entity_id: str | None = None

    @property
    def is_open(self) -> bool:
        return self.mode is not None and (
            self.entity_id is not None or self.mode is ModalMode.CREATE
        )


CLOSED: Final[ModalState] = ModalState()


__all__ = ["CLOSED", "ModalMode", "ModalState"]
