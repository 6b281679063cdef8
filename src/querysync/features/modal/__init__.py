"""Public surface for the modal feature."""

from .adapters.memory_location import MemoryLocation
from .domain.models import CLOSED, ModalMode, ModalState
from .usecases.ports import UrlLocation
from .usecases.resolver import ModalStateResolver

__all__ = [
    "CLOSED",
    "MemoryLocation",
    "ModalMode",
    "ModalState",
    "ModalStateResolver",
    "UrlLocation",
]
