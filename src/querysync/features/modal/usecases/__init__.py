"""Modal state use cases."""

from .ports import UrlLocation
from .resolver import ModalStateResolver

__all__ = ["ModalStateResolver", "UrlLocation"]
