"""Screen-level composition of the modal resolver and the request cache."""

from .entity_modal import EntityModalController

__all__ = ["EntityModalController"]
