"""Adapters for the modal feature."""

from .memory_location import MemoryLocation

__all__ = ["MemoryLocation"]
