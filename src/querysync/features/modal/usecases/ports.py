"""Ports for the modal feature."""

from __future__ import annotations

from typing import Protocol


class UrlLocation(Protocol):
    """Read and replace the query string of the current location.

    ``search`` is the raw query string without the leading ``?``.
    """

    @property
    def search(self) -> str:
        ...

    @search.setter
    def search(self, value: str) -> None:
        ...
