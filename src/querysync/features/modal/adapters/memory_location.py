"""In-memory location holding a full URL, for tests, the CLI and server-side rendering."""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit


class MemoryLocation:
    """Keep a URL and let the modal resolver rewrite only its query string."""

    _url: str

    def __init__(self, url: str = "/") -> None:
        self._url = url

    @property
    def url(self) -> str:
        return self._url

    @url.setter
    def url(self, value: str) -> None:
        self._url = value

    @property
    def search(self) -> str:
        return urlsplit(self._url).query

    @search.setter
    def search(self, value: str) -> None:
        parts = urlsplit(self._url)
        self._url = urlunsplit(parts._replace(query=value.lstrip("?")))

    def __repr__(self) -> str:
        return f"MemoryLocation({self._url!r})"


__all__ = ["MemoryLocation"]
