"""Where: src/querysync/platform/http/client.py
What: JSON API adapter that raises failures in the shapes the error classifier reads.
Why: Decouple network concerns from caching so loaders stay one-line calls.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import requests

from querysync.config.settings import API_BASE_URL, REQUEST_TIMEOUT_SECONDS
from querysync.features.errors.usecases.classifier import FETCH_ERROR_MARKER, TIMEOUT_MARKER
from querysync.platform.logging import logger


class ApiFailure(Exception):
    """Base class for transport failures; subclasses fix the raw shape."""

    message: str | None = None
    status: int | str | None = None
    data: Any = None
    error: str | None = None


class RequestTimeout(ApiFailure):
    """The request did not complete within the configured timeout."""

    def __init__(self) -> None:
        super().__init__(TIMEOUT_MARKER)
        self.message = TIMEOUT_MARKER


class FetchFailure(ApiFailure):
    """The server could not be reached at all."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.status = FETCH_ERROR_MARKER
        self.error = reason


class HttpFailure(ApiFailure):
    """The server answered with a non-2xx status."""

    def __init__(self, status: int, data: Any = None) -> None:
        super().__init__(f"HTTP {status}")
        self.status = status
        self.data = data


class MalformedResponse(ApiFailure):
    """A 2xx response announced JSON but did not contain valid JSON."""

    def __init__(self, detail: str) -> None:
        message = f"Malformed response from server: {detail}"
        super().__init__(message)
        self.message = message


class ApiClient:
    """Perform portal API calls on a worker thread through ``requests``.

    Successful JSON responses wrapped in ``{"success", "data", "timestamp"}``
    are unwrapped to ``data``. Requests are never retried; a write runs once.
    """

    _base_url: str
    _token_provider: Callable[[], str | None] | None
    _timeout: float
    _session: requests.Session

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        *,
        token_provider: Callable[[], str | None] | None = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._token_provider = token_provider
        self._timeout = timeout
        self._session = session or requests.Session()

    async def get(self, endpoint: str) -> Any:
        return await self.request("GET", endpoint)

    async def post(self, endpoint: str, data: Any = None) -> Any:
        return await self.request("POST", endpoint, data)

    async def patch(self, endpoint: str, data: Any = None) -> Any:
        return await self.request("PATCH", endpoint, data)

    async def delete(self, endpoint: str) -> Any:
        return await self.request("DELETE", endpoint)

    async def request(self, method: str, endpoint: str, data: Any = None) -> Any:
        return await asyncio.to_thread(self.send, method, endpoint, data)

    def send(self, method: str, endpoint: str, data: Any = None) -> Any:
        """Blocking request; raises an :class:`ApiFailure` subclass on failure."""

        url = f"{self._base_url}/{endpoint.lstrip('/')}"
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        token = self._token_provider() if self._token_provider is not None else None
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = self._session.request(
                method,
                url,
                json=data,
                headers=headers,
                timeout=self._timeout,
            )
        except requests.Timeout as exc:
            logger.warning("%s %s timed out after %.1fs", method, url, self._timeout)
            raise RequestTimeout() from exc
        except requests.RequestException as exc:
            logger.warning("%s %s request error: %s", method, url, exc)
            raise FetchFailure(str(exc)) from exc

        return self._handle_response(response)

    def close(self) -> None:
        self._session.close()

    @staticmethod
    def _handle_response(response: requests.Response) -> Any:
        content_type = response.headers.get("content-type", "")
        is_json = "application/json" in content_type
        status = int(response.status_code)

        if not 200 <= status < 300:
            logger.warning("HTTP error: status=%s url=%s", status, response.url)
            raise HttpFailure(status, _error_body(response, is_json))

        if not is_json:
            return response.text

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("JSON parse error for %s: %s", response.url, exc)
            raise MalformedResponse(str(exc)) from exc

        if isinstance(payload, dict) and "success" in payload and "data" in payload:
            return payload["data"]
        return payload


def _error_body(response: requests.Response, is_json: bool) -> Any:
    if is_json:
        try:
            return response.json()
        except ValueError:
            pass
    return {
        "statusCode": int(response.status_code),
        "errorCode": "UNKNOWN_ERROR",
        "message": response.text,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "path": response.url,
    }


__all__ = [
    "ApiClient",
    "ApiFailure",
    "FetchFailure",
    "HttpFailure",
    "MalformedResponse",
    "RequestTimeout",
]
