"""
Summary: Reduce any raw failure value to exactly one canonical AppError.
Why: Transport, timeout and validation layers fail in unrelated shapes that callers must treat uniformly.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

from ..domain.models import (
    DEFAULT_ERROR_MESSAGE,
    NETWORK_MESSAGE,
    TIMEOUT_MESSAGE,
    AppError,
    ErrorKind,
)

TIMEOUT_MARKER: Final[str] = "Request timeout"
FETCH_ERROR_MARKER: Final[str] = "FETCH_ERROR"

_MISSING: Final[object] = object()
_SCALAR_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray, int, float, complex, bool)

_STATUS_MESSAGES: Final[dict[int, tuple[ErrorKind, str]]] = {
    401: (ErrorKind.AUTH, "Session expired. Please log in again."),
    403: (ErrorKind.PERMISSION, "You do not have permission to perform this action."),
    404: (ErrorKind.NOT_FOUND, "Requested resource was not found."),
}


def classify(raw: object) -> AppError:
    """Map ``raw`` to an :class:`AppError`.

    Resolution is ordered and the first matching rule wins:

    1. ``None`` or a scalar (string, bytes, number) -> generic default.
    2. ``message == "Request timeout"`` -> timeout.
    3. ``status == "FETCH_ERROR"`` -> network error.
    4. numeric ``status`` -> dispatch on the HTTP status code.
    5. ``data.error.details`` field map -> validation error, messages joined.
    6. non-empty ``message`` string -> passed through verbatim.
    7. anything else -> generic default.

    Only the shape of ``raw`` is inspected (mapping keys or attributes), so
    dictionaries, exceptions and plain objects classify the same way. The
    function never raises.
    """

    try:
        return _resolve(raw)
    except Exception:
        # Total by contract: hostile shapes degrade to the generic default.
        return AppError(message=DEFAULT_ERROR_MESSAGE)


def _resolve(raw: object) -> AppError:
    if raw is None or isinstance(raw, _SCALAR_TYPES):
        return AppError(message=DEFAULT_ERROR_MESSAGE)

    message = _message_of(raw)
    if message == TIMEOUT_MARKER:
        return AppError(message=TIMEOUT_MESSAGE, kind=ErrorKind.TIMEOUT, is_timeout=True)

    status = _field(raw, "status")
    if status == FETCH_ERROR_MARKER:
        reason = _field(raw, "error")
        return AppError(
            message=reason if isinstance(reason, str) and reason else NETWORK_MESSAGE,
            kind=ErrorKind.NETWORK,
            is_network_error=True,
        )

    status_code = _as_status_code(status)
    if status_code is not None:
        return _classify_status(status_code, _field(raw, "data"))

    details = _validation_details(raw)
    if details:
        return AppError(
            message=", ".join(details.values()),
            kind=ErrorKind.VALIDATION,
            validation_errors=details,
        )

    if message:
        return AppError(message=message)

    return AppError(message=DEFAULT_ERROR_MESSAGE)


def _classify_status(status: int, body: object) -> AppError:
    body_message = _string_field(body, "message")
    code = _string_field(body, "errorCode") or _string_field(body, "code")

    if status == 400:
        return AppError(
            message=body_message or "Invalid request.",
            kind=ErrorKind.VALIDATION,
            status=status,
            code=code,
            validation_errors=_details_of(_field(body, "error")),
        )

    known = _STATUS_MESSAGES.get(status)
    if known is not None:
        kind, text = known
        return AppError(
            message=text,
            kind=kind,
            status=status,
            code=code,
            is_auth_error=kind is ErrorKind.AUTH,
        )

    if status >= 500:
        return AppError(
            message="Server error. Please try again later.",
            kind=ErrorKind.SERVER,
            status=status,
            code=code,
        )

    return AppError(message=body_message or "Request failed.", status=status, code=code)


def _field(value: object, name: str) -> Any:
    """Return ``value[name]`` or ``value.name``; ``_MISSING`` when absent."""

    if value is _MISSING or value is None or isinstance(value, _SCALAR_TYPES):
        return _MISSING
    try:
        if isinstance(value, Mapping):
            return value.get(name, _MISSING)
        return getattr(value, name, _MISSING)
    except Exception:
        return _MISSING


def _string_field(value: object, name: str) -> str | None:
    candidate = _field(value, name)
    if isinstance(candidate, str) and candidate:
        return candidate
    return None


def _message_of(raw: object) -> str | None:
    message = _field(raw, "message")
    if isinstance(message, str):
        return message
    # Exceptions carry their message as the first positional argument.
    args = _field(raw, "args")
    if isinstance(args, tuple) and args and isinstance(args[0], str):
        return args[0]
    return None


def _as_status_code(status: object) -> int | None:
    if isinstance(status, bool):
        return None
    if isinstance(status, int):
        return status
    if isinstance(status, float) and status.is_integer():
        return int(status)
    return None


def _details_of(error: object) -> dict[str, str] | None:
    details = _field(error, "details")
    if not isinstance(details, Mapping) or not details:
        return None
    return {str(name): str(text) for name, text in details.items()}


def _validation_details(raw: object) -> dict[str, str] | None:
    return _details_of(_field(_field(raw, "data"), "error"))


__all__ = ["FETCH_ERROR_MARKER", "TIMEOUT_MARKER", "classify"]
