"""Canonical error shape consumed by cache callers, UI and auth logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


DEFAULT_ERROR_MESSAGE = "Something went wrong. Please try again."
TIMEOUT_MESSAGE = "Request is taking too long. Please check your internet connection."
NETWORK_MESSAGE = "Unable to connect to the server. Please try again later."


class ErrorKind(str, Enum):
    """Closed taxonomy every raw failure is reduced to."""

    NETWORK = "network"
    TIMEOUT = "timeout"
    AUTH = "auth"
    PERMISSION = "permission"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    SERVER = "server"
    GENERIC = "generic"


@dataclass(slots=True, frozen=True)
class AppError:
    """Normalized failure with a user-facing message and classification flags."""

    message: str
    kind: ErrorKind = ErrorKind.GENERIC
    status: int | None = None
    code: str | None = None
    is_network_error: bool = False
    is_timeout: bool = False
    is_auth_error: bool = False
    validation_errors: dict[str, str] | None = None

    @property
    def is_forbidden(self) -> bool:
        return self.kind is ErrorKind.PERMISSION

    @property
    def is_not_found(self) -> bool:
        return self.kind is ErrorKind.NOT_FOUND

    @property
    def is_server_error(self) -> bool:
        return self.kind is ErrorKind.SERVER

    @property
    def is_validation_error(self) -> bool:
        return self.kind is ErrorKind.VALIDATION


__all__ = [
    "AppError",
    "DEFAULT_ERROR_MESSAGE",
    "ErrorKind",
    "NETWORK_MESSAGE",
    "TIMEOUT_MESSAGE",
]
