"""Apply classified failures: notify the user and trigger the auth-reset hook."""

from __future__ import annotations

from collections.abc import Callable
from logging import Logger

from querysync.platform.logging import logger as app_logger

from ..domain.models import AppError
from .classifier import classify
from .ports import Notifier


class ErrorHandler:
    """Classify raw failures and route them to UI feedback and session reset."""

    _notifier: Notifier | None
    _on_auth_error: Callable[[], None] | None
    _logger: Logger

    def __init__(
        self,
        *,
        notifier: Notifier | None = None,
        on_auth_error: Callable[[], None] | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._notifier = notifier
        self._on_auth_error = on_auth_error
        self._logger = logger or app_logger.getChild("errors")

    def handle(
        self,
        raw: object,
        *,
        silent: bool = False,
        on_auth_error: Callable[[], None] | None = None,
    ) -> AppError:
        """Classify ``raw`` and apply its side effects.

        Args:
            raw: Any failure value raised or returned by a loader or executor,
                or an :class:`AppError` the cache already classified.
            silent: Skip the user notification.
            on_auth_error: Per-call session-reset hook; overrides the handler default.

        Returns:
            AppError: The classified error, so callers can branch on its flags.
        """

        error = raw if isinstance(raw, AppError) else classify(raw)
        self._logger.debug(
            "Handling %s error (status=%s): %s", error.kind.value, error.status, error.message
        )

        if error.is_auth_error:
            hook = on_auth_error or self._on_auth_error
            if hook is not None:
                hook()

        if not silent and self._notifier is not None:
            self._notifier.error(error.message)

        return error


__all__ = ["ErrorHandler"]
