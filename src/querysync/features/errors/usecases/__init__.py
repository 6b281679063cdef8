"""Error classification and handling use cases."""

from .classifier import FETCH_ERROR_MARKER, TIMEOUT_MARKER, classify
from .handler import ErrorHandler
from .ports import Notifier

__all__ = ["ErrorHandler", "FETCH_ERROR_MARKER", "Notifier", "TIMEOUT_MARKER", "classify"]
