"""Public surface for the errors feature."""

from .domain.models import AppError, ErrorKind
from .usecases.classifier import classify
from .usecases.handler import ErrorHandler
from .usecases.ports import Notifier

__all__ = [
    "AppError",
    "ErrorHandler",
    "ErrorKind",
    "Notifier",
    "classify",
]
