"""HTTP transport package.

Thin JSON client for the portal API whose failures carry the raw shapes
understood by :func:`querysync.features.errors.classify`.
"""

from .client import (
    ApiClient,
    ApiFailure,
    FetchFailure,
    HttpFailure,
    MalformedResponse,
    RequestTimeout,
)

__all__ = [
    "ApiClient",
    "ApiFailure",
    "FetchFailure",
    "HttpFailure",
    "MalformedResponse",
    "RequestTimeout",
]
