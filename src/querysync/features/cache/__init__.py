# Where: querysync.features.cache
# What: Export the request cache, mutation binding and result snapshots.
# Why: Provide a stable import surface for screens and tests.

"""Public surface for the cache feature."""

from .domain.models import (
    CacheEntry,
    CacheKey,
    MutationResult,
    QueryResult,
    is_covered,
    key_identity,
    normalize_key,
)
from .usecases.mutation import Mutation
from .usecases.request_cache import RequestCache

__all__ = [
    "CacheEntry",
    "CacheKey",
    "Mutation",
    "MutationResult",
    "QueryResult",
    "RequestCache",
    "is_covered",
    "key_identity",
    "normalize_key",
]
