"""Where: src/querysync/features/cache/domain/models.py
What: Cache keys, per-key entries and the result snapshots handed to callers.
Why: Keep structural key identity and entry bookkeeping free of scheduling code.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar

from querysync.features.errors import AppError

T = TypeVar("T")

KeySegment: TypeAlias = str | int | float | bool | None
CacheKey: TypeAlias = tuple[KeySegment, ...]

_SEGMENT_TYPES = (str, int, float, bool, type(None))


def normalize_key(key: Iterable[KeySegment] | str, *, allow_empty: bool = False) -> CacheKey:
    """Return ``key`` as an immutable tuple of primitive segments.

    A bare string is treated as a single-segment key rather than a sequence of
    characters.

    Raises:
        ValueError: If a segment is not a primitive or the key is empty while
            ``allow_empty`` is false.
    """

    segments: tuple[Any, ...] = (key,) if isinstance(key, str) else tuple(key)
    for segment in segments:
        if not isinstance(segment, _SEGMENT_TYPES):
            msg = f"Cache key segments must be primitives, got {type(segment).__name__}"
            raise ValueError(msg)
    if not segments and not allow_empty:
        raise ValueError("Cache key must contain at least one segment")
    return segments


KeyIdentity: TypeAlias = tuple[tuple[str, KeySegment], ...]


def _segment_identity(segment: KeySegment) -> tuple[str, KeySegment]:
    # bool is an int subclass and 1 == 1.0 == True; tag so only JSON-equal segments match.
    if isinstance(segment, bool):
        return ("bool", segment)
    if isinstance(segment, (int, float)):
        return ("number", segment)
    if segment is None:
        return ("null", None)
    return ("string", segment)


def key_identity(key: CacheKey) -> KeyIdentity:
    """Return the lookup identity of ``key``; ``True`` and ``1`` never collide."""

    return tuple(_segment_identity(segment) for segment in key)


def is_covered(key: CacheKey, prefix: CacheKey) -> bool:
    """Return True when ``prefix`` is a leading segment run of ``key``."""

    return len(prefix) <= len(key) and key_identity(key[: len(prefix)]) == key_identity(prefix)


@dataclass(slots=True, frozen=True)
class QueryResult(Generic[T]):
    """Snapshot of a cache entry as seen by one caller."""

    data: T | None = None
    error: AppError | None = None
    is_loading: bool = False
    is_fetching: bool = False
    is_stale: bool = False
    has_data: bool = False


@dataclass(slots=True, frozen=True)
class MutationResult(Generic[T]):
    """Outcome of a single mutation run."""

    data: T | None = None
    error: AppError | None = None

    @property
    def is_success(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class CacheEntry(Generic[T]):
    """Mutable bookkeeping for one cache key.

    ``generation`` increases on every invalidation; a load only clears
    staleness when no invalidation happened after it started.
    """

    key: CacheKey
    data: T | None = None
    has_data: bool = False
    error: AppError | None = None
    task: asyncio.Task[QueryResult[T]] | None = None
    fetched_at: float | None = None
    is_stale: bool = False
    generation: int = 0

    def snapshot(self) -> QueryResult[T]:
        in_flight = self.task is not None
        return QueryResult(
            data=self.data,
            error=self.error,
            is_loading=in_flight and not self.has_data,
            is_fetching=in_flight,
            is_stale=self.is_stale,
            has_data=self.has_data,
        )


__all__ = [
    "CacheEntry",
    "CacheKey",
    "KeyIdentity",
    "KeySegment",
    "MutationResult",
    "QueryResult",
    "is_covered",
    "key_identity",
    "normalize_key",
]
