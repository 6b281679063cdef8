"""
Summary: Key-addressed cache of async read results with prefix invalidation after writes.
Why: Every screen reads through one shared store so a successful write refreshes all dependent reads.
"""

from __future__ import annotations

import asyncio
import inspect
import time
from collections.abc import Awaitable, Callable, Iterable
from logging import Logger
from typing import Any, TypeVar

from querysync.features.errors import AppError, classify
from querysync.platform.logging import logger as app_logger

from ..domain.models import (
    CacheEntry,
    CacheKey,
    KeyIdentity,
    KeySegment,
    MutationResult,
    QueryResult,
    is_covered,
    key_identity,
    normalize_key,
)
from .mutation import Mutation

T = TypeVar("T")
V = TypeVar("V")

KeyLike = Iterable[KeySegment] | str
Loader = Callable[[], Awaitable[T] | T]
Executor = Callable[[V], Awaitable[T] | T]
Listener = Callable[[QueryResult[Any]], None]
SuccessCallback = Callable[[T, V], Awaitable[None] | None]
ErrorCallback = Callable[[AppError, V], Awaitable[None] | None]


async def _resolve(value: Awaitable[T] | T) -> T:
    if inspect.isawaitable(value):
        return await value
    return value


class RequestCache:
    """Explicitly owned query/mutation store; create one per application session.

    All methods must be called from the thread running the event loop. Between
    two awaits, entry creation, in-flight attachment and invalidation are
    plain synchronous updates of ``_entries``.
    """

    _entries: dict[KeyIdentity, CacheEntry[Any]]
    _listeners: dict[KeyIdentity, list[Listener]]
    _stale_after: float | None
    _clock: Callable[[], float]
    _logger: Logger

    def __init__(
        self,
        *,
        stale_after: float | None = None,
        clock: Callable[[], float] = time.monotonic,
        logger: Logger | None = None,
    ) -> None:
        self._entries = {}
        self._listeners = {}
        self._stale_after = stale_after if stale_after and stale_after > 0 else None
        self._clock = clock
        self._logger = logger or app_logger.getChild("cache")

    # Query path -------------------------------------------------------------

    def query(self, key: KeyLike, loader: Loader[T], *, enabled: bool = True) -> QueryResult[T]:
        """Return the current snapshot for ``key``, starting a load when needed.

        A load starts when the key is new, was invalidated, has aged past
        ``stale_after``, or only ever failed (an error and no value). A key
        with a request already in flight attaches to it instead of calling
        ``loader`` again. Must run inside an event loop.
        """

        if not enabled:
            return QueryResult()

        cache_key = normalize_key(key)
        identity = key_identity(cache_key)
        entry = self._entries.get(identity)
        if entry is None:
            entry = CacheEntry(key=cache_key)
            self._start(entry, loader)
            self._entries[identity] = entry
        elif entry.task is not None:
            self._logger.debug(
                "Attached to in-flight request for %s",
                cache_key,
                extra={"cache_event": "cache.query.attach", "cache_key": cache_key},
            )
        elif self._needs_refetch(entry):
            self._start(entry, loader)
        return entry.snapshot()

    async def fetch(self, key: KeyLike, loader: Loader[T], *, enabled: bool = True) -> QueryResult[T]:
        """Awaitable form of :meth:`query` returning the settled snapshot."""

        result = self.query(key, loader, enabled=enabled)
        if not enabled:
            return result
        return await self.wait(key)

    def refetch(self, key: KeyLike, loader: Loader[T]) -> QueryResult[T]:
        """Force a new load for ``key`` unless one is already in flight."""

        cache_key = normalize_key(key)
        identity = key_identity(cache_key)
        entry = self._entries.get(identity)
        if entry is None:
            entry = CacheEntry(key=cache_key)
            self._start(entry, loader)
            self._entries[identity] = entry
        elif entry.task is None:
            self._start(entry, loader)
        return entry.snapshot()

    async def wait(self, key: KeyLike) -> QueryResult[Any]:
        """Wait for the in-flight load of ``key`` (if any) and return its snapshot.

        Cancelling the waiter does not cancel the shared load.
        """

        entry = self._lookup(key)
        if entry is None:
            return QueryResult()
        if entry.task is not None:
            return await asyncio.shield(entry.task)
        return entry.snapshot()

    def peek(self, key: KeyLike) -> QueryResult[Any]:
        """Return the snapshot for ``key`` without starting a load."""

        entry = self._lookup(key)
        return entry.snapshot() if entry is not None else QueryResult()

    def get_data(self, key: KeyLike) -> Any:
        entry = self._lookup(key)
        return entry.data if entry is not None else None

    def set_data(self, key: KeyLike, value: T) -> QueryResult[T]:
        """Write ``value`` as the resolved result for ``key`` (optimistic updates)."""

        cache_key = normalize_key(key)
        identity = key_identity(cache_key)
        entry = self._entries.get(identity)
        if entry is None:
            entry = CacheEntry(key=cache_key)
            self._entries[identity] = entry
        entry.data = value
        entry.has_data = True
        entry.error = None
        entry.is_stale = False
        entry.fetched_at = self._clock()
        snapshot = entry.snapshot()
        self._notify(identity, snapshot)
        return snapshot

    def keys(self) -> list[CacheKey]:
        return [entry.key for entry in self._entries.values()]

    # Invalidation -----------------------------------------------------------

    def invalidate(self, *prefixes: KeyLike) -> list[CacheKey]:
        """Mark every entry covered by any of ``prefixes`` stale.

        Values are kept; the next :meth:`query` of a stale key refetches while
        still returning the previous value. An empty prefix covers every key.

        Returns:
            list[CacheKey]: Keys that were marked stale.
        """

        normalized = [normalize_key(prefix, allow_empty=True) for prefix in prefixes]
        marked: list[CacheKey] = []
        for entry in self._entries.values():
            if any(is_covered(entry.key, prefix) for prefix in normalized):
                entry.is_stale = True
                entry.generation += 1
                marked.append(entry.key)

        if normalized:
            self._logger.info(
                "Invalidated %d cache entries",
                len(marked),
                extra={
                    "cache_event": "cache.invalidate",
                    "prefixes": normalized,
                    "entry_count": len(marked),
                },
            )
        return marked

    def remove(self, prefix: KeyLike) -> list[CacheKey]:
        """Evict entries covered by ``prefix``; in-flight loads finish detached."""

        normalized = normalize_key(prefix, allow_empty=True)
        removed = [
            identity
            for identity, entry in self._entries.items()
            if is_covered(entry.key, normalized)
        ]
        return [self._entries.pop(identity).key for identity in removed]

    def clear(self) -> None:
        self._entries.clear()

    # Subscriptions ----------------------------------------------------------

    def subscribe(self, key: KeyLike, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with the settled snapshot after each load of ``key``.

        Returns:
            Callable[[], None]: Idempotent unsubscribe function. Once called,
            ``listener`` is never invoked again, even for loads already in flight.
        """

        identity = key_identity(normalize_key(key))
        listeners = self._listeners.setdefault(identity, [])
        listeners.append(listener)

        def unsubscribe() -> None:
            current = self._listeners.get(identity)
            if current is None or listener not in current:
                return
            current.remove(listener)
            if not current:
                del self._listeners[identity]

        return unsubscribe

    # Mutation path ----------------------------------------------------------

    async def mutate(
        self,
        executor: Executor[V, T],
        variables: V,
        *,
        invalidates: Iterable[KeyLike] = (),
        on_success: SuccessCallback[T, V] | None = None,
        on_error: ErrorCallback[V] | None = None,
    ) -> MutationResult[T]:
        """Run ``executor(variables)`` once and apply its outcome.

        On success the covered entries are invalidated before ``on_success``
        runs. On failure the error is classified, passed to ``on_error`` and
        nothing is invalidated. Concurrent calls are never de-duplicated.
        """

        prefixes = [normalize_key(prefix, allow_empty=True) for prefix in invalidates]
        started = self._clock()
        try:
            data = await _resolve(executor(variables))
        except Exception as exc:
            error = classify(exc)
            self._logger.warning(
                "Mutation failed: %s",
                error.message,
                extra={
                    "cache_event": "cache.mutation.error",
                    "error_message": error.message,
                    "duration_ms": (self._clock() - started) * 1000,
                },
            )
            if on_error is not None:
                await _resolve(on_error(error, variables))
            return MutationResult(error=error)

        if prefixes:
            _ = self.invalidate(*prefixes)
        self._logger.debug(
            "Mutation succeeded",
            extra={
                "cache_event": "cache.mutation.success",
                "duration_ms": (self._clock() - started) * 1000,
            },
        )
        if on_success is not None:
            await _resolve(on_success(data, variables))
        return MutationResult(data=data)

    def mutation(
        self,
        executor: Executor[V, T],
        *,
        invalidates: Iterable[KeyLike] = (),
        on_success: SuccessCallback[T, V] | None = None,
        on_error: ErrorCallback[V] | None = None,
    ) -> Mutation[V, T]:
        """Bind ``executor`` and its invalidation set into a reusable :class:`Mutation`."""

        return Mutation(
            cache=self,
            executor=executor,
            invalidates=tuple(normalize_key(prefix, allow_empty=True) for prefix in invalidates),
            on_success=on_success,
            on_error=on_error,
        )

    # Internals --------------------------------------------------------------

    def _lookup(self, key: KeyLike) -> CacheEntry[Any] | None:
        return self._entries.get(key_identity(normalize_key(key)))

    def _needs_refetch(self, entry: CacheEntry[Any]) -> bool:
        if entry.is_stale:
            return True
        if entry.error is not None and not entry.has_data:
            return True
        if self._stale_after is None or entry.fetched_at is None:
            return False
        return self._clock() - entry.fetched_at >= self._stale_after

    def _start(self, entry: CacheEntry[T], loader: Loader[T]) -> None:
        self._logger.debug(
            "Fetching %s",
            entry.key,
            extra={"cache_event": "cache.query.fetch", "cache_key": entry.key},
        )
        loop = asyncio.get_running_loop()
        entry.task = loop.create_task(self._load(entry, loader, entry.generation))

    async def _load(self, entry: CacheEntry[T], loader: Loader[T], generation: int) -> QueryResult[T]:
        started = self._clock()
        try:
            data = await _resolve(loader())
        except asyncio.CancelledError:
            entry.task = None
            raise
        except Exception as exc:
            entry.error = classify(exc)
            entry.task = None
            self._logger.warning(
                "Query %s failed: %s",
                entry.key,
                entry.error.message,
                extra={
                    "cache_event": "cache.query.error",
                    "cache_key": entry.key,
                    "error_message": entry.error.message,
                },
            )
        else:
            entry.data = data
            entry.has_data = True
            entry.error = None
            entry.fetched_at = self._clock()
            entry.is_stale = entry.generation != generation
            entry.task = None
            self._logger.debug(
                "Resolved %s",
                entry.key,
                extra={
                    "cache_event": "cache.query.success",
                    "cache_key": entry.key,
                    "duration_ms": (entry.fetched_at - started) * 1000,
                },
            )

        snapshot = entry.snapshot()
        identity = key_identity(entry.key)
        if self._entries.get(identity) is entry:
            self._notify(identity, snapshot)
        return snapshot

    def _notify(self, identity: KeyIdentity, snapshot: QueryResult[Any]) -> None:
        for listener in list(self._listeners.get(identity, ())):
            try:
                listener(snapshot)
            except Exception:
                self._logger.exception(
                    "Cache listener for %s failed", tuple(segment for _, segment in identity)
                )


__all__ = ["RequestCache"]
