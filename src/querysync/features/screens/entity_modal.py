"""
Summary: Compose modal URL state with the request cache for one entity resource.
Why: Every admin screen fetches the entity named in the URL and closes its modal after writes.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import Any, TypeVar

from querysync.features.cache import CacheKey, MutationResult, QueryResult, RequestCache
from querysync.features.errors import AppError
from querysync.features.modal import ModalMode, ModalState, ModalStateResolver

T = TypeVar("T")
V = TypeVar("V")

DetailLoader = Callable[[str], Awaitable[T] | T]


class EntityModalController:
    """Drive the details/edit/create modal of ``resource`` (e.g. ``"locations"``)."""

    _resource: str
    _resolver: ModalStateResolver
    _cache: RequestCache

    def __init__(self, resource: str, *, resolver: ModalStateResolver, cache: RequestCache) -> None:
        if not resource:
            raise ValueError("resource must be a non-empty name")
        self._resource = resource
        self._resolver = resolver
        self._cache = cache

    @property
    def resolver(self) -> ModalStateResolver:
        return self._resolver

    @property
    def state(self) -> ModalState:
        return self._resolver.read()

    def detail_key(self, entity_id: str) -> CacheKey:
        return (self._resource, entity_id)

    def detail(self, loader: DetailLoader[T]) -> QueryResult[T]:
        """Query the entity named in the URL; disabled while no id is present."""

        entity_id = self._resolver.read().entity_id
        if entity_id is None:
            return self._cache.query((self._resource,), lambda: None, enabled=False)
        return self._cache.query(self.detail_key(entity_id), lambda: loader(entity_id))

    async def load_detail(self, loader: DetailLoader[T]) -> QueryResult[T]:
        """Resolve :meth:`detail` and close the modal when the entity does not exist."""

        entity_id = self._resolver.read().entity_id
        if entity_id is None:
            return QueryResult()
        result = await self._cache.fetch(self.detail_key(entity_id), lambda: loader(entity_id))
        if result.error is not None and result.error.is_not_found:
            _ = self._resolver.close()
        return result

    def open(self, entity_id: str | None, mode: ModalMode | str) -> ModalState:
        return self._resolver.open(entity_id, mode)

    def close(self) -> ModalState:
        return self._resolver.close()

    async def submit(
        self,
        executor: Callable[[V], Awaitable[T] | T],
        variables: V,
        *,
        invalidates: Iterable[Iterable[Any]] | None = None,
        on_success: Callable[[T, V], Awaitable[None] | None] | None = None,
        on_error: Callable[[AppError, V], Awaitable[None] | None] | None = None,
    ) -> MutationResult[T]:
        """Run a write, refresh the resource's queries and close the modal on success.

        ``invalidates`` defaults to every key under ``(resource,)``. The modal
        stays open on failure so the form can show the error.
        """

        prefixes = list(invalidates) if invalidates is not None else [(self._resource,)]
        result = await self._cache.mutate(
            executor,
            variables,
            invalidates=prefixes,
            on_success=on_success,
            on_error=on_error,
        )
        if result.is_success:
            _ = self._resolver.close()
        return result


__all__ = ["EntityModalController"]
