"""One-shot write operations bound to a cache and an invalidation set."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from querysync.features.errors import AppError

from ..domain.models import CacheKey, MutationResult

if TYPE_CHECKING:
    from .request_cache import RequestCache

T = TypeVar("T")
V = TypeVar("V")


@dataclass(slots=True, frozen=True)
class Mutation(Generic[V, T]):
    """Describe a write: its executor, the key prefixes it dirties and its callbacks.

    Holds no run state; every :meth:`run` is independent of the others.
    """

    cache: RequestCache
    executor: Callable[[V], Awaitable[T] | T]
    invalidates: tuple[CacheKey, ...] = ()
    on_success: Callable[[T, V], Awaitable[None] | None] | None = None
    on_error: Callable[[AppError, V], Awaitable[None] | None] | None = None

    async def run(self, variables: V) -> MutationResult[T]:
        return await self.cache.mutate(
            self.executor,
            variables,
            invalidates=self.invalidates,
            on_success=self.on_success,
            on_error=self.on_error,
        )


__all__ = ["Mutation"]
