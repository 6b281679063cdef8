"""Query and mutation use cases."""

from .mutation import Mutation
from .request_cache import RequestCache

__all__ = ["Mutation", "RequestCache"]
