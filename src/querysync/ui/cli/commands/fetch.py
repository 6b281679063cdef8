"""Where: src/querysync/ui/cli/commands/fetch.py
What: GET an API endpoint through the transport adapter and the request cache.
Why: Exercise the same read path the portal screens use from a terminal.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import final

from rich.console import Console

from querysync.config.settings import QUERY_STALE_AFTER_SECONDS
from querysync.features.cache import QueryResult, RequestCache
from querysync.features.errors import ErrorHandler
from querysync.platform.http import ApiClient
from querysync.ui.cli.args.options import FetchArgs
from querysync.ui.cli.display.errors import build_error_table
from querysync.ui.cli.display.notifier import RichNotifier


@final
class FetchCommand:
    """Print the unwrapped response data, or the classified failure."""

    def __init__(
        self,
        args: FetchArgs,
        *,
        client_factory: Callable[[], ApiClient] | None = None,
        console: Console | None = None,
    ) -> None:
        self._args = args
        self._client_factory = client_factory or self._default_client_factory
        self._console = console or Console()

    def execute(self) -> QueryResult[object]:
        return asyncio.run(self._run())

    async def _run(self) -> QueryResult[object]:
        client = self._client_factory()
        cache = RequestCache(stale_after=QUERY_STALE_AFTER_SECONDS)
        key = ("fetch", self._args.endpoint)
        try:
            result = await cache.fetch(key, lambda: client.get(self._args.endpoint))
        finally:
            client.close()

        if result.error is not None:
            handler = ErrorHandler(
                notifier=RichNotifier(),
                on_auth_error=lambda: self._console.print(
                    "[yellow]Authentication required: pass --token or set QUERYSYNC_TOKEN.[/yellow]"
                ),
            )
            _ = handler.handle(result.error, silent=self._args.quiet)
            self._console.print(build_error_table(result.error))
            return result

        self._console.print_json(data=result.data)
        return result

    def _default_client_factory(self) -> ApiClient:
        token = self._args.token
        return ApiClient(
            self._args.base_url,
            token_provider=lambda: token,
            timeout=self._args.timeout,
        )
