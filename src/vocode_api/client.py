"""
Vocode / AsyncVocode — main SDK clients.
"""

import asyncio
import functools
import inspect
from typing import Any, Optional

import httpx

from vocode_api.account_connections import AccountConnectionsAPI
from vocode_api.actions import ActionsAPI
from vocode_api.agents import AgentsAPI
from vocode_api.calls import CallsAPI
from vocode_api.config import API_KEY_ENV, ClientConfig
from vocode_api.errors import AuthError
from vocode_api.numbers import NumbersAPI
from vocode_api.prompts import PromptsAPI
from vocode_api.transport.http import HttpClient
from vocode_api.usage import UsageAPI
from vocode_api.vector_databases import VectorDatabasesAPI
from vocode_api.voices import VoicesAPI
from vocode_api.webhooks import WebhooksAPI


class AsyncVocode:
    """Async Vocode client (primary)."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        version: Optional[str] = None,
        timeout: Optional[float] = None,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        overrides = {
            key: value
            for key, value in {"api_key": api_key, "base_url": base_url, "version": version, "timeout": timeout}.items()
            if value is not None
        }
        self.config = (config or ClientConfig.from_env()).model_copy(update=overrides)
        if not self.config.api_key:
            raise AuthError(f"api_key required. Pass api_key= or set {API_KEY_ENV}.")

        self.http = HttpClient(
            base_url=self.config.base_url,
            version=self.config.version,
            api_key=self.config.api_key,
            timeout=self.config.timeout,
            transport=transport,
        )
        self.account_connections = AccountConnectionsAPI(self.http)
        self.actions = ActionsAPI(self.http)
        self.agents = AgentsAPI(self.http)
        self.calls = CallsAPI(self.http)
        self.numbers = NumbersAPI(self.http)
        self.prompts = PromptsAPI(self.http)
        self.voices = VoicesAPI(self.http)
        self.webhooks = WebhooksAPI(self.http)
        self.vector_databases = VectorDatabasesAPI(self.http)
        self.usage = UsageAPI(self.http)

    async def aclose(self) -> None:
        await self.http.close()

    close = aclose

    async def __aenter__(self) -> "AsyncVocode":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


class _SyncAPI:
    """Blocking view of one resource API; coroutine methods run on the owner's loop."""

    def __init__(self, api: Any, run: Any):
        self._api = api
        self._run = run

    def __getattr__(self, name: str) -> Any:
        attr = getattr(self._api, name)
        if not inspect.iscoroutinefunction(attr):
            return attr

        @functools.wraps(attr)
        def call(*args: Any, **kwargs: Any) -> Any:
            return self._run(attr(*args, **kwargs))
        return call


class Vocode:
    """Sync wrapper around AsyncVocode. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._async = AsyncVocode(**kwargs)
        self._loop = asyncio.new_event_loop()

        self.account_connections = _SyncAPI(self._async.account_connections, self._run)
        self.actions = _SyncAPI(self._async.actions, self._run)
        self.agents = _SyncAPI(self._async.agents, self._run)
        self.calls = _SyncAPI(self._async.calls, self._run)
        self.numbers = _SyncAPI(self._async.numbers, self._run)
        self.prompts = _SyncAPI(self._async.prompts, self._run)
        self.voices = _SyncAPI(self._async.voices, self._run)
        self.webhooks = _SyncAPI(self._async.webhooks, self._run)
        self.vector_databases = _SyncAPI(self._async.vector_databases, self._run)
        self.usage = _SyncAPI(self._async.usage, self._run)

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def config(self) -> ClientConfig:
        return self._async.config

    def close(self) -> None:
        if self._loop.is_closed():
            return
        try:
            self._run(self._async.aclose())
        finally:
            self._loop.close()

    def __enter__(self) -> "Vocode":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
