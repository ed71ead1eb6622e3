"""High-level API for FlexDB operations.

This module provides the main client interface. It owns the configuration
and the request executor, and hands out Store handles which in turn hand
out Collection handles.
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from .auth import ACCOUNT, AuthContext
from .config import DEFAULT_ENDPOINT, FlexDBConfig
from .http import HTTPExecutor
from .store import Store


class FlexDB:
    """FlexDB client.

    Usage:
        async with FlexDB(api_key="...") as db:
            store = await db.ensure_store_exists("my-app")
            users = store.collection("users")
            await users.create({"name": "Alice"})

        # Explicit configuration
        db = FlexDB(config=FlexDBConfig(endpoint="http://localhost:8000"))

        # Inject custom transport (for testing)
        db = FlexDB(transport=httpx.MockTransport(handler))
    """

    def __init__(
        self,
        api_key: str | None = None,
        endpoint: str | None = None,
        config: FlexDBConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize client.

        Args:
            api_key: Account API key. Without one, account-scoped calls
                are sent with no Authorization header.
            endpoint: Service base URL (defaults to the hosted service)
            config: Full configuration; mutually exclusive with
                api_key/endpoint
            transport: Optional httpx transport (for testing/advanced use)
        """
        if config is not None and (api_key is not None or endpoint is not None):
            raise ValueError("Pass either config or api_key/endpoint, not both")
        self.config = config or FlexDBConfig(
            api_key=api_key,
            endpoint=endpoint or DEFAULT_ENDPOINT,
        )
        self._executor = HTTPExecutor(self.config, transport=transport)

    async def __aenter__(self) -> "FlexDB":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close client."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._executor.aclose()

    @property
    def endpoint(self) -> str:
        return self.config.endpoint

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        auth: AuthContext | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Execute a scoped request. See HTTPExecutor.request()."""
        return await self._executor.request(method, path, body, auth=auth, params=params)

    async def create_store(self, name_or_payload: str | Mapping[str, Any] | None = None) -> Store | None:
        """Create a store.

        Args:
            name_or_payload: Store name, or a full creation payload
                (e.g., {"name": "my-app"})

        Returns:
            Handle for the new store

        Raises:
            httpx.HTTPStatusError: 409 if the name is taken, 401 if the
                API key is rejected
        """
        if isinstance(name_or_payload, str):
            payload: dict[str, Any] = {"name": name_or_payload}
        else:
            payload = dict(name_or_payload or {})

        data = await self.request("post", "/stores", payload, auth=ACCOUNT)
        if data is None:
            return None
        return Store(self, data)

    async def get_store(self, name: str) -> Store | None:
        """Get a store by name.

        Returns:
            Handle for the store, or None if it does not exist
        """
        data = await self.request("get", f"/stores/{quote(name, safe='')}", auth=ACCOUNT)
        if data is None:
            return None
        return Store(self, data)

    async def ensure_store_exists(self, name: str) -> Store | None:
        """Get a store by name, creating it if it does not exist.

        Not atomic: two callers racing on the same name can both see it
        missing, and the second create then fails with 409. That error is
        propagated as-is.
        """
        store = await self.get_store(name)
        if store is None:
            store = await self.create_store(name)
        return store
