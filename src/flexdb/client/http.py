"""Request executor on top of httpx.

This module owns the one place where FlexDB requests hit the network.
It resolves the Authorization header for the request scope, dispatches
the call, and normalizes the result:

- 2xx: parsed JSON body, passed through unchanged ("" when empty)
- 404: None
- anything else: the httpx exception, propagated unchanged

There is no retry layer. Each call makes exactly one request.
"""

import logging
from typing import Any

import httpx

from .auth import AuthContext, resolve_authorization
from .config import FlexDBConfig

logger = logging.getLogger("flexdb")

METHODS = frozenset({"get", "post", "put", "delete"})
BODY_METHODS = frozenset({"post", "put"})


class HTTPExecutor:
    """Executes scoped requests against the FlexDB service.

    Usage:
        executor = HTTPExecutor(config)
        store = await executor.request("get", "/stores/my-store", auth=ACCOUNT)
        await executor.aclose()
    """

    def __init__(
        self,
        config: FlexDBConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize executor.

        Args:
            config: Client configuration
            transport: Optional httpx transport (for testing/advanced use)
        """
        self.config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-initialize the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.endpoint,
                timeout=self.config.timeout,
                transport=self._transport,
                follow_redirects=True,
            )
        return self._client

    async def aclose(self) -> None:
        """Close HTTP client and release resources."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def headers(self, auth: AuthContext | None) -> dict[str, str]:
        """Build request headers for the given scope."""
        value = resolve_authorization(auth, self.config.api_key)
        if value is None:
            return {}
        return {"Authorization": value}

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        auth: AuthContext | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Execute a request and normalize the response.

        Args:
            method: One of "get", "post", "put", "delete"
            path: API path relative to the endpoint (e.g., "/stores")
            body: JSON payload, only sent for post/put
            auth: Request scope (ACCOUNT or StoreScope)
            params: Optional query parameters

        Returns:
            Parsed JSON response. None only for 404; an empty success
            body (e.g., 204 No Content) is returned as the empty string

        Raises:
            ValueError: If method is not supported
            httpx.HTTPStatusError: For any non-404 error response
            httpx.TransportError: If the request could not be completed
        """
        method = method.lower()
        if method not in METHODS:
            raise ValueError(f"Unsupported method: {method}. Must be one of {sorted(METHODS)}")

        logger.debug("%s %s (%s)", method.upper(), path, type(auth).__name__ if auth else "unscoped")

        kwargs: dict[str, Any] = {"headers": self.headers(auth)}
        if params:
            kwargs["params"] = params
        if method in BODY_METHODS and body is not None:
            kwargs["json"] = body

        response = await self.client.request(method.upper(), path, **kwargs)
        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> Any:
        """Return the parsed body, None for 404, or raise.

        404 is the only response that maps to None. A success response
        without a body yields its (empty) text instead.
        """
        if response.status_code == 404:
            logger.debug("%s %s -> 404, returning None", response.request.method, response.request.url.path)
            return None

        response.raise_for_status()

        if not response.content:
            return response.text
        return response.json()
