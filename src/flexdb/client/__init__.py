"""FlexDB API client.

This package provides the async client library for the FlexDB document
store. The object graph mirrors the service:

    FlexDB (account)  ->  Store (store-scoped)  ->  Collection

Usage:
    from flexdb.client import FlexDB

    async with FlexDB(api_key="...") as db:
        store = await db.create_store("my-app")
        users = store.collection("users")
        alice = await users.create({"name": "Alice"})
        page = await users.get_many(page=1, limit=10)
"""

from .api import FlexDB
from .auth import ACCOUNT, Account, AuthContext, StoreScope, resolve_authorization
from .collection import Collection
from .config import DEFAULT_ENDPOINT, FlexDBConfig, FlexDBSettings
from .exceptions import (
    FlexDBError,
    describe_error,
    is_auth_failure,
    is_conflict,
    is_transport_failure,
    status_of,
)
from .http import HTTPExecutor
from .store import Store
from .types import Document, Page, PageMetadata

__all__ = [
    # Main API
    "FlexDB",
    "Store",
    "Collection",
    "FlexDBConfig",
    "FlexDBSettings",
    "DEFAULT_ENDPOINT",
    # Authorization
    "ACCOUNT",
    "Account",
    "AuthContext",
    "StoreScope",
    "resolve_authorization",
    # Request executor
    "HTTPExecutor",
    # Payload shapes
    "Document",
    "Page",
    "PageMetadata",
    # Errors
    "FlexDBError",
    "describe_error",
    "is_auth_failure",
    "is_conflict",
    "is_transport_failure",
    "status_of",
]
