"""FlexDB - Async client library and CLI for the FlexDB document store."""

from flexdb.client import FlexDB
from flexdb.client.auth import ACCOUNT, Account, StoreScope
from flexdb.client.collection import Collection
from flexdb.client.config import FlexDBConfig, FlexDBSettings
from flexdb.client.exceptions import (
    FlexDBError,
    describe_error,
    is_auth_failure,
    is_conflict,
    is_transport_failure,
    status_of,
)
from flexdb.client.store import Store

try:
    from importlib.metadata import version
    __version__ = version("flexdb-client")
except Exception:
    __version__ = "0.1.0"  # Fallback for development

__all__ = [
    "ACCOUNT",
    "Account",
    "Collection",
    "FlexDB",
    "FlexDBConfig",
    "FlexDBError",
    "FlexDBSettings",
    "Store",
    "StoreScope",
    "__version__",
    "describe_error",
    "is_auth_failure",
    "is_conflict",
    "is_transport_failure",
    "status_of",
]
