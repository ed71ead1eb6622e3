"""Authorization scopes and header resolution.

Every request to FlexDB is made in one of two scopes:

Account:
    Authorized with the account API key. Used for store lifecycle
    operations (create, fetch by name).

Store:
    Authorized with the store's own id. Used for everything inside a
    store (documents, collections) and for deleting the store itself.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Account:
    """Account scope. Resolves to the configured API key, if any."""


@dataclass(frozen=True)
class StoreScope:
    """Store scope. The store id is sent as the credential."""

    store_id: str


AuthContext = Account | StoreScope

# Shared marker for account-scoped calls
ACCOUNT = Account()


def resolve_authorization(context: AuthContext | None, api_key: str | None) -> str | None:
    """Resolve the Authorization header value for a request.

    Args:
        context: Scope of the request, or None for an unscoped request
        api_key: API key configured on the client

    Returns:
        "Account <key>" or "Store <id>", or None when no header
        should be sent at all.
    """
    if isinstance(context, Account):
        if api_key:
            return f"Account {api_key}"
        return None
    if isinstance(context, StoreScope):
        # An empty id is still sent as "Store " rather than dropped
        return f"Store {context.store_id}"
    return None
