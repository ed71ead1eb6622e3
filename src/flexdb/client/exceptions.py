"""Error helpers for the FlexDB client.

Remote and network failures are not wrapped: callers receive the httpx
exceptions unchanged (httpx.HTTPStatusError, httpx.TransportError). The
helpers below classify those native errors so callers can branch on
them without digging into httpx internals.
"""

import httpx
from pydantic import ValidationError


class FlexDBError(Exception):
    """Base exception for errors raised locally by flexdb tooling."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def status_of(exc: BaseException) -> int | None:
    """Return the HTTP status carried by an error, or None.

    Transport failures (connection refused, timeouts, DNS) have no status.
    """
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code
    return None


def is_auth_failure(exc: BaseException) -> bool:
    """Check for 401/403, e.g. operating on a deleted store."""
    return status_of(exc) in (401, 403)


def is_conflict(exc: BaseException) -> bool:
    """Check for 409, e.g. a store name that is already taken."""
    return status_of(exc) == 409


def is_transport_failure(exc: BaseException) -> bool:
    """Check if the request never produced an HTTP response."""
    return isinstance(exc, httpx.TransportError)


def describe_error(exc: BaseException) -> str:
    """Render an error as a one-line, human-readable message."""
    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        base = f"HTTP {response.status_code} {response.reason_phrase}"
        body = response.text.strip()
        if body:
            return f"{base}: {body}"
        return base
    if isinstance(exc, ValidationError):
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'value'}: {err['msg']}"
            for err in exc.errors()
        )
        return f"Invalid configuration: {details}"
    if isinstance(exc, httpx.TimeoutException):
        return f"Request timeout: {exc}"
    if isinstance(exc, httpx.TransportError):
        return f"Cannot connect: {exc}"
    return str(exc)
