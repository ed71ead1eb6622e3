"""Store handle."""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from .auth import StoreScope
from .collection import Collection

if TYPE_CHECKING:
    from .api import FlexDB


class Store:
    """A remote FlexDB store.

    Thin view over the payload the service returned for the store. The
    store id doubles as the credential for everything inside the store.

    After delete() succeeds the handle must not be reused. Nothing is
    tracked locally: later calls through its collections fail on the
    service side with 401.
    """

    def __init__(self, client: "FlexDB", data: dict[str, Any]):
        """Initialize store handle.

        Args:
            client: Client the store was obtained from
            data: Store payload from the service; must contain 'id'
        """
        self.client = client
        self.data = data
        self._id: str = data["id"]

    def __repr__(self) -> str:
        return f"Store(id={self._id!r}, name={self.name!r})"

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str | None:
        return self.data.get("name")

    @property
    def scope(self) -> StoreScope:
        """Authorization scope for requests inside this store."""
        return StoreScope(self._id)

    def collection(self, name: str) -> Collection:
        """Get a handle for a collection in this store. No network call."""
        return Collection(self, name)

    async def delete(self) -> Any:
        """Delete the store.

        Returns:
            Server acknowledgment (e.g., {"success": true}), or None if
            the store was already gone
        """
        return await self.client.request("delete", f"/stores/{quote(self._id, safe='')}", auth=self.scope)
