"""Collection handle: document operations inside one store."""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from .types import Document, Page

if TYPE_CHECKING:
    from .store import Store


class Collection:
    """A named collection of documents in a store.

    Collections have no lifecycle of their own on the service: one comes
    into existence with its first document. Every call is store-scoped,
    authorized as "Store <store id>".

    Usage:
        users = store.collection("users")
        alice = await users.create({"name": "Alice"})
        same = await users.get(alice["id"])
    """

    def __init__(self, store: "Store", name: str):
        self.store = store
        self.name = name

    def __repr__(self) -> str:
        return f"Collection(name={self.name!r}, store_id={self.store.id!r})"

    def _path(self, doc_id: str | None = None) -> str:
        collection = quote(self.name, safe="")
        if doc_id is None:
            return f"/collections/{collection}"
        return f"/collections/{collection}/{quote(str(doc_id), safe='')}"

    async def _request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self.store.client.request(
            method, path, body, auth=self.store.scope, params=params
        )

    async def create(self, document: Document) -> Document:
        """Create a document.

        Args:
            document: Document body

        Returns:
            The created document, including its server-assigned id
        """
        return await self._request("post", self._path(), document)

    async def get(self, doc_id: str) -> Document | None:
        """Get a document by id.

        Returns:
            The document, or None if it does not exist
        """
        return await self._request("get", self._path(doc_id))

    async def get_all(self) -> list[Document]:
        """Get every document in the collection, unpaginated.

        Intended for small collections; use get_many() otherwise.
        """
        return await self._request("get", self._path())

    async def get_many(self, page: int = 1, limit: int = 20) -> Page:
        """Get one page of documents.

        Args:
            page: 1-based page number
            limit: Documents per page

        Returns:
            Dictionary with 'metadata' (page, limit, total) and 'documents'
        """
        return await self._request("get", self._path(), params={"page": page, "limit": limit})

    async def update(self, doc_id: str, document: Document) -> Document | None:
        """Update a document with a partial or full body.

        Returns:
            The updated document
        """
        return await self._request("put", self._path(doc_id), document)

    async def delete(self, doc_id: str) -> Any:
        """Delete a document by id.

        Returns:
            Server acknowledgment (e.g., {"success": true})
        """
        return await self._request("delete", self._path(doc_id))

    async def delete_collection(self) -> Any:
        """Delete the whole collection and every document in it."""
        return await self._request("delete", self._path())
