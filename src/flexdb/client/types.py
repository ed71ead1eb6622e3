"""Payload shapes returned by the FlexDB service.

These describe what the service sends back; the client passes payloads
through as-is and never validates them.
"""

from typing import Any, TypedDict

Document = dict[str, Any]


class PageMetadata(TypedDict):
    page: int
    limit: int
    total: int


class Page(TypedDict):
    metadata: PageMetadata
    documents: list[Document]
