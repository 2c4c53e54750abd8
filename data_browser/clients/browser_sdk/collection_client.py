from __future__ import annotations

from typing import Any
from urllib.parse import quote

from data_browser.clients.browser_sdk.http_client import HttpClient
from data_browser.clients.browser_sdk.normalizers import CollectionPage, normalize_collection_page


class CollectionClient:
    """Reads one page of a paginated collection, optionally scoped to a category."""

    def __init__(self, http_client: HttpClient, collection: str, items_field: str) -> None:
        self.http_client = http_client
        self.collection = "/" + collection.strip("/")
        self.items_field = items_field

    def path_for(self, category: str = "") -> str:
        if category:
            return f"{self.collection}/category/{quote(category, safe='')}"
        return self.collection

    async def list_page(self, limit: int, skip: int, category: str = "") -> CollectionPage:
        params = _build_query_params(limit=limit, skip=skip)
        payload = await self.http_client.request("GET", self.path_for(category), params=params)
        return normalize_collection_page(payload, items_field=self.items_field, limit=limit, skip=skip)


def _build_query_params(**kwargs: Any) -> dict[str, Any]:
    return {key: value for key, value in kwargs.items() if value not in (None, "")}
