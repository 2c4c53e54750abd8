from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from data_browser.clients.browser_sdk.errors import ApiError


class CollectionPage(BaseModel):
    items: list[dict[str, Any]] = Field(default_factory=list)
    total: int = 0
    skip: int = 0
    limit: int = 0


def normalize_collection_page(payload: Any, *, items_field: str, limit: int, skip: int) -> CollectionPage:
    rows: list[Any] | None = None
    if isinstance(payload, list):
        rows = payload
    elif isinstance(payload, dict):
        for key in (items_field, "items", "data"):
            if isinstance(payload.get(key), list):
                rows = payload[key]
                break
    if rows is None:
        raise ApiError.invalid_response(f"The response has no {items_field!r} list")

    items = [row for row in rows if isinstance(row, dict)]
    total = _to_int(payload.get("total")) if isinstance(payload, dict) else None
    if total is None:
        # without a total, the rows seen so far are all that is known to exist
        total = skip + len(items)

    return CollectionPage(
        items=items,
        total=max(0, total),
        skip=_payload_int(payload, "skip", skip),
        limit=_payload_int(payload, "limit", limit),
    )


def _payload_int(payload: Any, key: str, default: int) -> int:
    if not isinstance(payload, dict):
        return default
    value = _to_int(payload.get(key))
    return default if value is None else max(0, value)


def _to_int(value: Any) -> int | None:
    try:
        if value is None or value == "" or isinstance(value, bool):
            return None
        return int(value)
    except (TypeError, ValueError):
        return None
