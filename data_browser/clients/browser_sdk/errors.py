from __future__ import annotations

from dataclasses import dataclass

import httpx

_MAX_BODY_EXCERPT = 200


@dataclass
class ApiError(Exception):
    """A request to the data source that did not produce a usable page."""

    code: str
    message: str
    status_code: int | None = None
    details: str | None = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    @classmethod
    def from_http_response(cls, response: httpx.Response) -> "ApiError":
        # error bodies look like {"message": "Product with id '0' not found"}
        return cls(
            code=f"HTTP_{response.status_code}",
            message=_body_message(response) or response.reason_phrase or f"HTTP {response.status_code}",
            status_code=response.status_code,
        )

    @classmethod
    def invalid_response(cls, reason: str, response: httpx.Response | None = None) -> "ApiError":
        return cls(
            code="INVALID_RESPONSE",
            message=reason,
            status_code=response.status_code if response is not None else None,
            details=_excerpt(response.text) if response is not None else None,
        )


class NetworkFailure(ApiError):
    """The request never produced an HTTP response (timeout, refused, DNS...)."""


def _body_message(response: httpx.Response) -> str | None:
    try:
        payload = response.json()
    except ValueError:
        return _excerpt(response.text)
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return None


def _excerpt(text: str) -> str | None:
    text = text.strip()
    return text[:_MAX_BODY_EXCERPT] or None
