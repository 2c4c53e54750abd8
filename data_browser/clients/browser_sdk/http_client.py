from __future__ import annotations

import asyncio
from typing import Any

import httpx

from data_browser.clients.browser_sdk.config import SDKConfig
from data_browser.clients.browser_sdk.errors import ApiError, NetworkFailure


class HttpClient:
    def __init__(
        self,
        config: SDKConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self._client = client or httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=self.config.timeout_seconds,
            verify=self.config.verify_ssl,
        )
        self._retry_max_attempts = max(1, self.config.retry_max_attempts)
        self._retry_backoff_ms = max(0, self.config.retry_backoff_ms)

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        request_headers = {"Accept": "application/json", **(headers or {})}
        normalized_path = path if path.startswith("/") else f"/{path}"
        allow_retry = method.upper() == "GET"

        for attempt in range(1, self._retry_max_attempts + 1):
            try:
                response = await self._client.request(
                    method=method,
                    url=normalized_path,
                    headers=request_headers,
                    params=params,
                )
            except httpx.TimeoutException as exc:
                if (not allow_retry) or attempt >= self._retry_max_attempts:
                    raise NetworkFailure(
                        code="TIMEOUT_ERROR",
                        message="The request timed out",
                        details=str(exc),
                    ) from exc
                await self._backoff(attempt)
                continue
            except httpx.TransportError as exc:
                if (not allow_retry) or attempt >= self._retry_max_attempts:
                    raise NetworkFailure(
                        code="NETWORK_ERROR",
                        message="Could not reach the data source",
                        details=str(exc),
                    ) from exc
                await self._backoff(attempt)
                continue

            if response.status_code >= 400:
                error = ApiError.from_http_response(response)
                if allow_retry and self._is_retryable_status(error.status_code) and attempt < self._retry_max_attempts:
                    await self._backoff(attempt)
                    continue
                raise error

            try:
                payload = response.json()
            except ValueError as exc:
                raise ApiError.invalid_response("The data source answered with a non-JSON body", response) from exc
            return payload if isinstance(payload, dict) else {"data": payload}

        raise NetworkFailure(code="NETWORK_ERROR", message="Could not reach the data source", details="retry exhausted")

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _backoff(self, attempt: int) -> None:
        await asyncio.sleep((self._retry_backoff_ms * attempt) / 1000)

    @staticmethod
    def _is_retryable_status(status_code: int | None) -> bool:
        return bool(status_code and 500 <= status_code <= 599)
