"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from vehiclestore.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from vehiclestore.exceptions import (
    VehicleAPIError,
    VehicleConnectionError,
    VehicleTimeoutError,
)

Params = list[tuple[str, str]]


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return response.text


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return the envelope's ``data``."""
    if response.status_code >= 400:
        raise VehicleAPIError(
            status_code=response.status_code,
            message=_error_message(response),
        )
    if response.status_code == 204 or not response.content:
        return None
    body = response.json()
    if isinstance(body, dict) and "data" in body:
        return body["data"]
    return body


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def request(
        self,
        method: str,
        endpoint: str,
        params: Params | None = None,
        json: Any = None,
    ) -> Any:
        """Perform a request and return the unwrapped response data."""
        try:
            response = self._client.request(method, endpoint, params=params, json=json)
        except httpx.ConnectError as exc:
            raise VehicleConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise VehicleTimeoutError(str(exc)) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def request(
        self,
        method: str,
        endpoint: str,
        params: Params | None = None,
        json: Any = None,
    ) -> Any:
        """Perform an async request and return the unwrapped response data."""
        try:
            response = await self._client.request(method, endpoint, params=params, json=json)
        except httpx.ConnectError as exc:
            raise VehicleConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise VehicleTimeoutError(str(exc)) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
