"""HttpxTransport — promise-style adapter over httpx.AsyncClient."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

import httpx

from request_lifecycle.exceptions import TransportError
from request_lifecycle.transports.base import (
    OutgoingRequest,
    Transport,
    TransportResponse,
)

if TYPE_CHECKING:
    from request_lifecycle.interceptors import RequestInterceptor


def _decode(response: httpx.Response) -> Any:
    """JSON when possible, otherwise the raw text."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class HttpxTransport(Transport):
    """Sends through ``AsyncClient.request`` and raises on non-2xx status."""

    def __init__(
        self,
        base_url: str = "",
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
        interceptors: Sequence[RequestInterceptor] = (),
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(interceptors=interceptors, headers=headers)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def _send(self, request: OutgoingRequest) -> TransportResponse:
        try:
            response = await self._client.request(
                request.method.value,
                request.url,
                params=request.params or None,
                content=request.content,
                headers=request.headers,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                str(exc), status=exc.response.status_code, cause=exc
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or type(exc).__name__, cause=exc) from exc

        return TransportResponse(
            status=response.status_code,
            data=_decode(response),
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
