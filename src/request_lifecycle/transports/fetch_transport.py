"""FetchTransport — fetch-style adapter that inspects the status itself."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

import httpx

from request_lifecycle.exceptions import TransportError
from request_lifecycle.transports.base import (
    OutgoingRequest,
    Transport,
    TransportResponse,
)

if TYPE_CHECKING:
    from request_lifecycle.interceptors import RequestInterceptor


class FetchTransport(Transport):
    """Builds the full URL up front and reports ``Error <status>: <reason>``.

    Unlike HttpxTransport, a response body that is not valid JSON is an
    error rather than falling back to text.
    """

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

    @staticmethod
    def full_url(request: OutgoingRequest) -> str:
        query = request.query_string
        if not query:
            return request.url
        separator = "&" if "?" in request.url else "?"
        return f"{request.url}{separator}{query}"

    async def _send(self, request: OutgoingRequest) -> TransportResponse:
        http_request = self._client.build_request(
            request.method.value,
            self.full_url(request),
            headers=request.headers,
            content=request.content,
        )
        try:
            response = await self._client.send(http_request)
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or type(exc).__name__, cause=exc) from exc

        if not response.is_success:
            raise TransportError(
                f"Error {response.status_code}: {response.reason_phrase}",
                status=response.status_code,
            )

        if not response.content:
            data = None
        else:
            try:
                data = response.json()
            except ValueError as exc:
                raise TransportError(
                    "Response body is not valid JSON",
                    status=response.status_code,
                    cause=exc,
                ) from exc

        return TransportResponse(
            status=response.status_code,
            data=data,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
