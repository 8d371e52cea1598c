"""Transport base — OutgoingRequest, TransportResponse and the Transport contract."""

from __future__ import annotations

import asyncio
import json
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from request_lifecycle._types import JSONValue
from request_lifecycle.cancellation import CancellationHandle
from request_lifecycle.exceptions import Cancelled, ConstructionError
from request_lifecycle.methods import HttpMethod

if TYPE_CHECKING:
    from request_lifecycle.interceptors import RequestInterceptor

DEFAULT_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def encode_body(body: Any) -> bytes:
    """Serialize a JSON body, raising ConstructionError when it cannot be."""
    try:
        return json.dumps(body, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise ConstructionError(f"Request body is not JSON serializable: {exc}") from exc


@dataclass
class OutgoingRequest:
    """Wire-level request handed to interceptors and then sent."""

    method: HttpMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, Any] = field(default_factory=dict)
    content: bytes | None = None

    @property
    def query_string(self) -> str:
        return str(httpx.QueryParams(self.params)) if self.params else ""


@dataclass(frozen=True)
class TransportResponse:
    """Normalized successful response."""

    status: int
    data: JSONValue = None
    headers: dict[str, str] = field(default_factory=dict)


class Transport(ABC):
    """Uniform adapter over a concrete HTTP transport.

    Subclasses implement ``_send``; ``execute`` handles request shaping,
    interceptors and cancellation.
    """

    def __init__(
        self,
        *,
        interceptors: Sequence[RequestInterceptor] = (),
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._interceptors: list[RequestInterceptor] = list(interceptors)
        self._headers = {**DEFAULT_HEADERS, **(headers or {})}

    @property
    def interceptors(self) -> tuple[RequestInterceptor, ...]:
        return tuple(self._interceptors)

    def add_interceptor(self, interceptor: RequestInterceptor) -> Transport:
        self._interceptors.append(interceptor)
        return self

    def prepare(
        self,
        method: HttpMethod | str,
        url: str,
        params: Mapping[str, Any] | None = None,
        body: Any | None = None,
    ) -> OutgoingRequest:
        http_method = HttpMethod.coerce(method)
        request = OutgoingRequest(method=http_method, url=url, headers=dict(self._headers))
        if http_method.carries_body:
            if body is not None:
                request.content = encode_body(body)
        else:
            request.params = dict(params or {})
        return request

    async def execute(
        self,
        method: HttpMethod | str,
        url: str,
        params: Mapping[str, Any] | None,
        body: Any | None,
        signal: CancellationHandle,
    ) -> TransportResponse:
        request = self.prepare(method, url, params, body)

        signal.raise_if_cancelled()
        for interceptor in self._interceptors:
            await interceptor.intercept(request)

        signal.raise_if_cancelled()
        return await self._observe(self._send(request), signal)

    @staticmethod
    async def _observe(
        send: Awaitable[TransportResponse], signal: CancellationHandle
    ) -> TransportResponse:
        task = asyncio.ensure_future(send)
        remove = signal.add_callback(task.cancel)
        try:
            return await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if signal.cancelled and (current is None or not current.cancelling()):
                raise Cancelled(signal.reason or "cancelled") from None
            raise
        finally:
            remove()

    @abstractmethod
    async def _send(self, request: OutgoingRequest) -> TransportResponse: ...

    async def aclose(self) -> None:
        pass

    async def __aenter__(self) -> Transport:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
