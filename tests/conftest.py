"""Shared pytest fixtures for request-lifecycle tests."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

import pytest

from request_lifecycle.cancellation import CancellationHandle
from request_lifecycle.credentials import Credential, InMemoryCredentialStore
from request_lifecycle.methods import HttpMethod
from request_lifecycle.transports.base import (
    OutgoingRequest,
    Transport,
    TransportResponse,
)


class ScriptedTransport(Transport):
    """Transport answering from a script, optionally holding sends open.

    With ``gated=True`` every send waits until the test calls ``release``.
    ``cancelled_at_send`` records, for each send, whether every earlier
    signal had already fired.
    """

    def __init__(self, *, gated: bool = False, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.gated = gated
        self.replies: dict[str, TransportResponse | Exception] = {}
        self.sent: list[OutgoingRequest] = []
        self.signals: list[CancellationHandle] = []
        self.cancelled_at_send: list[bool] = []
        self.cancelled_sends: list[str] = []
        self._gates: dict[str, asyncio.Event] = {}
        self.closed = False

    def reply(self, url: str, result: TransportResponse | Exception | Any) -> None:
        if not isinstance(result, (TransportResponse, Exception)):
            result = TransportResponse(status=200, data=result)
        self.replies[url] = result

    def release(self, url: str) -> None:
        self._gates.setdefault(url, asyncio.Event()).set()

    async def execute(
        self,
        method: HttpMethod | str,
        url: str,
        params: Mapping[str, Any] | None,
        body: Any | None,
        signal: CancellationHandle,
    ) -> TransportResponse:
        self.signals.append(signal)
        return await super().execute(method, url, params, body, signal)

    async def _send(self, request: OutgoingRequest) -> TransportResponse:
        self.sent.append(request)
        self.cancelled_at_send.append(all(s.cancelled for s in self.signals[:-1]))
        if self.gated:
            gate = self._gates.setdefault(request.url, asyncio.Event())
            try:
                await gate.wait()
            except asyncio.CancelledError:
                self.cancelled_sends.append(request.url)
                raise
        result = self.replies.get(request.url, TransportResponse(status=200))
        if isinstance(result, Exception):
            raise result
        return result

    async def aclose(self) -> None:
        self.closed = True


class SignalIgnoringTransport(ScriptedTransport):
    """Keeps sending after cancellation, like a transport that never checks."""

    async def execute(
        self,
        method: HttpMethod | str,
        url: str,
        params: Mapping[str, Any] | None,
        body: Any | None,
        signal: CancellationHandle,
    ) -> TransportResponse:
        self.signals.append(signal)
        return await self._send(self.prepare(method, url, params, body))


class RecordingNavigator:
    """Navigator double that remembers where it was sent."""

    def __init__(self, location: str = "/") -> None:
        self.location = location
        self.visited: list[str] = []

    def current_location(self) -> str:
        return self.location

    async def navigate(self, location: str) -> None:
        self.visited.append(location)
        self.location = location


@pytest.fixture
def transport() -> ScriptedTransport:
    return ScriptedTransport()


@pytest.fixture
def gated_transport() -> ScriptedTransport:
    return ScriptedTransport(gated=True)


@pytest.fixture
def ignoring_transport() -> SignalIgnoringTransport:
    return SignalIgnoringTransport(gated=True)


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def authenticated_store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore(Credential(authenticated=True, token="abc"))


@pytest.fixture
def anonymous_store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
def make_request() -> Any:
    """Factory for OutgoingRequest objects."""

    def _make(
        method: HttpMethod = HttpMethod.GET,
        url: str = "/items",
        headers: dict[str, str] | None = None,
    ) -> OutgoingRequest:
        return OutgoingRequest(method=method, url=url, headers=dict(headers or {}))

    return _make
