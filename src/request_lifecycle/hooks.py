"""RequestHook base and convenience hook classes."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from request_lifecycle.context import RequestContext
from request_lifecycle.exceptions import RequestException
from request_lifecycle.state import Outcome, RequestState


class RequestHook:
    """Base abstraction for lifecycle hooks. All methods are no-op by default."""

    async def on_request_start(self, ctx: RequestContext) -> None:
        pass

    async def on_outcome(
        self,
        ctx: RequestContext,
        outcome: Outcome,
        error: RequestException | None,
    ) -> None:
        pass

    async def on_request_end(self, ctx: RequestContext, state: RequestState) -> None:
        pass


class BeforeRequest(RequestHook):
    """Convenience hook that only fires when a request starts."""

    def __init__(self, callback: Callable[[RequestContext], Awaitable[None]]) -> None:
        self._callback = callback

    async def on_request_start(self, ctx: RequestContext) -> None:
        await self._callback(ctx)


class AfterRequest(RequestHook):
    """Convenience hook that fires with the settled state."""

    def __init__(
        self, callback: Callable[[RequestContext, RequestState], Awaitable[None]]
    ) -> None:
        self._callback = callback

    async def on_request_end(self, ctx: RequestContext, state: RequestState) -> None:
        await self._callback(ctx, state)


class OnOutcome(RequestHook):
    """Convenience hook that fires with the terminal outcome and error."""

    def __init__(
        self,
        callback: Callable[
            [RequestContext, Outcome, RequestException | None], Awaitable[None]
        ],
    ) -> None:
        self._callback = callback

    async def on_outcome(
        self,
        ctx: RequestContext,
        outcome: Outcome,
        error: RequestException | None,
    ) -> None:
        await self._callback(ctx, outcome, error)
