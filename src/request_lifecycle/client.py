"""RequestClient — single-flight request lifecycle with data/error/loading state."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping, Sequence
from typing import Any

from request_lifecycle._types import QueryParams, RequestFunction
from request_lifecycle.cancellation import CancellationHandle
from request_lifecycle.context import RequestContext
from request_lifecycle.exceptions import (
    Cancelled,
    ConstructionError,
    InternalRequestError,
    RequestException,
)
from request_lifecycle.hooks import RequestHook
from request_lifecycle.methods import HttpMethod
from request_lifecycle.state import Outcome, RequestState
from request_lifecycle.trace import RequestTrace, TraceEntry
from request_lifecycle.transports.base import Transport, encode_body

logger = logging.getLogger(__name__)


def _validate(
    method: HttpMethod, url: str, params: QueryParams | None, body: Any | None
) -> None:
    if not isinstance(url, str) or not url:
        raise ConstructionError("Request URL must be a non-empty string")
    if params is not None and not isinstance(params, Mapping):
        raise ConstructionError("Request params must be a mapping")
    if method.carries_body and body is not None:
        encode_body(body)


class RequestClient:
    """Tracks one logical request at a time over a Transport.

    Starting a request cancels the one still in flight on the same client.
    The bound request function always resolves to a RequestState; network
    failures land in ``error`` and cancellations leave both ``data`` and
    ``error`` empty. Settlements of superseded requests never touch the
    client's state. An exception from an ``on_outcome`` or ``on_request_end``
    hook is logged and does not replace the returned state.

    Each instance owns its state. Call sites that should share loading and
    cancellation behaviour must share the instance explicitly.
    """

    def __init__(
        self,
        transport: Transport,
        *,
        hooks: Sequence[RequestHook] = (),
        debug: bool = False,
    ) -> None:
        self._transport = transport
        self._hooks: list[RequestHook] = list(hooks)
        self._debug = debug
        self._state = RequestState()
        self._handle: CancellationHandle | None = None
        self.trace = RequestTrace()

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def state(self) -> RequestState:
        return self._state.snapshot()

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def in_flight(self) -> bool:
        return self._handle is not None

    def add_hook(self, hook: RequestHook) -> RequestClient:
        self._hooks.append(hook)
        return self

    def request(self, method: HttpMethod | str) -> RequestFunction:
        """Bind ``method`` and return ``request_fn(url, params=None, body=None)``."""
        http_method = HttpMethod.coerce(method)

        async def request_fn(
            url: str,
            params: QueryParams | None = None,
            body: Any | None = None,
        ) -> RequestState:
            return await self._perform(http_method, url, params, body)

        return request_fn

    def get(self) -> RequestFunction:
        return self.request(HttpMethod.GET)

    def post(self) -> RequestFunction:
        return self.request(HttpMethod.POST)

    def put(self) -> RequestFunction:
        return self.request(HttpMethod.PUT)

    def patch(self) -> RequestFunction:
        return self.request(HttpMethod.PATCH)

    def delete(self) -> RequestFunction:
        return self.request(HttpMethod.DELETE)

    def cancel(self) -> bool:
        """Cancel the in-flight request. Returns False if there was none."""
        if self._handle is None:
            return False
        return self._handle.cancel("cancelled")

    def get_state(self) -> RequestState:
        return self._state.snapshot()

    async def _perform(
        self,
        method: HttpMethod,
        url: str,
        params: QueryParams | None,
        body: Any | None,
    ) -> RequestState:
        _validate(method, url, params, body)

        self._state.loading = True
        self._state.data = None
        self._state.error = None
        self._state.outcome = None

        if self._handle is not None:
            self._handle.cancel("superseded")
        handle = CancellationHandle()
        self._handle = handle

        ctx = RequestContext(
            method=method,
            url=url,
            handle=handle,
            params=dict(params or {}),
            body=body,
        )
        started = time.perf_counter()
        data: Any | None = None
        error: RequestException | None = None
        outcome = Outcome.CANCELLED

        try:
            for hook in self._hooks:
                await hook.on_request_start(ctx)
            response = await self._transport.execute(method, url, params, body, handle)
        except Cancelled as exc:
            logger.warning("Request cancelled: %s %s (%s)", method.value, url, exc.reason)
        except RequestException as exc:
            error = exc
            outcome = Outcome.REJECTED
        except Exception as exc:
            logger.error("Unexpected error for %s %s: %s", method.value, url, exc)
            error = InternalRequestError("Internal request error", cause=exc)
            outcome = Outcome.REJECTED
        else:
            data = response.data
            outcome = Outcome.FULFILLED
        finally:
            if handle.cancelled and outcome is not Outcome.CANCELLED:
                logger.warning(
                    "Discarding late settlement of cancelled request: %s %s",
                    method.value,
                    url,
                )
                data = None
                error = None
                outcome = Outcome.CANCELLED

            superseded = handle is not self._handle
            if superseded:
                logger.debug("Dropping superseded request: %s %s", method.value, url)
            else:
                self._state.data = data
                self._state.error = error
                self._state.outcome = outcome
                self._state.loading = False
                self._handle = None

        if superseded:
            result = RequestState(outcome=Outcome.CANCELLED)
        else:
            result = self._state.snapshot()

        if self._debug:
            reason = str(error) if error is not None else handle.reason
            self.trace.entries.append(
                TraceEntry(
                    method=method,
                    url=url,
                    duration_ms=(time.perf_counter() - started) * 1000,
                    outcome=outcome,
                    superseded=superseded,
                    reason=reason,
                )
            )

        await self._run_end_hooks(ctx, outcome, error, result)
        return result

    async def _run_end_hooks(
        self,
        ctx: RequestContext,
        outcome: Outcome,
        error: RequestException | None,
        result: RequestState,
    ) -> None:
        # State is already written at this point.
        for hook in self._hooks:
            try:
                await hook.on_outcome(ctx, outcome, error)
            except Exception:
                logger.exception("on_outcome hook %r failed for %s", hook, ctx.url)
        for hook in self._hooks:
            try:
                await hook.on_request_end(ctx, result)
            except Exception:
                logger.exception("on_request_end hook %r failed for %s", hook, ctx.url)

    async def aclose(self) -> None:
        self.cancel()
        await self._transport.aclose()

    async def __aenter__(self) -> RequestClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
