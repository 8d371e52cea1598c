"""settle_all() — wait for every request and keep the ones that fulfilled."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Iterable
from typing import TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


async def settle_all(requests: Iterable[Awaitable[T]]) -> list[T | None]:
    """Await all ``requests`` and return their values in input order.

    A request that raises maps to ``None``; its exception is logged and never
    re-raised. Only an error while building the input propagates: a failing
    iterable, or an element that is not awaitable. In that case nothing is
    scheduled and unstarted coroutines are closed.
    """
    pending = list(requests)
    if not pending:
        return []

    invalid = [item for item in pending if not inspect.isawaitable(item)]
    if invalid:
        for item in pending:
            if inspect.iscoroutine(item):
                item.close()
        raise TypeError(f"settle_all() expects awaitables, got {invalid[0]!r}")

    results = await asyncio.gather(*pending, return_exceptions=True)

    settled: list[T | None] = []
    for index, result in enumerate(results):
        if isinstance(result, BaseException):
            logger.info("Request %d of %d failed: %r", index + 1, len(results), result)
            settled.append(None)
        else:
            settled.append(result)
    return settled
