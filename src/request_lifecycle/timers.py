"""ScheduledCall — delayed callback execution with status tracking."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any, Literal

logger = logging.getLogger(__name__)

CallStatus = Literal["pending", "fulfilled", "rejected", "cancelled"]


class ScheduledCall:
    """A callback scheduled on the running event loop after ``delay`` seconds."""

    def __init__(self, delay: float, callback: Callable[[], Any]) -> None:
        if delay < 0:
            raise ValueError("delay must be non-negative")
        self._callback = callback
        self.status: CallStatus = "pending"
        self.result: Any = None
        self.error: Exception | None = None
        self._timer = asyncio.get_running_loop().call_later(delay, self._run)

    def _run(self) -> None:
        if self.status != "pending":
            return
        try:
            self.result = self._callback()
        except Exception as exc:
            logger.error("Scheduled callback failed: %s", exc)
            self.error = exc
            self.status = "rejected"
        else:
            self.status = "fulfilled"

    @property
    def done(self) -> bool:
        return self.status != "pending"

    def cancel(self) -> dict[str, CallStatus]:
        """Stop the call if it has not run yet and report the status."""
        if self.status == "pending":
            self._timer.cancel()
            self.status = "cancelled"
        return {"status": self.status}


def schedule_timeout(delay: float, callback: Callable[[], Any]) -> ScheduledCall:
    """Run ``callback`` after ``delay`` seconds. Must be called inside a running loop."""
    return ScheduledCall(delay, callback)
