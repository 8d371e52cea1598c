"""CancellationHandle — single-use abort token for one logical request."""

from __future__ import annotations

from collections.abc import Callable

from request_lifecycle.exceptions import Cancelled


class CancellationHandle:
    """Abort signal owned by a RequestClient for the span of one request.

    Transports register callbacks with ``add_callback``; ``cancel`` runs them
    once, synchronously, so cancellation is visible before the caller
    continues. A handle is never reset or reused.
    """

    def __init__(self) -> None:
        self._cancelled = False
        self._reason: str | None = None
        self._callbacks: list[Callable[[], object]] = []

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def reason(self) -> str | None:
        return self._reason

    def cancel(self, reason: str = "cancelled") -> bool:
        """Trigger the handle. Returns False if it was already triggered."""
        if self._cancelled:
            return False
        self._cancelled = True
        self._reason = reason
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()
        return True

    def add_callback(self, callback: Callable[[], object]) -> Callable[[], None]:
        """Register ``callback`` to run on cancel and return a remover.

        If the handle is already cancelled the callback runs immediately.
        """
        if self._cancelled:
            callback()
            return lambda: None

        self._callbacks.append(callback)

        def remove() -> None:
            try:
                self._callbacks.remove(callback)
            except ValueError:
                pass

        return remove

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise Cancelled(self._reason or "cancelled")

    def __repr__(self) -> str:
        state = f"cancelled={self._reason!r}" if self._cancelled else "active"
        return f"<CancellationHandle {state}>"
