"""RequestException hierarchy for request outcomes."""

from __future__ import annotations


class RequestException(Exception):
    """Base for all request exceptions."""


class Cancelled(RequestException):
    """Request was superseded or explicitly cancelled."""

    def __init__(self, reason: str = "cancelled") -> None:
        super().__init__(reason)
        self.reason = reason


class Unauthenticated(RequestException):
    """No usable credential was found for a request that requires one."""

    def __init__(self, detail: str = "Not authenticated") -> None:
        super().__init__(detail)
        self.detail = detail


class TransportError(RequestException):
    """Non-2xx response or network-level failure."""

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.cause = cause


class ConstructionError(RequestException, ValueError):
    """Malformed request input detected before anything was sent."""


class InternalRequestError(RequestException):
    """Wraps unexpected exceptions raised while performing a request."""

    def __init__(self, detail: str, *, cause: Exception | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.cause = cause
