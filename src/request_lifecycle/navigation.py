"""Navigator protocol — the external navigation collaborator."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

SESSION_EXPIRED_LOCATION = "/session-expired"


@runtime_checkable
class Navigator(Protocol):
    """Routing layer owned by the application, invoked on missing auth."""

    def current_location(self) -> str: ...

    async def navigate(self, location: str) -> None: ...
