"""RequestTrace and TraceEntry — debug execution recording."""

from __future__ import annotations

from dataclasses import dataclass, field

from request_lifecycle.methods import HttpMethod
from request_lifecycle.state import Outcome


@dataclass(frozen=True)
class TraceEntry:
    """Single logical request record."""

    method: HttpMethod
    url: str
    duration_ms: float
    outcome: Outcome
    superseded: bool = False
    reason: str | None = None


@dataclass
class RequestTrace:
    """Ordered record of the logical requests a client has settled."""

    entries: list[TraceEntry] = field(default_factory=list)

    @property
    def last(self) -> TraceEntry | None:
        return self.entries[-1] if self.entries else None

    def clear(self) -> None:
        self.entries.clear()
