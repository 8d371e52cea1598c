"""RequestState and Outcome — the observable result of a logical request."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from request_lifecycle._types import JSONValue
from request_lifecycle.exceptions import RequestException


class Outcome(Enum):
    """Terminal states of a logical request."""

    FULFILLED = "fulfilled"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


@dataclass
class RequestState:
    """The ``data`` / ``error`` / ``loading`` triple a call site renders.

    Once ``loading`` is False at most one of ``data`` and ``error`` is set.
    Both stay empty when the request was cancelled, and also when a request
    fulfilled with no body (a 204 or a JSON ``null``). ``outcome`` tells
    those two apart; it is ``None`` until a request settles and takes no
    part in equality.
    """

    data: JSONValue = None
    error: RequestException | None = None
    loading: bool = False
    outcome: Outcome | None = field(default=None, compare=False)

    def snapshot(self) -> RequestState:
        return replace(self)

    def as_dict(self) -> dict[str, Any]:
        return {"data": self.data, "error": self.error, "loading": self.loading}
