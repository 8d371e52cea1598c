"""RequestContext — per-request record passed to hooks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from request_lifecycle.cancellation import CancellationHandle
from request_lifecycle.methods import HttpMethod


@dataclass
class RequestContext:
    """Lightweight description of one logical request."""

    method: HttpMethod
    url: str
    handle: CancellationHandle
    params: dict[str, Any] = field(default_factory=dict)
    body: Any | None = None
    state: dict[str, Any] = field(default_factory=dict)
