"""Shared type aliases and protocols."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from request_lifecycle.state import RequestState

JSONValue: TypeAlias = (
    dict[str, Any] | list[Any] | str | int | float | bool | None
)
QueryParams: TypeAlias = Mapping[str, Any]

# Bound request function returned by RequestClient.request()
RequestFunction = Callable[..., Awaitable["RequestState"]]
