"""HttpMethod enum — the closed set of supported request methods."""

from __future__ import annotations

from enum import Enum

from request_lifecycle.exceptions import ConstructionError


class HttpMethod(Enum):
    """HTTP methods a request function can be bound to."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @property
    def carries_body(self) -> bool:
        """GET sends query params; every other method sends a JSON body."""
        return self is not HttpMethod.GET

    @classmethod
    def coerce(cls, method: HttpMethod | str) -> HttpMethod:
        """Accept an HttpMethod or a case-insensitive method name."""
        if isinstance(method, HttpMethod):
            return method
        if isinstance(method, str):
            try:
                return cls(method.strip().upper())
            except ValueError:
                pass
        raise ConstructionError(f"Unsupported HTTP method: {method!r}")
