"""create_client() — wires settings, credentials and transport into a RequestClient."""

from __future__ import annotations

from collections.abc import Sequence

import httpx

from request_lifecycle.client import RequestClient
from request_lifecycle.config import ClientSettings, get_settings
from request_lifecycle.credentials import (
    CredentialStore,
    InMemoryCredentialStore,
    SessionFileCredentialStore,
)
from request_lifecycle.hooks import RequestHook
from request_lifecycle.interceptors import AuthInterceptor
from request_lifecycle.navigation import Navigator
from request_lifecycle.transports import FetchTransport, HttpxTransport, Transport


def _make_store(settings: ClientSettings) -> CredentialStore:
    if settings.session_file is not None:
        return SessionFileCredentialStore(settings.session_file, key=settings.session_key)
    return InMemoryCredentialStore()


def create_client(
    settings: ClientSettings | None = None,
    *,
    credential_store: CredentialStore | None = None,
    navigator: Navigator | None = None,
    http_client: httpx.AsyncClient | None = None,
    hooks: Sequence[RequestHook] = (),
) -> RequestClient:
    """Return a new, independent RequestClient configured from ``settings``."""
    settings = settings or get_settings()

    interceptor = AuthInterceptor(
        credential_store or _make_store(settings),
        mode=settings.auth_mode,
        fail_fast_on_missing_auth=settings.fail_fast_on_missing_auth,
        navigator=navigator,
        session_expired_location=settings.session_expired_location,
    )

    transport_cls: type[HttpxTransport] | type[FetchTransport]
    if settings.transport == "fetch":
        transport_cls = FetchTransport
    else:
        transport_cls = HttpxTransport

    transport: Transport = transport_cls(
        settings.base_url,
        client=http_client,
        timeout=settings.timeout_seconds,
        interceptors=[interceptor],
    )
    return RequestClient(transport, hooks=hooks, debug=settings.debug)
