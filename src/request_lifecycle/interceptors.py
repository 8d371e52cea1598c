"""Request interceptors — RequestInterceptor base and AuthInterceptor."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum

from request_lifecycle.credentials import Credential, CredentialStore
from request_lifecycle.exceptions import Unauthenticated
from request_lifecycle.navigation import SESSION_EXPIRED_LOCATION, Navigator
from request_lifecycle.transports.base import OutgoingRequest

logger = logging.getLogger(__name__)


class RequestInterceptor(ABC):
    """Processing step applied to every outgoing request before it is sent."""

    @abstractmethod
    async def intercept(self, request: OutgoingRequest) -> None: ...


class AuthMode(Enum):
    """What counts as being authenticated."""

    AUTHENTICATED_FLAG = "authenticated"
    TOKEN_PRESENT = "token"


class AuthInterceptor(RequestInterceptor):
    """Attaches the session credential as a Bearer token.

    The credential is re-read from ``store`` for every request. When it is
    missing, the navigator (if any) is sent to the session-expired location.
    With ``fail_fast_on_missing_auth`` the request then stops with
    Unauthenticated; otherwise it goes out without an Authorization header.
    """

    def __init__(
        self,
        store: CredentialStore,
        *,
        mode: AuthMode = AuthMode.AUTHENTICATED_FLAG,
        fail_fast_on_missing_auth: bool = False,
        navigator: Navigator | None = None,
        session_expired_location: str = SESSION_EXPIRED_LOCATION,
        scheme: str = "Bearer",
        header: str = "Authorization",
    ) -> None:
        self._store = store
        self._mode = mode
        self._fail_fast = fail_fast_on_missing_auth
        self._navigator = navigator
        self._session_expired_location = session_expired_location
        self._scheme = scheme
        self._header = header

    @property
    def fail_fast_on_missing_auth(self) -> bool:
        return self._fail_fast

    def is_authenticated(self, credential: Credential) -> bool:
        if self._mode is AuthMode.TOKEN_PRESENT:
            return credential.token is not None
        return credential.authenticated

    async def intercept(self, request: OutgoingRequest) -> None:
        credential = self._store.read()

        if self.is_authenticated(credential):
            if credential.token:
                request.headers[self._header] = f"{self._scheme} {credential.token}"
            else:
                logger.warning("Credential is authenticated but carries no token")
            return

        logger.warning(
            "No credential for %s %s", request.method.value, request.url
        )
        await self._redirect()

        if self._fail_fast:
            raise Unauthenticated()

    async def _redirect(self) -> None:
        if self._navigator is None:
            return
        if self._navigator.current_location() == self._session_expired_location:
            return
        await self._navigator.navigate(self._session_expired_location)
