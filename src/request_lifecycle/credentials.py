"""Credential stores — Credential, CredentialStore, InMemory and session-file stores."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credential:
    """Authentication entry read from the session store."""

    authenticated: bool = False
    token: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> Credential:
        if not data:
            return cls()
        token = data.get("token")
        return cls(
            authenticated=bool(data.get("authenticated", False)),
            token=token if isinstance(token, str) and token else None,
        )


ANONYMOUS = Credential()


@runtime_checkable
class CredentialStore(Protocol):
    """Read-only view of the session-scoped credential entry."""

    def read(self) -> Credential: ...


class InMemoryCredentialStore:
    """Process-local credential store. Writes come from outside the client."""

    def __init__(self, credential: Credential | None = None) -> None:
        self._credential = credential or ANONYMOUS

    def read(self) -> Credential:
        return self._credential

    def set(self, credential: Credential) -> None:
        self._credential = credential

    def clear(self) -> None:
        self._credential = ANONYMOUS


class SessionFileCredentialStore:
    """Reads the credential from a JSON session file on every call.

    The file holds a JSON object; the credential lives under ``key``
    (``"auth"`` by default) as ``{"authenticated": bool, "token": str}``.
    A missing or unreadable file reads as anonymous.
    """

    def __init__(self, path: str | Path, *, key: str = "auth") -> None:
        self._path = Path(path)
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> Credential:
        if not self._path.exists():
            return ANONYMOUS
        try:
            data = json.loads(self._path.read_bytes())
        except (OSError, ValueError) as exc:
            logger.warning("Unreadable session file %s: %s", self._path, exc)
            return ANONYMOUS

        if not isinstance(data, dict):
            return ANONYMOUS
        entry = data.get(self._key)
        return Credential.from_mapping(entry if isinstance(entry, dict) else None)
