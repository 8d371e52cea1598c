"""ClientSettings — environment-driven configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from request_lifecycle.interceptors import AuthMode
from request_lifecycle.navigation import SESSION_EXPIRED_LOCATION


class ClientSettings(BaseSettings):
    base_url: str = "http://localhost:8000"
    timeout_seconds: float = 30.0
    transport: Literal["httpx", "fetch"] = "httpx"

    auth_mode: AuthMode = AuthMode.AUTHENTICATED_FLAG
    fail_fast_on_missing_auth: bool = False
    session_file: Path | None = None
    session_key: str = "auth"
    session_expired_location: str = SESSION_EXPIRED_LOCATION

    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="REQUEST_LIFECYCLE_",
        env_file=".env",
        extra="ignore",
    )


def get_settings() -> ClientSettings:
    return ClientSettings()
