"""
Authentication example of request-lifecycle.

Demonstrates:
- Reading the bearer token from a session file on every request
- Redirecting a navigator when the session is gone
- Fail-fast mode versus letting the server reject the call
- Aggregating independent requests with settle_all
"""

import asyncio
import json
import tempfile
from pathlib import Path

import httpx
from fastapi import FastAPI, Header, HTTPException

from request_lifecycle import ClientSettings, create_client, settle_all

app = FastAPI(title="Secure API")


@app.get("/me")
async def me(authorization: str | None = Header(default=None)):
    if authorization != "Bearer secret-token":
        raise HTTPException(status_code=401, detail="Not authenticated")
    return {"user": "ada"}


class PrintingNavigator:
    """Stands in for the application's router."""

    def __init__(self) -> None:
        self.location = "/home"

    def current_location(self) -> str:
        return self.location

    async def navigate(self, location: str) -> None:
        print(f"navigating {self.location} -> {location}")
        self.location = location


async def main() -> None:
    session_file = Path(tempfile.mkdtemp()) / "session.json"
    http = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://api")
    navigator = PrintingNavigator()

    lenient = create_client(
        ClientSettings(session_file=session_file),
        navigator=navigator,
        http_client=http,
    )
    strict = create_client(
        ClientSettings(session_file=session_file, fail_fast_on_missing_auth=True),
        http_client=http,
    )

    # No session yet: the lenient client still calls the server, the strict one does not
    print("lenient:", (await lenient.get()("/me")).error)
    print("strict:", (await strict.get()("/me")).error)

    # Log in by writing the session file; the next request picks it up
    session_file.write_text(json.dumps({"auth": {"authenticated": True, "token": "secret-token"}}))
    print("after login:", (await lenient.get()("/me")).data)

    async def fetch_me(token: str):
        response = await http.get("/me", headers={"Authorization": f"Bearer {token}"})
        response.raise_for_status()
        return response.json()

    print("settled:", await settle_all([fetch_me("secret-token"), fetch_me("wrong")]))

    await http.aclose()


if __name__ == "__main__":
    asyncio.run(main())
