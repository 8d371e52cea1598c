"""FastAPI backend served in-process through httpx.ASGITransport."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from typing import Any

import httpx
import pytest
from fastapi import FastAPI, Header, HTTPException, Request, Response
from fastapi.responses import PlainTextResponse


def build_app() -> FastAPI:
    app = FastAPI()
    app.state.secure_hits = 0

    @app.get("/items")
    async def list_items(page: int = 1) -> list[dict[str, Any]]:
        return [{"id": page * 10 + n, "page": page} for n in range(2)]

    @app.post("/items", status_code=201)
    async def create_item(request: Request) -> dict[str, Any]:
        payload = await request.json()
        return {"id": 99, **payload}

    @app.put("/items/{item_id}")
    async def replace_item(item_id: int, request: Request) -> dict[str, Any]:
        payload = await request.json()
        return {"id": item_id, **payload}

    @app.delete("/items/{item_id}")
    async def delete_item(item_id: int) -> Response:
        return Response(status_code=204)

    @app.get("/query")
    async def echo_query(request: Request) -> dict[str, str]:
        return dict(request.query_params)

    @app.get("/headers")
    async def echo_headers(request: Request) -> dict[str, str | None]:
        return {
            "accept": request.headers.get("accept"),
            "content-type": request.headers.get("content-type"),
            "authorization": request.headers.get("authorization"),
        }

    @app.get("/secure")
    async def secure(authorization: str | None = Header(default=None)) -> dict[str, str]:
        app.state.secure_hits += 1
        if authorization != "Bearer abc":
            raise HTTPException(status_code=401, detail="Not authenticated")
        return {"user": "abc"}

    @app.get("/boom")
    async def boom() -> None:
        raise HTTPException(status_code=500, detail="boom")

    @app.get("/text")
    async def text() -> PlainTextResponse:
        return PlainTextResponse("hello")

    @app.get("/slow")
    async def slow() -> dict[str, bool]:
        await asyncio.sleep(5)
        return {"slow": True}

    @app.post("/login")
    async def login(response: Response) -> dict[str, bool]:
        response.set_cookie("session", "xyz")
        return {"ok": True}

    @app.get("/whoami")
    async def whoami(request: Request) -> dict[str, str | None]:
        return {"session": request.cookies.get("session")}

    return app


@pytest.fixture
def api_app() -> FastAPI:
    return build_app()


@pytest.fixture
async def asgi_client(api_app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=api_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
