"""
Basic usage example of request-lifecycle.

Demonstrates:
- Binding a method and calling the request function
- Reading data / error / loading from the returned state
- A newer request superseding a slow one on the same client

Runs against an in-process FastAPI app, no server needed.
"""

import asyncio

import httpx
from fastapi import FastAPI

from request_lifecycle import HttpxTransport, RequestClient

app = FastAPI(title="Items API")


@app.get("/items")
async def list_items(page: int = 1):
    return [{"id": page * 10 + n} for n in range(3)]


@app.get("/slow")
async def slow():
    await asyncio.sleep(2)
    return {"slow": True}


async def main() -> None:
    http = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://api")
    async with RequestClient(HttpxTransport(client=http)) as client:
        get = client.request("GET")

        state = await get("/items", {"page": "1"})
        print("items:", state.data, "error:", state.error, "loading:", state.loading)

        # The slow request is cancelled as soon as the second one starts
        slow = asyncio.create_task(get("/slow"))
        await asyncio.sleep(0.1)
        fresh = await get("/items", {"page": "2"})
        stale = await slow
        print("fresh:", fresh.data)
        print("stale:", stale.data, stale.error)

    await http.aclose()


if __name__ == "__main__":
    asyncio.run(main())
