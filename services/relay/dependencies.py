from typing import AsyncIterator

import httpx
from fastapi import Request


async def get_webhook_client(request: Request) -> AsyncIterator[httpx.AsyncClient]:
    settings = request.app.state.settings
    async with httpx.AsyncClient(
        timeout=settings.webhook_timeout,
        transport=request.app.state.transport,
        follow_redirects=True,
    ) as client:
        yield client
