from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from visitor_log.server.main import create_app


@pytest_asyncio.fixture(name="client")
async def client_fixture() -> AsyncGenerator[AsyncClient, None]:
    """A client against a fresh application using the real clock and default store."""
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client
