from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from visitor_log.core.repositories import InMemoryVisitorRepository
from visitor_log.server.main import create_app


@pytest.fixture
def app(repository: InMemoryVisitorRepository) -> FastAPI:
    """An application bound to the per-test repository."""
    return create_app(repository=repository)


@pytest_asyncio.fixture(name="client")
async def client_fixture(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client talking to the application in-process."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client
