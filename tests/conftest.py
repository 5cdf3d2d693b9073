"""Shared test fixtures."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from content_sanitizer.compliance.patterns import PLACEHOLDER


@pytest.fixture
def placeholder() -> str:
    """The replacement text substituted for every contact span."""
    return PLACEHOLDER


@pytest.fixture(autouse=True)
def reset_message_store():
    """Reset in-memory messages before each test."""
    from content_sanitizer.gateway.message_store import message_store

    message_store.clear()
    yield
    message_store.clear()


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client."""
    from content_sanitizer.gateway.main import app

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
