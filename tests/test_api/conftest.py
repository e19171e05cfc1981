"""
Fixtures for the API tests: the app, talking to the test database.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from evently.api.app import app
from evently.api.dependencies import get_async_session
from evently.config.settings import Settings


@pytest.fixture(scope="session")
def session_manager(server_settings: Settings, database):
    yield server_settings.async_manager()


@pytest_asyncio.fixture(loop_scope="session")
async def client(session_manager):
    async def get_test_session():
        async with session_manager.session() as session:
            async with session.begin():
                yield session

    app.dependency_overrides[get_async_session] = get_test_session

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()
