from collections.abc import Callable
from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine

from src.auth.dependencies import require_admin
from src.auth.identity import Identity
from src.config.database import to_sync_dsn
from src.config.settings import settings
from src.main import app  # loads every ORM module onto the metadata
from src.models.base import BaseModel

ADMIN_IDENTITY = Identity(user_id="admin-user", email="admin@example.com")


@pytest.fixture(scope="session", autouse=True)
def create_tables():
    """Create a fresh schema in the testing database once per run."""
    sync_engine = create_engine(to_sync_dsn(settings.test_database_url))
    BaseModel.metadata.drop_all(sync_engine)
    BaseModel.metadata.create_all(sync_engine)
    yield
    BaseModel.metadata.drop_all(sync_engine)
    sync_engine.dispose()


@pytest.fixture
def client_factory():
    """Build an HTTP client against the app with the given dependency overrides."""

    @asynccontextmanager
    async def factory(overrides: dict[Callable, Callable] | None = None, as_admin: bool = False):
        app.dependency_overrides.update(overrides or {})
        if as_admin:
            app.dependency_overrides[require_admin] = lambda: ADMIN_IDENTITY
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                yield client
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest.fixture
async def client(client_factory):
    async with client_factory() as client:
        yield client
