"""Pytest configuration and fixtures."""

import pytest
import pytest_asyncio

from fake_server import ENDPOINT, FakeFlexDB
from flexdb.client import FlexDB
from flexdb.client.config import FlexDBConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep FLEXDB_* variables from the outer environment out of tests."""
    for name in ("FLEXDB_API_KEY", "FLEXDB_ENDPOINT", "FLEXDB_STORE_ID", "FLEXDB_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config():
    """Create a test config pointing at the fake service."""
    return FlexDBConfig(api_key="test-key", endpoint=ENDPOINT)


@pytest.fixture
def fake():
    """Create an empty fake FlexDB service."""
    return FakeFlexDB()


@pytest_asyncio.fixture
async def db(fake):
    """Client authorized with the fake service's API key."""
    async with FlexDB(api_key="test-key", endpoint=ENDPOINT, transport=fake.transport) as client:
        yield client


@pytest_asyncio.fixture
async def anonymous_db(fake):
    """Client without an API key."""
    async with FlexDB(endpoint=ENDPOINT, transport=fake.transport) as client:
        yield client


@pytest_asyncio.fixture
async def store(db):
    """A freshly created store."""
    return await db.create_store("test-store")


@pytest.fixture
def users(store):
    """The 'users' collection of the test store."""
    return store.collection("users")
