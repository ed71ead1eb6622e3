"""Tests for the FlexDB client and store handles."""

import asyncio

import httpx
import pytest
from pydantic import ValidationError

from fake_server import ENDPOINT
from flexdb.client import FlexDB, Store
from flexdb.client.config import DEFAULT_ENDPOINT
from flexdb.client.exceptions import is_transport_failure, status_of


class TestClientInit:
    """Tests for FlexDB construction."""

    def test_defaults(self):
        db = FlexDB()
        assert db.config.api_key is None
        assert db.endpoint == DEFAULT_ENDPOINT

    def test_empty_endpoint_falls_back_to_default(self):
        assert FlexDB(endpoint="").endpoint == DEFAULT_ENDPOINT

    def test_explicit_config(self, config):
        db = FlexDB(config=config)
        assert db.config is config

    def test_config_and_keywords_are_exclusive(self, config):
        with pytest.raises(ValueError, match="either config"):
            FlexDB(api_key="k", config=config)

    def test_config_is_immutable(self):
        db = FlexDB(api_key="k")
        with pytest.raises(ValidationError):
            db.config.api_key = "other"


class TestCreateStore:
    """Tests for create_store."""

    @pytest.mark.asyncio
    async def test_create_store_from_name(self, db, fake):
        store = await db.create_store("test-store")

        assert isinstance(store, Store)
        assert store.name == "test-store"
        assert store.data["account"] == "acct-1"
        assert fake.requests[-1].headers["Authorization"] == "Account test-key"

    @pytest.mark.asyncio
    async def test_create_store_from_payload(self, db):
        store = await db.create_store({"name": "from-payload"})
        assert store.name == "from-payload"

    @pytest.mark.asyncio
    async def test_create_store_without_api_key(self, anonymous_db, fake):
        store = await anonymous_db.create_store("anonymous")

        assert store.id
        assert "account" not in store.data
        assert "Authorization" not in fake.requests[-1].headers

    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts(self, db):
        await db.create_store("taken")
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await db.create_store("taken")
        assert status_of(exc_info.value) == 409

    @pytest.mark.asyncio
    async def test_bad_api_key_is_rejected(self, fake):
        async with FlexDB(api_key="wrong", endpoint=ENDPOINT, transport=fake.transport) as db:
            with pytest.raises(httpx.HTTPStatusError) as exc_info:
                await db.create_store("x")
        assert status_of(exc_info.value) == 401


class TestGetStore:
    """Tests for get_store and ensure_store_exists."""

    @pytest.mark.asyncio
    async def test_get_store_by_name(self, db, store):
        found = await db.get_store("test-store")

        assert found.id == store.id
        assert found.data == store.data

    @pytest.mark.asyncio
    async def test_missing_store_returns_none(self, db):
        assert await db.get_store("does-not-exist") is None

    @pytest.mark.asyncio
    async def test_store_name_is_encoded_in_path(self, db, fake):
        """Reserved characters stay in the path segment instead of starting a query."""
        assert await db.get_store("a?b") is None

        request = fake.requests[-1]
        assert request.url.raw_path == b"/api/v1/stores/a%3Fb"
        assert request.url.path == "/api/v1/stores/a?b"
        assert request.url.query == b""

    @pytest.mark.asyncio
    async def test_ensure_creates_missing_store(self, db, fake):
        store = await db.ensure_store_exists("new-store")

        assert store.name == "new-store"
        assert [r.method for r in fake.requests] == ["GET", "POST"]

    @pytest.mark.asyncio
    async def test_ensure_returns_existing_store(self, db, store, fake):
        found = await db.ensure_store_exists("test-store")

        assert found.id == store.id
        assert fake.requests[-1].method == "GET"
        assert len(fake.stores) == 1

    @pytest.mark.asyncio
    async def test_ensure_race_surfaces_conflict(self, fake):
        """Two concurrent callers can both see the store missing."""
        lookups = 0
        both_looked_up = asyncio.Event()

        async def handler(request):
            # Hold each lookup until both callers have made theirs
            nonlocal lookups
            if request.method == "GET":
                lookups += 1
                if lookups == 2:
                    both_looked_up.set()
                await both_looked_up.wait()
            return fake.handler(request)

        async with FlexDB(api_key="test-key", endpoint=ENDPOINT, transport=httpx.MockTransport(handler)) as db:
            results = await asyncio.gather(
                db.ensure_store_exists("raced"),
                db.ensure_store_exists("raced"),
                return_exceptions=True,
            )

        stores = [r for r in results if isinstance(r, Store)]
        errors = [r for r in results if isinstance(r, Exception)]
        assert len(stores) == 1
        assert len(errors) == 1
        assert isinstance(errors[0], httpx.HTTPStatusError)
        assert status_of(errors[0]) == 409
        assert len(fake.stores) == 1


class TestStoreHandle:
    """Tests for Store."""

    def test_id_is_read_only(self):
        store = Store(FlexDB(), {"id": "store-1", "name": "s"})
        with pytest.raises(AttributeError):
            store.id = "store-2"

    def test_collection_is_bound_to_store(self):
        store = Store(FlexDB(), {"id": "store-1"})
        users = store.collection("users")

        assert users.store is store
        assert users.name == "users"
        assert store.name is None

    @pytest.mark.asyncio
    async def test_delete_store(self, db, store, fake):
        result = await store.delete()

        assert result == {"success": True}
        request = fake.requests[-1]
        assert request.method == "DELETE"
        assert request.headers["Authorization"] == f"Store {store.id}"
        assert await db.get_store("test-store") is None

    @pytest.mark.asyncio
    async def test_collection_ops_fail_after_delete(self, store):
        users = store.collection("users")
        await store.delete()

        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await users.create({"name": "Alice"})
        assert status_of(exc_info.value) == 401


class TestUnreachable:
    """Tests for transport failures."""

    @pytest.mark.asyncio
    async def test_unreachable_endpoint(self):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        async with FlexDB(endpoint="http://localhost:9999/", transport=httpx.MockTransport(refuse)) as db:
            with pytest.raises(httpx.TransportError) as exc_info:
                await db.create_store("test-store")

        assert is_transport_failure(exc_info.value)
        assert status_of(exc_info.value) is None
