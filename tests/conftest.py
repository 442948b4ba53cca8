"""Shared pytest fixtures."""

from types import SimpleNamespace
from typing import Any
from uuid import UUID

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from accounts.app import App
from accounts.config import Config
from accounts.core.modules.token.service import TokenService
from accounts.core.modules.user.models import User
from accounts.core.modules.user.passwords import hash_password
from accounts.core.modules.user.service import UserService
from accounts.web.server import create_fastapi_app


class FakeCollection:
    """In-memory stand-in for an AsyncCollection: exact-match lookups and unique indexes."""

    def __init__(self) -> None:
        self.docs: list[dict[str, Any]] = []
        self.unique_fields: set[str] = {"_id"}

    async def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        for doc in self.docs:
            if all(doc.get(key) == value for key, value in query.items()):
                return dict(doc)
        return None

    async def insert_one(self, doc: dict[str, Any]) -> SimpleNamespace:
        for field in self.unique_fields:
            if any(existing.get(field) == doc.get(field) for existing in self.docs):
                raise DuplicateKeyError(f"E11000 duplicate key error dup key: {{ {field}: {doc.get(field)!r} }}")
        self.docs.append(dict(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    async def create_index(self, keys: list[tuple[str, int]], unique: bool = False, **_: Any) -> str:
        if unique:
            self.unique_fields.update(name for name, _direction in keys)
        return "_".join(f"{name}_{direction}" for name, direction in keys)


class FakeDatabase:
    def __init__(self) -> None:
        self.collections: dict[str, FakeCollection] = {}

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())


class FakeMongoClient:
    def __init__(self, *_: Any, **__: Any) -> None:
        self.database = FakeDatabase()
        self.closed = False

    def get_database(self, _name: str) -> FakeDatabase:
        return self.database

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def config():
    """Config with a low bcrypt cost to keep tests fast."""
    return Config(
        database_url="mongodb://localhost:27017/accounts_test",
        jwt_secret="test-secret",
        bcrypt_rounds=4,
        token_ttl_seconds=3600,
    )


@pytest.fixture
def database():
    return FakeDatabase()


@pytest_asyncio.fixture
async def user_service(database, config):
    service = UserService(database, config)
    await service.on_start()
    return service


@pytest.fixture
def token_service(database, config):
    return TokenService(database, config)


@pytest.fixture
def mock_user():
    """Create a stored-shape user whose password is 'secret1'."""
    return User(
        id=UUID("87654321-4321-8765-4321-876543218765"),
        name="Ann",
        email="ann@x.com",
        password_hash=hash_password("secret1", 4),
    )


@pytest.fixture
def app(monkeypatch, config):
    """App wired to an in-memory database."""
    monkeypatch.setattr("accounts.core.core.AsyncMongoClient", FakeMongoClient)
    return App(config)


@pytest.fixture
def client(app, config):
    with TestClient(create_fastapi_app(app, config)) as test_client:
        yield test_client
