import sys
from pathlib import Path as _Path
sys.path.insert(0, str(_Path(__file__).resolve().parents[1] / "src"))

import mongomock
import pytest
from argon2 import PasswordHasher
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from ureg.app import create_app
from ureg.config import Settings
from ureg.infra.user_repo import UserRepository
from ureg.services.user_service import UserService


@pytest.fixture()
def collection():
    """In-memory Mongo collection, fresh per test."""
    return mongomock.MongoClient()["ureg_test"]["users"]


@pytest.fixture()
def hasher() -> PasswordHasher:
    # Low cost keeps the suite fast; production cost comes from Settings.
    return PasswordHasher(time_cost=1, memory_cost=8, parallelism=1)


@pytest.fixture()
def repo(collection) -> UserRepository:
    return UserRepository(collection)


@pytest.fixture()
def service(repo, hasher) -> UserService:
    return UserService(repo, hasher=hasher)


@pytest.fixture()
def client(collection, hasher) -> TestClient:
    app = create_app(Settings(), collection=collection, hasher=hasher)
    return TestClient(app, follow_redirects=False)


class FailingCollection:
    """Collection whose every call fails as if the server were unreachable."""

    def _boom(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")

    find = find_one = insert_one = find_one_and_update = delete_one = _boom


@pytest.fixture()
def failing_collection() -> FailingCollection:
    return FailingCollection()
