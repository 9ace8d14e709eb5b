from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from user_directory_api.app.core.store import UserStore
from user_directory_api.app.main import create_app
from user_directory_api.app.services.user_service import UserService


@pytest.fixture()
def store() -> UserStore:
    return UserStore.seeded()


@pytest.fixture()
def service(store: UserStore) -> UserService:
    return UserService(store)


@pytest.fixture()
def client(store: UserStore) -> Iterator[TestClient]:
    with TestClient(create_app(store=store)) as test_client:
        yield test_client
