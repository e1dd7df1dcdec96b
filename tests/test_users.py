from typing import Generator

import pytest
from fastapi.testclient import TestClient

from productization.main import create_app
from productization.routers.users import get_user_directory
from productization.schemas.users import DirectoryUser
from productization.services.user_directory import UserDirectory


@pytest.fixture
def directory() -> UserDirectory:
    return UserDirectory([DirectoryUser(id=1, name="alice")])


@pytest.fixture
def users_client(directory: UserDirectory) -> Generator[TestClient, None, None]:
    app = create_app()
    app.dependency_overrides[get_user_directory] = lambda: directory
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def test_snapshot_is_not_affected_by_later_writes(directory: UserDirectory):
    before = directory.snapshot()
    directory.add(DirectoryUser(id=2, name="bob"))

    assert [u.name for u in before] == ["alice"]
    assert [u.name for u in directory.snapshot()] == ["alice", "bob"]


def test_list_users(users_client: TestClient):
    response = users_client.get("/api/users")

    assert response.status_code == 200
    assert response.json() == {"users": [{"id": 1, "name": "alice"}]}


def test_add_user(users_client: TestClient):
    response = users_client.post("/api/users", json={"id": 2, "name": "bob"})

    assert response.status_code == 201
    assert [u["name"] for u in response.json()["users"]] == ["alice", "bob"]


def test_add_user_requires_name(users_client: TestClient):
    response = users_client.post("/api/users", json={"id": 3, "name": ""})

    assert response.status_code == 422
