import pytest
from fastapi.testclient import TestClient

from main import create_app
from storage.memory import MemStorage


@pytest.fixture
def storage():
    return MemStorage()


@pytest.fixture
def client(storage):
    return TestClient(create_app(storage))


@pytest.fixture
def admin(storage):
    return next(iter(storage.users.values()))
