"""Test configuration for repo-root tests."""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from todo_store.main import create_app  # noqa: E402
from todo_store.repositories import TodoRepositoryForMemory  # noqa: E402
from todo_store.services import TodoService  # noqa: E402


@pytest.fixture
def repository() -> TodoRepositoryForMemory:
    """Fresh in-memory repository."""
    return TodoRepositoryForMemory()


@pytest.fixture
def todo_service(repository: TodoRepositoryForMemory) -> TodoService:
    """Create todo service for testing."""
    return TodoService(repository)


@pytest.fixture
def client(repository: TodoRepositoryForMemory) -> TestClient:
    """Provide a TestClient over an app bound to the test repository."""
    return TestClient(create_app(repository))
