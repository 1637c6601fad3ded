"""
Shared fixtures: fake model clients, an in-memory run store and the API client.
"""

import pytest
from fastapi.testclient import TestClient

from app.core.app import app
from tests.fakes import FailingClient, InMemoryRunStore, ScriptedClient


@pytest.fixture
def scripted_client():
    return ScriptedClient()


@pytest.fixture
def failing_client():
    return FailingClient()


@pytest.fixture
def memory_store():
    return InMemoryRunStore()


@pytest.fixture
def client():
    """Create a TestClient for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client
