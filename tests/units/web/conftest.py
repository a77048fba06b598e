"""This module contains shared fixtures for the web unit tests."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from licitax_advisor.web.dependencies import get_firestore_client
from licitax_advisor.web.main import app

from tests.units.conftest import FakeFirestoreClient


@pytest.fixture
def client(firestore_client: FakeFirestoreClient) -> Generator[TestClient, None, None]:
    """Create a test client backed by the in-memory store."""
    app.dependency_overrides[get_firestore_client] = lambda: firestore_client
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def acme(client: TestClient) -> dict:
    """Registers a client through the API.

    Returns:
        The created client.
    """
    response = client.post("/clients", json={"razaoSocial": "ACME Ltda", "cnpj": "11222333000181"})
    assert response.status_code == 201
    return response.json()
