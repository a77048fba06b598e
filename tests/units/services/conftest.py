"""This module contains shared fixtures for the services unit tests."""

import pytest
from licitax_advisor.repositories.bids import BidsRepository
from licitax_advisor.repositories.clients import ClientsRepository
from licitax_advisor.repositories.debts import DebtsRepository
from licitax_advisor.repositories.documents import DocumentsRepository
from licitax_advisor.repositories.settings import SettingsRepository

from tests.units.conftest import FakeFirestoreClient


@pytest.fixture
def clients_repository(firestore_client: FakeFirestoreClient) -> ClientsRepository:
    """Provides the clients repository over the in-memory store."""
    return ClientsRepository(firestore_client)


@pytest.fixture
def bids_repository(firestore_client: FakeFirestoreClient) -> BidsRepository:
    """Provides the bids repository over the in-memory store."""
    return BidsRepository(firestore_client)


@pytest.fixture
def documents_repository(firestore_client: FakeFirestoreClient) -> DocumentsRepository:
    """Provides the documents repository over the in-memory store."""
    return DocumentsRepository(firestore_client)


@pytest.fixture
def debts_repository(firestore_client: FakeFirestoreClient) -> DebtsRepository:
    """Provides the debts repository over the in-memory store."""
    return DebtsRepository(firestore_client)


@pytest.fixture
def settings_repository(firestore_client: FakeFirestoreClient) -> SettingsRepository:
    """Provides the settings repository over the in-memory store."""
    return SettingsRepository(firestore_client)


@pytest.fixture
def acme_id(clients_repository: ClientsRepository) -> str:
    """Registers a client and returns its id.

    Returns:
        The id of the stored client.
    """
    return clients_repository.add({"razaoSocial": "ACME Ltda", "cnpj": "11222333000181"})
