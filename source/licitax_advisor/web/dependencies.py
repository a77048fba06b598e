"""This module wires the services for FastAPI's dependency injection.

The Firestore client is acquired per request, so a store that failed to
initialize makes the store-backed endpoints answer 503 while the rest of
the API keeps working.
"""

from fastapi import Depends
from google.cloud.firestore import Client
from licitax_advisor.providers.firestore import FirestoreProvider
from licitax_advisor.repositories.bids import BidsRepository
from licitax_advisor.repositories.clients import ClientsRepository
from licitax_advisor.repositories.debts import DebtsRepository
from licitax_advisor.repositories.documents import DocumentsRepository
from licitax_advisor.repositories.settings import SettingsRepository
from licitax_advisor.services import (
    BidsService,
    ClientsService,
    ComprasGovService,
    DebtsService,
    DocumentsService,
    DocumentValidationService,
    SettingsService,
)


def get_firestore_client() -> Client:
    """Returns the shared Firestore client.

    Returns:
        The Firestore client.
    """
    return FirestoreProvider.get_client()


def get_clients_service(client: Client = Depends(get_firestore_client)) -> ClientsService:  # noqa: B008
    """Builds the clients service.

    Args:
        client: The Firestore client.

    Returns:
        The service.
    """
    return ClientsService(ClientsRepository(client))


def get_bids_service(client: Client = Depends(get_firestore_client)) -> BidsService:  # noqa: B008
    """Builds the bids service.

    Args:
        client: The Firestore client.

    Returns:
        The service.
    """
    return BidsService(
        BidsRepository(client),
        ClientsRepository(client),
        DebtsRepository(client),
        SettingsRepository(client),
    )


def get_documents_service(client: Client = Depends(get_firestore_client)) -> DocumentsService:  # noqa: B008
    """Builds the documents service.

    Args:
        client: The Firestore client.

    Returns:
        The service.
    """
    return DocumentsService(DocumentsRepository(client), ClientsRepository(client))


def get_debts_service(client: Client = Depends(get_firestore_client)) -> DebtsService:  # noqa: B008
    """Builds the debts service.

    Args:
        client: The Firestore client.

    Returns:
        The service.
    """
    return DebtsService(DebtsRepository(client))


def get_settings_service(client: Client = Depends(get_firestore_client)) -> SettingsService:  # noqa: B008
    """Builds the settings service.

    Args:
        client: The Firestore client.

    Returns:
        The service.
    """
    return SettingsService(SettingsRepository(client))


def get_document_validation_service() -> DocumentValidationService:
    """Builds the document validation service.

    Returns:
        The service.
    """
    return DocumentValidationService()


def get_compras_gov_service() -> ComprasGovService:
    """Builds the Compras.gov.br query service.

    Returns:
        The service.
    """
    return ComprasGovService()
