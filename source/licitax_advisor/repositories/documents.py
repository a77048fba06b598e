"""This module defines the repository for client compliance documents."""

from licitax_advisor.repositories.base import FirestoreRepository


class DocumentsRepository(FirestoreRepository):
    """Handles store operations for the `documentos` collection."""

    collection_name = "documentos"
