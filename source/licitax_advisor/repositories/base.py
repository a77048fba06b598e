"""This module defines the base repository over a Firestore collection."""

from typing import Any

from google.api_core.exceptions import NotFound
from google.cloud.firestore import Client, CollectionReference, FieldFilter, Query
from licitax_advisor.exceptions.resources import NotFoundError
from licitax_advisor.providers.logging import Logger, LoggingProvider

StoredDocument = tuple[str, dict[str, Any]]
"""A stored document as an `(id, fields)` pair."""


class FirestoreRepository:
    """Handles the document operations shared by every collection.

    Subclasses only name their collection. Every method returns plain
    `(id, fields)` pairs so that mapping to API models stays in the mappers.

    Args:
        client: The Firestore client used for all operations.
    """

    collection_name: str
    logger: Logger
    client: Client

    def __init__(self, client: Client) -> None:
        """Initializes the repository with a Firestore client.

        Args:
            client: The Firestore client to be used for all operations.
        """
        self.logger = LoggingProvider().get_logger()
        self.client = client

    def _collection(self) -> CollectionReference:
        return self.client.collection(self.collection_name)

    def list_all(self, order_by: str | None = None, descending: bool = False) -> list[StoredDocument]:
        """Reads every document of the collection.

        Args:
            order_by: An optional field to order by.
            descending: Whether the ordering is descending.

        Returns:
            The documents, in store order or by the requested field.
        """
        self.logger.debug(f"Listing documents of '{self.collection_name}'.")
        query = self._collection()
        if order_by:
            direction = Query.DESCENDING if descending else Query.ASCENDING
            query = query.order_by(order_by, direction=direction)
        return [(snapshot.id, snapshot.to_dict() or {}) for snapshot in query.stream()]

    def get(self, document_id: str) -> dict[str, Any] | None:
        """Fetches one document by id.

        Args:
            document_id: The document id.

        Returns:
            The stored fields, or None if the document does not exist.
        """
        snapshot = self._collection().document(document_id).get()
        if not snapshot.exists:
            return None
        return snapshot.to_dict() or {}

    def exists(self, document_id: str) -> bool:
        """Checks whether a document exists.

        Args:
            document_id: The document id.

        Returns:
            True if the document exists.
        """
        return self._collection().document(document_id).get().exists

    def find_by_field(self, field: str, value: Any, limit: int | None = None) -> list[StoredDocument]:
        """Finds the documents whose field equals a value.

        Args:
            field: The field to compare.
            value: The value to match.
            limit: An optional maximum number of results.

        Returns:
            The matching documents.
        """
        query = self._collection().where(filter=FieldFilter(field, "==", value))
        if limit is not None:
            query = query.limit(limit)
        return [(snapshot.id, snapshot.to_dict() or {}) for snapshot in query.stream()]

    def add(self, data: dict[str, Any]) -> str:
        """Creates a document with a generated id.

        Args:
            data: The fields to store.

        Returns:
            The generated id.
        """
        _, reference = self._collection().add(data)
        self.logger.info(f"Created document '{reference.id}' in '{self.collection_name}'.")
        return reference.id

    def update(self, document_id: str, data: dict[str, Any]) -> None:
        """Merges fields into an existing document.

        Args:
            document_id: The document id.
            data: The fields to write.

        Raises:
            NotFoundError: If the document does not exist.
        """
        try:
            self._collection().document(document_id).update(data)
        except NotFound as e:
            message = f"Documento '{document_id}' não encontrado em '{self.collection_name}'."
            raise NotFoundError(message, str(e)) from e
        self.logger.info(f"Updated document '{document_id}' in '{self.collection_name}'.")

    def set(self, document_id: str, data: dict[str, Any], merge: bool = True) -> None:
        """Creates or merges a document under a known id.

        Args:
            document_id: The document id.
            data: The fields to write.
            merge: Whether to merge into an existing document instead of replacing it.
        """
        self._collection().document(document_id).set(data, merge=merge)
        self.logger.info(f"Wrote document '{document_id}' in '{self.collection_name}'.")

    def delete(self, document_id: str) -> None:
        """Removes a document. Removing a missing document is not an error for the store.

        Args:
            document_id: The document id.
        """
        self._collection().document(document_id).delete()
        self.logger.info(f"Deleted document '{document_id}' from '{self.collection_name}'.")
