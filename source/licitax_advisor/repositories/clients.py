"""This module defines the repository for client records."""

from licitax_advisor.repositories.base import FirestoreRepository, StoredDocument


class ClientsRepository(FirestoreRepository):
    """Handles store operations for the `clients` collection."""

    collection_name = "clients"

    def find_by_cnpj(self, cnpj: str, limit: int | None = None) -> list[StoredDocument]:
        """Finds the clients registered under a tax identifier.

        Args:
            cnpj: The tax identifier to look for.
            limit: An optional maximum number of results.

        Returns:
            The matching clients.
        """
        return self.find_by_field("cnpj", cnpj, limit=limit)
