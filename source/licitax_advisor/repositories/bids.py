"""This module defines the repository for tracked bids (licitações)."""

from licitax_advisor.repositories.base import FirestoreRepository, StoredDocument


class BidsRepository(FirestoreRepository):
    """Handles store operations for the `licitacoes` collection."""

    collection_name = "licitacoes"

    def list_by_start_date(self) -> list[StoredDocument]:
        """Reads every bid, the most recent start date first.

        Returns:
            The stored bids.
        """
        return self.list_all(order_by="dataInicio", descending=True)
