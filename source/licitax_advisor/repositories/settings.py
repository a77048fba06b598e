"""This module defines the repository for the company settings document."""

from typing import Any

from licitax_advisor.repositories.base import FirestoreRepository

COMPANY_DOCUMENT_ID = "empresa"


class SettingsRepository(FirestoreRepository):
    """Handles the single `configuracoes/empresa` document."""

    collection_name = "configuracoes"

    def get_company(self) -> dict[str, Any] | None:
        """Reads the company settings.

        Returns:
            The stored settings, or None if they were never saved.
        """
        return self.get(COMPANY_DOCUMENT_ID)

    def save_company(self, data: dict[str, Any]) -> None:
        """Merges fields into the company settings, creating the document if needed.

        Args:
            data: The fields to write.
        """
        self.set(COMPANY_DOCUMENT_ID, data, merge=True)
