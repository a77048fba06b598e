"""This module defines the service for the company settings."""

from typing import Any

from licitax_advisor.mappers.entities import settings_to_wire, to_store
from licitax_advisor.models.settings import CompanySettings
from licitax_advisor.repositories.settings import SettingsRepository
from licitax_advisor.services.base import parse_payload, store_operation


class SettingsService:
    """Reads and merges the `configuracoes/empresa` document."""

    def __init__(self, repository: SettingsRepository) -> None:
        """Initializes the service.

        Args:
            repository: The settings repository.
        """
        self.repository = repository

    @store_operation("Erro ao buscar configurações")
    def get_settings(self) -> CompanySettings:
        """Reads the company settings.

        Returns:
            The settings, empty when they were never saved.
        """
        return settings_to_wire(self.repository.get_company())

    @store_operation("Erro ao salvar configurações")
    def update_settings(self, payload: Any) -> CompanySettings:
        """Merges fields into the company settings.

        Args:
            payload: The fields to change.

        Returns:
            The settings after the merge.
        """
        settings = parse_payload(CompanySettings, payload)
        self.repository.save_company(to_store(settings))
        return settings_to_wire(self.repository.get_company())
