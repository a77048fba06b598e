"""This module defines the service for client records."""

from typing import Any

from licitax_advisor.exceptions.resources import ConflictError, InvalidArgumentError, NotFoundError
from licitax_advisor.mappers.entities import client_to_wire, to_store
from licitax_advisor.mappers.results import map_documents
from licitax_advisor.models.clients import Client, ClientCreate, ClientUpdate
from licitax_advisor.providers.logging import Logger, LoggingProvider
from licitax_advisor.repositories.clients import ClientsRepository
from licitax_advisor.services.base import parse_payload, store_operation


class ClientsService:
    """Implements the client operations, enforcing the uniqueness of the CNPJ.

    The uniqueness check and the write are separate store round trips, so
    two concurrent registrations of the same CNPJ can both succeed.
    """

    logger: Logger
    repository: ClientsRepository

    def __init__(self, repository: ClientsRepository) -> None:
        """Initializes the service.

        Args:
            repository: The clients repository.
        """
        self.logger = LoggingProvider().get_logger()
        self.repository = repository

    @store_operation("Erro ao buscar clientes")
    def list_clients(self) -> list[Client]:
        """Lists every client.

        Returns:
            The clients that could be mapped.
        """
        return map_documents(self.repository.list_all(), client_to_wire, self.logger, "clients")

    @store_operation("Erro ao buscar cliente")
    def get_client(self, client_id: str) -> Client:
        """Fetches one client.

        Args:
            client_id: The client id.

        Returns:
            The client.

        Raises:
            NotFoundError: If the client does not exist.
        """
        data = self.repository.get(client_id)
        if data is None:
            raise NotFoundError("Cliente não encontrado.")
        return client_to_wire(client_id, data)

    @store_operation("Erro ao adicionar cliente")
    def create_client(self, payload: Any) -> Client:
        """Registers a client.

        Args:
            payload: The request body.

        Returns:
            The created client, with its generated id.

        Raises:
            InvalidArgumentError: If `razaoSocial` or `cnpj` is missing.
            ConflictError: If the CNPJ is already registered.
        """
        client = parse_payload(ClientCreate, payload)
        if self.repository.find_by_cnpj(client.cnpj, limit=1):
            raise ConflictError(f"CNPJ {client.cnpj} já cadastrado.")

        data = to_store(client)
        client_id = self.repository.add(data)
        self.logger.info(f"Client '{client_id}' registered.")
        return client_to_wire(client_id, data)

    @store_operation("Erro ao atualizar cliente")
    def update_client(self, client_id: str, payload: Any) -> None:
        """Merges fields into a client.

        Args:
            client_id: The client id.
            payload: The fields to change.

        Raises:
            InvalidArgumentError: If the body is empty or invalid.
            ConflictError: If another client already holds the new CNPJ.
            NotFoundError: If the client does not exist.
        """
        update = parse_payload(ClientUpdate, payload)
        data = to_store(update)
        if not data:
            raise InvalidArgumentError("Nenhum campo para atualizar.")

        if update.cnpj:
            others = [found_id for found_id, _ in self.repository.find_by_cnpj(update.cnpj) if found_id != client_id]
            if others:
                raise ConflictError(f"CNPJ {update.cnpj} já cadastrado para outro cliente.")

        self.repository.update(client_id, data)

    @store_operation("Erro ao excluir cliente")
    def delete_client(self, client_id: str) -> None:
        """Removes a client. Bids, documents and debts referencing it are kept.

        Args:
            client_id: The client id.

        Raises:
            NotFoundError: If the client does not exist.
        """
        if not self.repository.exists(client_id):
            raise NotFoundError(f"Cliente com ID {client_id} não encontrado.")
        self.repository.delete(client_id)
