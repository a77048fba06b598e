"""This module defines the service for client compliance documents."""

from typing import Any

from licitax_advisor.exceptions.resources import InvalidArgumentError, NotFoundError
from licitax_advisor.mappers.entities import document_to_wire, to_store
from licitax_advisor.mappers.results import map_documents
from licitax_advisor.models.documents import Document, DocumentCreate, DocumentUpdate
from licitax_advisor.providers.date import DateProvider
from licitax_advisor.providers.logging import Logger, LoggingProvider
from licitax_advisor.repositories.clients import ClientsRepository
from licitax_advisor.repositories.documents import DocumentsRepository
from licitax_advisor.services.base import parse_payload, store_operation
from licitax_advisor.services.denormalization import CLIENT_NAME_FIELD, ClientNameResolver


class DocumentsService:
    """Implements the client document operations."""

    logger: Logger

    def __init__(self, documents_repository: DocumentsRepository, clients_repository: ClientsRepository) -> None:
        """Initializes the service.

        Args:
            documents_repository: The documents repository.
            clients_repository: The clients repository, for name resolution.
        """
        self.logger = LoggingProvider().get_logger()
        self.repository = documents_repository
        self.resolver = ClientNameResolver(clients_repository)

    @store_operation("Erro ao buscar documentos")
    def list_documents(self) -> list[Document]:
        """Lists every client document.

        Returns:
            The documents that could be mapped.
        """
        return map_documents(self.repository.list_all(), document_to_wire, self.logger, "documentos")

    @store_operation("Erro ao buscar documento")
    def get_document(self, document_id: str) -> Document:
        """Fetches one client document.

        Args:
            document_id: The document id.

        Returns:
            The document.

        Raises:
            NotFoundError: If the document does not exist.
        """
        data = self.repository.get(document_id)
        if data is None:
            raise NotFoundError("Documento não encontrado.")
        return document_to_wire(document_id, data)

    @store_operation("Erro ao adicionar documento")
    def create_document(self, payload: Any) -> Document:
        """Registers a document for an existing client.

        Args:
            payload: The request body.

        Returns:
            The created document, with its generated id.

        Raises:
            InvalidArgumentError: If `clienteId` or `tipoDocumento` is missing.
            NotFoundError: If the referenced client does not exist.
        """
        document = parse_payload(DocumentCreate, payload)
        data = to_store(document)
        data[CLIENT_NAME_FIELD] = self.resolver.resolve(document.client_id)
        data["dataVencimento"] = document.expiration_date
        data["createdAt"] = DateProvider.now()

        document_id = self.repository.add(data)
        self.logger.info(f"Document '{document_id}' registered for client '{document.client_id}'.")
        return document_to_wire(document_id, data)

    @store_operation("Erro ao atualizar documento")
    def update_document(self, document_id: str, payload: Any) -> None:
        """Merges fields into a document, re-resolving the client name when the client changes.

        Args:
            document_id: The document id.
            payload: The fields to change.

        Raises:
            InvalidArgumentError: If the body is empty or invalid.
            NotFoundError: If the document or the referenced client does not exist.
        """
        update = parse_payload(DocumentUpdate, payload)
        data = to_store(update)
        data.pop(CLIENT_NAME_FIELD, None)
        if not data:
            raise InvalidArgumentError("Nenhum campo para atualizar.")

        if not self.repository.exists(document_id):
            raise NotFoundError("Documento não encontrado para atualização.")

        if update.client_id:
            data[CLIENT_NAME_FIELD] = self.resolver.resolve(update.client_id)

        self.repository.update(document_id, data)

    @store_operation("Erro ao excluir documento")
    def delete_document(self, document_id: str) -> None:
        """Removes a client document.

        Args:
            document_id: The document id.

        Raises:
            NotFoundError: If the document does not exist.
        """
        if not self.repository.exists(document_id):
            raise NotFoundError("Documento não encontrado.")
        self.repository.delete(document_id)
