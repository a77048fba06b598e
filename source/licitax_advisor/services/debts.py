"""This module defines the service for debts (débitos)."""

from typing import Any

from licitax_advisor.exceptions.resources import InvalidArgumentError, NotFoundError
from licitax_advisor.mappers.entities import debt_to_wire
from licitax_advisor.mappers.results import map_documents
from licitax_advisor.models.debts import Debt, DebtCreate, DebtStatusUpdate
from licitax_advisor.models.enums import DebtStatus, DebtType
from licitax_advisor.providers.date import DateProvider
from licitax_advisor.providers.logging import Logger, LoggingProvider
from licitax_advisor.repositories.debts import DebtsRepository
from licitax_advisor.services.base import parse_payload, store_operation

INVALID_STATUS_MESSAGE = "Status inválido fornecido."


class DebtsService:
    """Implements the debt operations.

    Debts are never deleted through this service; a bid removes its own
    generated debt while it is pending.
    """

    logger: Logger

    def __init__(self, repository: DebtsRepository) -> None:
        """Initializes the service.

        Args:
            repository: The debts repository.
        """
        self.logger = LoggingProvider().get_logger()
        self.repository = repository

    @store_operation("Erro ao buscar débitos")
    def list_debts(self) -> list[Debt]:
        """Lists every debt.

        Returns:
            The debts that could be mapped.
        """
        return map_documents(self.repository.list_all(), debt_to_wire, self.logger, "debitos")

    @store_operation("Erro ao buscar débito")
    def get_debt(self, debt_id: str) -> Debt:
        """Fetches one debt.

        Args:
            debt_id: The debt id.

        Returns:
            The debt.

        Raises:
            NotFoundError: If the debt does not exist.
        """
        data = self.repository.get(debt_id)
        if data is None:
            raise NotFoundError("Débito não encontrado.")
        return debt_to_wire(debt_id, data)

    @store_operation("Erro ao adicionar débito avulso")
    def create_debt(self, payload: Any) -> Debt:
        """Registers an ad-hoc debt, pending from the moment it is created.

        Args:
            payload: The request body.

        Returns:
            The created debt, with its generated id.

        Raises:
            InvalidArgumentError: If a required field is missing or invalid.
        """
        debt = parse_payload(DebtCreate, payload)
        data = {
            "tipoDebito": DebtType.AD_HOC.value,
            "clienteNome": debt.client_name,
            "clienteCnpj": debt.client_cnpj or None,
            "descricao": debt.description,
            "valor": debt.amount,
            "dataVencimento": debt.due_date,
            "dataReferencia": DateProvider.now(),
            "status": DebtStatus.PENDING.value,
        }
        debt_id = self.repository.add(data)
        self.logger.info(f"Ad-hoc debt '{debt_id}' registered for '{debt.client_name}'.")
        return debt_to_wire(debt_id, data)

    @store_operation("Erro ao atualizar status do débito")
    def update_status(self, debt_id: str, payload: Any) -> None:
        """Moves a debt to one of the settled statuses.

        Args:
            debt_id: The debt id.
            payload: The request body, `{"status": ...}`.

        Raises:
            InvalidArgumentError: If the status is missing or not a settled status.
            NotFoundError: If the debt does not exist.
        """
        try:
            status = parse_payload(DebtStatusUpdate, payload).status
        except InvalidArgumentError as e:
            raise InvalidArgumentError(INVALID_STATUS_MESSAGE, e.error) from e
        if status not in DebtStatus.settled_statuses():
            raise InvalidArgumentError(INVALID_STATUS_MESSAGE, f"'{status}' is not a settled status.")

        self.repository.update(debt_id, {"status": status.value})
        self.logger.info(f"Debt '{debt_id}' moved to {status.value}.")
