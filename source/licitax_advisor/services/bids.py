"""This module defines the service for tracked bids (licitações).

Besides the plain record operations, moving a bid to the homologated status
bills the client: a debt keyed by the bid id is created (or merged into an
existing one) with the amount charged for the bid.
"""

from datetime import datetime
from typing import Any

from licitax_advisor.exceptions.resources import InvalidArgumentError, NotFoundError
from licitax_advisor.mappers.entities import bid_to_wire, to_store
from licitax_advisor.mappers.results import map_documents
from licitax_advisor.models.bids import Bid, BidCreate, BidUpdate
from licitax_advisor.models.enums import BidStatus, DebtStatus, DebtType
from licitax_advisor.models.settings import CompanySettings
from licitax_advisor.providers.config import Config, ConfigProvider
from licitax_advisor.providers.date import DateProvider
from licitax_advisor.providers.logging import Logger, LoggingProvider
from licitax_advisor.repositories.bids import BidsRepository
from licitax_advisor.repositories.clients import ClientsRepository
from licitax_advisor.repositories.debts import DebtsRepository
from licitax_advisor.repositories.settings import SettingsRepository
from licitax_advisor.services.base import parse_payload, store_operation
from licitax_advisor.services.denormalization import CLIENT_NAME_FIELD, ClientNameResolver
from pydantic import ValidationError

DISCARDED_CREATE_FIELDS = ("propostaItensPdf",)


class BidsService:
    """Implements the bid operations and the billing of homologated bids."""

    logger: Logger
    config: Config

    def __init__(
        self,
        bids_repository: BidsRepository,
        clients_repository: ClientsRepository,
        debts_repository: DebtsRepository,
        settings_repository: SettingsRepository,
    ) -> None:
        """Initializes the service.

        Args:
            bids_repository: The bids repository.
            clients_repository: The clients repository, for name resolution and billing.
            debts_repository: The debts repository, for billing.
            settings_repository: The settings repository, for the billing day.
        """
        self.logger = LoggingProvider().get_logger()
        self.config = ConfigProvider.get_config()
        self.bids_repository = bids_repository
        self.clients_repository = clients_repository
        self.debts_repository = debts_repository
        self.settings_repository = settings_repository
        self.resolver = ClientNameResolver(clients_repository)

    @store_operation("Erro ao buscar licitações")
    def list_bids(self) -> list[Bid]:
        """Lists every bid, the most recent start date first.

        Returns:
            The bids that could be mapped.
        """
        return map_documents(self.bids_repository.list_by_start_date(), bid_to_wire, self.logger, "licitacoes")

    @store_operation("Erro ao buscar licitação")
    def get_bid(self, bid_id: str) -> Bid:
        """Fetches one bid.

        Args:
            bid_id: The bid id.

        Returns:
            The bid.

        Raises:
            NotFoundError: If the bid does not exist.
        """
        data = self.bids_repository.get(bid_id)
        if data is None:
            raise NotFoundError("Licitação não encontrada.")
        return bid_to_wire(bid_id, data)

    @store_operation("Erro ao adicionar licitação")
    def create_bid(self, payload: Any) -> Bid:
        """Registers a bid for an existing client.

        The bid always starts awaiting analysis, with an empty checklist and
        no comments, whatever the payload says.

        Args:
            payload: The request body.

        Returns:
            The created bid, with its generated id.

        Raises:
            InvalidArgumentError: If a required field is missing or invalid.
            NotFoundError: If the referenced client does not exist.
        """
        bid = parse_payload(BidCreate, payload)
        data = to_store(bid)
        for field in DISCARDED_CREATE_FIELDS:
            data.pop(field, None)

        data.update(
            {
                CLIENT_NAME_FIELD: self.resolver.resolve(bid.client_id),
                "status": BidStatus.AWAITING_ANALYSIS.value,
                "checklist": {},
                "comentarios": [],
                "createdAt": DateProvider.now(),
            }
        )
        bid_id = self.bids_repository.add(data)
        self.logger.info(f"Bid '{bid_id}' registered for client '{bid.client_id}'.")
        return bid_to_wire(bid_id, data)

    @store_operation("Erro ao atualizar licitação")
    def update_bid(self, bid_id: str, payload: Any) -> None:
        """Merges fields into a bid, billing the client on homologation.

        Args:
            bid_id: The bid id.
            payload: The fields to change.

        Raises:
            InvalidArgumentError: If the body is empty or invalid.
            NotFoundError: If the bid or a newly referenced client does not exist.
        """
        update = parse_payload(BidUpdate, payload)
        data = to_store(update)
        data.pop(CLIENT_NAME_FIELD, None)
        if not data:
            raise InvalidArgumentError("Nenhum campo para atualizar.")

        existing = self.bids_repository.get(bid_id)
        if existing is None:
            raise NotFoundError("Licitação não encontrada para atualização.")

        if update.client_id:
            data[CLIENT_NAME_FIELD] = self.resolver.resolve(update.client_id)

        homologated = BidStatus.HOMOLOGATED.value
        newly_homologated = data.get("status") == homologated and existing.get("status") != homologated
        if newly_homologated:
            data["dataHomologacao"] = DateProvider.now()

        self.bids_repository.update(bid_id, data)

        if newly_homologated:
            self._bill_homologation(bid_id, {**existing, **data})

    @store_operation("Erro ao excluir licitação")
    def delete_bid(self, bid_id: str) -> None:
        """Removes a bid, along with its generated debt while it is still pending.

        Args:
            bid_id: The bid id.

        Raises:
            NotFoundError: If the bid does not exist.
        """
        if not self.bids_repository.exists(bid_id):
            raise NotFoundError("Licitação não encontrada.")

        debt = self.debts_repository.get(bid_id)
        if debt is not None and debt.get("status") == DebtStatus.PENDING.value:
            self.debts_repository.delete(bid_id)
            self.logger.info(f"Pending debt of bid '{bid_id}' removed.")

        self.bids_repository.delete(bid_id)

    def _billing_day(self) -> int:
        """Reads the company's billing day, falling back to the configured default.

        Returns:
            The day of month on which generated debts fall due.
        """
        try:
            settings = CompanySettings.model_validate(self.settings_repository.get_company() or {})
        except ValidationError as e:
            self.logger.warning(f"Ignoring invalid company settings: {e}")
            return self.config.DEFAULT_DUE_DAY
        return settings.due_day or self.config.DEFAULT_DUE_DAY

    def _bill_homologation(self, bid_id: str, bid: dict[str, Any]) -> None:
        """Creates or merges the debt generated by a homologated bid.

        Args:
            bid_id: The bid id, reused as the debt id.
            bid: The merged bid fields after the update.
        """
        homologation_date: datetime = bid["dataHomologacao"]
        due_date = DateProvider.add_months_on_day(homologation_date, 1, self._billing_day())

        client_id = bid.get("clienteId")
        client = self.clients_repository.get(client_id) if client_id else None
        amount = bid.get("valorCobrado")
        if amount is None:
            self.logger.warning(f"Bid '{bid_id}' has no charged amount; billing 0.")

        self.debts_repository.set(
            bid_id,
            {
                "tipoDebito": DebtType.BID.value,
                "clienteNome": bid.get("clienteNome"),
                "clienteCnpj": (client or {}).get("cnpj"),
                "descricao": f"Serviços Licitação {bid.get('numeroLicitacao')}",
                "valor": amount or 0,
                "dataVencimento": due_date,
                "dataReferencia": homologation_date,
                "status": DebtStatus.PENDING.value,
                "licitacaoNumero": bid.get("numeroLicitacao"),
            },
            merge=True,
        )
        self.logger.info(f"Bid '{bid_id}' homologated; debt due on {DateProvider.format_date(due_date)}.")
