"""This module contains tests for the debts service."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest
from licitax_advisor.exceptions.resources import InvalidArgumentError, NotFoundError
from licitax_advisor.repositories.debts import DebtsRepository
from licitax_advisor.services.debts import DebtsService


@pytest.fixture
def service(debts_repository: DebtsRepository) -> DebtsService:
    """Provides the service over the in-memory store."""
    return DebtsService(debts_repository)


def _payload(**overrides: object) -> dict:
    payload = {
        "clienteNome": "ACME Ltda",
        "descricao": "Consultoria avulsa",
        "valor": 350.5,
        "dataVencimento": "2024-07-10T12:00:00.000Z",
    }
    payload.update(overrides)
    return payload


def test_create_ad_hoc_debt(service: DebtsService) -> None:
    """Tests the server-controlled fields of a new debt."""
    created = service.create_debt(_payload(clienteCnpj="", status="PAGO"))

    debt = service.get_debt(created.id)
    assert debt.debt_type == "AVULSO"
    assert debt.status == "PENDENTE"
    assert debt.client_cnpj is None
    assert debt.due_date == "2024-07-10T12:00:00.000Z"
    assert debt.reference_date.endswith("Z")


def test_create_allows_zero_amount(service: DebtsService) -> None:
    """Tests that a debt may be registered at zero."""
    assert service.create_debt(_payload(valor=0)).amount == 0


def test_create_rejects_negative_amount(service: DebtsService) -> None:
    """Tests that a debt amount may not be negative."""
    with pytest.raises(InvalidArgumentError, match="valor"):
        service.create_debt(_payload(valor=-10))


def test_create_requires_fields(service: DebtsService) -> None:
    """Tests the missing-fields message."""
    with pytest.raises(InvalidArgumentError, match="Campos obrigatórios estão faltando: clienteNome"):
        service.create_debt({"descricao": "x", "valor": 1, "dataVencimento": "2024-07-10"})


@pytest.mark.parametrize("status", ["PAGO", "ENVIADO_FINANCEIRO", "PAGO_VIA_ACORDO"])
def test_update_status_to_settled(service: DebtsService, status: str) -> None:
    """Tests the three allowed transitions."""
    created = service.create_debt(_payload())

    service.update_status(created.id, {"status": status})

    assert service.get_debt(created.id).status == status


@pytest.mark.parametrize("payload", [{"status": "PENDENTE"}, {"status": "CANCELADO"}, {}, {"status": None}])
def test_update_status_rejects_other_values(payload: dict) -> None:
    """Tests that invalid statuses are refused before the store is touched."""
    repository = MagicMock()

    with pytest.raises(InvalidArgumentError, match="Status inválido fornecido."):
        DebtsService(repository).update_status("debt-1", payload)

    repository.update.assert_not_called()


def test_update_status_of_missing_debt(service: DebtsService) -> None:
    """Tests that settling an unknown debt is a not-found failure."""
    with pytest.raises(NotFoundError):
        service.update_status("nope", {"status": "PAGO"})


def test_list_skips_debts_without_dates(service: DebtsService, debts_repository: DebtsRepository) -> None:
    """Tests that a stored debt without a reference date does not fail the listing."""
    created = service.create_debt(_payload())
    debts_repository.set("broken", {"clienteNome": "X", "dataVencimento": datetime(2024, 1, 1, tzinfo=UTC)})

    assert [debt.id for debt in service.list_debts()] == [created.id]
