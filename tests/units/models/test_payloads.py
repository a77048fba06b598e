"""Unit tests for the inbound payload models."""

from datetime import UTC, datetime

import pytest
from licitax_advisor.models.bids import BidCreate, BidUpdate
from licitax_advisor.models.clients import ClientCreate
from licitax_advisor.models.debts import DebtCreate, DebtStatusUpdate
from licitax_advisor.models.documents import DocumentCreate
from licitax_advisor.models.enums import DebtStatus
from pydantic import ValidationError


def test_bid_create_parses_dates_as_utc() -> None:
    """Tests that bid dates are parsed into aware datetimes."""
    bid = BidCreate.model_validate(
        {
            "clienteId": "c1",
            "numeroLicitacao": "PE 1/2024",
            "dataInicio": "2024-05-01T10:00:00-03:00",
            "dataMetaAnalise": "2024-04-28",
        }
    )

    assert bid.start_date == datetime(2024, 5, 1, 13, 0, tzinfo=UTC)
    assert bid.analysis_deadline == datetime(2024, 4, 28, tzinfo=UTC)


@pytest.mark.parametrize("value", ["ontem", ""])
def test_bid_create_rejects_invalid_required_date(value: str) -> None:
    """Tests that a required date must be a real date."""
    with pytest.raises(ValidationError):
        BidCreate.model_validate(
            {"clienteId": "c1", "numeroLicitacao": "1", "dataInicio": value, "dataMetaAnalise": "2024-04-28"}
        )


def test_bid_update_blank_optional_date_is_none() -> None:
    """Tests that a cleared form date is sent as no date."""
    update = BidUpdate.model_validate({"dataHomologacao": ""})
    assert update.homologation_date is None
    assert "homologation_date" in update.model_fields_set


def test_bid_update_rejects_unknown_status() -> None:
    """Tests that bid statuses are validated."""
    with pytest.raises(ValidationError):
        BidUpdate.model_validate({"status": "GANHO"})


def test_negative_amounts_are_rejected() -> None:
    """Tests that monetary values may not be negative."""
    with pytest.raises(ValidationError):
        BidUpdate.model_validate({"valorCobrado": -1})
    with pytest.raises(ValidationError):
        DebtCreate.model_validate(
            {"clienteNome": "ACME", "descricao": "x", "valor": -0.01, "dataVencimento": "2024-05-10"}
        )


def test_client_create_keeps_extra_fields() -> None:
    """Tests that fields outside the known set are kept."""
    client = ClientCreate.model_validate({"razaoSocial": "ACME", "cnpj": "1", "ramo": "obras"})
    assert client.model_dump(by_alias=True, exclude_unset=True) == {"razaoSocial": "ACME", "cnpj": "1", "ramo": "obras"}


def test_client_create_requires_non_empty_cnpj() -> None:
    """Tests that the CNPJ may not be blank."""
    with pytest.raises(ValidationError):
        ClientCreate.model_validate({"razaoSocial": "ACME", "cnpj": ""})


def test_document_create_without_expiration() -> None:
    """Tests that documents may have no expiration date."""
    document = DocumentCreate.model_validate({"clienteId": "c1", "tipoDocumento": "Contrato Social"})
    assert document.expiration_date is None


def test_debt_status_update() -> None:
    """Tests that debt statuses are parsed into the enumeration."""
    assert DebtStatusUpdate.model_validate({"status": "PAGO"}).status is DebtStatus.PAID
    with pytest.raises(ValidationError):
        DebtStatusUpdate.model_validate({"status": "CANCELADO"})
