"""This module converts between stored documents and API representations.

Outbound, every store-native timestamp becomes an ISO-8601 string. Inbound,
the validated payload models already carry aware datetimes, which the store
persists as native timestamps, so converting them is a matter of dumping
the models under their wire names.

A stored document that cannot be represented raises `MappingError`, which
list operations catch per document.
"""

from typing import Any

from licitax_advisor.exceptions.resources import MappingError
from licitax_advisor.models.bids import BID_DATE_FIELDS, Bid
from licitax_advisor.models.clients import Client
from licitax_advisor.models.debts import Debt
from licitax_advisor.models.documents import Document
from licitax_advisor.models.settings import CompanySettings
from licitax_advisor.providers.date import DateProvider
from pydantic import BaseModel, ValidationError

BID_REQUIRED_DATE_FIELDS = ("dataInicio", "dataMetaAnalise")
DEBT_REQUIRED_DATE_FIELDS = ("dataVencimento", "dataReferencia")


def _convert_date(document_id: str, data: dict[str, Any], field: str, required: bool = False) -> str | None:
    """Converts one stored date field to its ISO-8601 string.

    Args:
        document_id: The id of the document, for error reporting.
        data: The stored fields.
        field: The name of the date field.
        required: Whether a missing value is a mapping failure.

    Returns:
        The ISO-8601 string, or None for a missing optional value.

    Raises:
        MappingError: If the value is missing but required, or unparsable.
    """
    value = data.get(field)
    if value == "":
        value = None
    if value is None and required:
        raise MappingError(document_id, f"missing required date field '{field}'")
    try:
        return DateProvider.to_optional_iso_string(value)
    except (TypeError, ValueError) as e:
        raise MappingError(document_id, f"invalid date in field '{field}': {e}") from e


def _validate(document_id: str, model: type[BaseModel], payload: dict[str, Any]) -> Any:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise MappingError(document_id, str(e)) from e


def client_to_wire(document_id: str, data: dict[str, Any]) -> Client:
    """Maps a stored client, keeping every stored field.

    Args:
        document_id: The document id.
        data: The stored fields.

    Returns:
        The API representation.
    """
    return _validate(document_id, Client, {**data, "id": document_id})


def bid_to_wire(document_id: str, data: dict[str, Any]) -> Bid:
    """Maps a stored bid, converting top-level and nested timestamps.

    Optional dates that are absent stay absent. Comments and the dispute log
    keep their other fields untouched.

    Args:
        document_id: The document id.
        data: The stored fields.

    Returns:
        The API representation.

    Raises:
        MappingError: If a required date is missing or any date is invalid.
    """
    payload = {**data, "id": document_id}
    for field in BID_DATE_FIELDS:
        required = field in BID_REQUIRED_DATE_FIELDS
        if required or data.get(field) is not None:
            payload[field] = _convert_date(document_id, data, field, required)

    comments = data.get("comentarios") or []
    payload["comentarios"] = [
        {**comment, "data": _convert_date(document_id, comment, "data")} if isinstance(comment, dict) else comment
        for comment in comments
    ]

    dispute_log = data.get("disputaLog")
    if isinstance(dispute_log, dict):
        payload["disputaLog"] = {
            **dispute_log,
            "iniciadaEm": _convert_date(document_id, dispute_log, "iniciadaEm"),
            "finalizadaEm": _convert_date(document_id, dispute_log, "finalizadaEm"),
            "mensagens": [
                {**message, "timestamp": _convert_date(document_id, message, "timestamp")}
                for message in dispute_log.get("mensagens") or []
                if isinstance(message, dict)
            ],
        }

    return _validate(document_id, Bid, payload)


def document_to_wire(document_id: str, data: dict[str, Any]) -> Document:
    """Maps a stored client document to its fixed set of API fields.

    Args:
        document_id: The document id.
        data: The stored fields.

    Returns:
        The API representation.
    """
    return _validate(
        document_id,
        Document,
        {
            "id": document_id,
            "clienteId": data.get("clienteId"),
            "clienteNome": data.get("clienteNome"),
            "tipoDocumento": data.get("tipoDocumento"),
            "dataVencimento": _convert_date(document_id, data, "dataVencimento"),
        },
    )


def debt_to_wire(document_id: str, data: dict[str, Any]) -> Debt:
    """Maps a stored debt. Both the due date and the reference date are required.

    Args:
        document_id: The document id.
        data: The stored fields.

    Returns:
        The API representation.
    """
    payload = {**data, "id": document_id}
    for field in DEBT_REQUIRED_DATE_FIELDS:
        payload[field] = _convert_date(document_id, data, field, required=True)
    return _validate(document_id, Debt, payload)


def settings_to_wire(data: dict[str, Any] | None) -> CompanySettings:
    """Maps the company settings document, which may not exist yet.

    Args:
        data: The stored fields, or None.

    Returns:
        The settings, empty when nothing was stored.
    """
    return _validate("empresa", CompanySettings, data or {})


def to_store(model: BaseModel) -> dict[str, Any]:
    """Dumps a validated payload under its wire names, keeping only the fields sent.

    Datetimes stay native so the store persists them as timestamps.

    Args:
        model: The validated payload.

    Returns:
        The fields to write.
    """
    return model.model_dump(by_alias=True, exclude_unset=True)
