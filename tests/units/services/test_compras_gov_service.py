"""This module contains tests for the Compras.gov.br query service."""

from unittest.mock import MagicMock

import pytest
import requests
from licitax_advisor.exceptions.resources import InternalError, InvalidArgumentError, NotFoundError
from licitax_advisor.services.compras_gov import PROXY_NOT_CONFIGURED_MESSAGE, ComprasGovService

PROXY_URL = "https://proxy.example.com/api/compras"


@pytest.fixture
def http_provider() -> MagicMock:
    """Provides a mocked HTTP provider."""
    return MagicMock()


@pytest.fixture
def service(http_provider: MagicMock) -> ComprasGovService:
    """Provides the service with a configured proxy URL."""
    service = ComprasGovService(http_provider)
    service.config = service.config.model_copy(update={"COMPRAS_GOV_PROXY_URL": PROXY_URL})
    return service


def _response(status_code: int = 200, json_body: object = None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.ok = status_code < 400
    response.status_code = status_code
    response.text = text
    if json_body is None:
        response.json.side_effect = ValueError("not json")
    else:
        response.json.return_value = json_body
    return response


def test_run_forwards_snake_case_params(service: ComprasGovService, http_provider: MagicMock) -> None:
    """Tests the request sent to the proxy."""
    http_provider.get.return_value = _response(json_body={"resultado": [], "totalRegistros": 0})

    result = service.run("pregoes", {"dtDataEditalInicial": "2024-01-01", "dtDataEditalFinal": "2024-01-31"})

    http_provider.get.assert_called_once_with(
        PROXY_URL,
        params={
            "pagina": "1",
            "tamanho_pagina": "10",
            "dt_data_edital_inicial": "2024-01-01",
            "dt_data_edital_final": "2024-01-31",
            "endpoint": "/modulo-legado/3_consultarPregoes",
        },
    )
    assert result.ok
    assert result.data == {"resultado": [], "totalRegistros": 0}


def test_run_passes_text_and_error_statuses_through(service: ComprasGovService, http_provider: MagicMock) -> None:
    """Tests that a non-JSON error answer is handed back for display."""
    http_provider.get.return_value = _response(status_code=502, text="Bad Gateway")

    result = service.run("rdc", {"dataPublicacaoMin": "2024-01-01", "dataPublicacaoMax": "2024-01-02"})

    assert result.model_dump(by_alias=True) == {"ok": False, "statusCode": 502, "data": None, "text": "Bad Gateway"}


def test_unknown_query(service: ComprasGovService) -> None:
    """Tests that an unknown query name is a not-found failure."""
    with pytest.raises(NotFoundError, match="Consulta 'nope' não existe."):
        service.run("nope", {})


def test_invalid_params_are_not_sent(service: ComprasGovService, http_provider: MagicMock) -> None:
    """Tests that invalid parameters never reach the proxy."""
    with pytest.raises(InvalidArgumentError):
        service.run("pregoes", {"dtDataEditalInicial": "2024-02-01", "dtDataEditalFinal": "2024-01-01"})
    http_provider.get.assert_not_called()


def test_proxy_not_configured(http_provider: MagicMock) -> None:
    """Tests the failure when no proxy URL is configured."""
    service = ComprasGovService(http_provider)
    service.config = service.config.model_copy(update={"COMPRAS_GOV_PROXY_URL": None})

    with pytest.raises(InternalError, match=PROXY_NOT_CONFIGURED_MESSAGE):
        service.run("compras-sem-licitacao", {"dtAnoAviso": "2023"})


def test_proxy_unreachable(service: ComprasGovService, http_provider: MagicMock) -> None:
    """Tests that connection failures become internal errors."""
    http_provider.get.side_effect = requests.ConnectionError("refused")

    with pytest.raises(InternalError) as exc_info:
        service.run("compras-sem-licitacao", {"dtAnoAviso": "2023"})

    assert exc_info.value.error == "refused"
