"""This module defines the service that queries Compras.gov.br through the proxy.

The proxy forwards the query to the open-data API named by the `endpoint`
parameter. Whatever the proxy answers is handed back for display: JSON when
the body parses, the raw text otherwise, error statuses included.
"""

from collections.abc import Mapping
from typing import Any

import requests
from licitax_advisor.exceptions.resources import InternalError, NotFoundError
from licitax_advisor.models.queries import QUERIES, ProxyQuery, ProxyResponse
from licitax_advisor.providers.config import Config, ConfigProvider
from licitax_advisor.providers.http import HttpProvider
from licitax_advisor.providers.logging import Logger, LoggingProvider
from licitax_advisor.services.base import parse_payload

PROXY_NOT_CONFIGURED_MESSAGE = "A URL do proxy de consultas ao Compras.gov.br não está configurada."


class ComprasGovService:
    """Runs the typed Compras.gov.br queries against the configured proxy."""

    logger: Logger
    config: Config
    http_provider: HttpProvider

    def __init__(self, http_provider: HttpProvider | None = None) -> None:
        """Initializes the service.

        Args:
            http_provider: The HTTP client. A new one is created when omitted.
        """
        self.logger = LoggingProvider().get_logger()
        self.config = ConfigProvider.get_config()
        self.http_provider = http_provider or HttpProvider()

    @staticmethod
    def build_query(name: str, params: Mapping[str, Any]) -> ProxyQuery:
        """Validates the parameters of a named query.

        Args:
            name: The query name, e.g. `pregoes`.
            params: The raw parameters, by camelCase or snake_case name.

        Returns:
            The validated query.

        Raises:
            NotFoundError: If no query has that name.
            InvalidArgumentError: If the parameters are invalid.
        """
        query_class = QUERIES.get(name)
        if query_class is None:
            raise NotFoundError(f"Consulta '{name}' não existe.", f"Available: {', '.join(sorted(QUERIES))}.")
        return parse_payload(query_class, dict(params))

    def run(self, name: str, params: Mapping[str, Any]) -> ProxyResponse:
        """Runs a named query.

        Args:
            name: The query name.
            params: The raw parameters.

        Returns:
            The proxy's answer, passed through.
        """
        return self.execute(self.build_query(name, params))

    def execute(self, query: ProxyQuery) -> ProxyResponse:
        """Sends a validated query to the proxy.

        Args:
            query: The validated query.

        Returns:
            The proxy's answer, passed through.

        Raises:
            InternalError: If the proxy is not configured or cannot be reached.
        """
        if not self.config.COMPRAS_GOV_PROXY_URL:
            raise InternalError(PROXY_NOT_CONFIGURED_MESSAGE, "COMPRAS_GOV_PROXY_URL is not set.")

        self.logger.info(f"Querying Compras.gov.br endpoint {query.ENDPOINT}.")
        try:
            response = self.http_provider.get(self.config.COMPRAS_GOV_PROXY_URL, params=query.to_query_params())
        except requests.RequestException as e:
            self.logger.error(f"Compras.gov.br proxy request failed: {e}")
            raise InternalError("Erro ao conectar com o serviço de consulta.", str(e)) from e

        if not response.ok:
            self.logger.warning(f"Compras.gov.br proxy answered {response.status_code} for {query.ENDPOINT}.")
        return self.to_proxy_response(response)

    @staticmethod
    def to_proxy_response(response: requests.Response) -> ProxyResponse:
        """Wraps a proxy response, decoding the body as JSON when possible.

        Args:
            response: The HTTP response.

        Returns:
            The wrapped response; `data` holds the JSON body, `text` the raw
            body when it is not JSON.
        """
        try:
            return ProxyResponse(ok=response.ok, status_code=response.status_code, data=response.json())
        except ValueError:
            return ProxyResponse(ok=response.ok, status_code=response.status_code, text=response.text)
