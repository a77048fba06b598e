"""Compras.gov.br consultation API router."""

from fastapi import APIRouter, Depends, Request
from licitax_advisor.models.queries import QUERIES, ProxyResponse
from licitax_advisor.services import ComprasGovService
from licitax_advisor.web.dependencies import get_compras_gov_service

router = APIRouter(prefix="/consultas", tags=["consultas"])


@router.get("")
def list_queries() -> dict[str, str]:
    """List the available queries.

    Returns:
        The title of each query, by name.
    """
    return {name: query_class.TITLE for name, query_class in QUERIES.items()}


@router.get("/{name}")
def run_query(
    name: str,
    request: Request,
    service: ComprasGovService = Depends(get_compras_gov_service),  # noqa: B008
) -> ProxyResponse:
    """Run a query; its parameters are taken from the query string.

    Args:
        name: The query name.
        request: The request, whose query string holds the parameters.
        service: The Compras.gov.br service.

    Returns:
        The proxy's answer, passed through.
    """
    return service.run(name, dict(request.query_params))
