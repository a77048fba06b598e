"""Clients API router."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from licitax_advisor.models.clients import Client
from licitax_advisor.services import ClientsService
from licitax_advisor.web.dependencies import get_clients_service

router = APIRouter(prefix="/clients", tags=["clients"])


@router.get("")
def list_clients(service: ClientsService = Depends(get_clients_service)) -> list[Client]:  # noqa: B008
    """List every client.

    Args:
        service: The clients service.

    Returns:
        The clients.
    """
    return service.list_clients()


@router.get("/{client_id}")
def get_client(client_id: str, service: ClientsService = Depends(get_clients_service)) -> Client:  # noqa: B008
    """Fetch one client.

    Args:
        client_id: The client id.
        service: The clients service.

    Returns:
        The client.
    """
    return service.get_client(client_id)


@router.post("", status_code=201)
def create_client(
    payload: Any = Body(None),  # noqa: B008
    service: ClientsService = Depends(get_clients_service),  # noqa: B008
) -> Client:
    """Register a client.

    Args:
        payload: The client fields.
        service: The clients service.

    Returns:
        The created client.
    """
    return service.create_client(payload)


@router.put("/{client_id}")
def update_client(
    client_id: str,
    payload: Any = Body(None),  # noqa: B008
    service: ClientsService = Depends(get_clients_service),  # noqa: B008
) -> dict[str, str]:
    """Update a client.

    Args:
        client_id: The client id.
        payload: The fields to change.
        service: The clients service.

    Returns:
        A confirmation message.
    """
    service.update_client(client_id, payload)
    return {"message": "Cliente atualizado com sucesso."}


@router.delete("/{client_id}")
def delete_client(
    client_id: str,
    service: ClientsService = Depends(get_clients_service),  # noqa: B008
) -> dict[str, str]:
    """Delete a client.

    Args:
        client_id: The client id.
        service: The clients service.

    Returns:
        A confirmation message.
    """
    service.delete_client(client_id)
    return {"message": "Cliente excluído com sucesso."}
