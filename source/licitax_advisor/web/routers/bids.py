"""Bids (licitações) API router."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from licitax_advisor.models.bids import Bid
from licitax_advisor.services import BidsService
from licitax_advisor.web.dependencies import get_bids_service

router = APIRouter(prefix="/licitacoes", tags=["licitacoes"])


@router.get("")
def list_bids(service: BidsService = Depends(get_bids_service)) -> list[Bid]:  # noqa: B008
    """List every bid, the most recent start date first.

    Args:
        service: The bids service.

    Returns:
        The bids.
    """
    return service.list_bids()


@router.get("/{bid_id}")
def get_bid(bid_id: str, service: BidsService = Depends(get_bids_service)) -> Bid:  # noqa: B008
    """Fetch one bid.

    Args:
        bid_id: The bid id.
        service: The bids service.

    Returns:
        The bid.
    """
    return service.get_bid(bid_id)


@router.post("", status_code=201)
def create_bid(
    payload: Any = Body(None),  # noqa: B008
    service: BidsService = Depends(get_bids_service),  # noqa: B008
) -> Bid:
    """Register a bid.

    Args:
        payload: The bid fields.
        service: The bids service.

    Returns:
        The created bid.
    """
    return service.create_bid(payload)


@router.put("/{bid_id}")
def update_bid(
    bid_id: str,
    payload: Any = Body(None),  # noqa: B008
    service: BidsService = Depends(get_bids_service),  # noqa: B008
) -> dict[str, str]:
    """Update a bid.

    Args:
        bid_id: The bid id.
        payload: The fields to change.
        service: The bids service.

    Returns:
        A confirmation message.
    """
    service.update_bid(bid_id, payload)
    return {"message": "Licitação atualizada com sucesso."}


@router.delete("/{bid_id}")
def delete_bid(bid_id: str, service: BidsService = Depends(get_bids_service)) -> dict[str, str]:  # noqa: B008
    """Delete a bid.

    Args:
        bid_id: The bid id.
        service: The bids service.

    Returns:
        A confirmation message.
    """
    service.delete_bid(bid_id)
    return {"message": "Licitação excluída com sucesso."}
