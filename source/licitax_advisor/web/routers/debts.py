"""Debts (débitos) API router."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from licitax_advisor.models.debts import Debt
from licitax_advisor.services import DebtsService
from licitax_advisor.web.dependencies import get_debts_service

router = APIRouter(prefix="/debitos", tags=["debitos"])


@router.get("")
def list_debts(service: DebtsService = Depends(get_debts_service)) -> list[Debt]:  # noqa: B008
    """List every debt.

    Args:
        service: The debts service.

    Returns:
        The debts.
    """
    return service.list_debts()


@router.get("/{debt_id}")
def get_debt(debt_id: str, service: DebtsService = Depends(get_debts_service)) -> Debt:  # noqa: B008
    """Fetch one debt.

    Args:
        debt_id: The debt id.
        service: The debts service.

    Returns:
        The debt.
    """
    return service.get_debt(debt_id)


@router.post("", status_code=201)
def create_debt(
    payload: Any = Body(None),  # noqa: B008
    service: DebtsService = Depends(get_debts_service),  # noqa: B008
) -> Debt:
    """Register an ad-hoc debt.

    Args:
        payload: The debt fields.
        service: The debts service.

    Returns:
        The created debt.
    """
    return service.create_debt(payload)


@router.put("/{debt_id}")
def update_debt_status(
    debt_id: str,
    payload: Any = Body(None),  # noqa: B008
    service: DebtsService = Depends(get_debts_service),  # noqa: B008
) -> dict[str, str]:
    """Move a debt to a settled status.

    Args:
        debt_id: The debt id.
        payload: `{"status": ...}`.
        service: The debts service.

    Returns:
        A confirmation message.
    """
    service.update_status(debt_id, payload)
    return {"message": "Status do débito atualizado com sucesso."}
