"""Company settings API router."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from licitax_advisor.models.settings import CompanySettings
from licitax_advisor.services import SettingsService
from licitax_advisor.web.dependencies import get_settings_service

router = APIRouter(prefix="/configuracoes", tags=["configuracoes"])


@router.get("")
def get_settings(service: SettingsService = Depends(get_settings_service)) -> CompanySettings:  # noqa: B008
    """Read the company settings.

    Args:
        service: The settings service.

    Returns:
        The settings.
    """
    return service.get_settings()


@router.put("")
def update_settings(
    payload: Any = Body(None),  # noqa: B008
    service: SettingsService = Depends(get_settings_service),  # noqa: B008
) -> CompanySettings:
    """Merge fields into the company settings.

    Args:
        payload: The fields to change.
        service: The settings service.

    Returns:
        The settings after the merge.
    """
    return service.update_settings(payload)
