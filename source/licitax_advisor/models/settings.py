"""This module defines the Pydantic models for the company settings document."""

from pydantic import BaseModel, ConfigDict, Field


class CompanySettings(BaseModel):
    """The consultancy's own settings, stored as a single document.

    Attributes:
        due_day: The day of month on which generated debts fall due.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    due_day: int | None = Field(None, ge=1, le=31, alias="diaVencimentoPadrao")
