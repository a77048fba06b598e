"""This module defines reusable Pydantic field types shared by the entity models."""

from datetime import datetime
from typing import Annotated, Any

from licitax_advisor.providers.date import DateProvider
from pydantic import BeforeValidator, Field


def _parse_optional_datetime(value: Any) -> datetime | None:
    """Parses a date-like value, mapping None and blank strings to None.

    Args:
        value: The raw value from the payload.

    Returns:
        The parsed datetime, or None.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return DateProvider.parse_datetime(value)


IsoDatetime = Annotated[datetime, BeforeValidator(DateProvider.parse_datetime)]
"""A datetime accepted as an ISO-8601 string or date-like value, always timezone-aware."""

OptionalIsoDatetime = Annotated[datetime | None, BeforeValidator(_parse_optional_datetime)]
"""Like `IsoDatetime`, but an empty form field (blank string) means no date."""

RequiredText = Annotated[str, Field(min_length=1)]
"""A string that must be present and non-empty."""


def _reject_null(value: Any) -> Any:
    if value is None:
        raise ValueError("must not be null")
    return value


UpdatableText = Annotated[RequiredText | None, BeforeValidator(_reject_null)]
"""A required text field in a partial update: it may be left out, but not cleared."""

UpdatableIsoDatetime = Annotated[IsoDatetime | None, BeforeValidator(_reject_null)]
"""A required date in a partial update: it may be left out, but not cleared or blanked."""
