"""This module provides centralized date-related utilities."""

import calendar
from datetime import UTC, date, datetime, time
from typing import Any


class DateProvider:
    """Provides centralized constants and methods for date handling.

    The document store keeps timestamps as native values while the API
    exchanges ISO-8601 strings. Every conversion between the two goes through
    this class so that both directions agree on time zones and precision.
    """

    DATE_FORMAT = "%Y-%m-%d"

    @staticmethod
    def now() -> datetime:
        """Returns the current time as a timezone-aware UTC datetime.

        Returns:
            The current UTC time.
        """
        return datetime.now(UTC)

    @classmethod
    def parse_datetime(cls, value: Any) -> datetime:
        """Converts an ISO-8601 string or a date-like value to an aware datetime.

        Naive values are taken as UTC. Plain dates become midnight UTC.

        Args:
            value: An ISO-8601 string, a `datetime` (including the store's
                timestamp subclass) or a `date`.

        Returns:
            The equivalent timezone-aware datetime.

        Raises:
            ValueError: If the value is empty or cannot be parsed.
        """
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, date):
            parsed = datetime.combine(value, time.min)
        elif isinstance(value, str) and value.strip():
            parsed = datetime.fromisoformat(value.strip())
        else:
            raise ValueError(f"Invalid date value: {value!r}")

        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=UTC)
        return parsed

    @classmethod
    def to_iso_string(cls, value: Any) -> str:
        """Converts a stored timestamp or date-like value to an ISO-8601 string.

        The output is always UTC with millisecond precision and a `Z` suffix,
        e.g. `2024-05-01T13:00:00.000Z`.

        Args:
            value: A `datetime`, `date` or ISO-8601 string.

        Returns:
            The ISO-8601 representation.

        Raises:
            ValueError: If the value is empty or cannot be parsed.
        """
        parsed = cls.parse_datetime(value).astimezone(UTC)
        return parsed.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    @classmethod
    def to_optional_iso_string(cls, value: Any) -> str | None:
        """Like `to_iso_string`, but passes `None` through unchanged.

        Args:
            value: A date-like value or None.

        Returns:
            The ISO-8601 representation, or None.
        """
        if value is None:
            return None
        return cls.to_iso_string(value)

    @classmethod
    def format_date(cls, value: date) -> str:
        """Formats a date as `yyyy-MM-dd`, the format the procurement APIs expect.

        Args:
            value: The date to format.

        Returns:
            The formatted date.
        """
        return value.strftime(cls.DATE_FORMAT)

    @staticmethod
    def add_months_on_day(value: datetime, months: int, day: int) -> datetime:
        """Moves a datetime forward by whole months and pins the day of month.

        The day is clamped to the length of the target month, so day 31 in
        February yields the last day of February.

        Args:
            value: The starting datetime.
            months: How many months to move forward.
            day: The desired day of month (1-31).

        Returns:
            The resulting datetime, keeping the time of day and time zone.
        """
        month_index = value.month - 1 + months
        year = value.year + month_index // 12
        month = month_index % 12 + 1
        last_day = calendar.monthrange(year, month)[1]
        return value.replace(year=year, month=month, day=min(max(day, 1), last_day))
