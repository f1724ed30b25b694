"""
Publication date field for input schemas.

Clients send `datePublish` as a date, a full datetime, or an ISO string of
either. Everything is normalized to a plain `date` before it reaches the
database.
"""

from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BeforeValidator


def normalize_publish_date(value: Any) -> date:
    """
    Normalize a date-like value to `datetime.date`.

    Args:
        value: date, datetime, or ISO 8601 date / datetime string.

    Returns:
        The normalized `date`.

    Raises:
        ValueError: For numbers, unparseable strings and any other type.
            Pydantic would otherwise read numbers (and numeric strings) as
            unix timestamps.

    Example:
        >>> normalize_publish_date("2024-01-01T10:00:00Z")
        datetime.date(2024, 1, 1)
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            raise ValueError(f"{value!r} is not an ISO date string") from None
    raise ValueError("publish date must be a date or an ISO date string")


PublishDate = Annotated[date, BeforeValidator(normalize_publish_date)]
