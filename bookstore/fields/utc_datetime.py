"""
Timezone-aware timestamp column for SQLModel.

PostgreSQL hands back aware datetimes for TIMESTAMP WITH TIME ZONE, SQLite
hands back naive ones. UTCDateTimeType normalizes both directions to UTC so
`created_at` / `updated_at` compare and serialize the same on every backend.
"""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import DateTime, TypeDecorator, func
from sqlmodel import Field


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


class UTCDateTimeType(TypeDecorator):  # type: ignore[misc]
    """
    SQLAlchemy type decorator for UTC timestamps.

    Example:
        Python value: datetime(2025, 12, 12, 10, 30, tzinfo=UTC)
        PostgreSQL value: 2025-12-12 10:30:00+00
        SQLite value: 2025-12-12 10:30:00.000000
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(
        self, value: datetime | None, dialect: Any
    ) -> datetime | None:
        """
        Convert datetime to UTC before saving.

        Note:
            If datetime is timezone-naive, UTC is assumed.
        """
        if value is None:
            return None

        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(
        self, value: datetime | None, dialect: Any
    ) -> datetime | None:
        """Attach UTC to naive values coming back from the database."""
        if value is None:
            return None

        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


def TimestampField(**kwargs: Any) -> datetime:
    """
    Create a store-assigned UTC timestamp field.

    The value defaults to the current time in Python and, for rows inserted
    outside the ORM, to the database's `now()`.

    Args:
        **kwargs: Additional Field arguments (description, etc.)

    Returns:
        A Field configured for UTC timestamp storage

    Example:
        created_at: datetime = TimestampField()
    """
    return Field(  # type: ignore[no-any-return]
        default_factory=utc_now,
        sa_type=UTCDateTimeType(),
        sa_column_kwargs={"nullable": False, "server_default": func.now()},
        **kwargs,
    )
