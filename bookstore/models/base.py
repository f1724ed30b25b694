"""
Base models for all database tables.

BaseModel combines SQLModel with SQLAlchemy's AsyncAttrs mixin so lazy
relationships can be awaited via `awaitable_attrs` instead of raising
MissingGreenlet in async code. TimestampedModel adds the store-assigned
`created_at` / `updated_at` columns shared by every entity.
"""

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlmodel import SQLModel

from bookstore.fields.utc_datetime import TimestampField


class BaseModel(SQLModel, AsyncAttrs):  # type: ignore[misc]
    """
    Base model for all database tables with async relationship support.

    Note:
        Eager loading (selectinload) is preferred; repositories load every
        nested relation their read projection needs up front.
    """

    pass


class TimestampedModel(BaseModel):
    """
    Base model adding creation and modification timestamps.

    Attributes:
        created_at: Set once when the row is inserted.
        updated_at: Set on insert and refreshed by every update.
    """

    created_at: datetime = TimestampField()
    updated_at: datetime = TimestampField()
