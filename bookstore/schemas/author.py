"""
Read and write shapes for the Author entity.

The three types are intentionally independent: AuthorRead is the fixed
projection returned by every read, AuthorCreate requires every writable
field and AuthorUpdate makes each of them optional. JSON uses camelCase
(`ID`, `firstName`, ...); Python code uses the snake_case attribute names.
"""

from datetime import datetime
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from bookstore.schemas.validators import reject_explicit_nulls


class AuthorRead(BaseModel):  # type: ignore[misc]
    """Author projection: ID, names and timestamps, never its products."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int = Field(alias="ID")
    first_name: str
    last_name: str
    created_at: datetime
    updated_at: datetime


class AuthorCreate(BaseModel):  # type: ignore[misc]
    """Input model for creating an author."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str = Field(..., description="Author first name")
    last_name: str = Field(..., description="Author last name")


class AuthorUpdate(BaseModel):  # type: ignore[misc]
    """
    Input model for a partial author update.

    Only fields present in the request are applied; presence is read from
    `model_fields_set`, so an omitted field keeps its stored value.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str | None = Field(default=None, description="New first name")
    last_name: str | None = Field(default=None, description="New last name")

    @model_validator(mode="after")
    def check_present_fields(self) -> Self:
        reject_explicit_nulls(self)
        return self
