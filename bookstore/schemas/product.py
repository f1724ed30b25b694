"""
Read and write shapes for the Product entity.

ProductRead nests the author under the AuthorRead projection and never
exposes the bare `authorID`. ProductCreate and ProductUpdate carry the
foreign key instead of a nested author.
"""

from datetime import date, datetime
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from bookstore.fields.publish_date import PublishDate
from bookstore.schemas.author import AuthorRead
from bookstore.schemas.validators import reject_explicit_nulls


class ProductRead(BaseModel):  # type: ignore[misc]
    """Product projection with the nested author projection."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int = Field(alias="ID")
    title: str
    is_fiction: bool
    date_publish: date
    author: AuthorRead
    created_at: datetime
    updated_at: datetime


class ProductCreate(BaseModel):  # type: ignore[misc]
    """Input model for creating a product."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., description="Product title")
    is_fiction: bool = Field(..., description="Whether the book is fiction")
    date_publish: PublishDate = Field(
        ..., description="Publication date (date or ISO string)"
    )
    author_id: int = Field(..., alias="authorID", description="Author ID")


class ProductUpdate(BaseModel):  # type: ignore[misc]
    """
    Input model for a partial product update.

    Only fields present in the request are applied; absent fields keep
    their stored value.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = Field(default=None, description="New title")
    is_fiction: bool | None = Field(default=None, description="New fiction flag")
    date_publish: PublishDate | None = Field(
        default=None, description="New publication date"
    )
    author_id: int | None = Field(
        default=None, alias="authorID", description="New author ID"
    )

    @model_validator(mode="after")
    def check_present_fields(self) -> Self:
        reject_explicit_nulls(self)
        return self
