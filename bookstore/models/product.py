from datetime import date

from sqlmodel import Field, Relationship

from bookstore.models.author import Author
from bookstore.models.base import TimestampedModel


class Product(TimestampedModel, table=True):
    """
    SQLModel representing a product (a published book).

    Attributes:
        id: Primary key identifier for the product
        title: Product title
        is_fiction: Whether the book is fiction
        date_publish: Publication date
        author_id: Foreign key to author.id (ON DELETE RESTRICT)
        author: The referenced author, loaded eagerly by ProductRepository
    """

    __table_args__ = {"extend_existing": True}

    id: int | None = Field(default=None, primary_key=True)
    title: str
    is_fiction: bool
    date_publish: date
    author_id: int = Field(
        foreign_key="author.id", ondelete="RESTRICT", index=True
    )

    author: Author | None = Relationship()
