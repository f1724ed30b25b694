from sqlmodel import Field

from bookstore.models.base import TimestampedModel


class Author(TimestampedModel, table=True):
    """
    SQLModel representing an author entity in the database.

    This is a clean data model without Active Record methods.
    Use AuthorRepository for all database operations.

    There is no `products` relationship on this side: reads never expose
    an author's product list, and deleting an author that still has
    products is refused by the database (no cascade).

    Attributes:
        id: Primary key identifier for the author
        first_name: Author's first name
        last_name: Author's last name
    """

    __table_args__ = {"extend_existing": True}

    id: int | None = Field(default=None, primary_key=True)
    first_name: str
    last_name: str
