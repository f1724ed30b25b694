"""
Repository for the Author entity.

Authors are read under the AuthorRead projection (ID, names, timestamps)
and have no nested relations to load.

Example:
    ```python
    from bookstore.repositories.author_repository import AuthorRepository
    from bookstore.storage.db import async_session

    async with async_session() as session:
        repo = AuthorRepository(session)
        authors = await repo.find_all()
        jane = await repo.create(AuthorCreate(first_name="Jane", last_name="Doe"))
    ```
"""

from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore.models.author import Author
from bookstore.repositories.base import BaseRepository
from bookstore.schemas.author import AuthorRead


class AuthorRepository(BaseRepository[Author, AuthorRead]):
    """
    Repository for Author entity operations.

    Deleting an author that still has products fails with
    ReferentialIntegrityError; products are never cascaded.
    """

    integrity_messages = {
        "delete": "Author is still referenced by one or more products",
    }

    def __init__(self, session: AsyncSession):
        """
        Initialize Author repository.

        Args:
            session: Database session for executing queries.
        """
        super().__init__(session, Author, AuthorRead)
