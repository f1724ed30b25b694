"""
Repository for the Product entity.

Every product read eagerly loads its author so the ProductRead projection
can nest it; the bare foreign key is never returned.

Example:
    ```python
    from bookstore.repositories.product_repository import ProductRepository
    from bookstore.storage.db import async_session

    async with async_session() as session:
        repo = ProductRepository(session)
        book = await repo.create(
            ProductCreate(
                title="Book",
                is_fiction=True,
                date_publish="2024-01-01",
                author_id=1,
            )
        )
        print(book.author.first_name)
    ```
"""

from sqlalchemy.orm import selectinload
from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore.models.product import Product
from bookstore.repositories.base import BaseRepository
from bookstore.schemas.product import ProductRead


class ProductRepository(BaseRepository[Product, ProductRead]):
    """
    Repository for Product entity operations.

    Creating or updating a product with an author ID that does not exist
    fails with ReferentialIntegrityError.
    """

    load_options = (selectinload(Product.author),)  # type: ignore[arg-type]

    integrity_messages = {
        "create": "Referenced author does not exist",
        "update": "Referenced author does not exist",
    }

    def __init__(self, session: AsyncSession):
        """
        Initialize Product repository.

        Args:
            session: Database session for executing queries.
        """
        super().__init__(session, Product, ProductRead)
