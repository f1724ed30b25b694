"""
Mock factory functions for repository testing.

Provides pre-configured repository mocks with the gateway methods stubbed,
plus helpers building read models for their return values.
"""

from datetime import UTC, date, datetime
from unittest.mock import AsyncMock

from bookstore.repositories.author_repository import AuthorRepository
from bookstore.repositories.product_repository import ProductRepository
from bookstore.schemas.author import AuthorRead
from bookstore.schemas.product import ProductRead

FIXED_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


def make_author_read(
    id: int = 1, first_name: str = "Jane", last_name: str = "Doe"
) -> AuthorRead:
    """
    Build an AuthorRead with fixed timestamps.

    Returns:
        AuthorRead: Author projection.
    """
    return AuthorRead(
        id=id,
        first_name=first_name,
        last_name=last_name,
        created_at=FIXED_TIME,
        updated_at=FIXED_TIME,
    )


def make_product_read(
    id: int = 1,
    title: str = "Book",
    is_fiction: bool = True,
    date_publish: date = date(2024, 1, 1),
    author: AuthorRead | None = None,
) -> ProductRead:
    """
    Build a ProductRead with fixed timestamps and a nested author.

    Returns:
        ProductRead: Product projection.
    """
    return ProductRead(
        id=id,
        title=title,
        is_fiction=is_fiction,
        date_publish=date_publish,
        author=author or make_author_read(),
        created_at=FIXED_TIME,
        updated_at=FIXED_TIME,
    )


def create_mock_author_repository():
    """
    Creates a mock AuthorRepository with common methods.

    Returns:
        AsyncMock: Mocked AuthorRepository instance
    """
    repo_mock = AsyncMock(spec=AuthorRepository)
    repo_mock.find_by_id = AsyncMock(return_value=None)
    repo_mock.find_all = AsyncMock(return_value=[])
    repo_mock.create = AsyncMock()
    repo_mock.update = AsyncMock()
    repo_mock.delete = AsyncMock(return_value=None)
    return repo_mock


def create_mock_product_repository():
    """
    Creates a mock ProductRepository with common methods.

    Returns:
        AsyncMock: Mocked ProductRepository instance
    """
    repo_mock = AsyncMock(spec=ProductRepository)
    repo_mock.find_by_id = AsyncMock(return_value=None)
    repo_mock.find_all = AsyncMock(return_value=[])
    repo_mock.create = AsyncMock()
    repo_mock.update = AsyncMock()
    repo_mock.delete = AsyncMock(return_value=None)
    return repo_mock
