"""
Dependency injection configuration for FastAPI.

Each request gets its own database session; repositories are built on top
of that session. Tests replace `get_author_repository` /
`get_product_repository` through `app.dependency_overrides`.

Example:
    ```python
    from fastapi import APIRouter
    from bookstore.dependencies import AuthorRepoDep

    router = APIRouter()

    @router.get("/author")
    async def get_authors(repo: AuthorRepoDep) -> list[AuthorRead]:
        return await repo.find_all()
    ```
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore.repositories.author_repository import AuthorRepository
from bookstore.repositories.product_repository import ProductRepository
from bookstore.storage.db import get_session

# ============================================================================
# Database Session Dependencies
# ============================================================================

SessionDep = Annotated[AsyncSession, Depends(get_session)]


# ============================================================================
# Repository Dependencies
# ============================================================================


def get_author_repository(session: SessionDep) -> AuthorRepository:
    """
    Get author repository with injected database session.

    Args:
        session: Database session injected by FastAPI.

    Returns:
        AuthorRepository instance with session.
    """
    return AuthorRepository(session)


def get_product_repository(session: SessionDep) -> ProductRepository:
    """
    Get product repository with injected database session.

    Args:
        session: Database session injected by FastAPI.

    Returns:
        ProductRepository instance with session.
    """
    return ProductRepository(session)


AuthorRepoDep = Annotated[AuthorRepository, Depends(get_author_repository)]
ProductRepoDep = Annotated[ProductRepository, Depends(get_product_repository)]
