"""
Author endpoints.

Authors have no command layer: handlers call the injected
AuthorRepository directly.
"""

from fastapi import APIRouter, status

from bookstore.dependencies import AuthorRepoDep
from bookstore.exceptions import NotFoundError
from bookstore.schemas.author import AuthorCreate, AuthorRead, AuthorUpdate
from bookstore.utils.error_handler import handle_http_errors

router = APIRouter(prefix="/api/author", tags=["author"])


@router.get(
    "",
    response_model=list[AuthorRead],
    summary="Get all authors",
)
@handle_http_errors
async def get_authors(repo: AuthorRepoDep) -> list[AuthorRead]:
    """
    Get all authors.

    Args:
        repo: Author repository (injected via dependency).

    Returns:
        Every author; an empty list when there are none.
    """
    return await repo.find_all()


@router.get(
    "/{author_id}",
    response_model=AuthorRead,
    summary="Get an author by ID",
)
@handle_http_errors
async def get_author(author_id: int, repo: AuthorRepoDep) -> AuthorRead:
    """
    Get a single author.

    Args:
        author_id: ID of the author.
        repo: Author repository (injected via dependency).

    Raises:
        HTTPException: 404 if author not found.
    """
    author = await repo.find_by_id(author_id)
    if author is None:
        raise NotFoundError("Author not found", {"id": author_id})
    return author


@router.post(
    "",
    response_model=AuthorRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
)
@handle_http_errors
async def create_author(
    author_data: AuthorCreate,
    repo: AuthorRepoDep,
) -> AuthorRead:
    """
    Create a new author.

    Args:
        author_data: Author data to create.
        repo: Author repository (injected via dependency).

    Returns:
        Created author with generated ID and timestamps.

    Example:
        POST /api/author
        {
            "firstName": "Jane",
            "lastName": "Doe"
        }
    """
    return await repo.create(author_data)


@router.put(
    "/{author_id}",
    response_model=AuthorRead,
    summary="Update an author",
)
@handle_http_errors
async def update_author(
    author_id: int,
    author_data: AuthorUpdate,
    repo: AuthorRepoDep,
) -> AuthorRead:
    """
    Update an existing author. Fields left out of the body keep their value.

    Args:
        author_id: ID of author to update.
        author_data: Fields to change.
        repo: Author repository (injected via dependency).

    Raises:
        HTTPException: 404 if author not found.

    Example:
        PUT /api/author/1
        {
            "lastName": "Smith"
        }
    """
    return await repo.update(author_id, author_data)


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author",
)
@handle_http_errors
async def delete_author(
    author_id: int,
    repo: AuthorRepoDep,
) -> None:
    """
    Delete an author.

    Args:
        author_id: ID of author to delete.
        repo: Author repository (injected via dependency).

    Raises:
        HTTPException: 404 if author not found, 400 if the author still
            has products.
    """
    await repo.delete(author_id)
