"""
Tests for AuthorRepository.

These tests run the repository against an in-memory SQLite database with
foreign keys enforced.
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import pytest

from bookstore.exceptions import NotFoundError, ReferentialIntegrityError
from bookstore.repositories.author_repository import AuthorRepository
from bookstore.schemas.author import AuthorCreate, AuthorRead, AuthorUpdate


class TestAuthorRepositoryRead:
    """Tests for repository read operations."""

    @pytest.mark.asyncio
    async def test_find_all_empty(self, db_session):
        """Empty table yields an empty list."""
        repo = AuthorRepository(db_session)

        assert await repo.find_all() == []

    @pytest.mark.asyncio
    async def test_find_all_returns_projection(self, db_session, author):
        """Every author comes back as an AuthorRead."""
        repo = AuthorRepository(db_session)

        authors = await repo.find_all()

        assert len(authors) == 1
        assert isinstance(authors[0], AuthorRead)
        assert authors[0].id == author.id
        assert authors[0].first_name == "Jane"
        assert authors[0].last_name == "Doe"
        assert authors[0].created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_find_by_id_found(self, db_session, author):
        """Test getting author by ID when exists."""
        repo = AuthorRepository(db_session)

        found = await repo.find_by_id(author.id)

        assert found is not None
        assert found.id == author.id
        assert found.first_name == "Jane"

    @pytest.mark.asyncio
    async def test_find_by_id_not_found(self, db_session):
        """Test getting author by ID when doesn't exist."""
        repo = AuthorRepository(db_session)

        assert await repo.find_by_id(99999) is None


class TestAuthorRepositoryCreate:
    """Tests for repository create operations."""

    @pytest.mark.asyncio
    async def test_create_author(self, db_session):
        """Created author gets an ID and store-assigned timestamps."""
        repo = AuthorRepository(db_session)

        created = await repo.create(
            AuthorCreate(first_name="Jane", last_name="Doe")
        )

        assert created.id is not None
        assert created.first_name == "Jane"
        assert created.last_name == "Doe"
        assert created.created_at is not None
        assert created.updated_at is not None

    @pytest.mark.asyncio
    async def test_find_by_id_after_create_matches(self, db_session):
        """Reading a created author returns the create result."""
        repo = AuthorRepository(db_session)

        created = await repo.create(
            AuthorCreate(first_name="Ursula", last_name="Le Guin")
        )
        found = await repo.find_by_id(created.id)

        assert found == created

    @pytest.mark.asyncio
    async def test_create_multiple_authors(self, db_session):
        """Test creating multiple authors."""
        repo = AuthorRepository(db_session)

        first = await repo.create(AuthorCreate(first_name="A", last_name="One"))
        second = await repo.create(AuthorCreate(first_name="B", last_name="Two"))

        assert first.id != second.id
        assert len(await repo.find_all()) == 2


class TestAuthorRepositoryUpdate:
    """Tests for repository update operations."""

    @pytest.mark.asyncio
    async def test_update_single_field(self, db_session, author):
        """Only the fields sent are changed."""
        repo = AuthorRepository(db_session)

        updated = await repo.update(author.id, AuthorUpdate(last_name="Smith"))

        assert updated.first_name == "Jane"
        assert updated.last_name == "Smith"

    @pytest.mark.asyncio
    async def test_update_empty_only_touches_updated_at(
        self, db_session, author
    ):
        """An empty update keeps every field but refreshes updated_at."""
        repo = AuthorRepository(db_session)
        before = await repo.find_by_id(author.id)
        later = datetime.now(UTC) + timedelta(hours=1)

        with patch("bookstore.repositories.base.utc_now", return_value=later):
            updated = await repo.update(author.id, AuthorUpdate())

        assert updated.first_name == before.first_name
        assert updated.last_name == before.last_name
        assert updated.created_at == before.created_at
        assert updated.updated_at == later

    @pytest.mark.asyncio
    async def test_update_not_found(self, db_session):
        """Updating a missing author raises NotFoundError."""
        repo = AuthorRepository(db_session)

        with pytest.raises(NotFoundError) as exc_info:
            await repo.update(99999, AuthorUpdate(first_name="X"))

        assert exc_info.value.details == {"id": 99999}


class TestAuthorRepositoryDelete:
    """Tests for repository delete operations."""

    @pytest.mark.asyncio
    async def test_delete_author(self, db_session, author):
        """Test deleting an author without products."""
        repo = AuthorRepository(db_session)

        await repo.delete(author.id)

        assert await repo.find_by_id(author.id) is None

    @pytest.mark.asyncio
    async def test_delete_not_found(self, db_session):
        """Deleting a missing author raises NotFoundError."""
        repo = AuthorRepository(db_session)

        with pytest.raises(NotFoundError):
            await repo.delete(99999)

    @pytest.mark.asyncio
    async def test_delete_author_with_products_is_refused(
        self, db_session, author, product
    ):
        """Authors that still have products cannot be deleted."""
        repo = AuthorRepository(db_session)

        with pytest.raises(ReferentialIntegrityError) as exc_info:
            await repo.delete(author.id)

        assert "still referenced" in exc_info.value.message
        assert await repo.find_by_id(author.id) is not None
