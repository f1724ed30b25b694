"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for the database, repositories and
the HTTP client.
"""

import os

# Set environment for testing before importing bookstore modules
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FILE_PATH", os.devnull)
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import date  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from bookstore.models.author import Author  # noqa: E402
from bookstore.models.product import Product  # noqa: E402
from bookstore.storage.db import (  # noqa: E402
    create_db_and_tables,
    create_db_engine,
    create_session_factory,
)
from tests.mocks.repository_mocks import (  # noqa: E402
    create_mock_author_repository,
    create_mock_product_repository,
)


@pytest_asyncio.fixture
async def db_engine():
    """
    Provides a fresh in-memory SQLite engine with all tables created.

    Foreign keys are enforced, so referential integrity behaves as on
    PostgreSQL.
    """
    engine = create_db_engine("sqlite+aiosqlite:///:memory:")
    await create_db_and_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    """
    Provides an AsyncSession bound to the test engine.

    Returns:
        AsyncSession: Session committed by the fixtures that seed data.
    """
    session_factory = create_session_factory(db_engine)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def author(db_session):
    """
    Provides a committed author row (Jane Doe).

    Returns:
        Author: Persisted author entity.
    """
    entity = Author(first_name="Jane", last_name="Doe")
    db_session.add(entity)
    await db_session.commit()
    db_session.expunge_all()
    return entity


@pytest_asyncio.fixture
async def product(db_session, author):
    """
    Provides a committed product row ("Book") written by `author`.

    Returns:
        Product: Persisted product entity.
    """
    entity = Product(
        title="Book",
        is_fiction=True,
        date_publish=date(2024, 1, 1),
        author_id=author.id,
    )
    db_session.add(entity)
    await db_session.commit()
    db_session.expunge_all()
    return entity


@pytest.fixture
def mock_author_repo():
    """Provides a mocked AuthorRepository."""
    return create_mock_author_repository()


@pytest.fixture
def mock_product_repo():
    """Provides a mocked ProductRepository."""
    return create_mock_product_repository()


@pytest.fixture
def client(mock_author_repo, mock_product_repo):
    """
    Provides a TestClient for the full application with mocked repositories.

    Startup handlers are not run (the client is not used as a context
    manager), so no database is touched.

    Returns:
        TestClient: FastAPI test client instance.
    """
    from bookstore import app
    from bookstore.dependencies import (
        get_author_repository,
        get_product_repository,
    )

    app.dependency_overrides[get_author_repository] = lambda: mock_author_repo
    app.dependency_overrides[get_product_repository] = lambda: mock_product_repo
    yield TestClient(app)
    app.dependency_overrides.clear()
