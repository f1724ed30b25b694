"""
Base repository with the CRUD operations shared by every entity.

A repository is the persistence gateway for one table. It hides the
session and query details from commands and handlers and applies the
entity's fixed read projection to everything it returns: callers get
read models (`AuthorRead`, `ProductRead`), never ORM rows.

Example:
    ```python
    from bookstore.repositories.base import BaseRepository
    from bookstore.models.author import Author
    from bookstore.schemas.author import AuthorRead


    class AuthorRepository(BaseRepository[Author, AuthorRead]):
        def __init__(self, session: AsyncSession):
            super().__init__(session, Author, AuthorRead)
    ```
"""

from typing import Any, ClassVar, Generic, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm.interfaces import LoaderOption
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel.sql.expression import SelectOfScalar

from bookstore.exceptions import NotFoundError, ReferentialIntegrityError
from bookstore.fields.utc_datetime import utc_now
from bookstore.logging import logger

TModel = TypeVar("TModel", bound=SQLModel)
TRead = TypeVar("TRead", bound=BaseModel)


class BaseRepository(Generic[TModel, TRead]):
    """
    Base repository providing the gateway contract.

    Subclasses declare their projection with `read_schema` (passed to
    __init__) and `load_options` (eager loads for nested relations the
    read schema includes).

    Type Parameters:
        TModel: The SQLModel table this repository manages.
        TRead: The read model returned by every operation.

    Attributes:
        session: The database session for executing queries.
        model: The SQLModel class this repository manages.
        read_schema: The read model class forming the projection.
    """

    load_options: ClassVar[tuple[LoaderOption, ...]] = ()

    # Messages for ReferentialIntegrityError, keyed by operation
    integrity_messages: ClassVar[dict[str, str]] = {}

    def __init__(
        self,
        session: AsyncSession,
        model: Type[TModel],
        read_schema: Type[TRead],
    ):
        """
        Initialize repository with session, model and projection.

        Args:
            session: Database session for executing queries.
            model: The SQLModel class to manage.
            read_schema: The read model every result is converted to.
        """
        self.session = session
        self.model = model
        self.read_schema = read_schema

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def _projection(self) -> SelectOfScalar[TModel]:
        """Select statement for the model with its eager loads applied."""
        return select(self.model).options(*self.load_options)

    def _to_read(self, entity: TModel) -> TRead:
        return self.read_schema.model_validate(entity)

    async def _get_entity(
        self, id: int, *, refresh: bool = False
    ) -> TModel | None:
        """
        Load a row with its projection.

        Args:
            id: Primary key value.
            refresh: Overwrite any copy already held by the session, so
                values written by the database (timestamps, a changed
                foreign key's relation) are re-read.

        Returns:
            The ORM entity or None.
        """
        stmt = self._projection().where(self.model.id == id)  # type: ignore[attr-defined]
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.session.exec(stmt)
        return result.first()

    async def _reload(self, id: int) -> TRead:
        entity = await self._get_entity(id, refresh=True)
        if entity is None:
            raise NotFoundError(
                f"{self.entity_name} with ID {id} not found", {"id": id}
            )
        return self._to_read(entity)

    async def _flush(self, operation: str) -> None:
        """
        Flush pending changes as one store operation.

        Args:
            operation: "create", "update" or "delete"; used for messages.

        Raises:
            ReferentialIntegrityError: If a foreign key constraint failed.
                The session is rolled back so nothing is persisted.
            SQLAlchemyError: For any other database failure, unchanged.
        """
        try:
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            message = self.integrity_messages.get(
                operation,
                f"Cannot {operation} {self.entity_name}: referential integrity violated",
            )
            logger.warning(f"{message} ({e.orig})")
            raise ReferentialIntegrityError(message) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error on {operation} {self.entity_name}: {e}")
            raise

    async def find_all(self) -> list[TRead]:
        """
        Get all entities under the fixed projection.

        Returns:
            List of read models in the store's default order; empty list
            for an empty table.

        Raises:
            SQLAlchemyError: If database query fails.
        """
        try:
            result = await self.session.exec(self._projection())
            return [self._to_read(entity) for entity in result.all()]
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving {self.entity_name}: {e}")
            raise

    async def find_by_id(self, id: int) -> TRead | None:
        """
        Get entity by primary key ID.

        Args:
            id: Primary key value.

        Returns:
            Read model if found, None otherwise.
        """
        entity = await self._get_entity(id)
        if entity is None:
            return None
        return self._to_read(entity)

    async def create(self, data: BaseModel) -> TRead:
        """
        Create new entity in database.

        Args:
            data: Create input model whose fields match the table columns.

        Returns:
            The created entity's read model, with ID and timestamps.

        Raises:
            ReferentialIntegrityError: If a foreign key does not resolve.
        """
        entity = self.model(**data.model_dump())
        self.session.add(entity)
        await self._flush("create")
        return await self._reload(entity.id)  # type: ignore[attr-defined]

    async def update(self, id: int, data: BaseModel) -> TRead:
        """
        Apply a partial update to an existing entity.

        Only fields the caller set on `data` are written. `updated_at` is
        refreshed even when no field is set.

        Args:
            id: Primary key of the entity to update.
            data: Update input model.

        Returns:
            The updated entity's read model.

        Raises:
            NotFoundError: If no entity has this ID.
            ReferentialIntegrityError: If a new foreign key does not resolve.
        """
        entity = await self._get_entity(id)
        if entity is None:
            raise NotFoundError(
                f"{self.entity_name} with ID {id} not found", {"id": id}
            )

        changes: dict[str, Any] = data.model_dump(exclude_unset=True)
        for field, value in changes.items():
            setattr(entity, field, value)
        entity.updated_at = utc_now()  # type: ignore[attr-defined]

        await self._flush("update")
        return await self._reload(id)

    async def delete(self, id: int) -> None:
        """
        Delete entity by primary key ID.

        Args:
            id: Primary key of the entity to delete.

        Raises:
            NotFoundError: If no entity has this ID.
            ReferentialIntegrityError: If other rows still reference it.
        """
        entity = await self.session.get(self.model, id)
        if entity is None:
            raise NotFoundError(
                f"{self.entity_name} with ID {id} not found", {"id": id}
            )

        await self.session.delete(entity)
        await self._flush("delete")
