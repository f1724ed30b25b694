"""
Protocol classes for structural subtyping (duck typing with type safety).

Protocols define interfaces without requiring explicit inheritance. Any class
that implements the required methods is considered compatible, which lets
commands accept a real repository or a test double alike.

Example:
    ```python
    from bookstore.protocols import Repository
    from bookstore.schemas.product import ProductRead


    async def first_product(repo: Repository[ProductRead]) -> ProductRead | None:
        return await repo.find_by_id(1)
    ```
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T", covariant=True)


@runtime_checkable
class Repository(Protocol[T]):
    """
    Protocol for the persistence gateway of one entity.

    Every method returns read models under the entity's fixed projection.

    Type Parameters:
        T: The read model type this repository returns.
    """

    async def find_all(self) -> list[T]:
        """
        Get every entity, in the store's default order.

        Returns:
            List of read models; empty when the store is empty.
        """
        ...

    async def find_by_id(self, id: int) -> T | None:
        """
        Get entity by primary key ID.

        Args:
            id: Primary key value.

        Returns:
            Read model if found, None otherwise.
        """
        ...

    async def create(self, data: Any) -> T:
        """
        Create new entity from a create-input model.

        Args:
            data: Create input with every writable field.

        Returns:
            The created entity's read model.
        """
        ...

    async def update(self, id: int, data: Any) -> T:
        """
        Apply a partial update.

        Args:
            id: Primary key of the entity to update.
            data: Update input; only fields that were set are applied.

        Returns:
            The updated entity's read model.
        """
        ...

    async def delete(self, id: int) -> None:
        """
        Delete entity by primary key ID.

        Args:
            id: Primary key of the entity to delete.
        """
        ...
