"""
Base command for encapsulating business operations.

The Command pattern wraps one operation as an object that receives its
repository through the constructor. Handlers build a command per request
and call `execute`, so the operation can be reused and tested without
HTTP or a database.

Example:
    ```python
    from bookstore.commands.base import BaseCommand


    class GetProductsCommand(BaseCommand[list[ProductRead]]):
        def __init__(self, repository: Repository[ProductRead]):
            self.repository = repository

        async def execute(self) -> list[ProductRead]:
            return await self.repository.find_all()


    # Usage in HTTP handler
    @router.get("/product")
    async def get_products(repo: ProductRepoDep) -> list[ProductRead]:
        return await GetProductsCommand(repo).execute()
    ```
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

TOutput = TypeVar("TOutput")


class BaseCommand(ABC, Generic[TOutput]):
    """
    Base command for business operations.

    Type Parameters:
        TOutput: Output data type.
    """

    @abstractmethod
    async def execute(self, *args: Any) -> TOutput:
        """
        Execute the command.

        This method must be implemented by subclasses, narrowing the
        arguments to exactly what the operation needs.

        Returns:
            Result of the command execution.
        """
        pass
