"""
Commands for Product operations.

Each command forwards to one ProductRepository method and returns its
result unchanged: they add no validation or transformation, they only
give handlers a call surface that does not depend on how the repository
is built.

Example:
    ```python
    from bookstore.commands.product_commands import CreateProductCommand
    from bookstore.repositories.product_repository import ProductRepository


    @router.post("/product")
    async def create_product(
        data: ProductCreate, repo: ProductRepoDep
    ) -> ProductRead:
        return await CreateProductCommand(repo).execute(data)
    ```
"""

from bookstore.commands.base import BaseCommand
from bookstore.protocols import Repository
from bookstore.schemas.product import ProductCreate, ProductRead, ProductUpdate


class GetProductsCommand(BaseCommand[list[ProductRead]]):
    """Command to list every product."""

    def __init__(self, repository: Repository[ProductRead]):
        """
        Initialize command with repository.

        Args:
            repository: Product repository for data access.
        """
        self.repository = repository

    async def execute(self) -> list[ProductRead]:
        """
        Execute command to get all products.

        Returns:
            All products, each with its nested author.
        """
        return await self.repository.find_all()


class GetProductByIdCommand(BaseCommand[ProductRead | None]):
    """Command to get a single product."""

    def __init__(self, repository: Repository[ProductRead]):
        self.repository = repository

    async def execute(self, product_id: int) -> ProductRead | None:
        """
        Execute command to get a product by ID.

        Args:
            product_id: ID of the product.

        Returns:
            The product, or None when it does not exist.
        """
        return await self.repository.find_by_id(product_id)


class CreateProductCommand(BaseCommand[ProductRead]):
    """Command to create a product."""

    def __init__(self, repository: Repository[ProductRead]):
        self.repository = repository

    async def execute(self, data: ProductCreate) -> ProductRead:
        """
        Execute command to create a product.

        Args:
            data: Product data to create.

        Returns:
            Created product with generated ID and timestamps.

        Raises:
            ReferentialIntegrityError: If the author does not exist.

        Example:
            ```python
            data = ProductCreate(
                title="Book",
                is_fiction=True,
                date_publish="2024-01-01",
                author_id=1,
            )
            product = await command.execute(data)
            ```
        """
        return await self.repository.create(data)


class UpdateProductByIdCommand(BaseCommand[ProductRead]):
    """Command to partially update a product."""

    def __init__(self, repository: Repository[ProductRead]):
        self.repository = repository

    async def execute(self, product_id: int, data: ProductUpdate) -> ProductRead:
        """
        Execute command to update a product.

        Args:
            product_id: ID of the product to update.
            data: Fields to change; unset fields are left alone.

        Returns:
            Updated product.

        Raises:
            NotFoundError: If the product does not exist.
            ReferentialIntegrityError: If the new author does not exist.
        """
        return await self.repository.update(product_id, data)


class DeleteProductByIdCommand(BaseCommand[None]):
    """Command to delete a product."""

    def __init__(self, repository: Repository[ProductRead]):
        self.repository = repository

    async def execute(self, product_id: int) -> None:
        """
        Execute command to delete a product.

        Args:
            product_id: ID of the product to delete.

        Raises:
            NotFoundError: If the product does not exist.
        """
        await self.repository.delete(product_id)
