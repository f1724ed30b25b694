"""
Tests for Product commands.

Commands are pure pass-throughs: each one must forward its arguments to
the matching repository method and hand back the result (or exception)
unchanged.
"""

from unittest.mock import AsyncMock

import pytest

from bookstore.commands.product_commands import (
    CreateProductCommand,
    DeleteProductByIdCommand,
    GetProductByIdCommand,
    GetProductsCommand,
    UpdateProductByIdCommand,
)
from bookstore.exceptions import NotFoundError, ReferentialIntegrityError
from bookstore.schemas.product import ProductCreate, ProductUpdate
from tests.mocks.repository_mocks import make_product_read


class TestGetProductsCommand:
    """Tests for GetProductsCommand."""

    @pytest.mark.asyncio
    async def test_get_all_products(self):
        products = [make_product_read(id=1), make_product_read(id=2)]
        mock_repo = AsyncMock()
        mock_repo.find_all.return_value = products

        result = await GetProductsCommand(mock_repo).execute()

        assert result is products
        mock_repo.find_all.assert_awaited_once_with()


class TestGetProductByIdCommand:
    """Tests for GetProductByIdCommand."""

    @pytest.mark.asyncio
    async def test_found(self):
        product = make_product_read(id=7)
        mock_repo = AsyncMock()
        mock_repo.find_by_id.return_value = product

        result = await GetProductByIdCommand(mock_repo).execute(7)

        assert result is product
        mock_repo.find_by_id.assert_awaited_once_with(7)

    @pytest.mark.asyncio
    async def test_missing_returns_none(self):
        mock_repo = AsyncMock()
        mock_repo.find_by_id.return_value = None

        assert await GetProductByIdCommand(mock_repo).execute(7) is None


class TestCreateProductCommand:
    """Tests for CreateProductCommand."""

    @pytest.mark.asyncio
    async def test_create_product(self):
        data = ProductCreate(
            title="Book",
            is_fiction=True,
            date_publish="2024-01-01",
            author_id=1,
        )
        product = make_product_read()
        mock_repo = AsyncMock()
        mock_repo.create.return_value = product

        result = await CreateProductCommand(mock_repo).execute(data)

        assert result is product
        mock_repo.create.assert_awaited_once_with(data)

    @pytest.mark.asyncio
    async def test_integrity_error_propagates(self):
        mock_repo = AsyncMock()
        mock_repo.create.side_effect = ReferentialIntegrityError(
            "Referenced author does not exist"
        )
        data = ProductCreate(
            title="Book",
            is_fiction=False,
            date_publish="2024-01-01",
            author_id=99,
        )

        with pytest.raises(ReferentialIntegrityError):
            await CreateProductCommand(mock_repo).execute(data)


class TestUpdateProductByIdCommand:
    """Tests for UpdateProductByIdCommand."""

    @pytest.mark.asyncio
    async def test_update_product(self):
        data = ProductUpdate(title="New title")
        product = make_product_read(title="New title")
        mock_repo = AsyncMock()
        mock_repo.update.return_value = product

        result = await UpdateProductByIdCommand(mock_repo).execute(3, data)

        assert result is product
        mock_repo.update.assert_awaited_once_with(3, data)

    @pytest.mark.asyncio
    async def test_not_found_propagates(self):
        mock_repo = AsyncMock()
        mock_repo.update.side_effect = NotFoundError("Product with ID 3 not found")

        with pytest.raises(NotFoundError):
            await UpdateProductByIdCommand(mock_repo).execute(3, ProductUpdate())


class TestDeleteProductByIdCommand:
    """Tests for DeleteProductByIdCommand."""

    @pytest.mark.asyncio
    async def test_delete_product(self):
        mock_repo = AsyncMock()
        mock_repo.delete.return_value = None

        result = await DeleteProductByIdCommand(mock_repo).execute(5)

        assert result is None
        mock_repo.delete.assert_awaited_once_with(5)
