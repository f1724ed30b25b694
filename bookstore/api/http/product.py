"""
Product endpoints using Repository + Command + Dependency Injection.

Handlers build the matching product command around the injected
repository and return its result as-is.
"""

from fastapi import APIRouter, status

from bookstore.commands.product_commands import (
    CreateProductCommand,
    DeleteProductByIdCommand,
    GetProductByIdCommand,
    GetProductsCommand,
    UpdateProductByIdCommand,
)
from bookstore.dependencies import ProductRepoDep
from bookstore.exceptions import NotFoundError
from bookstore.schemas.product import ProductCreate, ProductRead, ProductUpdate
from bookstore.utils.error_handler import handle_http_errors

router = APIRouter(prefix="/api/product", tags=["product"])


@router.get(
    "",
    response_model=list[ProductRead],
    summary="Get all products",
)
@handle_http_errors
async def get_products(repo: ProductRepoDep) -> list[ProductRead]:
    """
    Get all products, each with its author.

    Args:
        repo: Product repository (injected via dependency).
    """
    return await GetProductsCommand(repo).execute()


@router.get(
    "/{product_id}",
    response_model=ProductRead,
    summary="Get a product by ID",
)
@handle_http_errors
async def get_product(product_id: int, repo: ProductRepoDep) -> ProductRead:
    """
    Get a single product.

    Raises:
        HTTPException: 404 if product not found.
    """
    product = await GetProductByIdCommand(repo).execute(product_id)
    if product is None:
        raise NotFoundError("Product not found", {"id": product_id})
    return product


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
)
@handle_http_errors
async def create_product(
    product_data: ProductCreate,
    repo: ProductRepoDep,
) -> ProductRead:
    """
    Create a new product.

    Args:
        product_data: Product data to create.
        repo: Product repository (injected via dependency).

    Raises:
        HTTPException: 400 if the author does not exist.

    Example:
        POST /api/product
        {
            "title": "Book",
            "isFiction": true,
            "datePublish": "2024-01-01",
            "authorID": 1
        }
    """
    return await CreateProductCommand(repo).execute(product_data)


@router.put(
    "/{product_id}",
    response_model=ProductRead,
    summary="Update a product",
)
@handle_http_errors
async def update_product(
    product_id: int,
    product_data: ProductUpdate,
    repo: ProductRepoDep,
) -> ProductRead:
    """
    Update an existing product. Fields left out of the body keep their value.

    Raises:
        HTTPException: 404 if product not found, 400 if the new author
            does not exist.
    """
    return await UpdateProductByIdCommand(repo).execute(product_id, product_data)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product",
)
@handle_http_errors
async def delete_product(product_id: int, repo: ProductRepoDep) -> None:
    """
    Delete a product.

    Raises:
        HTTPException: 404 if product not found.
    """
    await DeleteProductByIdCommand(repo).execute(product_id)
