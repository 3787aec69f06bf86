from fastapi import APIRouter, Body, Depends, status
from typing import Any, Optional

from app.database import ProductStore, get_store
from app.models.product import Product
from app.services.product_service import ProductService
from app.schemas.product import (
    ProductListResponse,
    ProductDeleteResponse,
    ValidationErrorResponse,
    NotFoundResponse
)

router = APIRouter(prefix="/products", tags=["Products"])

_ID_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": NotFoundResponse},
}


@router.get(
    "",
    response_model=ProductListResponse,
    summary="List all products",
    description="Get every product. The response is shaped like a page but is never paginated."
)
def list_products(store: ProductStore = Depends(get_store)):
    """Get all products with total, skip and limit metadata."""
    service = ProductService(store)
    return service.get_all()


@router.get(
    "/{product_id}",
    response_model=Product,
    responses=_ID_ERRORS,
    summary="Get product by ID",
    description="Get a single product. Non-numeric or non-positive ids are rejected with 400."
)
def get_product(
    product_id: str,
    store: ProductStore = Depends(get_store)
):
    """Get a product by ID."""
    service = ProductService(store)
    return service.get_by_id(product_id)


@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse}},
    summary="Create a new product",
    description="Create a new product. Title and price are required."
)
def create_product(
    payload: Optional[dict[str, Any]] = Body(None),
    store: ProductStore = Depends(get_store)
):
    """
    Create a new product.

    - **title**: Product title, non-empty (required)
    - **price**: Non-negative number (required)
    - **stock**: Non-negative integer (optional, default 0)
    - **discountPercentage**: Number between 0 and 100 (optional, default 0)
    - **rating**: Number between 0 and 5 (optional, default 0)
    - **images**: List of URLs; anything else is replaced by an empty list
    """
    service = ProductService(store)
    return service.create(payload or {})


@router.put(
    "/{product_id}",
    response_model=Product,
    responses=_ID_ERRORS,
    summary="Update a product",
    description="Update product details. Only provided fields will be updated."
)
def update_product(
    product_id: str,
    payload: Optional[dict[str, Any]] = Body(None),
    store: ProductStore = Depends(get_store)
):
    """
    Update a product.

    Partial updates are supported - only include fields you want to change.
    updatedAt is refreshed even when the payload is empty.
    """
    service = ProductService(store)
    return service.update(product_id, payload or {})


@router.delete(
    "/{product_id}",
    response_model=ProductDeleteResponse,
    responses=_ID_ERRORS,
    summary="Delete a product",
    description="Delete a product by ID and return the removed record."
)
def delete_product(
    product_id: str,
    store: ProductStore = Depends(get_store)
):
    """Delete a product."""
    service = ProductService(store)
    return service.delete(product_id)
