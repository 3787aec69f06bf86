from typing import List
import logging

from app.database import ProductStore
from app.models.product import Product
from app.schemas.product import ProductListResponse, ProductDeleteResponse
from app.utils.timestamps import utc_now_iso
from app.utils.validators import parse_product_id, validate_create, validate_update

logger = logging.getLogger(__name__)


class ProductNotFoundError(Exception):
    """Exception raised when a well-formed product id matches no product."""

    def __init__(self, product_id: int, available_ids: List[int]):
        super().__init__(f"Product with ID {product_id} not found")
        self.product_id = product_id
        self.available_ids = available_ids


class ProductService:
    """
    Service class for Product CRUD operations.

    This service handles:
    - Parsing path ids
    - Validating create and update payloads
    - Reading and mutating the product store
    - Reporting unknown ids

    Validation always happens before the store is touched.
    """

    def __init__(self, store: ProductStore):
        self.store = store

    def get_all(self) -> ProductListResponse:
        """Return every product, shaped like a single page covering the whole catalog."""
        products = self.store.list_all()
        return ProductListResponse(
            products=products,
            total=len(products),
            skip=0,
            limit=len(products),
            timestamp=utc_now_iso()
        )

    def get_by_id(self, raw_id: str) -> Product:
        """
        Get a product by its path id.

        Args:
            raw_id: Id segment as received in the URL

        Returns:
            Product instance

        Raises:
            ProductValidationError: If the id is not a positive integer
            ProductNotFoundError: If no product has that id
        """
        product_id = parse_product_id(raw_id)
        product = self.store.get_by_id(product_id)
        if not product:
            raise self._not_found(product_id)
        return product

    def create(self, payload: dict) -> Product:
        """
        Validate a payload and create a new product from it.

        Raises:
            ProductValidationError: For the first invalid field
        """
        product_data = validate_create(payload)
        product = self.store.create(product_data)
        logger.info(f"New product created with ID: {product.id}")
        return product

    def update(self, raw_id: str, payload: dict) -> Product:
        """
        Apply a partial update.

        The id is checked first, then existence, then the payload fields.
        Fields missing from the payload keep their current values.

        Raises:
            ProductValidationError: If the id or a present field is invalid
            ProductNotFoundError: If no product has that id
        """
        product_id = parse_product_id(raw_id)
        if not self.store.get_by_id(product_id):
            raise self._not_found(product_id)

        product_data = validate_update(payload)
        product = self.store.update(product_id, product_data)
        logger.info(f"Product {product_id} updated successfully")
        return product

    def delete(self, raw_id: str) -> ProductDeleteResponse:
        """
        Delete a product.

        Returns:
            Confirmation with the removed product and the remaining count

        Raises:
            ProductValidationError: If the id is not a positive integer
            ProductNotFoundError: If no product has that id
        """
        product_id = parse_product_id(raw_id)
        deleted = self.store.delete_by_id(product_id)
        if not deleted:
            raise self._not_found(product_id)

        logger.info(f"Product {product_id} deleted successfully")
        return ProductDeleteResponse(
            message="Product deleted successfully",
            deleted_product=deleted,
            remaining_products=self.store.count(),
            timestamp=utc_now_iso()
        )

    def _not_found(self, product_id: int) -> ProductNotFoundError:
        return ProductNotFoundError(product_id, self.store.ids())
