from fastapi import Request
import threading
from typing import Iterable, Optional, List

from app.models.product import Product
from app.schemas.product import ProductCreate, ProductUpdate
from app.seed_data import SEED_PRODUCTS
from app.utils.timestamps import utc_now_iso


class ProductStore:
    """
    In-memory product collection.

    The store keeps products in insertion order and assigns ids as
    ``max(id) + 1``. The largest id ever assigned is remembered, so an id
    freed by a delete is never handed out again.

    Endpoints are sync and run in FastAPI's threadpool, so every mutation
    holds ``_lock`` for its whole read-modify-write.
    """

    def __init__(self, products: Iterable[Product] = ()):
        self._products: List[Product] = list(products)
        self._last_id = max((p.id for p in self._products), default=0)
        self._lock = threading.Lock()

    @classmethod
    def with_seed_data(cls) -> "ProductStore":
        """Create a store holding the sample catalog, stamped with the current time."""
        now = utc_now_iso()
        return cls(
            Product(**data, created_at=now, updated_at=now)
            for data in SEED_PRODUCTS
        )

    def list_all(self) -> List[Product]:
        """Return all products in insertion order."""
        return list(self._products)

    def count(self) -> int:
        return len(self._products)

    def ids(self) -> List[int]:
        return [p.id for p in self._products]

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """
        Get a product by ID.

        Args:
            product_id: Already validated positive integer

        Returns:
            Product instance or None if not found
        """
        index = self._index_of(product_id)
        if index is None:
            return None
        return self._products[index]

    def create(self, product_data: ProductCreate) -> Product:
        """
        Append a new product.

        Args:
            product_data: Validated creation data, defaults already applied

        Returns:
            The stored product, with id and timestamps assigned
        """
        now = utc_now_iso()
        with self._lock:
            product = Product(
                id=self._next_id(),
                created_at=now,
                updated_at=now,
                **product_data.model_dump(),
            )
            self._products.append(product)
            self._last_id = product.id
        return product

    def update(self, product_id: int, product_data: ProductUpdate) -> Optional[Product]:
        """
        Merge a partial update onto an existing product.

        Only fields explicitly set on ``product_data`` are changed; ``id`` and
        ``created_at`` are never touched and ``updated_at`` is always refreshed.

        Returns:
            Updated product or None if not found
        """
        changes = product_data.model_dump(exclude_unset=True)
        changes["updated_at"] = utc_now_iso()

        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return None
            product = self._products[index].model_copy(update=changes, deep=True)
            self._products[index] = product
        return product

    def delete_by_id(self, product_id: int) -> Optional[Product]:
        """
        Remove a product.

        Returns:
            Snapshot of the removed product or None if not found
        """
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return None
            return self._products.pop(index)

    def _next_id(self) -> int:
        highest_live = max(self.ids(), default=0)
        return max(highest_live, self._last_id) + 1

    def _index_of(self, product_id: int) -> Optional[int]:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return None


def get_store(request: Request) -> ProductStore:
    """
    Dependency returning the application's product store.
    The store is created by the application lifespan.
    """
    return request.app.state.product_store
