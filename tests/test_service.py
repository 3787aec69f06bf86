"""Tests for ProductService, without HTTP."""
import pytest

from app.services.product_service import ProductNotFoundError, ProductService
from app.utils.validators import ErrorKind, ProductValidationError


def test_get_all(store):
    listing = ProductService(store).get_all()

    assert listing.total == 5
    assert listing.limit == 5
    assert listing.skip == 0


def test_not_found_carries_available_ids(store):
    with pytest.raises(ProductNotFoundError) as exc_info:
        ProductService(store).get_by_id("42")

    assert exc_info.value.available_ids == [1, 2, 3, 4, 5]
    assert str(exc_info.value) == "Product with ID 42 not found"


def test_update_checks_existence_before_fields(store):
    with pytest.raises(ProductNotFoundError):
        ProductService(store).update("42", {"price": -1})


def test_update_rejects_before_touching_store(store):
    before = store.get_by_id(1)

    with pytest.raises(ProductValidationError) as exc_info:
        ProductService(store).update("1", {"rating": 10})

    assert exc_info.value.kind == ErrorKind.INVALID_VALUE
    assert store.get_by_id(1) == before


def test_delete(store):
    result = ProductService(store).delete("3")

    assert result.deleted_product.id == 3
    assert result.remaining_products == 4
    assert 3 not in store.ids()
