"""Tests for id and payload validation."""
import math

import pytest

from app.utils.validators import (
    ErrorKind,
    ProductValidationError,
    coerce_images,
    parse_integer,
    parse_number,
    parse_product_id,
    validate_create,
    validate_update,
)


@pytest.mark.parametrize("raw, expected", [(3, 3.0), (2.5, 2.5), ("12.5", 12.5), (" 7 ", 7.0), ("1e2", 100.0)])
def test_parse_number_accepts(raw, expected):
    parsed = parse_number(raw)

    assert parsed.ok
    assert parsed.value == expected


@pytest.mark.parametrize("raw", ["abc", "12abc", "", True, None, [1], math.nan, math.inf, "nan"])
def test_parse_number_rejects(raw):
    parsed = parse_number(raw)

    assert not parsed.ok
    assert parsed.value is None


def test_parse_number_bounds():
    assert parse_number(0, minimum=0, maximum=100).ok
    assert parse_number(100, minimum=0, maximum=100).ok
    assert not parse_number(100.0001, minimum=0, maximum=100).ok
    assert not parse_number(-0.0001, minimum=0, maximum=100).ok


@pytest.mark.parametrize("raw, expected", [(4, 4), (4.0, 4), ("12", 12), ("+3", 3)])
def test_parse_integer_accepts(raw, expected):
    assert parse_integer(raw).value == expected


@pytest.mark.parametrize("raw", [3.7, "3.7", "x", False, None])
def test_parse_integer_rejects(raw):
    assert not parse_integer(raw).ok


def test_parse_product_id():
    assert parse_product_id("17") == 17


@pytest.mark.parametrize("raw", ["abc", "-1", "0", "1.5", "12abc", ""])
def test_parse_product_id_rejects_instead_of_truncating(raw):
    with pytest.raises(ProductValidationError) as exc_info:
        parse_product_id(raw)

    assert exc_info.value.kind == ErrorKind.INVALID_ID
    assert exc_info.value.field == "id"
    assert exc_info.value.received == raw


def test_coerce_images():
    assert coerce_images(["a", "b"]) == ["a", "b"]
    assert coerce_images("a") == []
    assert coerce_images(["a", 1]) == []
    assert coerce_images(None) == []


def test_validate_create_applies_defaults():
    product = validate_create({"title": " Hat ", "price": "19.5"})

    assert product.title == "Hat"
    assert product.price == 19.5
    assert product.stock == 0
    assert product.discount_percentage == 0
    assert product.images == []


def test_validate_create_treats_null_text_as_absent():
    product = validate_create({"title": "Hat", "price": 1, "brand": None, "description": None})

    assert product.brand == ""
    assert product.description == ""


@pytest.mark.parametrize("field", ["stock", "discountPercentage", "rating"])
def test_validate_create_rejects_null_numeric(field):
    with pytest.raises(ProductValidationError) as exc_info:
        validate_create({"title": "Hat", "price": 1, field: None})

    assert exc_info.value.field == field
    assert exc_info.value.kind == ErrorKind.INVALID_VALUE
    assert exc_info.value.received is None


def test_parse_number_rejects_huge_integer():
    parsed = parse_number(10 ** 400)

    assert not parsed.ok


@pytest.mark.parametrize("payload, field, kind", [
    ({}, "title", ErrorKind.MISSING_FIELD),
    ({"title": "  ", "price": 1}, "title", ErrorKind.MISSING_FIELD),
    ({"title": 5, "price": 1}, "title", ErrorKind.INVALID_VALUE),
    ({"title": "Hat"}, "price", ErrorKind.MISSING_FIELD),
    ({"title": "Hat", "price": None}, "price", ErrorKind.MISSING_FIELD),
    ({"title": "Hat", "price": "free"}, "price", ErrorKind.INVALID_VALUE),
    ({"title": "Hat", "price": 1, "stock": 1.5}, "stock", ErrorKind.INVALID_VALUE),
    ({"title": "Hat", "price": 1, "rating": 5.5}, "rating", ErrorKind.INVALID_VALUE),
    ({"title": "Hat", "price": 1, "brand": 3}, "brand", ErrorKind.INVALID_VALUE),
])
def test_validate_create_failures(payload, field, kind):
    with pytest.raises(ProductValidationError) as exc_info:
        validate_create(payload)

    assert exc_info.value.field == field
    assert exc_info.value.kind == kind


def test_validate_create_reports_first_failure_only():
    with pytest.raises(ProductValidationError) as exc_info:
        validate_create({"title": "Hat", "price": -1, "stock": -1, "rating": 9})

    assert exc_info.value.field == "price"
    assert exc_info.value.received == -1


def test_validate_update_only_sets_present_fields():
    update = validate_update({"price": 5, "description": "new"})

    assert update.model_dump(exclude_unset=True) == {"price": 5.0, "description": "new"}


def test_validate_update_empty():
    assert validate_update({}).model_dump(exclude_unset=True) == {}


def test_validate_update_drops_non_list_images():
    assert "images" not in validate_update({"images": "x"}).model_dump(exclude_unset=True)


@pytest.mark.parametrize("payload, field", [
    ({"title": ""}, "title"),
    ({"title": None}, "title"),
    ({"price": -10}, "price"),
    ({"stock": None}, "stock"),
    ({"discountPercentage": 101}, "discountPercentage"),
    ({"description": None}, "description"),
])
def test_validate_update_failures(payload, field):
    with pytest.raises(ProductValidationError) as exc_info:
        validate_update(payload)

    assert exc_info.value.field == field
    assert exc_info.value.kind == ErrorKind.INVALID_VALUE
