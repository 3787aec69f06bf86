"""
Request validation for product ids and product payloads.

Every field rule parses the raw JSON value into the expected type and then
checks its range, returning a ``Parsed`` result instead of raising. The
payload validators walk the fields in a fixed order and raise
``ProductValidationError`` for the first field that fails; errors are never
aggregated.
"""
import enum
import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional

from app.schemas.product import ProductCreate, ProductUpdate

_INTEGER_RE = re.compile(r"[+-]?\d+")
_NUMBER_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")

TEXT_FIELDS = ("description", "brand", "category", "thumbnail")


class ErrorKind(str, enum.Enum):
    """Kinds of request validation failure."""
    INVALID_ID = "InvalidId"
    MISSING_FIELD = "MissingField"
    INVALID_VALUE = "InvalidValue"


class ProductValidationError(Exception):
    """Exception raised when a path id or a payload field fails validation."""

    def __init__(self, kind: ErrorKind, field: str, message: str, received: Any = None):
        super().__init__(message)
        self.kind = kind
        self.field = field
        self.message = message
        self.received = received


@dataclass(frozen=True)
class Parsed:
    """Outcome of parsing one raw value: either ``value`` or an ``error`` message."""
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_number(raw: Any, minimum: float = None, maximum: float = None) -> Parsed:
    """Parse a JSON number or numeric string into a finite float within bounds."""
    if isinstance(raw, bool):
        return Parsed(error="not a number")
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return Parsed(error="not a finite number")
    elif isinstance(raw, str) and _NUMBER_RE.fullmatch(raw.strip()):
        value = float(raw.strip())
    else:
        return Parsed(error="not a number")

    if not math.isfinite(value):
        return Parsed(error="not a finite number")
    if minimum is not None and value < minimum:
        return Parsed(error=f"below {minimum}")
    if maximum is not None and value > maximum:
        return Parsed(error=f"above {maximum}")
    return Parsed(value=value)


def parse_integer(raw: Any, minimum: int = None) -> Parsed:
    """Parse an int, an integral float or a digit string into an int."""
    if isinstance(raw, bool):
        return Parsed(error="not an integer")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float) and math.isfinite(raw) and raw.is_integer():
        value = int(raw)
    elif isinstance(raw, str) and _INTEGER_RE.fullmatch(raw.strip()):
        value = int(raw.strip())
    else:
        return Parsed(error="not an integer")

    if minimum is not None and value < minimum:
        return Parsed(error=f"below {minimum}")
    return Parsed(value=value)


def parse_title(raw: Any) -> Parsed:
    """Parse a title: a string that is not blank. The result is trimmed."""
    if not isinstance(raw, str):
        return Parsed(error="not a string")
    title = raw.strip()
    if not title:
        return Parsed(error="empty")
    return Parsed(value=title)


def parse_text(raw: Any) -> Parsed:
    if not isinstance(raw, str):
        return Parsed(error="not a string")
    return Parsed(value=raw)


def coerce_images(raw: Any) -> list[str]:
    """Return ``raw`` if it is a list of strings, otherwise an empty list."""
    if isinstance(raw, list) and all(isinstance(item, str) for item in raw):
        return list(raw)
    return []


def parse_product_id(raw: str) -> int:
    """
    Parse a path id into a positive integer.

    Raises:
        ProductValidationError: with kind ``InvalidId`` for anything that is
            not an optionally signed run of digits, or is zero or negative.
            Ids such as "1.5" or "12abc" are rejected, never truncated.
    """
    parsed = parse_integer(raw, minimum=1)
    if not parsed.ok:
        raise ProductValidationError(
            ErrorKind.INVALID_ID,
            "id",
            "Invalid product ID. ID must be a positive number.",
            raw,
        )
    return parsed.value


# (payload key, model field, parser, error message), in validation order
_NUMERIC_RULES: list[tuple[str, str, Callable[[Any], Parsed], str]] = [
    (
        "stock", "stock",
        lambda raw: parse_integer(raw, minimum=0),
        "Stock must be a valid non-negative integer",
    ),
    (
        "discountPercentage", "discount_percentage",
        lambda raw: parse_number(raw, minimum=0, maximum=100),
        "Discount percentage must be a number between 0 and 100",
    ),
    (
        "rating", "rating",
        lambda raw: parse_number(raw, minimum=0, maximum=5),
        "Rating must be a number between 0 and 5",
    ),
]

_PRICE_MESSAGE = "Price must be a valid non-negative number"

UPDATABLE_FIELDS = (
    "title", "price", *(rule[0] for rule in _NUMERIC_RULES), *TEXT_FIELDS, "images",
)


def _invalid(field: str, message: str, received: Any) -> ProductValidationError:
    return ProductValidationError(ErrorKind.INVALID_VALUE, field, message, received)


def _check_numeric_and_text(payload: dict, cleaned: dict, skip_null: bool) -> None:
    # null never passes a numeric rule; skip_null only lets text fields fall back
    for key, field, parser, message in _NUMERIC_RULES:
        if key not in payload:
            continue
        parsed = parser(payload[key])
        if not parsed.ok:
            raise _invalid(key, message, payload[key])
        cleaned[field] = parsed.value

    for key in TEXT_FIELDS:
        if key not in payload or (skip_null and payload[key] is None):
            continue
        parsed = parse_text(payload[key])
        if not parsed.ok:
            raise _invalid(key, f"{key.capitalize()} must be a string", payload[key])
        cleaned[key] = parsed.value


def validate_create(payload: dict) -> ProductCreate:
    """
    Validate a create payload.

    ``title`` and ``price`` are required. Absent optional fields take their
    defaults; a null text field does too, but a null numeric field is invalid. Keys that are not product fields are ignored.

    Raises:
        ProductValidationError: for the first failing field
    """
    title = payload.get("title")
    if title is None or (isinstance(title, str) and not title.strip()):
        raise ProductValidationError(
            ErrorKind.MISSING_FIELD,
            "title",
            "Title is required and cannot be empty",
            title,
        )
    parsed_title = parse_title(title)
    if not parsed_title.ok:
        raise _invalid("title", "Title must be a string", title)

    price = payload.get("price")
    if price is None:
        raise ProductValidationError(
            ErrorKind.MISSING_FIELD, "price", "Price is required", price
        )
    parsed_price = parse_number(price, minimum=0)
    if not parsed_price.ok:
        raise _invalid("price", _PRICE_MESSAGE, price)

    cleaned = {"title": parsed_title.value, "price": parsed_price.value}
    _check_numeric_and_text(payload, cleaned, skip_null=True)
    cleaned["images"] = coerce_images(payload.get("images"))

    return ProductCreate(**cleaned)


def validate_update(payload: dict) -> ProductUpdate:
    """
    Validate a partial update payload.

    Only keys present in ``payload`` are validated and end up set on the
    returned ``ProductUpdate``. An explicit null is rejected for every field.
    A non-list ``images`` value is dropped; a list holding non-strings
    becomes an empty list.

    Raises:
        ProductValidationError: for the first failing field
    """
    for key in UPDATABLE_FIELDS:
        if key in payload and payload[key] is None:
            raise _invalid(key, f"{key} cannot be null", None)

    cleaned = {}

    if "title" in payload:
        parsed = parse_title(payload["title"])
        if not parsed.ok:
            raise _invalid("title", "Title cannot be empty", payload["title"])
        cleaned["title"] = parsed.value

    if "price" in payload:
        parsed = parse_number(payload["price"], minimum=0)
        if not parsed.ok:
            raise _invalid("price", _PRICE_MESSAGE, payload["price"])
        cleaned["price"] = parsed.value

    _check_numeric_and_text(payload, cleaned, skip_null=False)

    if isinstance(payload.get("images"), list):
        cleaned["images"] = coerce_images(payload["images"])

    return ProductUpdate(**cleaned)
