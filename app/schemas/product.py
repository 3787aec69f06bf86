from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Optional

from app.models.product import Product


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductCreate(_CamelModel):
    """Validated fields for a new product. Defaults fill in omitted optional fields."""
    title: str = Field(..., min_length=1)
    description: str = ""
    price: float = Field(..., ge=0)
    discount_percentage: float = Field(0, ge=0, le=100)
    rating: float = Field(0, ge=0, le=5)
    stock: int = Field(0, ge=0)
    brand: str = ""
    category: str = ""
    thumbnail: str = ""
    images: list[str] = Field(default_factory=list)


class ProductUpdate(_CamelModel):
    """
    Validated partial update. All fields are optional.

    Only fields that were explicitly set are merged onto the stored record,
    see ``model_dump(exclude_unset=True)``.
    """
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    discount_percentage: Optional[float] = Field(None, ge=0, le=100)
    rating: Optional[float] = Field(None, ge=0, le=5)
    stock: Optional[int] = Field(None, ge=0)
    brand: Optional[str] = None
    category: Optional[str] = None
    thumbnail: Optional[str] = None
    images: Optional[list[str]] = None


class ProductListResponse(BaseModel):
    """Schema for the product listing. Not paginated: skip is 0 and limit is total."""
    products: list[Product]
    total: int
    skip: int = 0
    limit: int
    timestamp: str


class ProductDeleteResponse(_CamelModel):
    """Schema for a successful delete."""
    message: str
    deleted_product: Product
    remaining_products: int
    timestamp: str


class ValidationErrorResponse(BaseModel):
    """Body returned with a 400."""
    message: str
    field: str
    received: Any = None


class NotFoundResponse(_CamelModel):
    """Body returned when a product id is well-formed but unknown."""
    message: str
    available_ids: list[int]
