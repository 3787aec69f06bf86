from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Product(BaseModel):
    """
    Product record held in the in-memory store.

    Attributes:
        id: Unique identifier, assigned by the store
        title: Product name (never empty)
        description: Free-text description
        price: Product price (non-negative)
        discount_percentage: Discount between 0 and 100
        rating: Rating between 0 and 5
        stock: Available quantity (non-negative)
        brand: Brand name
        category: Category name
        thumbnail: Main image URL
        images: Additional image URLs
        created_at: ISO-8601 timestamp set on creation
        updated_at: ISO-8601 timestamp refreshed on every update

    Serialized with camelCase names (``discountPercentage``, ``createdAt``...).
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    description: str = ""
    price: float
    discount_percentage: float = 0
    rating: float = 0
    stock: int = 0
    brand: str = ""
    category: str = ""
    thumbnail: str = ""
    images: list[str] = Field(default_factory=list)
    created_at: str
    updated_at: str

    def __repr__(self):
        return f"<Product(id={self.id}, title='{self.title}', stock={self.stock})>"
