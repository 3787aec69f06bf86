import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.database import ProductStore


@pytest.fixture(scope="function")
def client():
    """Create test client; its lifespan seeds a fresh store for each test."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def store():
    """Create a seeded store for direct access in tests."""
    return ProductStore.with_seed_data()


@pytest.fixture
def sample_product():
    """A valid create payload."""
    return {
        "title": "Test Product",
        "description": "A test product for API testing",
        "price": 29.99,
        "discountPercentage": 5,
        "rating": 4.5,
        "stock": 100,
        "brand": "TestBrand",
        "category": "test",
        "thumbnail": "https://example.com/thumbnail.jpg",
        "images": ["https://example.com/image1.jpg", "https://example.com/image2.jpg"]
    }
