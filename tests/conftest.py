import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.models import ProductIn
from app.service import ProductService


@pytest.fixture
def service():
    """Fresh service seeded with the five demo products."""
    return ProductService()


@pytest.fixture
def empty_service():
    return ProductService(seed=False)


@pytest.fixture
def client(service):
    return TestClient(create_app(service))


def product_in(**fields):
    data = {"name": "Widget", "price": 9.99, "quantity": 3, "category": "Gadgets"}
    data.update(fields)
    return ProductIn(**data)
