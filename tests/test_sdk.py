import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.service import ProductService
from sdk.pycatalog import CatalogClient


@pytest.fixture
def sdk():
    session = TestClient(create_app(ProductService()))
    return CatalogClient(base_url="http://testserver", session=session)


def test_health_and_listing(sdk):
    assert sdk.health()["status"] == "UP"
    assert len(sdk.list_products()) == 5
    assert len(sdk.list_products("FURNITURE")) == 1


def test_crud_round(sdk):
    created = sdk.create_product("Desk Lamp", 49.5, 12, "Furniture", "LED desk lamp")
    assert created["id"] == "6"
    assert sdk.get_product("6")["description"] == "LED desk lamp"

    updated = sdk.update_product("6", "Desk Lamp Pro", 59.0, 8, "Furniture")
    assert updated["name"] == "Desk Lamp Pro"
    assert updated["createdAt"] == created["createdAt"]

    assert sdk.delete_product("6") is True
    assert sdk.delete_product("6") is False
    assert sdk.get_product("6") is None
    assert sdk.update_product("6", "Gone", 1.0) is None


def test_invalid_create_raises(sdk):
    with pytest.raises(Exception):
        sdk.create_product("", 10.0)
    assert len(sdk.list_products()) == 5


def test_reset(sdk):
    sdk.delete_product("1")
    assert sdk.reset() == {"status": "reset", "count": 5}
    assert sdk.get_product("1")["name"] == "Laptop"
