from datetime import datetime

import pydantic
import pytest

from app.models import Product, ProductIn, Result, ValidationError, validate_product


def test_valid_payload_passes():
    assert validate_product(ProductIn(name="Lamp", price=0)) is None
    assert validate_product(ProductIn(name="Lamp", price=12.5, quantity=0)) is None


@pytest.mark.parametrize("name", [None, "", "   "])
def test_blank_name_is_rejected(name):
    error = validate_product(ProductIn(name=name, price=1))
    assert isinstance(error, ValidationError)
    assert error.message == "name is required"


def test_negative_price_is_rejected():
    error = validate_product(ProductIn(name="Lamp", price=-0.01))
    assert error.message == "price must not be negative"


def test_missing_price_is_rejected():
    assert validate_product(ProductIn(name="Lamp")).message == "price is required"


def test_to_product_defaults_missing_quantity_to_zero():
    now = datetime.now()
    product = ProductIn(name="Lamp", price=3, quantity=None).to_product("7", now, now)
    assert product.id == "7"
    assert product.quantity == 0
    assert product.category is None
    assert product.created_at == product.updated_at == now


def test_product_serializes_camel_case_timestamps():
    now = datetime(2024, 5, 1, 12, 30)
    product = Product(id="1", name="Lamp", price=3, created_at=now, updated_at=now)
    data = product.model_dump(by_alias=True, mode="json")
    assert data["createdAt"] == "2024-05-01T12:30:00"
    assert data["updatedAt"] == "2024-05-01T12:30:00"
    assert "created_at" not in data


def test_product_is_immutable():
    now = datetime.now()
    product = Product(id="1", name="Lamp", price=3, createdAt=now, updatedAt=now)
    with pytest.raises(pydantic.ValidationError):
        product.name = "Other"


def test_result_unwrap():
    now = datetime.now()
    product = Product(id="1", name="Lamp", price=3, created_at=now, updated_at=now)
    assert Result(value=product).ok
    assert Result(value=product).unwrap() is product

    failed = Result(error=ValidationError("name is required"))
    assert not failed.ok
    with pytest.raises(ValidationError, match="name is required"):
        failed.unwrap()


@pytest.mark.parametrize("price", [float("nan"), float("inf"), float("-inf"), 1e400])
def test_non_finite_price_is_rejected(price):
    error = validate_product(ProductIn(name="Lamp", price=price))
    assert error.message == "price must be a finite number"


def test_numeric_string_price_is_coerced_before_validation():
    payload = ProductIn(name="Lamp", price="12.5")
    assert payload.price == 12.5
    assert validate_product(payload) is None


def test_non_numeric_price_fails_decoding():
    with pytest.raises(pydantic.ValidationError):
        ProductIn(name="Lamp", price="cheap")


def test_product_refuses_non_finite_price():
    now = datetime.now()
    with pytest.raises(pydantic.ValidationError):
        Product(id="1", name="Lamp", price=float("nan"), created_at=now, updated_at=now)
