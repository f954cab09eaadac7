# app/models.py
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ValidationError(ValueError):
    """Rejected product input (blank name, negative price, ...)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Product(BaseModel):
    # instances handed out by the store are never mutated
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    description: Optional[str] = None
    price: float = Field(allow_inf_nan=False)
    quantity: int = 0
    category: Optional[str] = None
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class ProductIn(BaseModel):
    """Decoded request body. Types only; field rules live in validate_product."""

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = 0
    category: Optional[str] = None

    def to_product(self, product_id: str, created_at: datetime, updated_at: datetime) -> Product:
        return Product(
            id=product_id,
            name=self.name,
            description=self.description,
            price=self.price,
            quantity=self.quantity or 0,
            category=self.category,
            created_at=created_at,
            updated_at=updated_at,
        )


def validate_product(payload: ProductIn) -> Optional[ValidationError]:
    if payload.name is None or not payload.name.strip():
        return ValidationError("name is required")
    if payload.price is None:
        return ValidationError("price is required")
    if not math.isfinite(payload.price):
        return ValidationError("price must be a finite number")
    if payload.price < 0:
        return ValidationError("price must not be negative")
    return None


@dataclass(frozen=True)
class Result:
    """Outcome of a create/update: either the stored product or the reason it was rejected."""

    value: Optional[Product] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Product:
        if self.error is not None:
            raise self.error
        return self.value
