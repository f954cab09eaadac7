from typing import Any, Dict

from fastapi.responses import JSONResponse
from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    message: str


class ProductError(BaseModel):
    error: str


class ApiError(BaseModel):
    status: int
    message: str


class ResetResponse(BaseModel):
    status: str
    count: int


def product_error(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content=ProductError(error=message).model_dump())


def product_not_found(product_id: str) -> JSONResponse:
    return product_error(404, f"Product not found with id: {product_id}")


def api_error(status: int, message: str, **extra: Any) -> JSONResponse:
    body: Dict[str, Any] = ApiError(status=status, message=message).model_dump()
    body.update(extra)
    return JSONResponse(status_code=status, content=body)
