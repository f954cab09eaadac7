# app/main.py
"""
REST API over the in-memory product catalog.

``create_app`` wires a ``ProductService`` into a FastAPI app with CORS
and JSON error handlers; ``app`` is the module-level instance for
uvicorn::

    uvicorn app.main:app --port 8081
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .core import HealthResponse, ResetResponse, api_error, product_error, product_not_found
from .logging_config import setup_logging
from .models import Product, ProductIn
from .service import ProductService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _service(request: Request) -> ProductService:
    return request.app.state.service


# ---------------------------
# Product endpoints
# ---------------------------
@router.get("/products", response_model=List[Product])
def list_products(request: Request, category: Optional[str] = None):
    service = _service(request)
    if category:
        return service.list_by_category(category)
    return service.list_all()


@router.get("/products/{product_id}", response_model=Product)
def get_product(product_id: str, request: Request):
    product = _service(request).get_by_id(product_id)
    if product is None:
        return product_not_found(product_id)
    return product


@router.post("/products", response_model=Product, status_code=201)
def create_product(payload: ProductIn, request: Request, response: Response):
    result = _service(request).create(payload)
    if not result.ok:
        return product_error(400, result.error.message)
    response.headers["Location"] = f"/api/products/{result.value.id}"
    return result.value


@router.put("/products/{product_id}", response_model=Product)
def update_product(product_id: str, payload: ProductIn, request: Request):
    result = _service(request).update(product_id, payload)
    if result is None:
        return product_not_found(product_id)
    if not result.ok:
        return product_error(400, result.error.message)
    return result.value


@router.delete("/products/{product_id}", status_code=204)
def delete_product(product_id: str, request: Request):
    if not _service(request).delete(product_id):
        return product_not_found(product_id)
    return Response(status_code=204)


# ---------------------------
# Health / utility
# ---------------------------
@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="UP", message="Service is running")


@router.post("/reset", response_model=ResetResponse)
def reset(request: Request):
    """Restore the demo catalog (for tests/demo)."""
    service = _service(request)
    service.reset()
    return ResetResponse(status="reset", count=service.count())


# ---------------------------
# Error handlers
# ---------------------------
async def _http_error(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return api_error(404, "Route not found")
    return api_error(exc.status_code, str(exc.detail))


async def _bad_request(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()) if p != 'body') or 'body'}: {err.get('msg')}"
        for err in exc.errors()
    )
    return api_error(400, f"Invalid request: {problems}")


async def _internal_error(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return api_error(500, "Internal server error")


def create_app(service: Optional[ProductService] = None) -> FastAPI:
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.service = service if service is not None else ProductService(seed=settings.seed_data)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _bad_request)
    app.add_exception_handler(Exception, _internal_error)

    app.include_router(router)
    logger.info("REST API ready with %d products", app.state.service.count())
    return app


app = create_app()
