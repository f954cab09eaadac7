# app/hello.py
"""
Hello-world demo service.

A tour of basic routing: plain text, HTML and JSON responses, path and
query parameters, echoing request bodies and custom status codes.
Unknown routes get a JSON 404 that points at ``/info``.

    uvicorn app.hello:app --port 8080
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Path, Query, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .core import api_error
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

ROUTES = [
    "GET  /                    - Plain text greeting",
    "GET  /html                - HTML response",
    "GET  /json                - JSON response",
    "GET  /hello/{name}        - Greeting with name parameter",
    "GET  /greet/{name}/{age}  - Greeting with multiple parameters",
    "GET  /search?q=&filter=   - Query parameters example",
    "POST /echo                - Echo back request body",
    "PUT  /update/{id}         - Update example",
    "DELETE /delete/{id}       - Delete example",
    "GET  /status/{code}       - Custom status code",
    "GET  /info                - This info page",
]


def create_app() -> FastAPI:
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title="Hello World API", version="1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.get("/", response_class=PlainTextResponse)
    def home():
        return "Hello, FastAPI!"

    @app.get("/html", response_class=HTMLResponse)
    def html():
        return (
            "<h1>Hello from FastAPI!</h1>"
            "<p>This is an HTML response</p>"
            "<a href='/'>Back to home</a>"
        )

    @app.get("/json")
    def json_greeting():
        return {
            "message": "Hello, JSON!",
            "status": "success",
            "timestamp": int(time.time() * 1000),
        }

    @app.get("/hello/{name}", response_class=PlainTextResponse)
    def hello(name: str):
        return f"Hello, {name}! 👋"

    @app.get("/greet/{name}/{age}")
    def greet(name: str, age: str):
        return {
            "greeting": f"Hello, {name}",
            "age": age,
            "message": "Welcome to FastAPI!",
        }

    @app.get("/search")
    def search(q: Optional[str] = None, filter_: Optional[str] = Query(None, alias="filter")):
        return {
            "query": q if q is not None else "none",
            "filter": filter_ if filter_ is not None else "none",
            "info": "Query params example: /search?q=fastapi&filter=python",
        }

    @app.post("/echo")
    async def echo(request: Request):
        body = await request.body()
        return {
            "received": body.decode("utf-8", errors="replace"),
            "contentType": request.headers.get("content-type"),
            "method": request.method,
        }

    @app.put("/update/{item_id}")
    async def update(item_id: str, request: Request):
        body = await request.body()
        return {
            "id": item_id,
            "action": "updated",
            "data": body.decode("utf-8", errors="replace"),
        }

    @app.delete("/delete/{item_id}")
    def delete(item_id: str):
        return {"id": item_id, "action": "deleted", "success": True}

    @app.get("/status/{code}")
    def status(code: int = Path(..., ge=100, le=599)):
        # these statuses must not carry a body
        if code < 200 or code in (204, 304):
            return Response(status_code=code)
        return JSONResponse(
            status_code=code,
            content={"statusCode": code, "message": "Custom status code example"},
        )

    @app.get("/info")
    def info():
        return {"name": "Hello World API", "version": "1.0", "routes": ROUTES}

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return api_error(
                404,
                f"Route not found: {request.url.path}",
                hint="Try GET /info to see all available routes",
            )
        return api_error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def bad_request(request: Request, exc: RequestValidationError):
        return api_error(400, "Invalid request parameters", errors=[e.get("msg") for e in exc.errors()])

    @app.exception_handler(Exception)
    async def internal_error(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return api_error(500, str(exc) or "Internal server error", error=type(exc).__name__)

    logger.info("Hello World API ready")
    return app


app = create_app()
