"""FastAPI application factory.

Run with: python run.py  (or uvicorn web.server:app --port 5000)
"""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from app.container import container
from app.errors import DatasetError
from app.repositories.db import close_db
from settings import FRONTEND_URL
from web.api.errors import AuthError, NotFoundError, ValidationError
from web.api.health import ping
from web.api.health.schemas import PingResponse
from web.routes import create_router

API_TITLE = "uni-match API"
API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: build the container. Shutdown: close the DB connection."""
    container.init()
    logger.info("API started (CORS origin: {})", FRONTEND_URL)
    yield
    close_db()
    logger.info("API stopped")


def register_error_handlers(app: FastAPI) -> None:
    """Translate exceptions into JSON error responses without internal details."""

    @app.exception_handler(DatasetError)
    async def dataset_error_handler(request: Request, exc: DatasetError) -> JSONResponse:
        logger.error("Dataset error on {}: {}", request.url.path, exc.message)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": exc.message})

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on {}", request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app() -> FastAPI:
    """Build the application; the container is initialized on startup."""
    app = FastAPI(title=API_TITLE, version=API_VERSION, lifespan=lifespan)

    register_error_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[FRONTEND_URL],
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "Authorization", "X-Id-Token"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - start) * 1000, 1)
        logger.info("{} {} -> {} ({} ms)", request.method, request.url.path, response.status_code, duration_ms)
        return response

    # Liveness outside /api so it answers even when the API routes misbehave
    app.add_api_route("/ping", ping, methods=["GET"], response_model=PingResponse, tags=["health"])
    app.include_router(create_router(), prefix="/api")

    @app.api_route("/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"], include_in_schema=False)
    async def route_not_found(path: str) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": "Route not found"})

    return app


app = create_app()
