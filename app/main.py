"""Catalog API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, exception handlers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from app.api.catalog import router as catalog_router
from app.api.categories import router as categories_router
from app.api.health import router as health_router
from app.api.middleware import setup_middleware
from app.domain.exceptions import (
    DomainError,
    NotFoundError,
    ProductNotFoundError,
    StorageError,
    ValidationError,
)
from app.infrastructure.config import settings
from app.infrastructure.database import engine
from app.infrastructure.logging_config import configure_logging

configure_logging(settings.log_level)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and release pooled connections on shutdown."""
    logger.info(
        "Starting Catalog API",
        version=settings.api_version,
        debug=settings.debug,
    )

    yield

    await engine.dispose()
    logger.info("Shutting down Catalog API")


app = FastAPI(
    title="Catalog API",
    description="Product catalog with filtering and variant pricing",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS sits innermost; request ID and error handling wrap it
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_middleware(app)

app.include_router(health_router, tags=["Health"])
app.include_router(catalog_router)
app.include_router(categories_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: list[dict] | None = None,
) -> JSONResponse:
    """Build a response in the standard error envelope."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details or [],
            "request_id": getattr(request.state, "request_id", None),
        },
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Reject malformed filters and create payloads with 400."""
    details = [{"field": exc.field, "message": exc.message}] if exc.field else []
    return error_response(
        request, status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", exc.message, details
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Report unparseable request bodies as 400."""
    details = [
        {"field": ".".join(str(part) for part in err.get("loc", [])), "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    return error_response(
        request, status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", "Invalid request body", details
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    """Map lookups that matched nothing to 404."""
    if isinstance(exc, ProductNotFoundError):
        return error_response(
            request, status.HTTP_404_NOT_FOUND, "PRODUCT_NOT_FOUND", "Product not found"
        )
    return error_response(request, status.HTTP_404_NOT_FOUND, "NOT_FOUND", exc.message)


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    """Surface storage failures as 500 with the underlying message."""
    logger.error(
        "Storage failure",
        path=request.url.path,
        method=request.method,
        error=exc.message,
    )
    return error_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, "STORAGE_ERROR", exc.message
    )


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    """Fallback for domain errors without a dedicated handler."""
    return error_response(
        request, status.HTTP_400_BAD_REQUEST, "DOMAIN_ERROR", exc.message
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Wrap routing and framework HTTP errors (404, 405) in the envelope."""
    return error_response(request, exc.status_code, "ERROR", str(exc.detail))
