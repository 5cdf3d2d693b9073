"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from content_sanitizer.processing.sanitizer import content_sanitizer
from content_sanitizer.shared.config import settings
from content_sanitizer.shared.exception_handlers import (
    generic_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from content_sanitizer.shared.middleware import PrometheusMiddleware
from content_sanitizer.shared.schemas import HealthResponse

from .routes import messages, metrics, sanitize

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(
        f"Content sanitizer ready: {len(content_sanitizer.rules)} rules, "
        f"{len(settings.SANITIZER_EXTRA_KEYWORDS)} extra keyword(s)"
    )
    yield


# Create FastAPI application
app = FastAPI(
    title="Content Sanitizer API",
    version=settings.VERSION,
    description="Strips contact-sharing attempts from marketplace messages",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH"],
    allow_headers=["Content-Type", "Authorization"],
)

# Prometheus metrics middleware
app.add_middleware(PrometheusMiddleware)

# Include routers
app.include_router(sanitize.router, prefix="/api/v1", tags=["sanitizer"])
app.include_router(messages.router, prefix="/api/v1", tags=["messages"])
app.include_router(metrics.router, tags=["metrics"])

# Exception handlers
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)


@app.get("/api/v1/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        service=settings.SERVICE_NAME,
        version=settings.VERSION,
        timestamp=datetime.now(timezone.utc),
    )
