"""Global exception handlers for the sanitizer API.

Error bodies can carry fragments of the rejected request, and a rejected
message body may itself hold the contact details this service filters.
Every detail string is passed through the sanitizer before it is returned.
"""

import logging

from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse

from ..processing.sanitizer import sanitize

logger = logging.getLogger(__name__)


def _field_name(loc) -> str:
    return ".".join(str(part) for part in loc if part != "body") or "unknown"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Return the HTTP error detail only."""
    detail = sanitize(exc.detail) if isinstance(exc.detail, str) else exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Flatten validation errors to field/msg pairs without the rejected input."""
    errors = [
        {
            "field": _field_name(error.get("loc", ())),
            "msg": sanitize(error.get("msg")) or "Validation error",
        }
        for error in exc.errors()
    ]
    logger.info(
        f"Rejected {request.method} {request.url.path}: "
        f"invalid fields {sorted({error['field'] for error in errors})}"
    )
    return JSONResponse(status_code=422, content={"detail": errors})


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected exceptions and return an opaque 500."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
