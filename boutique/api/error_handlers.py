"""
Exception handlers for FastAPI.

NotFoundError -> 404, IntegrityViolationError -> 400, anything else -> 500.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from boutique.core.exceptions import (
    BoutiqueException,
    IntegrityViolationError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


async def boutique_exception_handler(request: Request, exc: BoutiqueException) -> JSONResponse:
    """Handler for every domain exception."""
    status_code = 500
    error_type = exc.__class__.__name__

    if isinstance(exc, NotFoundError):
        status_code = 404
    elif isinstance(exc, IntegrityViolationError):
        status_code = 400

    logger.warning(f"{error_type} on {request.method} {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=status_code,
        content={"error": error_type, "message": exc.message, "details": exc.details},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler for unexpected exceptions."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")

    return JSONResponse(
        status_code=500,
        content={
            "error": "InternalServerError",
            "message": "Internal server error",
            "details": {},
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the exception handlers on a FastAPI app.

    Usage:
        app = FastAPI()
        register_exception_handlers(app)
    """
    app.add_exception_handler(BoutiqueException, boutique_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
