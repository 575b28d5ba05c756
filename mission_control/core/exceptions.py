"""Custom exceptions and their JSON rendering."""
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class NotFoundError(HTTPException):
    """Resource not found exception."""

    def __init__(self, detail: Optional[str] = None):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail or "Resource not found")


class BadRequestError(HTTPException):
    """Request rejected before reaching the store or filesystem."""

    def __init__(self, detail: Optional[str] = None):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail or "Bad request")


class StoreError(HTTPException):
    """Store or filesystem failure collapsed to a static message."""

    def __init__(self, detail: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail or "Internal server error",
        )


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into path/message/code entries."""
    formatted = []
    for error in errors:
        loc = list(error.get("loc", ()))
        # Drop the "body"/"path"/"query" prefix FastAPI adds
        if loc and loc[0] in {"body", "path", "query"}:
            loc = loc[1:]
        formatted.append(
            {
                "path": loc,
                "message": error.get("msg", "Invalid value"),
                "code": error.get("type", "invalid"),
            }
        )
    return formatted


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = format_validation_errors(exc.errors())
    logger.info("Validation failed for %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": errors},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register JSON error rendering."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
