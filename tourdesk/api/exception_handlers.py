"""FastAPI exception handlers.

Every error leaves the API as `{"error": message}`. Persistence failures and
any other unexpected error are logged and reported as a generic 500 without
internal detail.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from tourdesk.errors import TourDeskError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def tourdesk_error_handler(request: Request, exc: TourDeskError) -> JSONResponse:
    """Handle client-facing domain errors."""
    return error_response(exc.status_code, exc.message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle bodies FastAPI could not parse into the request model."""
    logger.debug(f"Invalid request body for {request.method} {request.url.path}: {exc.errors()}")
    return error_response(400, "Invalid request body")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle framework HTTP errors (unknown route, wrong method)."""
    return error_response(exc.status_code, str(exc.detail))


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle unexpected persistence failures."""
    logger.error(f"Database error on {request.method} {request.url.path}: {type(exc).__name__}: {str(exc)}")
    return error_response(500, "Internal server error")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle anything else; the traceback is logged, never returned."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}")
    return error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TourDeskError, tourdesk_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
