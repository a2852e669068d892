#!/usr/bin/env python3
"""
Error handlers for the web application.

Every failure is reported as {"success": false, "error": ..., "code": ...}.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from etl.resume.exceptions import ResumeServiceError, ValidationError, ParsingError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: str, code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "code": code
        }
    )


async def service_exception_handler(
    request: Request,
    exc: ResumeServiceError
) -> JSONResponse:
    """
    Handle resume service exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = 500
    if isinstance(exc, ValidationError):
        status_code = 400
        logger.warning(f"Rejected request to {request.url.path}: {exc}")
    elif isinstance(exc, ParsingError):
        status_code = 422
        logger.error(f"Parsing error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)

    return _error_response(status_code, str(exc), exc.code)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle HTTP exceptions (404, 405, ...) with consistent format.
    """
    return _error_response(exc.status_code, str(exc.detail), "HTTP_ERROR")


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Outside production the exception text is returned to help debugging.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    environment = getattr(request.app.state, "environment", "production")
    message = "Internal server error" if environment == "production" else str(exc)

    return _error_response(500, message, "INTERNAL_ERROR")


def register_exception_handlers(app: FastAPI) -> None:
    """Register all error handlers on the app."""
    app.add_exception_handler(ResumeServiceError, service_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
