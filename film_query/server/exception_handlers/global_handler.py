"""
Global Exception Handlers for the FastAPI Application.

This module maps exceptions to RFC 7807 problem-details responses:

- ``InvalidParameterError`` becomes a 400 carrying the validation message.
- Any other unhandled exception becomes a 500 with a generic message and a
  random error ID. The full error context is logged under that ID; the
  response body never carries the exception message.
"""

import traceback
import uuid
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from film_query.core.errors import InvalidParameterError
from film_query.core.logging_config import get_logger
from film_query.core.monitoring import log_error
from film_query.server.core import constant
from film_query.server.schemas import ProblemDetail

logger = get_logger(__name__)

INTERNAL_ERROR_DETAIL = "An unexpected error occurred while processing the request"


def problem_response(
    request: Request,
    *,
    status_code: int,
    problem_type: str,
    title: str,
    detail: str,
    error_id: Optional[str] = None,
) -> JSONResponse:
    """
    Build a problem-details JSON response for ``request``.

    Args:
        request: The HTTP request that produced the problem
        status_code: HTTP status code of the response
        problem_type: URI identifying the problem type
        title: Short summary of the problem type
        detail: Explanation specific to this occurrence
        error_id: Correlation identifier, only set for internal errors

    Returns:
        JSONResponse with ``application/problem+json`` media type
    """
    problem = ProblemDetail(
        type=problem_type,
        title=title,
        status=status_code,
        detail=detail,
        instance=request.url.path,
        timestamp=datetime.now(timezone.utc).isoformat(),
        errorId=error_id,
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        media_type=constant.PROBLEM_JSON_MEDIA_TYPE,
    )


async def invalid_parameter_handler(request: Request, exc: InvalidParameterError) -> JSONResponse:
    """
    Map an invalid query parameter to a 400 problem response.

    Args:
        request: The HTTP request carrying the invalid parameter
        exc: The validation error

    Returns:
        JSONResponse with status 400
    """
    logger.info(f"Invalid parameter '{exc.parameter}' in {request.method} {request.url.path}: {exc.detail}")
    return problem_response(
        request,
        status_code=status.HTTP_400_BAD_REQUEST,
        problem_type=constant.PROBLEM_TYPE_INVALID_PARAMETER,
        title="Invalid Parameter",
        detail=exc.detail,
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    This handler is called for any unhandled exception in the application.
    It logs the full error context and returns a problem response with an
    error ID that clients can use to reference the error when reporting issues.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with status 500
    """
    error_id = str(uuid.uuid4())

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {exc}",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        },
    )
    log_error(type(exc).__name__, str(exc), {"error_id": error_id, "path": request.url.path})

    return problem_response(
        request,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        problem_type=constant.PROBLEM_TYPE_INTERNAL_ERROR,
        title="Internal Server Error",
        detail=INTERNAL_ERROR_DETAIL,
        error_id=error_id,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(InvalidParameterError, invalid_parameter_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
