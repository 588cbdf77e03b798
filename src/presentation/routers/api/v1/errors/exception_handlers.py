"""Global exception handlers for FastAPI application.

Converts everything that escapes a route into an RFC 7807 Problem Details
response, so clients see one error shape regardless of where it came from.

Handlers:
    http_exception_handler: HTTPException (auth dependencies, 404 routes)
    validation_exception_handler: RequestValidationError (422 with field errors)
    generic_exception_handler: Any other exception (500, logged)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.container import get_logger
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)


def _trace_id(request: Request) -> str | None:
    return getattr(request.state, "trace_id", None)


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to RFC 7807 Problem Details response.

    Example:
        >>> raise HTTPException(status_code=401, detail="Not authenticated")
        >>> # {
        >>> #   "type": "https://questlog.local/errors/unauthorized",
        >>> #   "title": "Authentication Required",
        >>> #   "status": 401,
        >>> #   "detail": "Not authenticated",
        >>> #   "instance": "/api/v1/auth/me",
        >>> #   "trace_id": "..."
        >>> # }
    """
    assert isinstance(exc, StarletteHTTPException)

    problem = ProblemDetails.for_status(
        exc.status_code,
        exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        str(request.url.path),
        trace_id=_trace_id(request),
    )

    # Preserve headers such as WWW-Authenticate
    return problem.to_response(headers=getattr(exc, "headers", None))


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to RFC 7807 with field-level errors.

    The ``body``/``query``/``path`` prefix is dropped from each location, so
    a bad ``password`` in the JSON body is reported as field ``password``.
    """
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p not in ("body", "query", "path")]
        field_errors.append(
            ErrorDetail(
                field=".".join(field_parts) if field_parts else "unknown",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    return ProblemDetails.for_status(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Request validation failed. Check 'errors' for details.",
        str(request.url.path),
        errors=field_errors or None,
        trace_id=_trace_id(request),
    ).to_response()


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Logs the exception with the trace ID and returns a 500 that leaks no
    internal details.
    """
    trace_id = _trace_id(request)

    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )

    return ProblemDetails.for_status(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Please contact support with the trace ID.",
        str(request.url.path),
        trace_id=trace_id,
    ).to_response()


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
