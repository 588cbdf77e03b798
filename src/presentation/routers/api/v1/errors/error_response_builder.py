"""Error response builder for handler failures.

Routers turn a handler's message constant into a problem document through
ErrorResponseBuilder.from_handler_error, passing their own table of
constant to ApplicationErrorCode.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from collections.abc import Mapping

from fastapi import Request
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Review not found",
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(
        ...     error=error,
        ...     request=request,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
        >>> # 404 with type {API_BASE_URL}/errors/not-found
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert ApplicationError to RFC 7807 JSON response.

        Args:
            error: Handler failure with its category
            request: FastAPI Request object (for the instance path)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with the status of ``error.code``
        """
        errors = None
        if error.domain_error and hasattr(error.domain_error, "field"):
            errors = [
                ErrorDetail(
                    field=error.domain_error.field or "unknown",
                    code=error.domain_error.code.value,
                    message=error.domain_error.message,
                )
            ]

        return ProblemDetails.for_status(
            error.code.value,
            error.message,
            str(request.url.path),
            errors=errors,
            trace_id=trace_id,
        ).to_response()

    @staticmethod
    def from_handler_error(
        error: str,
        request: Request,
        codes: Mapping[str, ApplicationErrorCode],
        fields: Mapping[str, str] | None = None,
    ) -> JSONResponse:
        """Convert a handler's string error into an RFC 7807 response.

        Args:
            error: Client-facing error constant returned by the handler.
            request: FastAPI Request object.
            codes: Error constant to ApplicationErrorCode. Unmapped errors
                become UNMAPPED (500).
            fields: Error constant to the request field it refers to. Mapped
                errors are listed under ``errors`` as invalid references.

        Example:
            >>> ErrorResponseBuilder.from_handler_error(
            ...     "Developer not found",
            ...     request,
            ...     codes={"Developer not found": ApplicationErrorCode.BAD_REQUEST},
            ...     fields={"Developer not found": "developer_id"},
            ... )
        """
        domain_error = None
        if fields and error in fields:
            domain_error = ValidationError(
                code=ErrorCode.INVALID_REFERENCE,
                message=error,
                field=fields[error],
            )
        app_error = ApplicationError(
            code=codes.get(error, ApplicationErrorCode.UNMAPPED),
            message=error,
            domain_error=domain_error,
        )
        return ErrorResponseBuilder.from_application_error(
            error=app_error,
            request=request,
            trace_id=get_trace_id() or "",
        )
