"""RFC 7807 problem documents.

Every failing Questlog endpoint answers with a JSON body shaped like
ProblemDetails. The ``type`` URI is
``{API_BASE_URL}/errors/{slug}`` where the slug depends only on the HTTP
status, so handler failures and framework errors (unknown route, missing
token, 422) share one vocabulary clients can branch on.

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    ErrorDetail: One rejected request field
    ProblemDetails: Problem document
    problem_type: Build the ``type`` URI for a slug
"""

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from src.core.config import settings

# status -> (title, type slug)
_PROBLEMS: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
}


def problem_type(slug: str) -> str:
    """Problem ``type`` URI under the configured API base URL.

    Example:
        >>> problem_type("conflict")
        'https://questlog.local/errors/conflict'
    """
    return f"{settings.api_base_url}/errors/{slug}"


class ErrorDetail(BaseModel):
    """One rejected request field.

    ``code`` is pydantic's error type for 422 responses and
    ``invalid_reference`` when an id in the body points at nothing.
    """

    field: str = Field(..., description="Field name", examples=["game_id"])
    code: str = Field(
        ..., description="Machine-readable error code", examples=["invalid_reference"]
    )
    message: str = Field(
        ..., description="Human-readable error message", examples=["Game not found"]
    )


class ProblemDetails(BaseModel):
    """Problem document.

    ``detail`` carries the handler's message verbatim (``"You have already
    reviewed this game"``). ``errors`` is only present when the failure
    can be pinned to request fields.
    """

    type: str = Field(
        ...,
        description="URI identifying the problem type",
        examples=["https://questlog.local/errors/conflict"],
    )
    title: str = Field(
        ..., description="Summary of the problem type", examples=["Resource Conflict"]
    )
    status: int = Field(..., description="HTTP status code", examples=[409])
    detail: str = Field(
        ...,
        description="Explanation of this occurrence",
        examples=["You have already reviewed this game"],
    )
    instance: str = Field(..., description="Request path", examples=["/api/v1/reviews"])
    errors: list[ErrorDetail] | None = Field(None, description="Field-level errors")
    trace_id: str | None = Field(None, description="Request trace ID")

    @classmethod
    def for_status(
        cls,
        status_code: int,
        detail: str,
        instance: str,
        *,
        errors: list[ErrorDetail] | None = None,
        trace_id: str | None = None,
    ) -> "ProblemDetails":
        """Build a problem whose title and type follow from the status."""
        title, slug = _PROBLEMS.get(status_code, ("Error", "error"))
        return cls(
            type=problem_type(slug),
            title=title,
            status=status_code,
            detail=detail,
            instance=instance,
            errors=errors,
            trace_id=trace_id,
        )

    def to_response(self, headers: dict[str, str] | None = None) -> JSONResponse:
        return JSONResponse(
            status_code=self.status,
            content=self.model_dump(exclude_none=True),
            headers=headers,
        )
