"""Failure categories for handler errors.

Handlers fail with a plain message constant (``"Review not found"``). Each
router owns a table from those constants to an ApplicationErrorCode, which
fixes the HTTP status and problem type the client sees.

Exports:
    ApplicationErrorCode: Failure category, valued by its HTTP status
    ApplicationError: Message plus category, optionally pinned to a field
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """How a handler failure is reported.

    The value is the HTTP status code of the response.

    Examples:
        >>> ApplicationErrorCode.CONFLICT.value
        409
    """

    BAD_REQUEST = 400
    """The request refers to something that cannot be used (draft review,
    unknown game id, following yourself)."""

    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    """Uniqueness: second review of a game, second like, taken username."""

    UNMAPPED = 500
    """A handler error the router has no entry for."""


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Handler failure ready to be rendered as a problem document.

    Attributes:
        code: Failure category
        message: The handler's message constant, sent as ``detail``
        domain_error: Field-level error when the failure points at one
            request field (e.g. ``developer_id`` of an unknown developer)

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.BAD_REQUEST,
        ...     message="Game not found",
        ...     domain_error=ValidationError(
        ...         code=ErrorCode.INVALID_REFERENCE,
        ...         message="Game not found",
        ...         field="game_id",
        ...     ),
        ... )
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
