"""Machine-readable error codes carried by DomainError.

Codes end up in the ``errors[].code`` field of Problem Details responses.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes."""

    VALIDATION_FAILED = "validation_failed"
    INVALID_REFERENCE = "invalid_reference"
