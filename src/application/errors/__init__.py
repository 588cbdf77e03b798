"""Application layer errors.

Exports:
    ApplicationError: Handler failure with its category
    ApplicationErrorCode: Failure category, valued by its HTTP status
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
]
