"""Domain errors package.

Usage:
    from src.domain.errors import AuthenticationError, DuplicateRecordError
"""

from src.domain.errors.authentication_error import AuthenticationError
from src.domain.errors.duplicate_record_error import DuplicateRecordError

__all__ = ["AuthenticationError", "DuplicateRecordError"]
