"""Base class for errors that travel as data.

DomainError does not inherit from Exception. It is attached to an
ApplicationError when a failure can be pinned to a specific input field, so
the Problem Details response can list it under ``errors``.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable error message.
        details: Optional debugging context.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
