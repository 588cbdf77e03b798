"""Common DomainError subclasses shared across resources."""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure tied to a request field.

    Surfaced under ``errors`` in Problem Details responses, e.g. an unknown
    ``developer_id`` on game creation.

    Attributes:
        field: Name of the offending request field.
    """

    field: str | None = None
