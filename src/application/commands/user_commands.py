"""User profile and administration commands."""

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from src.domain.enums import UserRole


@dataclass(frozen=True, kw_only=True)
class UpdateProfile:
    """Partially update the caller's own profile.

    Attributes:
        user_id: Profile owner (from the access token).
        changes: Only the fields present in the request body.
    """

    user_id: UUID
    changes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True)
class ChangeUserRole:
    """Administrator changes a member's role."""

    user_id: UUID
    role: UserRole


@dataclass(frozen=True, kw_only=True)
class DeleteUser:
    """Administrator deletes a member and everything they own."""

    user_id: UUID
