"""User domain entity.

Pure business logic, no framework dependencies.

Password Reset:
    - reset_token_hash: bcrypt hash of the SHA-256 digest of the issued reset JWT
    - reset_token_expires_at: expiry copied from the JWT ``exp`` claim
    - Issuing a new reset token overwrites both fields, so only the most
      recently issued token can ever match.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.domain.enums import UserRole

# Profile fields a member may change on their own profile
EDITABLE_PROFILE_FIELDS: frozenset[str] = frozenset(
    {
        "display_name",
        "bio",
        "avatar",
        "location",
        "website",
        "is_private",
        "language",
        "timezone",
        "email_notifications",
    }
)


@dataclass
class User:
    """Member of the community.

    Business Rules:
        - Email and username are unique (case-insensitive email)
        - Private profiles expose only public identity to other members
        - At most one password reset token is valid at any time

    Attributes:
        id: Unique user identifier
        email: Normalized (lowercase) email address
        username: Public handle used in profile URLs
        password_hash: Bcrypt hashed password (never plaintext)
        role: Authorization role
        display_name: Optional display name
        bio: Free-form profile text
        avatar: Avatar image URL
        location: Free-form location
        website: Personal website URL
        is_private: Hide profile details from other members
        language: Preferred UI language
        timezone: Preferred timezone
        email_notifications: Opt-in for notification emails
        reset_token_hash: Hash of the outstanding reset token (None if none)
        reset_token_expires_at: Expiry of the outstanding reset token
        created_at: Timestamp when user was created
        updated_at: Timestamp when user was last updated

    Example:
        >>> user = User(id=uuid7(), email="ana@example.com", username="ana",
        ...             password_hash="$2b$12$...")
        >>> user.has_valid_reset_token()
        False
    """

    id: UUID
    email: str
    username: str
    password_hash: str
    role: UserRole = UserRole.USER
    display_name: str | None = None
    bio: str | None = None
    avatar: str | None = None
    location: str | None = None
    website: str | None = None
    is_private: bool = False
    language: str = "en"
    timezone: str = "UTC"
    email_notifications: bool = True
    reset_token_hash: str | None = None
    reset_token_expires_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_admin(self) -> bool:
        """Check whether the user holds the ADMIN role."""
        return self.role == UserRole.ADMIN

    def can_view_full_profile(self, viewer_id: UUID | None) -> bool:
        """Check whether ``viewer_id`` may see bio, reviews and lists.

        Public profiles are fully visible to everyone, including anonymous
        visitors. Private profiles are fully visible only to their owner.
        """
        if not self.is_private:
            return True
        return viewer_id is not None and viewer_id == self.id

    def apply_profile_changes(self, changes: dict[str, object]) -> None:
        """Apply a partial profile update.

        Unknown keys and credential fields are ignored.

        Args:
            changes: Mapping of profile field name to new value.
        """
        for name, value in changes.items():
            if name in EDITABLE_PROFILE_FIELDS:
                setattr(self, name, value)
        self.updated_at = datetime.now(UTC)

    def change_role(self, role: UserRole) -> None:
        self.role = role
        self.updated_at = datetime.now(UTC)

    def change_password_hash(self, password_hash: str) -> None:
        """Replace the password hash and invalidate any pending reset token."""
        self.password_hash = password_hash
        self.clear_reset_token()
        self.updated_at = datetime.now(UTC)

    def set_reset_token(self, token_hash: str, expires_at: datetime) -> None:
        """Record a newly issued reset token, replacing any previous one.

        Args:
            token_hash: Hash of the issued reset token.
            expires_at: When the token stops being valid.
        """
        self.reset_token_hash = token_hash
        self.reset_token_expires_at = expires_at
        self.updated_at = datetime.now(UTC)

    def clear_reset_token(self) -> None:
        """Forget the outstanding reset token (single use)."""
        self.reset_token_hash = None
        self.reset_token_expires_at = None

    def has_valid_reset_token(self) -> bool:
        """Check whether a reset token is outstanding and not yet expired."""
        if self.reset_token_hash is None or self.reset_token_expires_at is None:
            return False
        return datetime.now(UTC) < self.reset_token_expires_at
