"""Domain Events Registry - Single Source of Truth.

Catalogs every domain event with its metadata. Used for:
- Container wiring (automated subscription)
- Validation tests (every required handler method exists)

Handler method names are derived from the metadata:
    - 3-state workflows: ``handle_{workflow_name}_{phase}``
    - Operational (single-state) events: ``handle_{workflow_name}``

Adding new events:
1. Define event dataclass in the appropriate *_events.py file
2. Add entry to EVENT_REGISTRY below
3. Run tests - they list the handler methods that are missing
"""

from dataclasses import dataclass
from enum import Enum

from src.domain.events.auth_events import (
    AuthTokenRefreshAttempted,
    AuthTokenRefreshFailed,
    AuthTokenRefreshSucceeded,
    PasswordResetConfirmAttempted,
    PasswordResetConfirmFailed,
    PasswordResetConfirmSucceeded,
    PasswordResetRequestAttempted,
    PasswordResetRequestFailed,
    PasswordResetRequestSucceeded,
    UserLoginAttempted,
    UserLoginFailed,
    UserLoginSucceeded,
    UserLogoutSucceeded,
    UserPasswordChangeAttempted,
    UserPasswordChangeFailed,
    UserPasswordChangeSucceeded,
    UserRegistrationAttempted,
    UserRegistrationFailed,
    UserRegistrationSucceeded,
)
from src.domain.events.base_event import DomainEvent
from src.domain.events.social_events import (
    CommentAdded,
    ReviewDeleted,
    ReviewLiked,
    ReviewPublished,
    UserFollowed,
    UserUnfollowed,
)


class EventCategory(Enum):
    """Event categories for organization and filtering."""

    AUTHENTICATION = "authentication"
    SOCIAL = "social"


class WorkflowPhase(Enum):
    """3-state workflow phases for ATTEMPT → OUTCOME pattern."""

    ATTEMPTED = "attempted"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    OPERATIONAL = "operational"  # Single-state fact events


@dataclass(frozen=True)
class EventMetadata:
    """Metadata for a domain event.

    Attributes:
        event_class: The event dataclass.
        category: Event category.
        workflow_name: Name of workflow (e.g., "user_registration").
        phase: Workflow phase.
        requires_logging: LoggingEventHandler handles this event.
        requires_email: EmailEventHandler handles this event.
        requires_notification: NotificationEventHandler handles this event.
    """

    event_class: type[DomainEvent]
    category: EventCategory
    workflow_name: str
    phase: WorkflowPhase
    requires_logging: bool = True  # Default: all events logged
    requires_email: bool = False
    requires_notification: bool = False

    @property
    def handler_method_name(self) -> str:
        if self.phase is WorkflowPhase.OPERATIONAL:
            return f"handle_{self.workflow_name}"
        return f"handle_{self.workflow_name}_{self.phase.value}"


def _workflow(
    workflow_name: str,
    attempted: type[DomainEvent],
    succeeded: type[DomainEvent],
    failed: type[DomainEvent],
    *,
    email_on_success: bool = False,
) -> list[EventMetadata]:
    return [
        EventMetadata(
            event_class=attempted,
            category=EventCategory.AUTHENTICATION,
            workflow_name=workflow_name,
            phase=WorkflowPhase.ATTEMPTED,
        ),
        EventMetadata(
            event_class=succeeded,
            category=EventCategory.AUTHENTICATION,
            workflow_name=workflow_name,
            phase=WorkflowPhase.SUCCEEDED,
            requires_email=email_on_success,
        ),
        EventMetadata(
            event_class=failed,
            category=EventCategory.AUTHENTICATION,
            workflow_name=workflow_name,
            phase=WorkflowPhase.FAILED,
        ),
    ]


# ═══════════════════════════════════════════════════════════════
# EVENT REGISTRY - Single Source of Truth
# ═══════════════════════════════════════════════════════════════

EVENT_REGISTRY: list[EventMetadata] = [
    # Authentication (3-state workflows)
    *_workflow(
        "user_registration",
        UserRegistrationAttempted,
        UserRegistrationSucceeded,
        UserRegistrationFailed,
    ),
    *_workflow(
        "user_login",
        UserLoginAttempted,
        UserLoginSucceeded,
        UserLoginFailed,
    ),
    *_workflow(
        "auth_token_refresh",
        AuthTokenRefreshAttempted,
        AuthTokenRefreshSucceeded,
        AuthTokenRefreshFailed,
    ),
    *_workflow(
        "user_password_change",
        UserPasswordChangeAttempted,
        UserPasswordChangeSucceeded,
        UserPasswordChangeFailed,
        email_on_success=True,
    ),
    *_workflow(
        "password_reset_request",
        PasswordResetRequestAttempted,
        PasswordResetRequestSucceeded,
        PasswordResetRequestFailed,
        email_on_success=True,
    ),
    *_workflow(
        "password_reset_confirm",
        PasswordResetConfirmAttempted,
        PasswordResetConfirmSucceeded,
        PasswordResetConfirmFailed,
        email_on_success=True,
    ),
    # Logout never fails from the client's point of view
    EventMetadata(
        event_class=UserLogoutSucceeded,
        category=EventCategory.AUTHENTICATION,
        workflow_name="user_logout",
        phase=WorkflowPhase.SUCCEEDED,
    ),
    # Social (operational fact events)
    EventMetadata(
        event_class=UserFollowed,
        category=EventCategory.SOCIAL,
        workflow_name="user_followed",
        phase=WorkflowPhase.OPERATIONAL,
        requires_notification=True,
    ),
    EventMetadata(
        event_class=UserUnfollowed,
        category=EventCategory.SOCIAL,
        workflow_name="user_unfollowed",
        phase=WorkflowPhase.OPERATIONAL,
    ),
    EventMetadata(
        event_class=ReviewPublished,
        category=EventCategory.SOCIAL,
        workflow_name="review_published",
        phase=WorkflowPhase.OPERATIONAL,
    ),
    EventMetadata(
        event_class=ReviewDeleted,
        category=EventCategory.SOCIAL,
        workflow_name="review_deleted",
        phase=WorkflowPhase.OPERATIONAL,
    ),
    EventMetadata(
        event_class=ReviewLiked,
        category=EventCategory.SOCIAL,
        workflow_name="review_liked",
        phase=WorkflowPhase.OPERATIONAL,
        requires_notification=True,
    ),
    EventMetadata(
        event_class=CommentAdded,
        category=EventCategory.SOCIAL,
        workflow_name="comment_added",
        phase=WorkflowPhase.OPERATIONAL,
        requires_notification=True,
    ),
]


def get_all_events() -> list[type[DomainEvent]]:
    """All registered event classes."""
    return [metadata.event_class for metadata in EVENT_REGISTRY]


def get_events_requiring_handler(handler_type: str) -> list[EventMetadata]:
    """Registry entries requiring a handler type.

    Args:
        handler_type: One of "logging", "email", "notification".

    Raises:
        ValueError: If handler_type is unknown.
    """
    flags = {
        "logging": "requires_logging",
        "email": "requires_email",
        "notification": "requires_notification",
    }
    if handler_type not in flags:
        raise ValueError(f"Unknown handler type: {handler_type}")
    return [m for m in EVENT_REGISTRY if getattr(m, flags[handler_type])]
