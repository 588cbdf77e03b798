"""initial_schema

Revision ID: 0a1f3c5e7b21
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0a1f3c5e7b21"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column("id", sa.Uuid(), nullable=False)


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.func.now(),
        nullable=False,
    )


def _updated_at() -> sa.Column:
    return sa.Column(
        "updated_at",
        sa.DateTime(timezone=True),
        server_default=sa.func.now(),
        nullable=False,
    )


def upgrade() -> None:
    """Create users, sessions, catalog, reviews, social and notification tables."""
    # Users and refresh-token sessions
    op.create_table(
        "users",
        _id(),
        _created_at(),
        _updated_at(),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="User email address (unique, lowercase)",
        ),
        sa.Column(
            "username",
            sa.String(length=30),
            nullable=False,
            comment="Public handle used in profile URLs (unique)",
        ),
        sa.Column(
            "password_hash",
            sa.String(length=255),
            nullable=False,
            comment="Bcrypt hashed password",
        ),
        sa.Column(
            "role",
            sa.String(length=20),
            nullable=False,
            comment="Authorization role (user, moderator, admin)",
        ),
        sa.Column("display_name", sa.String(length=100), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("avatar", sa.String(length=500), nullable=True),
        sa.Column("location", sa.String(length=100), nullable=True),
        sa.Column("website", sa.String(length=255), nullable=True),
        sa.Column(
            "is_private",
            sa.Boolean(),
            nullable=False,
            comment="Hide profile details from other members",
        ),
        sa.Column("language", sa.String(length=10), nullable=False),
        sa.Column("timezone", sa.String(length=50), nullable=False),
        sa.Column("email_notifications", sa.Boolean(), nullable=False),
        sa.Column(
            "reset_token_hash",
            sa.String(length=255),
            nullable=True,
            comment="Bcrypt hash of SHA-256 digest of the outstanding reset token",
        ),
        sa.Column(
            "reset_token_expires_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Expiry of the outstanding reset token",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "user_sessions",
        _id(),
        _created_at(),
        _updated_at(),
        sa.Column(
            "user_id",
            sa.Uuid(),
            nullable=False,
            comment="User who owns this session",
        ),
        sa.Column(
            "lookup_digest",
            sa.String(length=64),
            nullable=False,
            comment="SHA-256 hex digest of the refresh token",
        ),
        sa.Column(
            "token_hash",
            sa.String(length=255),
            nullable=False,
            comment="Bcrypt hashed refresh token (NEVER plaintext)",
        ),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("revoked_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "revoked_reason",
            sa.Text(),
            nullable=True,
            comment="rotated, logout, password_change, password_reset",
        ),
        sa.Column("last_used_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("user_agent", sa.String(length=500), nullable=True),
        sa.Column("ip_address", sa.String(length=45), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_user_sessions_user_id", "user_sessions", ["user_id"])
    op.create_index(
        "ix_user_sessions_lookup_digest",
        "user_sessions",
        ["lookup_digest"],
        unique=True,
    )
    op.create_index("ix_user_sessions_expires_at", "user_sessions", ["expires_at"])

    # Catalog references
    op.create_table(
        "developers",
        _id(),
        _created_at(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("slug", sa.String(length=120), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("website", sa.String(length=255), nullable=True),
        sa.Column("logo", sa.String(length=500), nullable=True),
        sa.Column("country", sa.String(length=100), nullable=True),
        sa.Column("founded_year", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index("ix_developers_slug", "developers", ["slug"], unique=True)

    op.create_table(
        "publishers",
        _id(),
        _created_at(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("slug", sa.String(length=120), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("website", sa.String(length=255), nullable=True),
        sa.Column("logo", sa.String(length=500), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index("ix_publishers_slug", "publishers", ["slug"], unique=True)

    op.create_table(
        "genres",
        _id(),
        _created_at(),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("slug", sa.String(length=60), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index("ix_genres_slug", "genres", ["slug"], unique=True)

    op.create_table(
        "platforms",
        _id(),
        _created_at(),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("slug", sa.String(length=60), nullable=False),
        sa.Column("abbreviation", sa.String(length=20), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index("ix_platforms_slug", "platforms", ["slug"], unique=True)

    # Games
    op.create_table(
        "games",
        _id(),
        _created_at(),
        _updated_at(),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column(
            "slug",
            sa.String(length=220),
            nullable=False,
            comment="URL-safe identifier derived from title (unique)",
        ),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("summary", sa.String(length=500), nullable=True),
        sa.Column("release_date", sa.Date(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("cover_image", sa.String(length=500), nullable=True),
        sa.Column("developer_id", sa.Uuid(), nullable=True),
        sa.Column("publisher_id", sa.Uuid(), nullable=True),
        sa.Column(
            "average_rating",
            sa.Float(),
            nullable=False,
            comment="Mean rating of published reviews (0 when none)",
        ),
        sa.Column(
            "review_count",
            sa.Integer(),
            nullable=False,
            comment="Number of published reviews",
        ),
        sa.ForeignKeyConstraint(
            ["developer_id"], ["developers.id"], ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(
            ["publisher_id"], ["publishers.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_games_title", "games", ["title"])
    op.create_index("ix_games_slug", "games", ["slug"], unique=True)
    op.create_index("ix_games_status", "games", ["status"])
    op.create_index("ix_games_developer_id", "games", ["developer_id"])
    op.create_index("ix_games_publisher_id", "games", ["publisher_id"])

    op.create_table(
        "game_genres",
        sa.Column("game_id", sa.Uuid(), nullable=False),
        sa.Column("genre_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["game_id"], ["games.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["genre_id"], ["genres.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("game_id", "genre_id"),
    )
    op.create_table(
        "game_platforms",
        sa.Column("game_id", sa.Uuid(), nullable=False),
        sa.Column("platform_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["game_id"], ["games.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["platform_id"], ["platforms.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("game_id", "platform_id"),
    )

    # Reviews, likes and comments
    op.create_table(
        "reviews",
        _id(),
        _created_at(),
        _updated_at(),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("game_id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=100), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "rating",
            sa.Float(),
            nullable=False,
            comment="0-10 with one decimal place",
        ),
        sa.Column("is_published", sa.Boolean(), nullable=False),
        sa.Column("is_spoiler", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["game_id"], ["games.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "game_id", name="uq_reviews_user_game"),
    )
    op.create_index("ix_reviews_user_id", "reviews", ["user_id"])
    op.create_index("ix_reviews_game_id", "reviews", ["game_id"])
    op.create_index("ix_reviews_is_published", "reviews", ["is_published"])

    op.create_table(
        "review_likes",
        _id(),
        _created_at(),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("review_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["review_id"], ["reviews.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "review_id", name="uq_review_likes_user_review"
        ),
    )
    op.create_index("ix_review_likes_user_id", "review_likes", ["user_id"])
    op.create_index("ix_review_likes_review_id", "review_likes", ["review_id"])

    op.create_table(
        "comments",
        _id(),
        _created_at(),
        _updated_at(),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("review_id", sa.Uuid(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["review_id"], ["reviews.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_comments_user_id", "comments", ["user_id"])
    op.create_index("ix_comments_review_id", "comments", ["review_id"])

    # Social graph
    op.create_table(
        "follows",
        _id(),
        _created_at(),
        sa.Column("follower_id", sa.Uuid(), nullable=False),
        sa.Column("following_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["follower_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["following_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("follower_id", "following_id", name="uq_follows_pair"),
        sa.CheckConstraint(
            "follower_id <> following_id", name="ck_follows_not_self"
        ),
    )
    op.create_index("ix_follows_follower_id", "follows", ["follower_id"])
    op.create_index("ix_follows_following_id", "follows", ["following_id"])

    # Game lists
    op.create_table(
        "game_lists",
        _id(),
        _created_at(),
        _updated_at(),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_game_lists_user_id", "game_lists", ["user_id"])

    op.create_table(
        "game_list_entries",
        _id(),
        _created_at(),
        sa.Column("list_id", sa.Uuid(), nullable=False),
        sa.Column("game_id", sa.Uuid(), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("notes", sa.String(length=500), nullable=True),
        sa.ForeignKeyConstraint(["list_id"], ["game_lists.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["game_id"], ["games.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "list_id", "game_id", name="uq_game_list_entries_list_game"
        ),
    )
    op.create_index("ix_game_list_entries_list_id", "game_list_entries", ["list_id"])
    op.create_index("ix_game_list_entries_game_id", "game_list_entries", ["game_id"])

    # Notifications
    op.create_table(
        "notifications",
        _id(),
        _created_at(),
        sa.Column("user_id", sa.Uuid(), nullable=False, comment="Recipient"),
        sa.Column(
            "type",
            sa.String(length=20),
            nullable=False,
            comment="follow, like, comment, review_reply, system",
        ),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("is_read", sa.Boolean(), nullable=False),
        sa.Column(
            "data",
            sa.JSON(),
            nullable=False,
            comment="Event payload used by clients to build links",
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_notifications_user_id", "notifications", ["user_id"])
    op.create_index("ix_notifications_is_read", "notifications", ["is_read"])


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_table("notifications")
    op.drop_table("game_list_entries")
    op.drop_table("game_lists")
    op.drop_table("follows")
    op.drop_table("comments")
    op.drop_table("review_likes")
    op.drop_table("reviews")
    op.drop_table("game_platforms")
    op.drop_table("game_genres")
    op.drop_table("games")
    op.drop_table("platforms")
    op.drop_table("genres")
    op.drop_table("publishers")
    op.drop_table("developers")
    op.drop_table("user_sessions")
    op.drop_table("users")
