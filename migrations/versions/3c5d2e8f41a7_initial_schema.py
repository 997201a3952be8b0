"""initial_schema

Create the schema for Fritter:
- Users (username unique regardless of case)
- Tags (created on first use, never deleted)
- Freets and their tags
- Credibility votes (one per user per freet) and reference links
- Follows (user -> user or user -> tag)
- Filters (named sets of users and tags, unique name per owner)

Revision ID: 3c5d2e8f41a7
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c5d2e8f41a7"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at(name: str = "created_at") -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        _created_at("date_joined"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "uq_users_username_lower",
        "users",
        [sa.text("lower(username)")],
        unique=True,
    )

    # ========================================================================
    # TAGS table
    # ========================================================================
    op.create_table(
        "tags",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_tag_name"),
    )

    # ========================================================================
    # FREETS table
    # ========================================================================
    op.create_table(
        "freets",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        _created_at("date_created"),
        _created_at("date_modified"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_freets_author_id", "freets", ["author_id"])
    op.create_index(
        "idx_freets_date_modified", "freets", [sa.text("date_modified DESC")]
    )

    # ========================================================================
    # FREET_TAGS junction table
    # ========================================================================
    op.create_table(
        "freet_tags",
        sa.Column("freet_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["freet_id"], ["freets.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("freet_id", "tag_id"),
    )
    op.create_index("idx_freet_tags_tag_id", "freet_tags", ["tag_id"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("freet_id", sa.UUID(), nullable=False),
        sa.Column("issuer_id", sa.UUID(), nullable=False),
        sa.Column("credible", sa.Boolean(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["freet_id"], ["freets.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["issuer_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("freet_id", "issuer_id", name="uq_vote_freet_issuer"),
    )
    op.create_index("idx_votes_issuer_id", "votes", ["issuer_id"])

    # ========================================================================
    # REFERENCE_LINKS table
    # ========================================================================
    op.create_table(
        "reference_links",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("freet_id", sa.UUID(), nullable=False),
        sa.Column("issuer_id", sa.UUID(), nullable=False),
        sa.Column("link", sa.Text(), nullable=False),
        _created_at("date_created"),
        sa.ForeignKeyConstraint(["freet_id"], ["freets.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["issuer_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_reference_links_freet_id", "reference_links", ["freet_id"])
    op.create_index("idx_reference_links_issuer_id", "reference_links", ["issuer_id"])

    # ========================================================================
    # FOLLOWS table
    # ========================================================================
    op.create_table(
        "follows",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("follower_id", sa.UUID(), nullable=False),
        sa.Column("target_kind", sa.String(10), nullable=False),  # 'User' or 'Tag'
        sa.Column("target_id", sa.UUID(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["follower_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "follower_id",
            "target_kind",
            "target_id",
            name="uq_follow_follower_target",
        ),
        sa.CheckConstraint(
            "target_kind IN ('User', 'Tag')", name="ck_follow_target_kind"
        ),
    )
    op.create_index("idx_follows_target", "follows", ["target_kind", "target_id"])

    # ========================================================================
    # FILTERS tables
    # ========================================================================
    op.create_table(
        "filters",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        _created_at(),
        _created_at("updated_at"),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("owner_id", "name", name="uq_filter_owner_name"),
    )
    op.create_table(
        "filter_users",
        sa.Column("filter_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["filter_id"], ["filters.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("filter_id", "user_id"),
    )
    op.create_table(
        "filter_tags",
        sa.Column("filter_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["filter_id"], ["filters.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("filter_id", "tag_id"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("filter_tags")
    op.drop_table("filter_users")
    op.drop_table("filters")
    op.drop_table("follows")
    op.drop_table("reference_links")
    op.drop_table("votes")
    op.drop_table("freet_tags")
    op.drop_table("freets")
    op.drop_table("tags")
    op.drop_table("users")
