"""SQLAlchemy table definitions for Fritter.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("username", String(255), nullable=False),
    Column("password_hash", String(255), nullable=False),
    Column(
        "date_joined", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Usernames are unique regardless of case
Index("uq_users_username_lower", func.lower(users_table.c.username), unique=True)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(255), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# FREETS TABLE
# ============================================================================
freets_table = Table(
    "freets",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column(
        "date_created", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "date_modified",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
)

Index("idx_freets_author_id", freets_table.c.author_id)
Index("idx_freets_date_modified", freets_table.c.date_modified.desc())

# ============================================================================
# FREET_TAGS TABLE (junction table for many-to-many relationship)
# ============================================================================
freet_tags_table = Table(
    "freet_tags",
    metadata,
    Column(
        "freet_id", UUID, ForeignKey("freets.id", ondelete="CASCADE"), primary_key=True
    ),
    Column(
        "tag_id", UUID, ForeignKey("tags.id", ondelete="RESTRICT"), primary_key=True
    ),
)

Index("idx_freet_tags_tag_id", freet_tags_table.c.tag_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "freet_id", UUID, ForeignKey("freets.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "issuer_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("credible", Boolean, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("freet_id", "issuer_id", name="uq_vote_freet_issuer"),
)

Index("idx_votes_issuer_id", votes_table.c.issuer_id)

# ============================================================================
# REFERENCE_LINKS TABLE
# ============================================================================
reference_links_table = Table(
    "reference_links",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "freet_id", UUID, ForeignKey("freets.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "issuer_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("link", Text, nullable=False),
    Column(
        "date_created", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_reference_links_freet_id", reference_links_table.c.freet_id)
Index("idx_reference_links_issuer_id", reference_links_table.c.issuer_id)

# ============================================================================
# FOLLOWS TABLE
# ============================================================================
# target_id points at users.id or tags.id depending on target_kind, so it
# carries no foreign key. User targets are removed by the account cascade.
follows_table = Table(
    "follows",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "follower_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("target_kind", String(10), nullable=False),  # 'User' or 'Tag'
    Column("target_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "follower_id", "target_kind", "target_id", name="uq_follow_follower_target"
    ),
)

Index("idx_follows_target", follows_table.c.target_kind, follows_table.c.target_id)

# ============================================================================
# FILTERS TABLE
# ============================================================================
filters_table = Table(
    "filters",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "owner_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("name", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("owner_id", "name", name="uq_filter_owner_name"),
)

filter_users_table = Table(
    "filter_users",
    metadata,
    Column(
        "filter_id", UUID, ForeignKey("filters.id", ondelete="CASCADE"), primary_key=True
    ),
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    ),
)

filter_tags_table = Table(
    "filter_tags",
    metadata,
    Column(
        "filter_id", UUID, ForeignKey("filters.id", ondelete="CASCADE"), primary_key=True
    ),
    Column(
        "tag_id", UUID, ForeignKey("tags.id", ondelete="RESTRICT"), primary_key=True
    ),
)
