"""SQLAlchemy table definitions for ChildGuard.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("phone", String(50), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("role", String(20), nullable=False, server_default="user"),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("avatar", Text, nullable=True),
    Column("identity_document", Text, nullable=True),  # base64
    Column("selfie_image", Text, nullable=True),  # base64
    # At most one active recovery secret per user
    Column("reset_secret", String(255), nullable=True),
    Column("reset_scheme", String(20), nullable=True),
    Column("reset_expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("status IN ('pending', 'approved')", name="check_user_status"),
    CheckConstraint("role IN ('user', 'admin')", name="check_user_role"),
    CheckConstraint(
        "reset_scheme IS NULL OR reset_scheme IN ('token', 'code')",
        name="check_reset_scheme",
    ),
)

Index("idx_users_reset_secret", users_table.c.reset_scheme, users_table.c.reset_secret)

# ============================================================================
# REPORTS TABLE
# ============================================================================
reports_table = Table(
    "reports",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("abuser_name", Text, nullable=True),
    Column("abuser_gender", String(50), nullable=True),
    Column("abuser_age", String(50), nullable=True),
    Column("relationship", Text, nullable=True),
    Column("nature_of_abuse", Text, nullable=True),
    Column("description_of_incident", Text, nullable=True),
    Column("location", Text, nullable=True),
    Column("reporter_name", Text, nullable=True),
    Column("reporter_phone", String(50), nullable=True),
    Column("victim_name", Text, nullable=True),
    Column("victim_age", String(50), nullable=True),
    Column("victim_gender", String(50), nullable=True),
    Column("description_of_victim", Text, nullable=True),
    Column("latitude", Float, nullable=True),
    Column("longitude", Float, nullable=True),
    Column("date", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
    Column("evidence", JSONB, nullable=False, server_default="[]"),
)

Index("idx_reports_date", reports_table.c.date.desc())

# ============================================================================
# ARTICLES TABLE
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", Text, nullable=False),
    Column("description", Text, nullable=True),
    Column("category", String(100), nullable=True),
    Column("thumbnail", Text, nullable=True),
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_articles_created_at", articles_table.c.created_at.desc())
