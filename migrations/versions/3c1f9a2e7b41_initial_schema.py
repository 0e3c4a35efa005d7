"""initial_schema

Create the schema for ChildGuard:
- Users (pending/approved moderation, single active password reset secret)
- Reports (child abuse incident reports with evidence attachments)
- Articles (awareness content)

Revision ID: 3c1f9a2e7b41
Revises:
Create Date: 2025-11-02 10:12:44.512309

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a2e7b41"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Enable required extensions
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),  # bcrypt
        sa.Column("role", sa.String(20), nullable=False, server_default="user"),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("avatar", sa.Text(), nullable=True),
        sa.Column("identity_document", sa.Text(), nullable=True),  # base64
        sa.Column("selfie_image", sa.Text(), nullable=True),  # base64
        sa.Column("reset_secret", sa.String(255), nullable=True),
        sa.Column("reset_scheme", sa.String(20), nullable=True),  # 'token', 'code'
        sa.Column("reset_expires_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.UniqueConstraint("phone", name="uq_users_phone"),
        sa.CheckConstraint(
            "status IN ('pending', 'approved')", name="check_user_status"
        ),
        sa.CheckConstraint("role IN ('user', 'admin')", name="check_user_role"),
        sa.CheckConstraint(
            "reset_scheme IS NULL OR reset_scheme IN ('token', 'code')",
            name="check_reset_scheme",
        ),
    )
    op.create_index(
        "idx_users_reset_secret", "users", ["reset_scheme", "reset_secret"]
    )

    # ========================================================================
    # REPORTS table
    # ========================================================================
    op.create_table(
        "reports",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("abuser_name", sa.Text(), nullable=True),
        sa.Column("abuser_gender", sa.String(50), nullable=True),
        sa.Column("abuser_age", sa.String(50), nullable=True),
        sa.Column("relationship", sa.Text(), nullable=True),
        sa.Column("nature_of_abuse", sa.Text(), nullable=True),
        sa.Column("description_of_incident", sa.Text(), nullable=True),
        sa.Column("location", sa.Text(), nullable=True),
        sa.Column("reporter_name", sa.Text(), nullable=True),
        sa.Column("reporter_phone", sa.String(50), nullable=True),
        sa.Column("victim_name", sa.Text(), nullable=True),
        sa.Column("victim_age", sa.String(50), nullable=True),
        sa.Column("victim_gender", sa.String(50), nullable=True),
        sa.Column("description_of_victim", sa.Text(), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column(
            "date",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "evidence",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_reports_date", "reports", [sa.text("date DESC")])

    # ========================================================================
    # ARTICLES table
    # ========================================================================
    op.create_table(
        "articles",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("thumbnail", sa.Text(), nullable=True),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
    )
    op.create_index(
        "idx_articles_created_at", "articles", [sa.text("created_at DESC")]
    )

    # Trigger function to update updated_at timestamp
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    op.execute("""
        CREATE TRIGGER update_users_updated_at
        BEFORE UPDATE ON users
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
    """)

    op.execute("""
        CREATE TRIGGER update_articles_updated_at
        BEFORE UPDATE ON articles
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
    """)


def downgrade() -> None:
    """Downgrade schema."""
    # Drop triggers
    op.execute("DROP TRIGGER IF EXISTS update_articles_updated_at ON articles")
    op.execute("DROP TRIGGER IF EXISTS update_users_updated_at ON users")

    # Drop trigger functions
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    # Drop tables (in reverse order of dependencies)
    op.drop_index("idx_articles_created_at", table_name="articles")
    op.drop_table("articles")
    op.drop_index("idx_reports_date", table_name="reports")
    op.drop_table("reports")
    op.drop_index("idx_users_reset_secret", table_name="users")
    op.drop_table("users")
