"""initial_schema

Create the UniFlow schema:
- User profiles (keyed by Firebase uid, allow-listed fields + extensions)
- Setup tokens (optional password setup link ledger)

Revision ID: 3c1e2f9a7b40
Revises:
Create Date: 2025-11-02 10:12:44.512210

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1e2f9a7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "user_profiles",
        sa.Column("id", sa.String(128), primary_key=True),
        sa.Column("display_name", sa.String(100), nullable=True),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("photo_url", sa.Text, nullable=True),
        sa.Column("university", sa.String(255), nullable=True),
        sa.Column("major", sa.String(255), nullable=True),
        sa.Column("graduation_year", sa.Integer, nullable=True),
        sa.Column("bio", sa.String(500), nullable=True),
        sa.Column(
            "extensions",
            postgresql.JSONB,
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.CheckConstraint(
            "graduation_year IS NULL OR graduation_year BETWEEN 1900 AND 2100",
            name="ck_user_profiles_graduation_year",
        ),
    )
    op.create_index("idx_user_profiles_email", "user_profiles", ["email"])

    op.create_table(
        "setup_tokens",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("token_hash", sa.String(64), nullable=False, unique=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("expires_at", postgresql.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("consumed_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
    )
    op.create_index("idx_setup_tokens_email", "setup_tokens", ["email"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_setup_tokens_email", table_name="setup_tokens")
    op.drop_table("setup_tokens")
    op.drop_index("idx_user_profiles_email", table_name="user_profiles")
    op.drop_table("user_profiles")
