"""SQLAlchemy table definitions for UniFlow.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, Index, Integer, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USER PROFILES TABLE (keyed by identity provider account id)
# ============================================================================
user_profiles_table = Table(
    "user_profiles",
    metadata,
    Column("id", String(128), primary_key=True),  # Firebase uid
    Column("display_name", String(100), nullable=True),
    Column("email", String(320), nullable=True),
    Column("photo_url", Text, nullable=True),
    Column("university", String(255), nullable=True),
    Column("major", String(255), nullable=True),
    Column("graduation_year", Integer, nullable=True),
    Column("bio", String(500), nullable=True),
    Column("extensions", JSONB, nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_user_profiles_email", user_profiles_table.c.email)

# ============================================================================
# SETUP TOKENS TABLE (password setup link ledger)
# ============================================================================
setup_tokens_table = Table(
    "setup_tokens",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("email", Text, nullable=False),
    Column("token_hash", String(64), nullable=False, unique=True),  # sha256 hex
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("consumed_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_setup_tokens_email", setup_tokens_table.c.email)
