"""setup_token_email_text

Store setup token emails as TEXT so any address a setup link was sent to
can be recorded.

Revision ID: 8d4b0c6e2a91
Revises: 3c1e2f9a7b40
Create Date: 2026-10-19 09:41:07.118304

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "8d4b0c6e2a91"
down_revision: Union[str, Sequence[str], None] = "3c1e2f9a7b40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.alter_column(
        "setup_tokens", "email", type_=sa.Text(), existing_type=sa.String(320)
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.alter_column(
        "setup_tokens", "email", type_=sa.String(320), existing_type=sa.Text()
    )
