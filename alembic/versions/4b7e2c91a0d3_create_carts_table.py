"""create_carts_table

Revision ID: 4b7e2c91a0d3
Revises: 
Create Date: 2026-10-19 09:12:44.318205

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b7e2c91a0d3'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # items, shipping, billing and workflow hold JSON text
    op.execute("""
        CREATE TABLE carts (
            id VARCHAR(64) PRIMARY KEY,
            anonymous_access_token VARCHAR(64),
            account_id VARCHAR(64),
            shop_id VARCHAR(64),
            items TEXT,
            shipping TEXT,
            billing TEXT,
            workflow TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            version INTEGER NOT NULL DEFAULT 1
        )
    """)

    op.execute("""
        CREATE INDEX idx_carts_anonymous_access_token
        ON carts (anonymous_access_token)
    """)

    op.execute("""
        CREATE INDEX idx_carts_account_id
        ON carts (account_id)
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP INDEX IF EXISTS idx_carts_account_id")
    op.execute("DROP INDEX IF EXISTS idx_carts_anonymous_access_token")
    op.execute("DROP TABLE IF EXISTS carts")
