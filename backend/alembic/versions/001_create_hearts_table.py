"""Create hearts table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `hearts` table holding every marker dropped on the map.
How:   Portable column types (Uuid, DateTime with timezone) so the same
       migration runs on PostgreSQL and SQLite.

Rollback: downgrade() drops the table (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

HEART_TYPES = ("redHeart", "silverHeart", "yellowHeart")


def upgrade() -> None:
    op.create_table(
        "hearts",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "type",
            sa.Enum(
                *HEART_TYPES,
                name="heart_type",
                native_enum=False,
                create_constraint=True,
                length=20,
            ),
            nullable=False,
        ),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False, server_default=sa.text("''")),
        sa.Column(
            "country_name",
            sa.String(255),
            nullable=False,
            server_default=sa.text("'Unknown'"),
        ),
        sa.Column(
            "country_code",
            sa.String(2),
            nullable=False,
            server_default=sa.text("'XX'"),
        ),
        sa.Column(
            "timestamp",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # Listing is always newest first
    op.create_index(
        "idx_hearts_timestamp",
        "hearts",
        [sa.text("timestamp DESC")],
    )


def downgrade() -> None:
    op.drop_index("idx_hearts_timestamp", table_name="hearts")
    op.drop_table("hearts")
