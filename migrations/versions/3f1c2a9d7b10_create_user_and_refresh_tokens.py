"""create user and refresh tokens

Revision ID: 3f1c2a9d7b10
Revises: 
Create Date: 2026-10-19 09:12:41.503118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "mst_user",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("user_name", sa.String(), nullable=True),
    )
    op.create_index("ix_mst_user_email", "mst_user", ["email"], unique=True)

    op.create_table(
        "trn_refresh_tokens",
        sa.Column("token", sa.String(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("mst_user.id"), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_trn_refresh_tokens_user_id", "trn_refresh_tokens", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_trn_refresh_tokens_user_id", table_name="trn_refresh_tokens")
    op.drop_table("trn_refresh_tokens")
    op.drop_index("ix_mst_user_email", table_name="mst_user")
    op.drop_table("mst_user")
