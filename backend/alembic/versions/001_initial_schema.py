"""Initial schema — employee and orders tables.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_ID = sa.BigInteger().with_variant(sa.Integer, "sqlite")


def upgrade() -> None:
    op.create_table(
        "employee",
        sa.Column("id", _ID, primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("role", sa.String(255), nullable=False),
    )

    op.create_table(
        "orders",
        sa.Column("id", _ID, primary_key=True, autoincrement=True),
        sa.Column("description", sa.String(255), nullable=False),
        sa.Column(
            "status", sa.String(20), nullable=False,
            server_default="IN_PROGRESS",
        ),
    )


def downgrade() -> None:
    op.drop_table("orders")
    op.drop_table("employee")
