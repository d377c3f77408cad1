"""Create the users table, or bring a legacy one up to a usable shape.

Fresh databases get the canonical table. Existing tables keep their id and
name columns; only password_hash, name and the unique email index are added
when missing, so the runtime schema probe finds what login needs.

Revision ID: 20251018000000
Revises:
Create Date: 2025-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20251018000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

EMAIL_INDEX = "users_email_key"


def upgrade() -> None:
    inspector = sa.inspect(op.get_bind())
    if not inspector.has_table("users"):
        op.create_table(
            "users",
            sa.Column("user_id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("email", sa.String(length=255), nullable=False),
            sa.Column("name", sa.Text(), nullable=True),
            sa.Column("full_name", sa.Text(), nullable=True),
            sa.Column("password_hash", sa.Text(), nullable=True),
            sa.Column("aadhaar_key", sa.String(length=64), nullable=True),
            sa.Column(
                "created_at",
                sa.DateTime(timezone=True),
                nullable=True,
                server_default=sa.func.now(),
            ),
            sa.PrimaryKeyConstraint("user_id"),
        )
        op.create_index(EMAIL_INDEX, "users", ["email"], unique=True)
        return

    columns = {c["name"] for c in inspector.get_columns("users")}
    if "password_hash" not in columns:
        op.add_column("users", sa.Column("password_hash", sa.Text(), nullable=True))
    if "name" not in columns and "full_name" not in columns:
        op.add_column("users", sa.Column("name", sa.Text(), nullable=True))

    indexes = {ix["name"] for ix in inspector.get_indexes("users")}
    uniques = {uc["name"] for uc in inspector.get_unique_constraints("users")}
    if EMAIL_INDEX not in indexes and EMAIL_INDEX not in uniques:
        op.create_index(EMAIL_INDEX, "users", ["email"], unique=True)


def downgrade() -> None:
    # Legacy tables predate this revision; only the index is ours to remove.
    op.drop_index(EMAIL_INDEX, table_name="users")
