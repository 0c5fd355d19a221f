"""User profile with permission override document.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "user_profile",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("role", sa.String(50), nullable=False, server_default="Employee"),
        sa.Column("station", sa.String(100), nullable=False, server_default=""),
        sa.Column("employee_id", sa.String(50), nullable=False, server_default=""),
        sa.Column("phone", sa.String(50), nullable=False, server_default=""),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        # JSON text: page key -> {view, create, ...}; NULL means role template only
        sa.Column("detailed_permissions", sa.Text(), nullable=True),
    )
    op.create_index("ix_user_profile_role", "user_profile", ["role"])
    op.create_index("ix_user_profile_employee_id", "user_profile", ["employee_id"])


def downgrade() -> None:
    op.drop_index("ix_user_profile_employee_id", table_name="user_profile")
    op.drop_index("ix_user_profile_role", table_name="user_profile")
    op.drop_table("user_profile")
