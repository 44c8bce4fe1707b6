"""create access and user_access

Revision ID: 5d1f0c2a8b7e
Revises:
Create Date: 2019-03-08 17:15:03.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5d1f0c2a8b7e"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# BIGINT ids; SQLite only auto-assigns INTEGER PRIMARY KEY columns
ID_TYPE = sa.BigInteger().with_variant(sa.Integer(), "sqlite")

ACCESS_NAMES = [
    "SearchUser",
    "GetUser",
    "CreateUser",
    "UpdateUser",
    "DeleteUser",
]


def upgrade() -> None:
    """Create access (with its default rows) and user_access.

    users is owned by another system and must already exist.
    """
    access = op.create_table(
        "access",
        sa.Column("id", ID_TYPE, primary_key=True, autoincrement=True, nullable=False),
        sa.Column("access_name", sa.String(255), nullable=False),
    )

    op.bulk_insert(access, [{"access_name": name} for name in ACCESS_NAMES])

    op.create_table(
        "user_access",
        sa.Column("permission_id", ID_TYPE, primary_key=True, autoincrement=True, nullable=False),
        sa.Column("access_id", ID_TYPE, nullable=False),
        sa.Column("user_id", ID_TYPE, nullable=False),
        sa.Column("permission_level", sa.String(255), nullable=True),
        sa.ForeignKeyConstraint(["access_id"], ["access.id"], ondelete="CASCADE", onupdate="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE", onupdate="CASCADE"),
    )


def downgrade() -> None:
    """Drop user_access and access."""
    op.drop_table("user_access")
    op.drop_table("access")
