"""add method index to submissions

Revision ID: a41c7d2e9b10
Revises: base_0001
Create Date: 2026-10-18 10:03:57.402611

"""

from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a41c7d2e9b10"
down_revision: Union[str, Sequence[str], None] = "base_0001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_index("ix_submissions_method", "submissions", ["method"])


def downgrade() -> None:
    op.drop_index("ix_submissions_method", table_name="submissions")
