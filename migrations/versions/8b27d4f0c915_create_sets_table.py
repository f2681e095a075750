"""create sets table

Revision ID: 8b27d4f0c915
Revises: 3f1a9c2e7b40
Create Date: 2025-09-02 18:40:03.551870
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "8b27d4f0c915"
down_revision: Union[str, Sequence[str], None] = "3f1a9c2e7b40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "sets",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("exercise_id", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["exercise_id"],
            ["exercises.id"],
            ondelete="CASCADE",
        ),
    )

    op.create_index(
        "ix_sets_exercise_id",
        "sets",
        ["exercise_id"],
    )


def downgrade() -> None:
    op.execute("DROP INDEX IF EXISTS ix_sets_exercise_id")
    op.execute("DROP TABLE IF EXISTS sets")
