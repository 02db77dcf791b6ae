"""Baseline schema — the meal_plans table.

Revision ID: 001_baseline
Revises: None
Create Date: 2026-09-28

Runs for every new database and for any existing file that has no
revision recorded and no tables yet.
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "001_baseline"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def upgrade() -> None:
    op.create_table(
        "meal_plans",
        sa.Column("id", sa.Text, primary_key=True),
        sa.Column("date", sa.Text, nullable=False),
        sa.Column("meal_type", sa.Text, nullable=False),
        sa.Column("preparation_role", sa.Text, nullable=False),
        sa.Column("participation_a", sa.Text, nullable=False),
        sa.Column("participation_b", sa.Text, nullable=False),
        sa.Column("current_state", sa.Integer, nullable=False),
        sa.Column("created_at", sa.Text, nullable=False),
        sa.Column("updated_at", sa.Text, nullable=False),
        sa.UniqueConstraint("date", "meal_type", name="uq_meal_plans_date_meal_type"),
    )
    op.create_index("ix_meal_plans_date", "meal_plans", ["date"])


def downgrade() -> None:
    op.drop_index("ix_meal_plans_date", table_name="meal_plans")
    op.drop_table("meal_plans")
