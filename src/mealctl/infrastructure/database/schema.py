"""SQLAlchemy Core table definitions for the mealctl database.

Dates are stored as ISO ``YYYY-MM-DD`` text and timestamps as ISO 8601
text, so lexical order matches chronological order.
"""

from __future__ import annotations

from sqlalchemy import Column, Index, Integer, MetaData, Table, Text, UniqueConstraint

metadata = MetaData()

meal_plans = Table(
    "meal_plans",
    metadata,
    Column("id", Text, primary_key=True),
    Column("date", Text, nullable=False),
    Column("meal_type", Text, nullable=False),  # LUNCH | DINNER
    Column("preparation_role", Text, nullable=False),  # PERSON_A | PERSON_B | NONE
    Column("participation_a", Text, nullable=False),
    Column("participation_b", Text, nullable=False),
    Column("current_state", Integer, nullable=False),  # derived, 1-5
    Column("created_at", Text, nullable=False),
    Column("updated_at", Text, nullable=False),
    UniqueConstraint("date", "meal_type", name="uq_meal_plans_date_meal_type"),
)

Index("ix_meal_plans_date", meal_plans.c.date)
