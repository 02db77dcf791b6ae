"""SQLite database engine and schema via SQLAlchemy Core."""

from mealctl.infrastructure.database.engine import create_db_engine, init_database
from mealctl.infrastructure.database.schema import meal_plans, metadata

__all__ = [
    "create_db_engine",
    "init_database",
    "meal_plans",
    "metadata",
]
