"""PlanStore — owns the database engine and the ports built on it.

The store is the single dependency the CLI context hands to services.
Opening a store on a missing database creates it by running every
migration, so fresh databases never need ``upgrade``. Existing files are
opened as they are; ``mealctl upgrade`` (or ``init``) migrates them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mealctl.infrastructure.database.engine import create_db_engine, init_database
from mealctl.infrastructure.ids import UuidIdGenerator
from mealctl.infrastructure.repositories.meal_plans import SqlMealPlanRepository

if TYPE_CHECKING:
    from pathlib import Path

    from sqlalchemy.engine import Engine

    from mealctl.domain.ids import IdGenerator

logger = logging.getLogger(__name__)


class PlanStore:
    """Database-backed home for meal plans."""

    def __init__(self, db_path: Path, *, id_generator: IdGenerator | None = None) -> None:
        self.db_path = db_path
        created = not db_path.exists()
        self._engine = init_database(db_path) if created else create_db_engine(db_path)
        if created:
            logger.info("Created meal plan database at %s", db_path)
        self.repository = SqlMealPlanRepository(self._engine)
        self.id_generator: IdGenerator = id_generator or UuidIdGenerator()

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def backup_dir(self) -> Path:
        return self.db_path.parent / "backups"

    def close(self) -> None:
        """Dispose the engine and its pooled connections."""
        self._engine.dispose()
