"""UpgradeService — bring the meal plan schema to the newest revision.

Pipeline: CHECK → BACKUP → MIGRATE → REPORT

Databases created by :class:`PlanStore` are migrated to head on
creation. A pending revision means a newer mealctl release, an empty
file (the baseline builds the tables), or tables created outside
Alembic, which are stamped rather than rebuilt.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from alembic.util import CommandError
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from mealctl.infrastructure.database.migrations import SCRIPT_LOCATION, bound_config
from mealctl.infrastructure.database.schema import meal_plans
from mealctl.services._helpers import backup_file
from mealctl.services.result import ServiceResult

if TYPE_CHECKING:
    from mealctl.infrastructure.store import PlanStore

logger = logging.getLogger(__name__)

_OP = "upgrade"


class UpgradeService:
    """Reports and applies pending Alembic revisions for one store."""

    def __init__(self, store: PlanStore) -> None:
        self._store = store
        self._scripts = ScriptDirectory(str(SCRIPT_LOCATION))

    def _current_revision(self) -> str | None:
        with self._store.engine.connect() as conn:
            return MigrationContext.configure(conn).get_current_revision()

    def _untracked(self, current: str | None) -> bool:
        """Tables exist but no revision was ever recorded."""
        return current is None and meal_plans.name in inspect(self._store.engine).get_table_names()

    def check_pending(self) -> ServiceResult:
        """List revisions between the database and head, oldest first."""
        try:
            current = self._current_revision()
        except SQLAlchemyError as exc:
            return ServiceResult.failure(_OP, "CHECK_FAILED", f"Failed to check migrations: {exc}")

        head = self._scripts.get_current_head()
        pending: list[dict[str, Any]] = [
            {"revision": rev.revision, "description": rev.doc or ""}
            for rev in self._scripts.iterate_revisions(head, current)
            if rev.revision != current
        ]
        pending.reverse()
        return ServiceResult(
            ok=True,
            op=_OP,
            data={
                "pending_count": len(pending),
                "pending": pending,
                "current": current,
                "head": head,
            },
        )

    def apply(self) -> ServiceResult:
        """Back up the database file, then migrate (or stamp) to head."""
        checked = self.check_pending()
        if not checked.ok:
            return checked

        head = checked.data["head"]
        pending_count = checked.data["pending_count"]
        if pending_count == 0:
            return ServiceResult(
                ok=True,
                op=_OP,
                data={
                    "applied_count": 0,
                    "current": head,
                    "message": "Database is already up to date",
                },
            )

        try:
            backup_path = backup_file(self._store.db_path, self._store.backup_dir)
        except OSError as exc:
            return ServiceResult.failure(_OP, "BACKUP_FAILED", f"Backup failed: {exc}")

        stamp_only = self._untracked(checked.data["current"])
        try:
            with bound_config(self._store.engine) as cfg:
                if stamp_only:
                    command.stamp(cfg, "head")
                else:
                    command.upgrade(cfg, "head")
        except (CommandError, SQLAlchemyError) as exc:
            return ServiceResult.failure(
                _OP,
                "MIGRATION_FAILED",
                f"Migration failed: {exc}. Backup at: {backup_path}",
                backup_path=str(backup_path),
            )

        logger.info(
            "%s %d revision(s) to %s; backup at %s",
            "Stamped" if stamp_only else "Applied",
            pending_count,
            head,
            backup_path,
        )
        return ServiceResult(
            ok=True,
            op=_OP,
            data={
                "applied_count": pending_count,
                "current": head,
                "backup_path": str(backup_path),
            },
        )
