"""SQLite engine for the meal plan store.

SQLAlchemy Core (not ORM) is used: the aggregate is rebuilt explicitly
by the repository, so an identity map or unit of work buys nothing.
The schema itself is owned by the Alembic revisions, never by
``metadata.create_all``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from mealctl.infrastructure.database.migrations import upgrade_head

# Concurrent CLI runs wait this long for the writer lock.
BUSY_TIMEOUT_MS = 5000

_PRAGMAS = (
    "PRAGMA journal_mode=WAL",
    "PRAGMA foreign_keys=ON",
    f"PRAGMA busy_timeout={BUSY_TIMEOUT_MS}",
)


def _apply_pragmas(dbapi_conn: Any, _record: Any) -> None:
    cursor = dbapi_conn.cursor()
    try:
        for pragma in _PRAGMAS:
            cursor.execute(pragma)
    finally:
        cursor.close()


def create_db_engine(db_path: Path) -> Engine:
    """Engine for the SQLite file at *db_path*, with pragmas set per connection."""
    engine = create_engine(f"sqlite:///{db_path}")
    event.listen(engine, "connect", _apply_pragmas)
    return engine


def init_database(db_path: Path) -> Engine:
    """Open *db_path* and run every migration up to head.

    Creates the file and its ``backups/`` sibling when missing. Safe to
    call on a database that is already at head.
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    (db_path.parent / "backups").mkdir(exist_ok=True)

    engine = create_db_engine(db_path)
    upgrade_head(engine)
    return engine
