"""Alembic environment for mealctl migrations (online mode only)."""

from __future__ import annotations

from alembic import context
from sqlalchemy import create_engine, pool
from sqlalchemy.engine import Connection

from mealctl.infrastructure.database.schema import metadata


def _migrate(connection: Connection) -> None:
    # Batch mode lets SQLite ALTERs be replayed as table copies.
    context.configure(connection=connection, target_metadata=metadata, render_as_batch=True)
    with context.begin_transaction():
        context.run_migrations()


shared = context.config.attributes.get("connection")
if shared is not None:
    _migrate(shared)
else:
    url = context.config.get_main_option("sqlalchemy.url")
    if url is None:
        raise RuntimeError("sqlalchemy.url must be set in Alembic config")
    with create_engine(url, poolclass=pool.NullPool).begin() as connection:
        _migrate(connection)
