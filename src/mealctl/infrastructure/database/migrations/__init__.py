"""Alembic wiring for the meal plan database.

There is no ``alembic.ini``: the config is built in code, and callers
that already hold an engine hand its connection to ``env.py`` through
``Config.attributes`` so migrations run on the same SQLite file handle.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from alembic import command
from alembic.config import Config

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

SCRIPT_LOCATION = Path(__file__).parent


def build_config(db_url: str) -> Config:
    """Alembic config for *db_url*, without a bound connection."""
    cfg = Config()
    cfg.set_main_option("script_location", str(SCRIPT_LOCATION))
    cfg.set_main_option("sqlalchemy.url", db_url)
    return cfg


@contextmanager
def bound_config(engine: Engine) -> Iterator[Config]:
    """Alembic config whose migrations run in one transaction on *engine*."""
    with engine.begin() as conn:
        cfg = build_config(engine.url.render_as_string(hide_password=False))
        cfg.attributes["connection"] = conn
        yield cfg


def upgrade_head(engine: Engine) -> None:
    """Build or migrate the schema on *engine* up to the newest revision."""
    with bound_config(engine) as cfg:
        command.upgrade(cfg, "head")
