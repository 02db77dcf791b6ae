"""Command: database initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mealctl.commands._base import MealCommand
from mealctl.services.result import ServiceResult
from mealctl.services.upgrade import UpgradeService

if TYPE_CHECKING:
    from mealctl.commands._context import AppContext


@click.command(
    "init",
    cls=MealCommand,
    examples="""\
  mealctl init
  mealctl -c ~/household/mealctl.toml init""",
)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create the meal plan database, or bring an existing one to head."""
    existed = app.settings.db_path.exists()
    store = app.store
    applied = 0
    if existed:
        migrated = UpgradeService(store).apply()
        if not migrated.ok:
            app.emit(migrated.model_copy(update={"op": "init"}))
            return
        applied = migrated.data["applied_count"]
    app.emit(
        ServiceResult(
            ok=True,
            op="init",
            data={
                "db_path": str(store.db_path),
                "created": not existed,
                "applied_count": applied,
                "plans": store.repository.count(),
            },
        )
    )
