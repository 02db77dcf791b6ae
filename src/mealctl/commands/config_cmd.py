"""Command: show the effective configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mealctl.commands._base import MealCommand
from mealctl.services.result import ServiceResult

if TYPE_CHECKING:
    from mealctl.commands._context import AppContext


@click.command(
    "config",
    cls=MealCommand,
    examples="""\
  mealctl config
  MEALCTL_HOUSEHOLD__PERSON_A_NAME=Mika mealctl --json config""",
)
@click.pass_obj
def config_cmd(app: AppContext) -> None:
    """Show settings after merging flags, env vars and mealctl.toml."""
    settings = app.settings
    app.emit(
        ServiceResult(
            ok=True,
            op="config",
            data={
                "config_path": str(settings.config_path) if settings.config_path else None,
                "db_path": str(settings.db_path),
                "household": settings.household.model_dump(),
                "notification": settings.notification.model_dump(),
            },
        )
    )
