"""Command: database schema migration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mealctl.commands._base import MealCommand
from mealctl.services.upgrade import UpgradeService

if TYPE_CHECKING:
    from mealctl.commands._context import AppContext


@click.command(
    cls=MealCommand,
    examples="""\
  mealctl upgrade --check
  mealctl upgrade
  mealctl --json -v upgrade""",
)
@click.option("--check", "check_only", is_flag=True, help="List pending revisions and exit.")
@click.pass_obj
def upgrade(app: AppContext, check_only: bool) -> None:
    """Bring the database schema up to date.

    A timestamped copy of the database goes to the backups directory
    before anything is migrated.
    """
    service = UpgradeService(app.store)
    if check_only:
        app.emit(service.check_pending())
        return
    app.emit(service.apply())
