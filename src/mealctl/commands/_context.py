"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy store initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mealctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from mealctl.config.settings import MealSettings
    from mealctl.infrastructure.store import PlanStore
    from mealctl.services.meal_plan import MealPlanService
    from mealctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store is lazily opened on first use so ``--help`` and
    ``--version`` never touch the database.
    """

    def __init__(self, settings: MealSettings) -> None:
        self.settings = settings
        self._store: PlanStore | None = None

        from mealctl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            log_level=settings.log_level,
        )

    @property
    def store(self) -> PlanStore:
        """The plan store (opened lazily on first access)."""
        if self._store is None:
            from mealctl.infrastructure.store import PlanStore

            self._store = PlanStore(self.settings.db_path)
        return self._store

    def meal_plans(self) -> MealPlanService:
        """A MealPlanService wired to the store's repository and ID source."""
        from mealctl.services.meal_plan import MealPlanService

        return MealPlanService(self.store.repository, self.store.id_generator)

    def close(self) -> None:
        if self._store is not None:
            self._store.close()
            self._store = None

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            person_a_name=self.settings.household.person_a_name,
            person_b_name=self.settings.household.person_b_name,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
