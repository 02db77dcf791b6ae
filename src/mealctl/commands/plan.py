"""Command group: read and change meal plans."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mealctl.commands._base import (
    ATTENDANCE_CHOICE,
    DAY,
    MEAL_CHOICE,
    PERSON_CHOICE,
    MealGroup,
    to_meal_type,
    to_participation,
    to_person,
)
from mealctl.domain.types import MealType, PreparationRole
from mealctl.services._helpers import today, week_from
from mealctl.services.contracts import day_result, plan_result, plans_result
from mealctl.services.result import ServiceResult

if TYPE_CHECKING:
    from datetime import date

    from mealctl.commands._context import AppContext

_PLAN_EXAMPLES = """\
  mealctl plan day today --dinner-cook a
  mealctl plan show tomorrow dinner
  mealctl plan attend today lunch a no
  mealctl plan assign 2024-01-15 dinner b
  mealctl plan quit today dinner
  mealctl plan list --meal dinner"""


def _role(person: str | None) -> PreparationRole | None:
    if person is None:
        return None
    return PreparationRole.for_person(to_person(person))


@click.group(cls=MealGroup, examples=_PLAN_EXAMPLES)
@click.pass_obj
def plan(app: AppContext) -> None:
    """Show, create, and change meal plans."""


@plan.command(
    examples="""\
  mealctl plan show today lunch
  mealctl --json plan show 2024-01-15 dinner"""
)
@click.argument("day", type=DAY)
@click.argument("meal", type=MEAL_CHOICE)
@click.pass_obj
def show(app: AppContext, day: date, meal: str) -> None:
    """Show the plan for one meal slot."""
    outcome = app.meal_plans().get_meal_plan(day, to_meal_type(meal))
    app.emit(plan_result("get_meal_plan", outcome))


@plan.command(
    examples="""\
  mealctl plan create today lunch
  mealctl plan create tomorrow dinner --cook a"""
)
@click.argument("day", type=DAY)
@click.argument("meal", type=MEAL_CHOICE)
@click.option("--cook", type=PERSON_CHOICE, default=None, help="Dinner cook (required for dinner).")
@click.pass_obj
def create(app: AppContext, day: date, meal: str, cook: str | None) -> None:
    """Get the plan for a slot, creating it if it does not exist yet."""
    meal_type = to_meal_type(meal)
    result = plan_result(
        "get_or_create_meal_plan",
        app.meal_plans().get_or_create_meal_plan(day, meal_type, _role(cook)),
    )
    if result.ok and cook and meal_type == MealType.LUNCH:
        result = result.with_warning("--cook is ignored for lunch")
    app.emit(result)


@plan.command(
    examples="""\
  mealctl plan day today --dinner-cook b
  mealctl plan day tomorrow --dinner-cook a"""
)
@click.argument("day", type=DAY)
@click.option(
    "--dinner-cook",
    type=PERSON_CHOICE,
    required=True,
    help="Cook for dinner if it has to be created.",
)
@click.pass_obj
def day(app: AppContext, day: date, dinner_cook: str) -> None:
    """Get or create both lunch and dinner for a day."""
    role = PreparationRole.for_person(to_person(dinner_cook))
    app.emit(day_result("get_or_create_day", app.meal_plans().get_or_create_day(day, role)))


@plan.command(
    examples="""\
  mealctl plan attend today dinner a no
  mealctl plan attend tomorrow lunch b undecided"""
)
@click.argument("day", type=DAY)
@click.argument("meal", type=MEAL_CHOICE)
@click.argument("person", type=PERSON_CHOICE)
@click.argument("attendance", type=ATTENDANCE_CHOICE)
@click.pass_obj
def attend(app: AppContext, day: date, meal: str, person: str, attendance: str) -> None:
    """Set whether PERSON (a or b) eats this meal."""
    outcome = app.meal_plans().change_participation(
        day, to_meal_type(meal), to_person(person), to_participation(attendance)
    )
    app.emit(plan_result("change_participation", outcome))


@plan.command(
    "quit",
    examples="""\
  mealctl plan quit today dinner""",
)
@click.argument("day", type=DAY)
@click.argument("meal", type=MEAL_CHOICE)
@click.pass_obj
def quit_(app: AppContext, day: date, meal: str) -> None:
    """The cook drops out; the meal is cancelled for both."""
    outcome = app.meal_plans().preparer_quits(day, to_meal_type(meal))
    app.emit(plan_result("preparer_quits", outcome))


@plan.command(
    examples="""\
  mealctl plan assign today dinner b"""
)
@click.argument("day", type=DAY)
@click.argument("meal", type=MEAL_CHOICE)
@click.argument("person", type=PERSON_CHOICE)
@click.pass_obj
def assign(app: AppContext, day: date, meal: str, person: str) -> None:
    """Hand dinner cooking to PERSON (a or b)."""
    outcome = app.meal_plans().change_preparation_role(
        day, to_meal_type(meal), PreparationRole.for_person(to_person(person))
    )
    app.emit(plan_result("change_preparation_role", outcome))


@plan.command(
    "list",
    examples="""\
  mealctl plan list
  mealctl plan list --from 2024-01-15 --to 2024-01-21 --meal dinner
  mealctl -q plan list""",
)
@click.option("--from", "start", type=DAY, default=None, help="First day (default: today).")
@click.option("--to", "end", type=DAY, default=None, help="Last day (default: a week on).")
@click.option("--meal", type=MEAL_CHOICE, default=None, help="Only this meal.")
@click.pass_obj
def list_(app: AppContext, start: date | None, end: date | None, meal: str | None) -> None:
    """List stored plans in a date range."""
    op = "list_meal_plans"
    first, last = week_from(start or today())
    last = end or last
    meal_type = to_meal_type(meal) if meal else None
    try:
        plans = app.meal_plans().list_meal_plans(first, last, meal_type)
    except ValueError as exc:
        app.emit(ServiceResult.failure(op, "INVALID_INPUT", str(exc)))
        return
    app.emit(
        plans_result(
            op,
            plans,
            start=first.isoformat(),
            end=last.isoformat(),
            meal_type=str(meal_type) if meal_type else None,
        )
    )
