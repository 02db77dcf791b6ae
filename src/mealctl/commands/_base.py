"""Custom Click base classes and parameter types.

MealCommand and MealGroup accept an ``examples`` parameter; passing
``--examples`` prints them and exits, keeping ``--help`` concise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from mealctl.domain.types import MealType, ParticipationStatus, Person
from mealctl.services._helpers import parse_day

if TYPE_CHECKING:
    from datetime import date


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class MealCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class MealGroup(click.Group):
    """Click Group subclass whose subcommands are MealCommands."""

    command_class = MealCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


# ── Parameter types ───────────────────────────────────────────────────


class DayParamType(click.ParamType):
    """``today``, ``tomorrow``, or ``YYYY-MM-DD``."""

    name = "date"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> date:
        try:
            return parse_day(str(value))
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


DAY = DayParamType()

MEAL_CHOICE = click.Choice(["lunch", "dinner"], case_sensitive=False)
PERSON_CHOICE = click.Choice(["a", "b"], case_sensitive=False)
ATTENDANCE_CHOICE = click.Choice(["yes", "no", "undecided"], case_sensitive=False)

_ATTENDANCE = {
    "yes": ParticipationStatus.WILL_PARTICIPATE,
    "no": ParticipationStatus.WILL_NOT_PARTICIPATE,
    "undecided": ParticipationStatus.UNDECIDED,
}


def to_meal_type(value: str) -> MealType:
    return MealType(value.upper())


def to_person(value: str) -> Person:
    return Person.PERSON_A if value.lower() == "a" else Person.PERSON_B


def to_participation(value: str) -> ParticipationStatus:
    return _ATTENDANCE[value.lower()]
