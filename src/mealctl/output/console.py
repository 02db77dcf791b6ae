"""Rich Console factory and theme for mealctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO
from typing import cast

from rich.console import Console
from rich.theme import Theme

MEAL_THEME = Theme(
    {
        "meal.ok": "bold green",
        "meal.error": "bold red",
        "meal.warning": "bold yellow",
        "meal.op": "bold cyan",
        "meal.key": "dim",
        "meal.id": "bold blue",
        "meal.cook": "bold",
        "meal.lunch": "yellow",
        "meal.dinner": "magenta",
        "meal.yes": "green",
        "meal.no": "red",
        "meal.undecided": "dim",
    }
)

_MEAL_STYLES: dict[str, str] = {
    "LUNCH": "meal.lunch",
    "DINNER": "meal.dinner",
}

_PARTICIPATION_STYLES: dict[str, str] = {
    "WILL_PARTICIPATE": "meal.yes",
    "WILL_NOT_PARTICIPATE": "meal.no",
    "UNDECIDED": "meal.undecided",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=MEAL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    return cast(StringIO, console.file).getvalue()


def style_for_meal(meal_type: str) -> str:
    return _MEAL_STYLES.get(meal_type, "")


def style_for_participation(status: str) -> str:
    return _PARTICIPATION_STYLES.get(status, "")
