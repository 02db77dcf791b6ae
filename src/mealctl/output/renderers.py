"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops
fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mealctl.output.console import (
    create_console,
    get_output,
    style_for_meal,
    style_for_participation,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from mealctl.services.result import ServiceResult


@dataclass(frozen=True)
class Names:
    """Display names for the two household members."""

    a: str = "Alice"
    b: str = "Bob"

    def for_role(self, role: str) -> str:
        return {"PERSON_A": self.a, "PERSON_B": self.b}.get(role, "nobody")


_PARTICIPATION_LABELS = {
    "WILL_PARTICIPATE": "eats",
    "WILL_NOT_PARTICIPATE": "skips",
    "UNDECIDED": "undecided",
}


def describe_state(meal_type: str, state: int, names: Names) -> str:
    """One-line summary of a state code for notifications and listings."""
    meal = "lunch" if meal_type == "LUNCH" else "dinner"
    descriptions = {
        1: f"{names.b} cooks {meal}, both eat",
        2: f"{names.b} cooks {meal}, {names.a} skips",
    }
    if meal_type == "LUNCH":
        descriptions[3] = "lunch cancelled"
        descriptions[4] = f"lunch cancelled, {names.b} undecided"
    else:
        descriptions[3] = f"{names.a} cooks dinner, both eat"
        descriptions[4] = f"{names.a} cooks dinner, {names.b} does not eat"
        descriptions[5] = "dinner cancelled"
    return descriptions.get(state, f"unknown state {state}")


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    names: Names | None = None,
    verbose: bool = False,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal, which
    is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    names = names or Names()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, names, verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("id", "")) for item in items)
    if "id" in result.data:
        return str(result.data["id"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="meal.ok"), Text(f"  {result.op}", style="meal.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="meal.key")
    v = Text(str(value), style="meal.id" if key == "id" else "")
    console.print(Text.assemble(k, v))


def _attendance(status: str) -> Text:
    return Text(_PARTICIPATION_LABELS.get(status, status), style=style_for_participation(status))


def _plan_panel(plan: dict[str, Any], names: Names, *, verbose: bool) -> Panel:
    body = Text()
    body.append("cook: ", style="meal.key")
    body.append(names.for_role(plan["preparation_role"]), style="meal.cook")
    body.append("\n")
    body.append(f"{names.a}: ", style="meal.key")
    body.append_text(_attendance(plan["participation_a"]))
    body.append("\n")
    body.append(f"{names.b}: ", style="meal.key")
    body.append_text(_attendance(plan["participation_b"]))
    body.append("\n")
    body.append("state: ", style="meal.key")
    body.append(
        f"{plan['current_state']} ({describe_state(plan['meal_type'], plan['current_state'], names)})"
    )
    for person in plan.get("can_take_preparation", []):
        body.append(f"\n{names.for_role(person)} can take over cooking", style="dim")
    if verbose:
        body.append(f"\nid: {plan['id']}", style="meal.id")
        body.append(f"\nupdated: {plan['updated_at']}", style="dim")

    title = f"{plan['date']} {plan['meal_type'].lower()}"
    return Panel(
        body,
        title=title,
        border_style=style_for_meal(plan["meal_type"]) or "dim",
        expand=False,
    )


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="meal.error")
    op = Text(f"  {result.op}", style="meal.op")
    console.print(label, op, Text(" — "), msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Plan renderers ────────────────────────────────────────────────────


def _render_plan(result: ServiceResult, console: Console, names: Names, verbose: bool) -> None:
    _status_line(console, result)
    console.print(_plan_panel(result.data, names, verbose=verbose))


def _render_day(result: ServiceResult, console: Console, names: Names, verbose: bool) -> None:
    _status_line(console, result)
    console.print(_plan_panel(result.data["lunch"], names, verbose=verbose))
    console.print(_plan_panel(result.data["dinner"], names, verbose=verbose))


def _render_plan_table(
    result: ServiceResult, console: Console, names: Names, verbose: bool
) -> None:
    d = result.data
    items = d.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Date", no_wrap=True)
    table.add_column("Meal")
    table.add_column("Cook", style="meal.cook")
    table.add_column(names.a)
    table.add_column(names.b)
    table.add_column("State", justify="right")
    if verbose:
        table.add_column("ID", style="meal.id", no_wrap=True)

    for item in items:
        row: list[Text | str] = [
            item["date"],
            Text(item["meal_type"].lower(), style=style_for_meal(item["meal_type"])),
            names.for_role(item["preparation_role"]),
            _attendance(item["participation_a"]),
            _attendance(item["participation_b"]),
            str(item["current_state"]),
        ]
        if verbose:
            row.append(item["id"])
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{d.get('count', len(items))} plans from {d['start']} to {d['end']}")


def _render_upgrade(result: ServiceResult, console: Console, names: Names, verbose: bool) -> None:
    _status_line(console, result)
    d = result.data
    for key in ("applied_count", "pending_count", "current", "head", "backup_path", "message"):
        if key in d:
            _field(console, key, d[key])
    if verbose and d.get("pending"):
        console.print()
        for p in d["pending"]:
            console.print(f"  {p['revision']}: {p['description']}")


def _render_generic(result: ServiceResult, console: Console, names: Names, verbose: bool) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console, Names, bool], None]] = {
    "get_meal_plan": _render_plan,
    "get_or_create_meal_plan": _render_plan,
    "change_participation": _render_plan,
    "preparer_quits": _render_plan,
    "change_preparation_role": _render_plan,
    "get_or_create_day": _render_day,
    "list_meal_plans": _render_plan_table,
    "upgrade": _render_upgrade,
}
