"""Output mode selection for ServiceResult.

The CLI renders results for humans (Rich panels and tables), for
scripts (``--quiet``: IDs only), or for machines (``--json``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mealctl.output.renderers import Names, render_quiet, render_result

if TYPE_CHECKING:
    from mealctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Rendering switches taken from the global CLI flags."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    person_a_name: str = "Alice"
    person_b_name: str = "Bob"


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    names = Names(a=settings.person_a_name, b=settings.person_b_name)
    return render_result(result, names=names, verbose=settings.verbose)
