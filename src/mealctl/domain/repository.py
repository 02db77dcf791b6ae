"""Persistence contract for meal plans, keyed by (date, meal type).

Implementations live in :mod:`mealctl.infrastructure.repositories`.
The domain assumes nothing beyond "a save replaces the row for that key".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import date

    from mealctl.domain.meal_plan import MealPlan
    from mealctl.domain.types import MealType


class MealPlanRepository(Protocol):
    """Read/write port the orchestration service talks to."""

    def find_by_date_and_type(self, day: date, meal_type: MealType) -> MealPlan | None:
        """Return the plan for one meal slot, or None."""
        ...

    def save(self, plan: MealPlan) -> MealPlan:
        """Insert or fully overwrite the plan for ``(plan.date, plan.meal_type)``."""
        ...

    def find_by_date_range(self, start: date, end: date) -> list[MealPlan]:
        """Plans with ``start <= date <= end``, ordered by date then meal type."""
        ...

    def find_by_date_range_and_type(
        self, start: date, end: date, meal_type: MealType
    ) -> list[MealPlan]:
        """Plans of one meal type with ``start <= date <= end``, ordered by date."""
        ...
