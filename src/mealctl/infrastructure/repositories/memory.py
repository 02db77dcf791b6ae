"""In-process meal plan repository keyed by (date, meal type)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mealctl.domain.meal_plan import MealPlan, utc_now
from mealctl.domain.types import MealType

if TYPE_CHECKING:
    from datetime import date

    from mealctl.domain.meal_plan import Clock

_MEAL_ORDER = {MealType.LUNCH: 0, MealType.DINNER: 1}


class InMemoryMealPlanRepository:
    """Dict-backed repository with the same copy semantics as the SQL one.

    ``save`` stores a detached copy and every read hands out a fresh
    one, so a caller's unsaved changes never reach the store.
    """

    def __init__(self, *, clock: Clock = utc_now) -> None:
        self._plans: dict[tuple[date, MealType], MealPlan] = {}
        self._clock = clock

    def _detach(self, plan: MealPlan) -> MealPlan:
        return MealPlan.restore(
            plan_id=plan.id,
            day=plan.date,
            meal_type=plan.meal_type,
            preparation_role=plan.preparation_role,
            participation_a=plan.participation_a,
            participation_b=plan.participation_b,
            created_at=plan.created_at,
            updated_at=plan.updated_at,
            clock=self._clock,
        )

    def find_by_date_and_type(self, day: date, meal_type: MealType) -> MealPlan | None:
        stored = self._plans.get((day, meal_type))
        return None if stored is None else self._detach(stored)

    def save(self, plan: MealPlan) -> MealPlan:
        self._plans[(plan.date, plan.meal_type)] = self._detach(plan)
        return self._detach(plan)

    def find_by_date_range(self, start: date, end: date) -> list[MealPlan]:
        plans = [p for (day, _), p in self._plans.items() if start <= day <= end]
        plans.sort(key=lambda p: (p.date, _MEAL_ORDER[p.meal_type]))
        return [self._detach(p) for p in plans]

    def find_by_date_range_and_type(
        self, start: date, end: date, meal_type: MealType
    ) -> list[MealPlan]:
        return [p for p in self.find_by_date_range(start, end) if p.meal_type == meal_type]

    def __len__(self) -> int:
        return len(self._plans)
