"""MealPlanService — load-or-create, mutate, save.

Pipeline per mutation: LOAD → DELEGATE → SAVE → RESPOND

No business rules live here; every rule is checked by the aggregate
and its failure reason is passed through unchanged. Nothing is saved
when the aggregate rejects a change.

Concurrent load-mutate-save sequences for the same (date, meal type)
are not coordinated: the repository upsert makes the last save win.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mealctl.domain.meal_plan import Clock, MealPlan, utc_now
from mealctl.domain.result import Result
from mealctl.domain.types import MealType, PreparationRole

if TYPE_CHECKING:
    from datetime import date

    from mealctl.domain.ids import IdGenerator
    from mealctl.domain.repository import MealPlanRepository
    from mealctl.domain.types import ParticipationStatus, Person

logger = logging.getLogger(__name__)

MEAL_PLAN_NOT_FOUND = "meal plan not found"


@dataclass(frozen=True)
class DayPlans:
    """Both meal slots of one day."""

    lunch: MealPlan
    dinner: MealPlan


class MealPlanService:
    """Thin use-case layer over :class:`MealPlanRepository`."""

    def __init__(
        self,
        repository: MealPlanRepository,
        id_generator: IdGenerator,
        *,
        clock: Clock = utc_now,
    ) -> None:
        self._repository = repository
        self._id_generator = id_generator
        self._clock = clock

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_meal_plan(self, day: date, meal_type: MealType) -> Result[MealPlan]:
        plan = self._repository.find_by_date_and_type(day, meal_type)
        if plan is None:
            return Result.failure(MEAL_PLAN_NOT_FOUND)
        return Result.success(plan)

    def list_meal_plans(
        self,
        start: date,
        end: date,
        meal_type: MealType | None = None,
    ) -> list[MealPlan]:
        """Stored plans between *start* and *end* inclusive.

        Raises:
            ValueError: If *start* is after *end*.
        """
        if start > end:
            msg = f"Range start {start.isoformat()} is after end {end.isoformat()}"
            raise ValueError(msg)
        if meal_type is None:
            return self._repository.find_by_date_range(start, end)
        return self._repository.find_by_date_range_and_type(start, end, meal_type)

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def get_or_create_meal_plan(
        self,
        day: date,
        meal_type: MealType,
        preparation_role: PreparationRole | None = None,
    ) -> Result[MealPlan]:
        """Return the stored plan for the slot, creating it if absent.

        Lunch ignores *preparation_role*; dinner requires one.
        """
        existing = self._repository.find_by_date_and_type(day, meal_type)
        if existing is not None:
            return Result.success(existing)

        if meal_type == MealType.LUNCH:
            plan = MealPlan.create_lunch_plan(day, self._id_generator, clock=self._clock)
        else:
            created = MealPlan.create_dinner_plan(
                day,
                preparation_role or PreparationRole.NONE,
                self._id_generator,
                clock=self._clock,
            )
            if created.is_failure:
                return created
            plan = created.value

        saved = self._repository.save(plan)
        logger.info(
            "Created meal plan %s for %s %s (state %d)",
            saved.id,
            day.isoformat(),
            meal_type,
            saved.current_state,
        )
        return Result.success(saved)

    def get_or_create_day(self, day: date, dinner_preparer: PreparationRole) -> Result[DayPlans]:
        """Lunch and dinner for *day*, creating whichever is missing."""
        lunch = self.get_or_create_meal_plan(day, MealType.LUNCH)
        if lunch.is_failure:
            return Result.failure(lunch.error)
        dinner = self.get_or_create_meal_plan(day, MealType.DINNER, dinner_preparer)
        if dinner.is_failure:
            return Result.failure(dinner.error)
        return Result.success(DayPlans(lunch=lunch.value, dinner=dinner.value))

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def change_participation(
        self,
        day: date,
        meal_type: MealType,
        person: Person,
        status: ParticipationStatus,
    ) -> Result[MealPlan]:
        return self._mutate(
            day,
            meal_type,
            "change_participation",
            lambda plan: plan.change_participation(person, status),
        )

    def preparer_quits(self, day: date, meal_type: MealType) -> Result[MealPlan]:
        return self._mutate(day, meal_type, "preparer_quits", lambda plan: plan.preparer_quits())

    def change_preparation_role(
        self,
        day: date,
        meal_type: MealType,
        new_preparer: PreparationRole,
    ) -> Result[MealPlan]:
        return self._mutate(
            day,
            meal_type,
            "change_preparation_role",
            lambda plan: plan.change_preparation_role(new_preparer),
        )

    def _mutate(
        self,
        day: date,
        meal_type: MealType,
        op: str,
        action: Callable[[MealPlan], Result[None]],
    ) -> Result[MealPlan]:
        # ── LOAD ─────────────────────────────────────────────
        plan = self._repository.find_by_date_and_type(day, meal_type)
        if plan is None:
            return Result.failure(MEAL_PLAN_NOT_FOUND)

        # ── DELEGATE ─────────────────────────────────────────
        outcome = action(plan)
        if outcome.is_failure:
            logger.debug("%s rejected for %s: %s", op, plan.id, outcome.error)
            return Result.failure(outcome.error)

        # ── SAVE ─────────────────────────────────────────────
        saved = self._repository.save(plan)
        logger.info("%s applied to %s (state %d)", op, saved.id, saved.current_state)
        return Result.success(saved)
