"""Typed payload contracts for the service/interface boundary.

These models validate payload shapes before they leave the service
layer, and adapt domain ``Result`` values into :class:`ServiceResult`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, Field

from mealctl.domain.types import Person
from mealctl.services.meal_plan import MEAL_PLAN_NOT_FOUND
from mealctl.services.result import ServiceResult

if TYPE_CHECKING:
    from mealctl.domain.meal_plan import MealPlan
    from mealctl.domain.result import Result
    from mealctl.services.meal_plan import DayPlans

Participation = Literal["WILL_PARTICIPATE", "WILL_NOT_PARTICIPATE", "UNDECIDED"]


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class MealPlanData(BaseModel):
    """One meal plan in its persisted shape."""

    id: str
    date: str
    meal_type: Literal["LUNCH", "DINNER"]
    preparation_role: Literal["PERSON_A", "PERSON_B", "NONE"]
    participation_a: Participation
    participation_b: Participation
    current_state: int = Field(ge=1, le=5)
    created_at: str
    updated_at: str
    can_take_preparation: list[Literal["PERSON_A", "PERSON_B"]] = Field(default_factory=list)


class MealPlanListData(BaseModel):
    """Payload contract for ``list_meal_plans``."""

    start: str
    end: str
    meal_type: Literal["LUNCH", "DINNER"] | None = None
    count: int
    items: list[MealPlanData]


class DayPlansData(BaseModel):
    """Payload contract for ``get_or_create_day``."""

    date: str
    lunch: MealPlanData
    dinner: MealPlanData


def _plan_fields(plan: MealPlan) -> dict[str, Any]:
    """Persisted fields plus who could take over cooking."""
    takers = [str(person) for person in Person if plan.can_take_preparation(person)]
    return {**plan.snapshot(), "can_take_preparation": takers}


def plan_payload(plan: MealPlan) -> dict[str, Any]:
    return dump_validated(MealPlanData, _plan_fields(plan))


def failure_result(op: str, reason: str) -> ServiceResult:
    """Wrap a domain failure reason; lookups that miss map to NOT_FOUND."""
    code = "NOT_FOUND" if reason == MEAL_PLAN_NOT_FOUND else "RULE_VIOLATION"
    return ServiceResult.failure(op, code, reason)


def plan_result(op: str, outcome: Result[MealPlan]) -> ServiceResult:
    if outcome.is_failure:
        return failure_result(op, outcome.error)
    return ServiceResult(ok=True, op=op, data=plan_payload(outcome.value))


def day_result(op: str, outcome: Result[DayPlans]) -> ServiceResult:
    if outcome.is_failure:
        return failure_result(op, outcome.error)
    day = outcome.value
    data = dump_validated(
        DayPlansData,
        {
            "date": day.lunch.date.isoformat(),
            "lunch": _plan_fields(day.lunch),
            "dinner": _plan_fields(day.dinner),
        },
    )
    return ServiceResult(ok=True, op=op, data=data)


def plans_result(
    op: str,
    plans: list[MealPlan],
    *,
    start: str,
    end: str,
    meal_type: str | None = None,
) -> ServiceResult:
    data = dump_validated(
        MealPlanListData,
        {
            "start": start,
            "end": end,
            "meal_type": meal_type,
            "count": len(plans),
            "items": [_plan_fields(plan) for plan in plans],
        },
    )
    return ServiceResult(ok=True, op=op, data=data)
