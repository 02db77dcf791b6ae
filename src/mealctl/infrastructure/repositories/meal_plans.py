"""SQLite-backed meal plan repository.

``save`` is an upsert on the ``(date, meal_type)`` unique key: a second
save for the same slot fully replaces the row, whichever process wrote
it first (last writer wins).
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import case, func, select
from sqlalchemy.dialects.sqlite import insert

from mealctl.domain.meal_plan import Clock, MealPlan, utc_now
from mealctl.infrastructure.database.schema import meal_plans

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from mealctl.domain.types import MealType

_MEAL_ORDER = case((meal_plans.c.meal_type == "LUNCH", 0), else_=1)


class CorruptRecordError(ValueError):
    """A stored row cannot be turned back into a valid MealPlan."""


class SqlMealPlanRepository:
    """Encapsulates SQL for meal plan reads and upserts."""

    def __init__(self, engine: Engine, *, clock: Clock = utc_now) -> None:
        self._engine = engine
        self._clock = clock

    def find_by_date_and_type(self, day: date, meal_type: MealType) -> MealPlan | None:
        stmt = select(meal_plans).where(
            meal_plans.c.date == day.isoformat(),
            meal_plans.c.meal_type == str(meal_type),
        )
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return self._to_domain(row) if row is not None else None

    def save(self, plan: MealPlan) -> MealPlan:
        values = plan.snapshot()
        stmt = insert(meal_plans).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[meal_plans.c.date, meal_plans.c.meal_type],
            set_={key: stmt.excluded[key] for key in values if key not in ("date", "meal_type")},
        )
        with self._engine.begin() as conn:
            conn.execute(stmt)
            row = (
                conn.execute(
                    select(meal_plans).where(
                        meal_plans.c.date == values["date"],
                        meal_plans.c.meal_type == values["meal_type"],
                    )
                )
                .mappings()
                .one()
            )
        return self._to_domain(row)

    def find_by_date_range(self, start: date, end: date) -> list[MealPlan]:
        stmt = (
            select(meal_plans)
            .where(meal_plans.c.date.between(start.isoformat(), end.isoformat()))
            .order_by(meal_plans.c.date, _MEAL_ORDER)
        )
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [self._to_domain(row) for row in rows]

    def find_by_date_range_and_type(
        self, start: date, end: date, meal_type: MealType
    ) -> list[MealPlan]:
        stmt = (
            select(meal_plans)
            .where(
                meal_plans.c.date.between(start.isoformat(), end.isoformat()),
                meal_plans.c.meal_type == str(meal_type),
            )
            .order_by(meal_plans.c.date)
        )
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [self._to_domain(row) for row in rows]

    def count(self) -> int:
        """Number of stored plans."""
        with self._engine.connect() as conn:
            return int(conn.execute(select(func.count(meal_plans.c.id))).scalar_one() or 0)

    def _to_domain(self, row: Any) -> MealPlan:
        try:
            return MealPlan.restore(
                plan_id=str(row["id"]),
                day=date.fromisoformat(row["date"]),
                meal_type=row["meal_type"],
                preparation_role=row["preparation_role"],
                participation_a=row["participation_a"],
                participation_b=row["participation_b"],
                created_at=datetime.fromisoformat(row["created_at"]),
                updated_at=datetime.fromisoformat(row["updated_at"]),
                clock=self._clock,
            )
        except ValueError as exc:
            msg = f"Invalid meal plan row {row['id']!r}: {exc}"
            raise CorruptRecordError(msg) from exc
