"""MealPlan aggregate — who cooks one meal slot and who attends.

One plan exists per (date, meal type). State only changes through the
named mutators below, each returning a :class:`Result`. The integer
``current_state`` is always derived from the meal type, the cook, and
both participations by :func:`compute_state`; nothing sets it directly.

Invariants held after every mutation:

- The assigned cook never has ``WILL_NOT_PARTICIPATE``.
- Lunch is cooked by ``PERSON_B`` or nobody; it is never reassigned.
- ``NONE`` as cook is reached only through :meth:`MealPlan.preparer_quits`.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING, Any

from mealctl.domain.result import Result
from mealctl.domain.types import (
    DEFAULT_LUNCH_PREPARER,
    MealType,
    ParticipationStatus,
    Person,
    PreparationRole,
)

if TYPE_CHECKING:
    from mealctl.domain.ids import IdGenerator

Clock = Callable[[], datetime]

# --- Business-rule failure reasons ---

DINNER_PREPARER_REQUIRED = "dinner plan creation requires a preparer (PERSON_A or PERSON_B)"
NO_PREPARER_ASSIGNED = "no preparer is currently assigned"
PREPARER_MUST_PARTICIPATE = "preparer must participate in the meal"
LUNCH_ROLE_IMMUTABLE = "lunch preparation role cannot be changed"
ROLE_NONE_NOT_ALLOWED = "cannot set preparation role to NONE; use preparerQuits instead"


def utc_now() -> datetime:
    """Default aggregate clock."""
    return datetime.now(UTC)


def compute_state(
    meal_type: MealType,
    preparation_role: PreparationRole,
    participation_a: ParticipationStatus,
    participation_b: ParticipationStatus,
) -> int:
    """Derive the status code for a meal slot.

    ==========  ==========  ==========================  =====
    meal        cook        condition                   state
    ==========  ==========  ==========================  =====
    LUNCH       PERSON_B    A will participate          1
    LUNCH       PERSON_B    otherwise                   2
    LUNCH       NONE        B undecided                 4
    LUNCH       NONE        otherwise                   3
    DINNER      PERSON_B    A will participate          1
    DINNER      PERSON_B    otherwise                   2
    DINNER      PERSON_A    B will participate          3
    DINNER      PERSON_A    otherwise                   4
    DINNER      NONE        any                         5
    ==========  ==========  ==========================  =====

    Raises:
        ValueError: For lunch cooked by ``PERSON_A``, which no sequence
            of mutations can produce.
    """
    a_joins = participation_a == ParticipationStatus.WILL_PARTICIPATE
    b_joins = participation_b == ParticipationStatus.WILL_PARTICIPATE

    match (meal_type, preparation_role):
        case (_, PreparationRole.PERSON_B):
            return 1 if a_joins else 2
        case (MealType.LUNCH, PreparationRole.NONE):
            return 4 if participation_b == ParticipationStatus.UNDECIDED else 3
        case (MealType.DINNER, PreparationRole.PERSON_A):
            return 3 if b_joins else 4
        case (MealType.DINNER, PreparationRole.NONE):
            return 5
    msg = f"Unreachable meal plan combination: {meal_type} cooked by {preparation_role}"
    raise ValueError(msg)


class MealPlan:
    """Aggregate root for one meal slot.

    Build new plans with :meth:`create_lunch_plan` or
    :meth:`create_dinner_plan`; rebuild persisted ones with :meth:`restore`.
    """

    def __init__(
        self,
        *,
        plan_id: str,
        day: date,
        meal_type: MealType,
        preparation_role: PreparationRole,
        participation_a: ParticipationStatus,
        participation_b: ParticipationStatus,
        created_at: datetime,
        updated_at: datetime,
        clock: Clock = utc_now,
    ) -> None:
        self._id = plan_id
        self._date = day
        self._meal_type = meal_type
        self._preparation_role = preparation_role
        self._participations = {
            Person.PERSON_A: participation_a,
            Person.PERSON_B: participation_b,
        }
        self._created_at = created_at
        self._updated_at = updated_at
        self._clock = clock
        self._current_state = 0
        self._check_invariants()
        self._refresh_state()

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def create_lunch_plan(
        cls,
        day: date,
        id_generator: IdGenerator,
        *,
        clock: Clock = utc_now,
    ) -> MealPlan:
        """New lunch plan: ``PERSON_B`` cooks and both attend."""
        now = clock()
        return cls(
            plan_id=id_generator.generate(),
            day=day,
            meal_type=MealType.LUNCH,
            preparation_role=DEFAULT_LUNCH_PREPARER,
            participation_a=ParticipationStatus.WILL_PARTICIPATE,
            participation_b=ParticipationStatus.WILL_PARTICIPATE,
            created_at=now,
            updated_at=now,
            clock=clock,
        )

    @classmethod
    def create_dinner_plan(
        cls,
        day: date,
        preparation_role: PreparationRole,
        id_generator: IdGenerator,
        *,
        clock: Clock = utc_now,
    ) -> Result[MealPlan]:
        """New dinner plan cooked by *preparation_role*; both attend."""
        if preparation_role == PreparationRole.NONE:
            return Result.failure(DINNER_PREPARER_REQUIRED)

        now = clock()
        plan = cls(
            plan_id=id_generator.generate(),
            day=day,
            meal_type=MealType.DINNER,
            preparation_role=preparation_role,
            participation_a=ParticipationStatus.WILL_PARTICIPATE,
            participation_b=ParticipationStatus.WILL_PARTICIPATE,
            created_at=now,
            updated_at=now,
            clock=clock,
        )
        return Result.success(plan)

    @classmethod
    def restore(
        cls,
        *,
        plan_id: str,
        day: date,
        meal_type: str,
        preparation_role: str,
        participation_a: str,
        participation_b: str,
        created_at: datetime,
        updated_at: datetime,
        clock: Clock = utc_now,
    ) -> MealPlan:
        """Rebuild a persisted plan.

        The state code is recomputed rather than read back, so a stale
        stored value can never leak into the aggregate.

        Raises:
            ValueError: On unknown enum values or a row that breaks an
                invariant.
        """
        return cls(
            plan_id=plan_id,
            day=day,
            meal_type=MealType(meal_type),
            preparation_role=PreparationRole(preparation_role),
            participation_a=ParticipationStatus(participation_a),
            participation_b=ParticipationStatus(participation_b),
            created_at=created_at,
            updated_at=updated_at,
            clock=clock,
        )

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    @property
    def date(self) -> date:
        return self._date

    @property
    def meal_type(self) -> MealType:
        return self._meal_type

    @property
    def preparation_role(self) -> PreparationRole:
        return self._preparation_role

    @property
    def participation_a(self) -> ParticipationStatus:
        return self._participations[Person.PERSON_A]

    @property
    def participation_b(self) -> ParticipationStatus:
        return self._participations[Person.PERSON_B]

    @property
    def current_state(self) -> int:
        return self._current_state

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def participation_of(self, person: Person) -> ParticipationStatus:
        return self._participations[person]

    def is_preparer(self, person: Person) -> bool:
        """Whether *person* is the assigned cook."""
        return self._preparation_role == PreparationRole.for_person(person)

    def can_take_preparation(self, person: Person) -> bool:
        """Whether *person* may take over cooking from the current cook.

        Only dinner cooks can be swapped, and only while someone cooks.
        """
        return (
            self._meal_type == MealType.DINNER
            and self._preparation_role != PreparationRole.NONE
            and not self.is_preparer(person)
        )

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def preparer_quits(self) -> Result[None]:
        """Drop the cook; the whole slot is cancelled for both people."""
        if self._preparation_role == PreparationRole.NONE:
            return Result.failure(NO_PREPARER_ASSIGNED)

        self._preparation_role = PreparationRole.NONE
        self._participations[Person.PERSON_A] = ParticipationStatus.WILL_NOT_PARTICIPATE
        self._participations[Person.PERSON_B] = ParticipationStatus.WILL_NOT_PARTICIPATE
        self._touch()
        return Result.success()

    def change_participation(self, person: Person, status: ParticipationStatus) -> Result[None]:
        """Set one person's attendance. The cook cannot opt out."""
        if self.is_preparer(person) and status == ParticipationStatus.WILL_NOT_PARTICIPATE:
            return Result.failure(PREPARER_MUST_PARTICIPATE)

        self._participations[person] = status
        self._touch()
        return Result.success()

    def change_participation_a(self, status: ParticipationStatus) -> Result[None]:
        return self.change_participation(Person.PERSON_A, status)

    def change_participation_b(self, status: ParticipationStatus) -> Result[None]:
        return self.change_participation(Person.PERSON_B, status)

    def change_preparation_role(self, new_preparer: PreparationRole) -> Result[None]:
        """Hand dinner cooking to *new_preparer*, who is then marked as attending."""
        if self._meal_type == MealType.LUNCH:
            return Result.failure(LUNCH_ROLE_IMMUTABLE)
        if new_preparer == PreparationRole.NONE:
            return Result.failure(ROLE_NONE_NOT_ALLOWED)

        self._preparation_role = new_preparer
        self._participations[Person(new_preparer.value)] = ParticipationStatus.WILL_PARTICIPATE
        self._touch()
        return Result.success()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _touch(self) -> None:
        self._refresh_state()
        self._updated_at = self._clock()

    def _refresh_state(self) -> None:
        self._current_state = compute_state(
            self._meal_type,
            self._preparation_role,
            self.participation_a,
            self.participation_b,
        )

    def _check_invariants(self) -> None:
        if (
            self._meal_type == MealType.LUNCH
            and self._preparation_role == PreparationRole.PERSON_A
        ):
            raise ValueError("Lunch cannot be cooked by PERSON_A")
        for person, status in self._participations.items():
            if self.is_preparer(person) and status == ParticipationStatus.WILL_NOT_PARTICIPATE:
                msg = f"Cook {person} is marked as not participating"
                raise ValueError(msg)

    def snapshot(self) -> dict[str, Any]:
        """Flat dict in the persisted shape (enum values, ISO timestamps)."""
        return {
            "id": self._id,
            "date": self._date.isoformat(),
            "meal_type": str(self._meal_type),
            "preparation_role": str(self._preparation_role),
            "participation_a": str(self.participation_a),
            "participation_b": str(self.participation_b),
            "current_state": self._current_state,
            "created_at": self._created_at.isoformat(),
            "updated_at": self._updated_at.isoformat(),
        }

    def __repr__(self) -> str:
        return (
            f"MealPlan(id={self._id!r}, date={self._date.isoformat()}, "
            f"meal_type={self._meal_type}, preparation_role={self._preparation_role}, "
            f"state={self._current_state})"
        )
