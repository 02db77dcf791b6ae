"""Closed enums for meal slots, cooks, and attendance.

Stored values are the upper-case member names so persisted rows and
service payloads read the same as the enum members.
"""

from __future__ import annotations

from enum import StrEnum


class MealType(StrEnum):
    """The two meal slots tracked per day."""

    LUNCH = "LUNCH"
    DINNER = "DINNER"


class Person(StrEnum):
    """The two fixed household members."""

    PERSON_A = "PERSON_A"
    PERSON_B = "PERSON_B"


class PreparationRole(StrEnum):
    """Who is assigned to cook a meal slot."""

    PERSON_A = "PERSON_A"
    PERSON_B = "PERSON_B"
    NONE = "NONE"

    @classmethod
    def for_person(cls, person: Person) -> PreparationRole:
        """The role that makes *person* the cook."""
        return cls(person.value)


class ParticipationStatus(StrEnum):
    """A person's attendance intent for one meal slot."""

    WILL_PARTICIPATE = "WILL_PARTICIPATE"
    WILL_NOT_PARTICIPATE = "WILL_NOT_PARTICIPATE"
    UNDECIDED = "UNDECIDED"


# Lunch is always cooked by the same person; the role can only be dropped.
DEFAULT_LUNCH_PREPARER = PreparationRole.PERSON_B
