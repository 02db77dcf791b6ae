"""Repository implementations of :class:`mealctl.domain.repository.MealPlanRepository`."""

from mealctl.infrastructure.repositories.meal_plans import (
    CorruptRecordError,
    SqlMealPlanRepository,
)
from mealctl.infrastructure.repositories.memory import InMemoryMealPlanRepository

__all__ = ["CorruptRecordError", "InMemoryMealPlanRepository", "SqlMealPlanRepository"]
