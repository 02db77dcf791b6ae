"""mealctl — two-person household meal coordination."""

__version__ = "0.3.0"
