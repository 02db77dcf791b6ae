"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, mealctl.toml only contains
overrides. A fresh household needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    # Relative paths resolve against the directory holding mealctl.toml.
    path: str = ".mealctl/mealctl.db"


class HouseholdConfig(BaseModel):
    """[household] section — display names for the two fixed participants."""

    model_config = {"frozen": True}

    person_a_name: str = Field(default="Alice", min_length=1)
    person_b_name: str = Field(default="Bob", min_length=1)


class NotificationConfig(BaseModel):
    """[notification] section: reminder schedule shown by ``mealctl config``.

    Weekday 0 is Sunday.
    """

    model_config = {"frozen": True}

    morning_hour: int = Field(default=7, ge=0, le=23)
    morning_minute: int = Field(default=0, ge=0, le=59)
    evening_hour: int = Field(default=22, ge=0, le=23)
    evening_minute: int = Field(default=0, ge=0, le=59)
    weekly_day: int = Field(default=0, ge=0, le=6)
    weekly_hour: int = Field(default=21, ge=0, le=23)
    weekly_minute: int = Field(default=0, ge=0, le=59)
