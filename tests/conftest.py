"""Shared pytest fixtures for mealctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from mealctl.infrastructure.database.engine import init_database
from mealctl.infrastructure.repositories.memory import InMemoryMealPlanRepository
from mealctl.infrastructure.store import PlanStore
from mealctl.services.meal_plan import MealPlanService

EPOCH = datetime(2024, 1, 14, 20, 0, tzinfo=UTC)


class SequenceIds:
    """Deterministic IdGenerator: plan-1, plan-2, ..."""

    def __init__(self, prefix: str = "plan") -> None:
        self.prefix = prefix
        self.issued = 0

    def generate(self) -> str:
        self.issued += 1
        return f"{self.prefix}-{self.issued}"


class TickingClock:
    """Clock that advances one minute on every read."""

    def __init__(self, start: datetime = EPOCH) -> None:
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + timedelta(minutes=1)
        return now


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """CLI invocations reconfigure logging; put the root logger back afterwards."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    meal = logging.getLogger("mealctl")
    meal_level = meal.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    meal.setLevel(meal_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def ids() -> SequenceIds:
    return SequenceIds()


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / ".mealctl" / "mealctl.db"


@pytest.fixture
def db_engine(db_path: Path) -> Generator[Engine]:
    """SQLite engine on a database migrated to head."""
    engine = init_database(db_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def store(db_path: Path, ids: SequenceIds) -> Generator[PlanStore]:
    """Freshly created plan store, migrated to head."""
    s = PlanStore(db_path, id_generator=ids)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def memory_repo(clock: TickingClock) -> InMemoryMealPlanRepository:
    return InMemoryMealPlanRepository(clock=clock)


@pytest.fixture
def service(
    memory_repo: InMemoryMealPlanRepository, ids: SequenceIds, clock: TickingClock
) -> MealPlanService:
    return MealPlanService(memory_repo, ids, clock=clock)


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI creates an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MEALCTL_CONFIG", raising=False)
