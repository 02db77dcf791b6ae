"""Tests for database engine setup and initialization."""

from pathlib import Path

from alembic import command
from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine

from mealctl.infrastructure.database.engine import (
    BUSY_TIMEOUT_MS,
    create_db_engine,
    init_database,
)
from mealctl.infrastructure.database.migrations import bound_config, build_config, upgrade_head
from mealctl.infrastructure.database.schema import meal_plans


class TestCreateDbEngine:
    def test_wal_mode_enabled(self, tmp_path: Path) -> None:
        engine = create_db_engine(tmp_path / "test.db")
        with engine.connect() as conn:
            result = conn.execute(text("PRAGMA journal_mode")).scalar()
            assert result == "wal"
        engine.dispose()

    def test_foreign_keys_enabled(self, tmp_path: Path) -> None:
        engine = create_db_engine(tmp_path / "test.db")
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1
        engine.dispose()

    def test_busy_timeout_set(self, tmp_path: Path) -> None:
        engine = create_db_engine(tmp_path / "test.db")
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA busy_timeout")).scalar() == BUSY_TIMEOUT_MS
        engine.dispose()


class TestInitDatabase:
    def test_creates_directories(self, db_path: Path, db_engine: Engine) -> None:
        assert db_path.exists()
        assert (db_path.parent / "backups").is_dir()

    def test_creates_meal_plans_table(self, db_engine: Engine) -> None:
        inspector = inspect(db_engine)
        assert "meal_plans" in inspector.get_table_names()
        columns = {c["name"] for c in inspector.get_columns("meal_plans")}
        assert columns == {
            "id",
            "date",
            "meal_type",
            "preparation_role",
            "participation_a",
            "participation_b",
            "current_state",
            "created_at",
            "updated_at",
        }

    def test_unique_slot_constraint(self, db_engine: Engine) -> None:
        uniques = inspect(db_engine).get_unique_constraints("meal_plans")
        assert {"date", "meal_type"} == set(uniques[0]["column_names"])

    def test_idempotent(self, db_path: Path, db_engine: Engine) -> None:
        again = init_database(db_path)
        assert "meal_plans" in inspect(again).get_table_names()
        again.dispose()


class TestMigrations:
    def test_init_records_head(self, db_engine: Engine) -> None:
        with db_engine.connect() as conn:
            version = conn.execute(text("SELECT version_num FROM alembic_version")).scalar()
        assert version == "001_baseline"

    def test_baseline_matches_table_definition(self, tmp_path: Path) -> None:
        engine = create_db_engine(tmp_path / "blank.db")
        try:
            upgrade_head(engine)
            inspector = inspect(engine)
            columns = {c["name"]: c["nullable"] for c in inspector.get_columns("meal_plans")}
            uniques = inspector.get_unique_constraints("meal_plans")
            indexes = inspector.get_indexes("meal_plans")
            primary = inspector.get_pk_constraint("meal_plans")["constrained_columns"]
        finally:
            engine.dispose()

        assert columns == {c.name: c.nullable for c in meal_plans.c}
        assert primary == [c.name for c in meal_plans.primary_key]
        assert [(u["name"], u["column_names"]) for u in uniques] == [
            ("uq_meal_plans_date_meal_type", ["date", "meal_type"])
        ]
        assert {(i["name"], tuple(i["column_names"])) for i in indexes} == {
            (i.name, tuple(c.name for c in i.columns)) for i in meal_plans.indexes
        }

    def test_downgrade_to_base_drops_table(self, tmp_path: Path) -> None:
        engine = create_db_engine(tmp_path / "blank.db")
        try:
            upgrade_head(engine)
            with bound_config(engine) as cfg:
                command.downgrade(cfg, "base")
            tables = set(inspect(engine).get_table_names())
        finally:
            engine.dispose()
        assert "meal_plans" not in tables

    def test_baseline_upgrade_on_empty_file(self, tmp_path: Path) -> None:
        db_path = tmp_path / "empty.db"
        command.upgrade(build_config(f"sqlite:///{db_path}"), "head")

        engine = create_db_engine(db_path)
        try:
            tables = set(inspect(engine).get_table_names())
        finally:
            engine.dispose()
        assert {"meal_plans", "alembic_version"} <= tables
