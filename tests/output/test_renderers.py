"""Tests for operation-specific Rich renderers."""

from mealctl.output.renderers import Names, describe_state, render_quiet, render_result
from mealctl.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _plan(**overrides: object) -> dict[str, object]:
    plan: dict[str, object] = {
        "id": "plan-1",
        "date": "2024-01-15",
        "meal_type": "DINNER",
        "preparation_role": "PERSON_A",
        "participation_a": "WILL_PARTICIPATE",
        "participation_b": "WILL_NOT_PARTICIPATE",
        "current_state": 4,
        "created_at": "2024-01-15T08:00:00+00:00",
        "updated_at": "2024-01-15T09:30:00+00:00",
    }
    plan.update(overrides)
    return plan


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


# ── State descriptions ───────────────────────────────────────────────


class TestDescribeState:
    def test_lunch_states(self) -> None:
        names = Names()
        assert describe_state("LUNCH", 1, names) == "Bob cooks lunch, both eat"
        assert describe_state("LUNCH", 2, names) == "Bob cooks lunch, Alice skips"
        assert describe_state("LUNCH", 3, names) == "lunch cancelled"
        assert describe_state("LUNCH", 4, names) == "lunch cancelled, Bob undecided"

    def test_dinner_states(self) -> None:
        names = Names(a="Mika", b="Jo")
        assert describe_state("DINNER", 3, names) == "Mika cooks dinner, both eat"
        assert describe_state("DINNER", 4, names) == "Mika cooks dinner, Jo does not eat"
        assert describe_state("DINNER", 5, names) == "dinner cancelled"

    def test_unknown_state(self) -> None:
        assert describe_state("LUNCH", 5, Names()) == "unknown state 5"

    def test_role_names(self) -> None:
        names = Names(a="Mika", b="Jo")
        assert names.for_role("PERSON_A") == "Mika"
        assert names.for_role("PERSON_B") == "Jo"
        assert names.for_role("NONE") == "nobody"


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("preparer_quits", "NOT_FOUND", "meal plan not found"))
        assert "ERROR" in output
        assert "preparer_quits" in output
        assert "meal plan not found" in output

    def test_verbose_shows_detail(self) -> None:
        result = _err("upgrade", "MIGRATION_FAILED", "Bad", backup_path="/tmp/b.db")
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "backup_path" in output

    def test_no_error_object(self) -> None:
        output = render_result(ServiceResult(ok=False, op="test"))
        assert "Unknown error" in output


# ── Plan rendering ───────────────────────────────────────────────────


class TestPlanRenderer:
    def test_panel_contents(self) -> None:
        output = render_result(_ok("get_meal_plan", **_plan()))
        assert "OK" in output
        assert "2024-01-15 dinner" in output
        assert "cook: Alice" in output
        assert "Bob: skips" in output
        assert "Alice cooks dinner, Bob does not eat" in output
        assert "plan-1" not in output

    def test_take_over_hint(self) -> None:
        output = render_result(
            _ok("get_meal_plan", **_plan(can_take_preparation=["PERSON_B"])),
            names=Names("Mika", "Jo"),
        )
        assert "Jo can take over cooking" in output

    def test_no_take_over_hint_without_candidates(self) -> None:
        output = render_result(_ok("get_meal_plan", **_plan()))
        assert "take over" not in output

    def test_household_names(self) -> None:
        output = render_result(_ok("change_preparation_role", **_plan()), names=Names("Mika", "Jo"))
        assert "cook: Mika" in output
        assert "Jo: skips" in output

    def test_verbose_shows_id(self) -> None:
        output = render_result(_ok("preparer_quits", **_plan()), verbose=True)
        assert "plan-1" in output
        assert "updated" in output

    def test_day(self) -> None:
        lunch = _plan(
            id="plan-1",
            meal_type="LUNCH",
            preparation_role="PERSON_B",
            participation_b="WILL_PARTICIPATE",
            current_state=1,
        )
        dinner = _plan(id="plan-2")
        output = render_result(_ok("get_or_create_day", date="2024-01-15", lunch=lunch, dinner=dinner))
        assert "2024-01-15 lunch" in output
        assert "2024-01-15 dinner" in output
        assert "Bob cooks lunch, both eat" in output


class TestListRenderer:
    def test_table(self) -> None:
        items = [
            _plan(id="p1", meal_type="LUNCH", preparation_role="NONE", current_state=3),
            _plan(id="p2"),
        ]
        output = render_result(
            _ok(
                "list_meal_plans",
                start="2024-01-15",
                end="2024-01-21",
                meal_type=None,
                count=2,
                items=items,
            )
        )
        assert "Date" in output
        assert "nobody" in output
        assert "2 plans from 2024-01-15 to 2024-01-21" in output

    def test_verbose_adds_ids(self) -> None:
        result = _ok("list_meal_plans", start="a", end="b", count=1, items=[_plan(id="p9")])
        assert "p9" in render_result(result, verbose=True)


class TestOtherRenderers:
    def test_upgrade(self) -> None:
        output = render_result(_ok("upgrade", pending_count=0, current="001_baseline"))
        assert "pending_count: 0" in output
        assert "current: 001_baseline" in output

    def test_generic_fallback(self) -> None:
        output = render_result(_ok("config", db_path="/x/m.db", household={"person_a_name": "A"}))
        assert "config" in output
        assert "db_path: /x/m.db" in output
        assert '"person_a_name":"A"' in output


# ── Quiet mode ───────────────────────────────────────────────────────


class TestQuiet:
    def test_single_plan_id(self) -> None:
        assert render_quiet(_ok("get_meal_plan", **_plan())) == "plan-1"

    def test_list_ids(self) -> None:
        result = _ok("list_meal_plans", items=[{"id": "p1"}, {"id": "p2"}])
        assert render_quiet(result) == "p1\np2"

    def test_ok_without_id(self) -> None:
        assert render_quiet(_ok("init", db_path="x")) == "OK: init"

    def test_error(self) -> None:
        out = render_quiet(_err("show", "NOT_FOUND", "meal plan not found"))
        assert out.startswith("ERROR: show")
        assert "meal plan not found" in out
