"""Field differ: diff() and compare_snapshots() over the tracked fields."""

from datetime import date
from decimal import Decimal

from app.application.services.field_differ import compare_snapshots, deep_equal, diff
from app.domain.value_objects.snapshot import MISSING
from app.domain.value_objects.tracked_fields import TRACKED_FIELD_NAMES, build_snapshot


def _state(**overrides):
    state = {
        "full_name": "Ada Lovelace",
        "email": "ada@example.com",
        "phone_number": "555-123-4567",
        "department": "Engineering",
        "designation": "Engineer",
        "salary": 50000,
        "employment_status": "Active",
        "date_of_joining": date(2024, 1, 15),
    }
    state.update(overrides)
    return build_snapshot(state)


def test_diff_reports_only_changed_fields() -> None:
    changes = diff(TRACKED_FIELD_NAMES, _state(), _state(salary=60000))
    assert len(changes) == 1
    change = changes[0]
    assert change.field == "salary"
    assert change.old_value == 50000
    assert change.new_value == 60000


def test_diff_identical_snapshots_is_empty() -> None:
    assert diff(TRACKED_FIELD_NAMES, _state(), _state()) == []


def test_diff_without_before_is_empty() -> None:
    """Creation has no prior state, so there is no delta."""
    assert diff(TRACKED_FIELD_NAMES, None, _state()) == []


def test_diff_follows_tracked_order() -> None:
    changes = diff(
        TRACKED_FIELD_NAMES,
        _state(),
        _state(salary=70000, full_name="Ada King", department="IT"),
    )
    assert [c.field for c in changes] == ["full_name", "department", "salary"]


def test_diff_ignores_untracked_fields() -> None:
    before = _state(updated_at="2024-01-01T00:00:00+00:00")
    after = _state(updated_at="2024-06-01T00:00:00+00:00")
    assert diff(TRACKED_FIELD_NAMES, before, after) == []


def test_diff_normalizes_equivalent_representations() -> None:
    """Whitespace, email case, 50000 vs 50000.00, date vs ISO string are not changes."""
    before = {
        "full_name": "Ada Lovelace",
        "email": "ada@example.com",
        "salary": 50000,
        "date_of_joining": date(2024, 1, 15),
    }
    after = {
        "full_name": "  Ada Lovelace ",
        "email": "ADA@example.com",
        "salary": Decimal("50000.00"),
        "date_of_joining": "2024-01-15",
    }
    fields = ("full_name", "email", "salary", "date_of_joining")
    assert diff(fields, before, after) == []


def test_missing_field_differs_from_present_value() -> None:
    before = {"full_name": "Ada"}
    after = {"full_name": "Ada", "designation": "Engineer"}
    changes = diff(("full_name", "designation"), before, after)
    assert len(changes) == 1
    assert changes[0].old_value is MISSING
    assert changes[0].to_dict() == {
        "field": "designation",
        "old_value": None,
        "new_value": "Engineer",
    }


def test_missing_field_differs_from_explicit_none() -> None:
    changes = diff(("designation",), {}, {"designation": None})
    assert len(changes) == 1


def test_field_missing_on_both_sides_is_unchanged() -> None:
    assert diff(("designation",), {}, {}) == []


def test_deep_equal_is_order_insensitive_for_nested_structures() -> None:
    assert deep_equal({"tags": ["a", "b"]}, {"tags": ["b", "a"]})
    assert deep_equal([{"x": 1, "y": 2}], [{"y": 2, "x": 1}])
    assert not deep_equal({"tags": ["a"]}, {"tags": ["a", "a"]})


def test_deep_equal_is_exact_for_scalars() -> None:
    assert deep_equal("x", "x")
    assert not deep_equal(1, 1.5)
    assert not deep_equal(True, 1)
    assert not deep_equal("1", 1)
    assert deep_equal(MISSING, MISSING)
    assert not deep_equal(MISSING, None)


def test_compare_snapshots_is_symmetric() -> None:
    v1 = _state()
    v2 = _state(salary=60000, designation="Senior Engineer")
    forward = compare_snapshots(TRACKED_FIELD_NAMES, v1, v2)
    backward = compare_snapshots(TRACKED_FIELD_NAMES, v2, v1)
    assert [d.field for d in forward] == [d.field for d in backward]
    for f, b in zip(forward, backward):
        assert f.version1_value == b.version2_value
        assert f.version2_value == b.version1_value


def test_compare_snapshots_of_same_snapshot_is_empty() -> None:
    v = _state()
    assert compare_snapshots(TRACKED_FIELD_NAMES, v, v) == []


def test_record_changes_agree_with_snapshot_comparison() -> None:
    before = _state()
    after = _state(salary=60000, email="ada.l@example.com")
    changes = diff(TRACKED_FIELD_NAMES, before, after)
    differences = compare_snapshots(TRACKED_FIELD_NAMES, before, after)
    assert [(c.field, c.old_value, c.new_value) for c in changes] == [
        (d.field, d.version1_value, d.version2_value) for d in differences
    ]
