from __future__ import annotations

import pytest

from projections.core.engine import InputValidationError, Period, ensure_valid, pick, run_projection
from projections.schemas.common import FieldError
from projections.schemas.pension import FersPensionOverride


def test_pick_prefers_present_override_even_when_zero():
    override = FersPensionOverride(colaApplied=0.0)

    assert pick(override, "colaApplied", 2.5) == 0.0
    assert pick(override, "salary", 90000.0) == 90000.0
    assert pick(None, "salary", 90000.0) == 90000.0


def test_period_reports_override_presence():
    assert Period(index=0, key=2030, override=FersPensionOverride(salary=0.0)).has_override
    assert not Period(index=0, key=2030, override=FersPensionOverride()).has_override
    assert not Period(index=0, key=2030).has_override


def test_run_projection_looks_up_each_year_once_in_order():
    seen = []

    def step(period: Period) -> int:
        seen.append((period.index, period.key, period.override))
        return period.key

    overrides = {2026: FersPensionOverride(salary=1.0)}
    rows = run_projection(2025, 3, step, overrides)

    assert rows == [2025, 2026, 2027]
    assert seen[0] == (0, 2025, None)
    assert seen[1][2] is overrides[2026]


def test_run_projection_stops_early_when_told_to():
    rows = run_projection(1, 100, lambda period: period.key, stop_when=lambda row: row >= 4)
    assert rows == [1, 2, 3, 4]


def test_ensure_valid_raises_with_every_error():
    errors = [
        FieldError(field="startYear", message="Start Year cannot be before 1900"),
        FieldError(field="yearsToProject", message="Must project at least 1 year"),
    ]

    with pytest.raises(InputValidationError) as excinfo:
        ensure_valid("Test", errors)

    assert excinfo.value.errors == errors
    assert excinfo.value.engine == "Test"
    assert "yearsToProject" in str(excinfo.value)


def test_ensure_valid_passes_on_empty_list():
    ensure_valid("Test", [])
