from __future__ import annotations

from math import isclose

import pytest

from projections.core.engine import InputValidationError
from projections.core.savings import (
    calculate_retirement_savings_projection,
    calculate_retirement_savings_projection_with_overrides,
    validate_retirement_savings_input,
)
from projections.schemas.savings import RetirementSavingsInput, RetirementSavingsOverride


def savings_input(**changes) -> RetirementSavingsInput:
    values = {
        "startYear": 2025,
        "birthYear": 1980,
        "initialBalance": 100_000,
        "initialContribution": 20_000,
        "estimatedYield": 6,
        "estimatedWithdrawRate": 0,
        "contributionIncreaseRate": 2,
        "withdrawStartAge": 60,
        "yearsToProject": 30,
    }
    values.update(changes)
    return RetirementSavingsInput(**values)


def test_grows_with_contributions_before_withdrawals():
    rows = calculate_retirement_savings_projection(savings_input())

    assert len(rows) == 30
    assert isclose(rows[0].endingBalance, 126_000, abs_tol=0.01)
    assert rows[-1].endingBalance > 1_000_000


def test_zero_yield_accumulates_contributions_exactly():
    rows = calculate_retirement_savings_projection(
        savings_input(
            birthYear=1985,
            initialBalance=20_000,
            initialContribution=10_000,
            estimatedYield=0,
            contributionIncreaseRate=0,
            withdrawStartAge=70,
            yearsToProject=10,
        )
    )

    assert rows[-1].endingBalance == 20_000 + 10_000 * 10


def test_contributions_stop_and_withdrawals_start_at_withdraw_age():
    rows = calculate_retirement_savings_projection(
        savings_input(
            birthYear=1970,
            initialBalance=500_000,
            initialContribution=25_000,
            estimatedYield=3,
            estimatedWithdrawRate=4,
            contributionIncreaseRate=0,
            yearsToProject=20,
        )
    )

    index = next(i for i, row in enumerate(rows) if row.age == 60)
    assert index > 0
    assert rows[index - 1].contribution == 25_000
    at60 = rows[index]
    assert at60.monthlyWithdraw > 0
    assert isclose(at60.monthlyWithdraw, at60.annualWithdraw / 12)
    assert at60.endingBalance < at60.beginningBalance
    assert all(row.contribution == 0 for row in rows[index:])


def test_withdraw_rate_applies_to_beginning_balance():
    rows = calculate_retirement_savings_projection(
        savings_input(birthYear=1960, initialBalance=200_000, initialContribution=0, estimatedYield=2,
                      estimatedWithdrawRate=10, withdrawStartAge=65, yearsToProject=20)
    )

    first = rows[0]
    assert isclose(first.annualWithdraw, 20_000)
    assert isclose(first.endingBalance, 200_000 + 4_000 - 20_000)
    assert 0 <= rows[-1].endingBalance < 200_000


def test_negative_starting_amounts_are_floored():
    rows = calculate_retirement_savings_projection(savings_input(initialBalance=-5_000, initialContribution=-100))

    assert rows[0].beginningBalance == 0
    assert rows[0].contribution == 0


def test_validation_reports_every_violation_in_order():
    data = savings_input(
        startYear=1800,
        birthYear=1800,
        estimatedYield=-150,
        estimatedWithdrawRate=150,
        withdrawStartAge=90,
        yearsToProject=0,
    )

    errors = validate_retirement_savings_input(data)

    assert [error.field for error in errors] == [
        "startYear",
        "birthYear",
        "estimatedYield",
        "estimatedWithdrawRate",
        "withdrawStartAge",
        "yearsToProject",
    ]
    with pytest.raises(InputValidationError) as excinfo:
        calculate_retirement_savings_projection(data)
    assert excinfo.value.errors == errors


def test_valid_input_has_no_errors():
    assert validate_retirement_savings_input(savings_input()) == []


def test_overrides_win_for_their_year_only():
    data = savings_input(
        yearOverrides={
            2026: RetirementSavingsOverride(yieldPercent=0, contribution=30_000),
        }
    )

    rows = calculate_retirement_savings_projection_with_overrides(data)
    by_year = {row.year: row for row in rows}

    assert by_year[2026].yieldPercent == 0
    assert by_year[2026].yieldAmount == 0
    assert by_year[2026].contribution == 30_000
    assert by_year[2026].hasOverride
    assert by_year[2027].yieldPercent == 6
    # the overridden contribution is the base for the next year's increase
    assert isclose(by_year[2027].contribution, 30_600)
    assert not by_year[2027].hasOverride


def test_flat_withdrawal_override_is_not_capped():
    data = savings_input(
        initialBalance=1_000,
        initialContribution=0,
        estimatedYield=0,
        yearsToProject=2,
        yearOverrides={2025: RetirementSavingsOverride(annualWithdraw=5_000)},
    )

    rows = calculate_retirement_savings_projection_with_overrides(data)

    assert rows[0].annualWithdraw == 5_000
    assert rows[0].endingBalance == -4_000


def test_plain_projection_ignores_overrides():
    data = savings_input(yearOverrides={2026: RetirementSavingsOverride(contribution=0)})

    plain = calculate_retirement_savings_projection(data)

    assert plain == calculate_retirement_savings_projection(savings_input())
    assert not any(row.hasOverride for row in plain)


def test_projection_is_deterministic():
    assert calculate_retirement_savings_projection(savings_input()) == calculate_retirement_savings_projection(
        savings_input()
    )
