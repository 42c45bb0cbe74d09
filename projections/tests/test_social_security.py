from __future__ import annotations

from projections.core.social_security import (
    calculate_social_security_projection,
    calculate_social_security_projection_with_overrides,
    initial_annual_benefit,
    validate_social_security_input,
)
from projections.domain.money import whole_units
from projections.schemas.social_security import SocialSecurityBenefitInput, SocialSecurityOverride


def benefit_input(**changes) -> SocialSecurityBenefitInput:
    values = {
        "startYear": 2025,
        "birthYear": 1970,
        "claimingAge": 67,
        "averageIncome": 60_000,
        "averageCOLA": 2,
        "yearsToProject": 30,
    }
    values.update(changes)
    return SocialSecurityBenefitInput(**values)


def benefit_at_age(rows, age):
    return next(row for row in rows if row.age == age).annualBenefit


def test_generates_one_row_per_year():
    rows = calculate_social_security_projection(benefit_input())

    assert len(rows) == 30
    assert [row.year for row in rows] == list(range(2025, 2055))


def test_zero_benefit_before_claiming():
    rows = calculate_social_security_projection(benefit_input())

    assert all(row.annualBenefit == 0 and row.monthlyBenefit == 0 for row in rows if row.year < 2037)


def test_claiming_at_fra_pays_the_pia():
    rows = calculate_social_security_projection(benefit_input())

    pia = 1226 * 0.9 + (5000 - 1226) * 0.32
    assert benefit_at_age(rows, 67) == whole_units(pia * 12)
    assert next(row for row in rows if row.age == 67).colaApplied == 0


def test_early_claim_is_reduced_and_late_claim_increased():
    early = benefit_at_age(calculate_social_security_projection(benefit_input(claimingAge=62)), 62)
    fra = benefit_at_age(calculate_social_security_projection(benefit_input(claimingAge=67)), 67)
    late = benefit_at_age(calculate_social_security_projection(benefit_input(claimingAge=70)), 70)

    assert early < fra < late


def test_delayed_credits_stop_at_70():
    assert initial_annual_benefit(benefit_input(claimingAge=72)) == initial_annual_benefit(
        benefit_input(claimingAge=70)
    )


def test_cola_increases_benefit_every_year_after_claiming():
    rows = [row for row in calculate_social_security_projection(benefit_input()) if row.age >= 67]

    for previous, current in zip(rows, rows[1:]):
        assert current.annualBenefit > previous.annualBenefit
        assert current.colaApplied == 2


def test_monthly_benefit_is_annual_over_12():
    for row in calculate_social_security_projection(benefit_input()):
        assert abs(row.monthlyBenefit - row.annualBenefit / 12) <= 1


def test_cola_is_back_applied_when_already_claiming():
    rows = calculate_social_security_projection(benefit_input(startYear=2040, claimingAge=62))

    expected = initial_annual_benefit(benefit_input(claimingAge=62)) * 1.02 ** 8
    assert abs(rows[0].annualBenefit - expected) <= 1


def test_cola_override_of_zero_freezes_that_year():
    data = benefit_input(yearOverrides={2038: SocialSecurityOverride(colaApplied=0)})

    rows = calculate_social_security_projection_with_overrides(data)
    by_year = {row.year: row for row in rows}

    assert by_year[2038].colaApplied == 0
    assert by_year[2038].annualBenefit == by_year[2037].annualBenefit
    assert by_year[2038].hasOverride
    assert by_year[2039].colaApplied == 2


def test_income_above_taxable_maximum_does_not_raise_benefit():
    capped = calculate_social_security_projection(benefit_input(averageIncome=176_100))
    above = calculate_social_security_projection(benefit_input(averageIncome=400_000))

    assert capped == above


def test_validation_reports_each_rule():
    errors = validate_social_security_input(benefit_input(claimingAge=60, averageIncome=-1, yearsToProject=0))

    assert [error.field for error in errors] == ["claimingAge", "averageIncome", "yearsToProject"]
