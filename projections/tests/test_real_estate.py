from __future__ import annotations

from projections.core.real_estate import (
    calculate_real_estate_projection,
    calculate_real_estate_projection_with_overrides,
    validate_real_estate_input,
)
from projections.schemas.real_estate import RealEstatePropertyInput, RealEstatePropertyOverride


def property_input(**changes) -> RealEstatePropertyInput:
    values = {
        "startYear": 2025,
        "birthYear": 1980,
        "propertyType": "rental",
        "monthlyMortgage": 1_500,
        "mortgageEndYear": 2027,
        "annualPropertyTax": 3_000,
        "propertyTaxIncreaseRate": 2,
        "annualInsurance": 1_200,
        "insuranceIncreaseRate": 3,
        "monthlyHoaFee": 100,
        "hoaFeeIncreaseRate": 0,
        "monthlyRentalIncome": 2_000,
        "rentalIncomeIncreaseRate": 1,
        "yearsToProject": 6,
    }
    values.update(changes)
    return RealEstatePropertyInput(**values)


def row_for(rows, year):
    return next(row for row in rows if row.year == year)


def test_first_year_totals():
    first = calculate_real_estate_projection(property_input())[0]

    assert first.age == 45
    assert first.annualExpense == 23_400
    assert first.monthlyExpense == 1_950
    assert first.annualIncome == 24_000
    assert first.monthlyIncome == 2_000
    assert first.annualNet == 600


def test_costs_grow_from_the_second_year():
    rows = calculate_real_estate_projection(property_input())

    assert rows[1].annualPropertyTax == 3_060
    assert rows[1].annualInsurance == 1_236
    assert rows[1].monthlyHoaFee == 100
    assert rows[1].monthlyRentalIncome == 2_020


def test_mortgage_stops_after_end_year():
    rows = calculate_real_estate_projection(property_input())

    assert row_for(rows, 2027).monthlyMortgage == 1_500
    assert all(row.monthlyMortgage == 0 for row in rows if row.year > 2027)


def test_residence_has_no_rental_income():
    rows = calculate_real_estate_projection(property_input(propertyType="residence"))

    assert all(row.annualIncome == 0 for row in rows)
    assert rows[0].annualNet == -23_400


def test_override_becomes_the_base_for_later_growth():
    data = property_input(yearOverrides={2026: RealEstatePropertyOverride(annualPropertyTax=5_000)})

    rows = calculate_real_estate_projection_with_overrides(data)

    assert row_for(rows, 2026).annualPropertyTax == 5_000
    assert row_for(rows, 2026).hasOverride
    assert row_for(rows, 2027).annualPropertyTax == 5_100
    assert not row_for(rows, 2027).hasOverride


def test_mortgage_override_applies_after_end_year():
    data = property_input(yearOverrides={2029: RealEstatePropertyOverride(monthlyMortgage=800)})

    rows = calculate_real_estate_projection_with_overrides(data)

    assert row_for(rows, 2029).monthlyMortgage == 800
    assert row_for(rows, 2030).monthlyMortgage == 0


def test_validation_reports_each_rule():
    errors = validate_real_estate_input(
        property_input(monthlyMortgage=-1, insuranceIncreaseRate=-2, yearsToProject=0)
    )

    assert [error.field for error in errors] == ["monthlyMortgage", "insuranceIncreaseRate", "yearsToProject"]
