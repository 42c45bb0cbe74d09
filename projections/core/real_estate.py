"""Real estate carrying-cost projection.

Each cost or income line compounds by its own rate from the second year on.
An override replaces a line for its year and becomes the base that later
years grow from.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from projections.core.engine import Period, ensure_valid, run_projection
from projections.domain.money import whole_units
from projections.schemas.common import FieldError
from projections.schemas.real_estate import (
    RealEstatePropertyInput,
    RealEstatePropertyOverride,
    RealEstatePropertyRow,
)

logger = logging.getLogger(__name__)

ENGINE = "Real estate property"


@dataclass
class _CostLines:
    mortgage: float
    property_tax: float
    insurance: float
    hoa: float
    rental_income: float


def validate_real_estate_input(data: RealEstatePropertyInput) -> List[FieldError]:
    errors: List[FieldError] = []

    if data.startYear < 1900:
        errors.append(FieldError(field="startYear", message="Start year cannot be before 1900"))
    if data.monthlyMortgage < 0:
        errors.append(FieldError(field="monthlyMortgage", message="Monthly mortgage cannot be negative"))
    if data.annualPropertyTax < 0:
        errors.append(FieldError(field="annualPropertyTax", message="Property tax cannot be negative"))
    if data.annualInsurance < 0:
        errors.append(FieldError(field="annualInsurance", message="Insurance cannot be negative"))
    if data.propertyTaxIncreaseRate < 0:
        errors.append(
            FieldError(field="propertyTaxIncreaseRate", message="Property tax increase rate cannot be negative")
        )
    if data.insuranceIncreaseRate < 0:
        errors.append(FieldError(field="insuranceIncreaseRate", message="Insurance increase rate cannot be negative"))
    if data.monthlyHoaFee < 0:
        errors.append(FieldError(field="monthlyHoaFee", message="HOA fee cannot be negative"))
    if data.hoaFeeIncreaseRate < 0:
        errors.append(FieldError(field="hoaFeeIncreaseRate", message="HOA fee increase rate cannot be negative"))
    if data.monthlyRentalIncome < 0:
        errors.append(FieldError(field="monthlyRentalIncome", message="Rental income cannot be negative"))
    if data.yearsToProject < 1:
        errors.append(FieldError(field="yearsToProject", message="Must project at least 1 year"))

    return errors


def calculate_real_estate_projection(data: RealEstatePropertyInput) -> List[RealEstatePropertyRow]:
    return calculate_real_estate_projection_with_overrides(data.model_copy(update={"yearOverrides": {}}))


def calculate_real_estate_projection_with_overrides(data: RealEstatePropertyInput) -> List[RealEstatePropertyRow]:
    ensure_valid(ENGINE, validate_real_estate_input(data))

    lines = _CostLines(
        mortgage=data.monthlyMortgage,
        property_tax=data.annualPropertyTax,
        insurance=data.annualInsurance,
        hoa=data.monthlyHoaFee,
        rental_income=data.monthlyRentalIncome if data.propertyType == "rental" else 0.0,
    )

    def step(period: Period[RealEstatePropertyOverride]) -> RealEstatePropertyRow:
        year = period.key

        if not period.is_first:
            lines.property_tax *= 1 + data.propertyTaxIncreaseRate / 100
            lines.insurance *= 1 + data.insuranceIncreaseRate / 100
            lines.hoa *= 1 + data.hoaFeeIncreaseRate / 100
            lines.rental_income *= 1 + data.rentalIncomeIncreaseRate / 100

        default_mortgage = 0.0 if year > data.mortgageEndYear else lines.mortgage
        lines.mortgage = period.pick("monthlyMortgage", default_mortgage)
        lines.property_tax = period.pick("annualPropertyTax", lines.property_tax)
        lines.insurance = period.pick("annualInsurance", lines.insurance)
        lines.hoa = period.pick("monthlyHoaFee", lines.hoa)
        lines.rental_income = period.pick("monthlyRentalIncome", lines.rental_income)

        annual_expense = lines.property_tax + lines.insurance + 12 * (lines.hoa + lines.mortgage)
        annual_income = 12 * lines.rental_income

        return RealEstatePropertyRow(
            year=year,
            age=year - data.birthYear,
            monthlyMortgage=lines.mortgage,
            annualPropertyTax=whole_units(lines.property_tax),
            annualInsurance=whole_units(lines.insurance),
            monthlyHoaFee=whole_units(lines.hoa),
            monthlyRentalIncome=whole_units(lines.rental_income),
            monthlyIncome=whole_units(lines.rental_income),
            annualIncome=whole_units(annual_income),
            monthlyExpense=whole_units(annual_expense / 12),
            annualExpense=whole_units(annual_expense),
            annualNet=whole_units(annual_income - annual_expense),
            hasOverride=period.has_override,
        )

    rows = run_projection(data.startYear, data.yearsToProject, step, data.yearOverrides)
    logger.debug("%s projection produced %d rows", ENGINE, len(rows))
    return rows
