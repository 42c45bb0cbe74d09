"""FERS basic annuity projection."""

from __future__ import annotations

import logging
from typing import Dict, List

from projections.core.engine import Period, ensure_valid, pick, run_projection
from projections.domain.fers import (
    COLA_START_AGE,
    annuity_factor,
    early_reduction_percent,
    high3_average,
    minimum_service_years,
)
from projections.schemas.common import FieldError
from projections.schemas.pension import FersPensionInput, FersPensionOverride, FersPensionRow

logger = logging.getLogger(__name__)

ENGINE = "FERS pension"

MINIMUM_HIRE_AGE = 16


def years_of_service(data: FersPensionInput) -> int:
    if data.retirementType == "deferred" and data.serviceEndYear is not None:
        return data.serviceEndYear - data.serviceStartYear
    return data.retirementAge - (data.serviceStartYear - data.birthYear)


def validate_fers_pension_input(data: FersPensionInput) -> List[FieldError]:
    errors: List[FieldError] = []

    if data.startYear < 1900:
        errors.append(FieldError(field="startYear", message="Start Year cannot be before 1900"))
    if data.birthYear < 1900:
        errors.append(FieldError(field="birthYear", message="Birth Year cannot be before 1900"))
    if data.serviceStartYear < 1900:
        errors.append(FieldError(field="serviceStartYear", message="Service Start Year cannot be before 1900"))
    if data.serviceEndYear is not None and data.serviceEndYear < 1900:
        errors.append(FieldError(field="serviceEndYear", message="Service End Year cannot be before 1900"))
    if data.retirementAge < 40 or data.retirementAge > 80:
        errors.append(FieldError(field="retirementAge", message="Retirement Age must be between 40 and 80"))
    if data.yearsToProject < 1:
        errors.append(FieldError(field="yearsToProject", message="Must project at least 1 year"))
    if data.currentSalary <= 0:
        errors.append(FieldError(field="currentSalary", message="Salary must be greater than zero"))
    if data.salaryGrowthRate < -100:
        errors.append(FieldError(field="salaryGrowthRate", message="Growth rate cannot be less than -100%"))
    if data.colaPercent < -100:
        errors.append(FieldError(field="colaPercent", message="COLA cannot be less than -100%"))
    if data.pensionMultiplier < 0:
        errors.append(FieldError(field="pensionMultiplier", message="Pension multiplier cannot be negative"))
    if data.survivorBenefitReduction < 0 or data.survivorBenefitReduction > 100:
        errors.append(
            FieldError(field="survivorBenefitReduction", message="Survivor benefit reduction must be between 0% and 100%")
        )

    if data.serviceStartYear - data.birthYear < MINIMUM_HIRE_AGE:
        errors.append(
            FieldError(field="serviceStartYear", message=f"Must be at least {MINIMUM_HIRE_AGE} to start federal job")
        )

    minimum = minimum_service_years(data.birthYear, data.retirementAge, data.retirementType)
    if minimum == 0:
        errors.append(FieldError(field="retirementType", message="Not eligible to retire with pension"))
    if years_of_service(data) < minimum:
        errors.append(
            FieldError(
                field="serviceStartYear",
                message=f"Must serve at least {minimum} years for {data.retirementType} retirement",
            )
        )

    if data.retirementType == "deferred":
        if data.serviceEndYear is None:
            errors.append(
                FieldError(field="serviceEndYear", message="Service End Year must be provided for deferred retirement")
            )
        if data.high3Salary <= 0:
            errors.append(
                FieldError(field="high3Salary", message="High-3 salary must be provided for deferred retirement")
            )

    return errors


def _salary_history(data: FersPensionInput, retirement_year: int) -> Dict[int, float]:
    """Salaries from startYear up to the year before retirement, overrides applied.

    A salary override replaces that year's salary; a growth-rate override sets
    the rate used to reach the following year.
    """
    history: Dict[int, float] = {}
    salary = data.currentSalary
    for year in range(data.startYear, retirement_year):
        override = data.yearOverrides.get(year)
        salary = max(pick(override, "salary", salary), 0.0)
        history[year] = salary
        salary *= 1 + pick(override, "salaryGrowthRate", data.salaryGrowthRate) / 100

    if data.startYear >= retirement_year:
        history[data.startYear] = data.currentSalary
    return history


def initial_annual_pension(data: FersPensionInput, history: Dict[int, float]) -> float:
    """Annual annuity payable in the retirement year, before any COLA."""
    if data.retirementType == "deferred":
        high3 = data.high3Salary
    else:
        high3 = high3_average(list(history.values()))

    service = years_of_service(data)
    reduction = early_reduction_percent(data.retirementType, data.retirementAge, service)
    return (
        high3
        * annuity_factor(data.pensionMultiplier, service)
        * (1 - reduction / 100)
        * (1 - data.survivorBenefitReduction / 100)
    )


def calculate_fers_pension_projection(data: FersPensionInput) -> List[FersPensionRow]:
    return calculate_fers_pension_projection_with_overrides(data.model_copy(update={"yearOverrides": {}}))


def calculate_fers_pension_projection_with_overrides(data: FersPensionInput) -> List[FersPensionRow]:
    ensure_valid(ENGINE, validate_fers_pension_input(data))

    retirement_year = data.birthYear + data.retirementAge
    history = _salary_history(data, retirement_year)
    pension = initial_annual_pension(data, history)

    def step(period: Period[FersPensionOverride]) -> FersPensionRow:
        nonlocal pension
        year = period.key
        age = year - data.birthYear
        salary = 0.0
        growth_rate = 0.0
        cola = 0.0
        paid = 0.0

        if year < retirement_year:
            waiting = (
                data.retirementType == "deferred"
                and data.serviceEndYear is not None
                and year > data.serviceEndYear
            )
            if not waiting:
                salary = history[year]
                if period.pick("salary", None) is None:
                    growth_rate = period.pick("salaryGrowthRate", data.salaryGrowthRate)
        else:
            if age >= COLA_START_AGE and year > retirement_year:
                cola = period.pick("colaApplied", data.colaPercent)
                pension *= 1 + cola / 100
            paid = pension

        return FersPensionRow(
            year=year,
            age=age,
            salary=salary,
            salaryGrowthRate=growth_rate,
            pension=paid,
            monthlyPension=paid / 12,
            colaApplied=cola,
            hasOverride=period.has_override,
        )

    rows = run_projection(data.startYear, data.yearsToProject, step, data.yearOverrides)
    logger.debug("%s projection produced %d rows", ENGINE, len(rows))
    return rows
