"""Military retired pay projection (High-3 and Blended Retirement System)."""

from __future__ import annotations

import logging
from typing import List

from projections.core.engine import Period, ensure_valid, pick, run_projection
from projections.schemas.common import FieldError
from projections.schemas.pension import (
    MilitaryPensionInput,
    MilitaryPensionOverride,
    MilitaryPensionRow,
)

logger = logging.getLogger(__name__)

ENGINE = "Military pension"

MINIMUM_ENLISTMENT_AGE = 17
MINIMUM_SERVICE_YEARS = 20

PENSION_MULTIPLIERS = {
    "high3": 2.5,
    "brs": 2.0,
}


def validate_military_pension_input(data: MilitaryPensionInput) -> List[FieldError]:
    errors: List[FieldError] = []

    if data.startYear < 1900:
        errors.append(FieldError(field="startYear", message="Start Year cannot be before 1900"))
    if data.birthYear < 1900:
        errors.append(FieldError(field="birthYear", message="Birth Year cannot be before 1900"))
    if data.serviceStartYear < 1900:
        errors.append(FieldError(field="serviceStartYear", message="Service Start Year cannot be before 1900"))
    if data.serviceEndYear < 1900:
        errors.append(FieldError(field="serviceEndYear", message="Service End Year cannot be before 1900"))
    if data.serviceStartYear > data.serviceEndYear:
        errors.append(
            FieldError(field="serviceStartYear", message="Service Start Year cannot be after Service End Year")
        )
    if data.yearsToProject < 1:
        errors.append(FieldError(field="yearsToProject", message="Must project at least 1 year"))
    if data.high3Salary <= 0:
        errors.append(FieldError(field="high3Salary", message="High-3 Salary must be greater than zero"))
    if data.colaPercent < -100:
        errors.append(FieldError(field="colaPercent", message="COLA cannot be less than -100%"))
    if data.serviceStartYear - data.birthYear < MINIMUM_ENLISTMENT_AGE:
        errors.append(
            FieldError(field="serviceStartYear", message=f"Must be at least {MINIMUM_ENLISTMENT_AGE} to join service")
        )
    if data.serviceEndYear - data.serviceStartYear < MINIMUM_SERVICE_YEARS:
        errors.append(
            FieldError(
                field="serviceStartYear",
                message=f"Must serve at least {MINIMUM_SERVICE_YEARS} years for a regular active-duty retirement",
            )
        )

    return errors


def calculate_military_pension_projection(data: MilitaryPensionInput) -> List[MilitaryPensionRow]:
    return calculate_military_pension_projection_with_overrides(data.model_copy(update={"yearOverrides": {}}))


def calculate_military_pension_projection_with_overrides(data: MilitaryPensionInput) -> List[MilitaryPensionRow]:
    ensure_valid(ENGINE, validate_military_pension_input(data))

    retirement_year = data.serviceEndYear
    service = data.serviceEndYear - data.serviceStartYear
    pension = data.high3Salary * service * PENSION_MULTIPLIERS[data.retirementType] / 100

    # retired before the projection window: catch up on the COLAs already paid
    for year in range(retirement_year + 1, data.startYear):
        pension *= 1 + pick(data.yearOverrides.get(year), "colaApplied", data.colaPercent) / 100

    def step(period: Period[MilitaryPensionOverride]) -> MilitaryPensionRow:
        nonlocal pension
        year = period.key
        cola = 0.0
        paid = 0.0

        if year >= retirement_year:
            if year > retirement_year:
                cola = period.pick("colaApplied", data.colaPercent)
                pension *= 1 + cola / 100
            paid = pension

        return MilitaryPensionRow(
            year=year,
            age=year - data.birthYear,
            pension=paid,
            monthlyPension=paid / 12,
            colaApplied=cola,
            hasOverride=period.has_override,
        )

    rows = run_projection(data.startYear, data.yearsToProject, step, data.yearOverrides)
    logger.debug("%s projection produced %d rows", ENGINE, len(rows))
    return rows
