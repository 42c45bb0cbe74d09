"""Social Security retirement benefit projection."""

from __future__ import annotations

import logging
from typing import List

from projections.core.engine import Period, ensure_valid, pick, run_projection
from projections.domain.money import whole_units
from projections.domain.social_security import (
    EARLIEST_CLAIMING_AGE,
    claiming_adjustment,
    estimate_pia,
    full_retirement_age,
)
from projections.schemas.common import FieldError
from projections.schemas.social_security import (
    SocialSecurityBenefitInput,
    SocialSecurityBenefitRow,
    SocialSecurityOverride,
)

logger = logging.getLogger(__name__)

ENGINE = "Social Security benefit"

LATEST_CLAIMING_AGE = 80


def validate_social_security_input(data: SocialSecurityBenefitInput) -> List[FieldError]:
    errors: List[FieldError] = []

    if data.startYear < 1900:
        errors.append(FieldError(field="startYear", message="Start Year cannot be before 1900"))
    if data.birthYear < 1900:
        errors.append(FieldError(field="birthYear", message="Birth Year cannot be before 1900"))
    if data.claimingAge < EARLIEST_CLAIMING_AGE or data.claimingAge > LATEST_CLAIMING_AGE:
        errors.append(
            FieldError(
                field="claimingAge",
                message=f"Claiming age must be between {EARLIEST_CLAIMING_AGE} and {LATEST_CLAIMING_AGE}",
            )
        )
    if data.averageIncome < 0:
        errors.append(FieldError(field="averageIncome", message="Average income cannot be negative"))
    if data.averageCOLA < -100:
        errors.append(FieldError(field="averageCOLA", message="COLA cannot be less than -100%"))
    if data.yearsToProject < 1:
        errors.append(FieldError(field="yearsToProject", message="Must project at least 1 year"))

    return errors


def initial_annual_benefit(data: SocialSecurityBenefitInput) -> float:
    fra = full_retirement_age(data.birthYear)
    return estimate_pia(data.averageIncome) * 12 * claiming_adjustment(data.claimingAge, fra)


def calculate_social_security_projection(data: SocialSecurityBenefitInput) -> List[SocialSecurityBenefitRow]:
    return calculate_social_security_projection_with_overrides(data.model_copy(update={"yearOverrides": {}}))


def calculate_social_security_projection_with_overrides(
    data: SocialSecurityBenefitInput,
) -> List[SocialSecurityBenefitRow]:
    ensure_valid(ENGINE, validate_social_security_input(data))

    claiming_year = data.birthYear + data.claimingAge
    benefit = initial_annual_benefit(data)

    for year in range(claiming_year + 1, data.startYear):
        benefit *= 1 + pick(data.yearOverrides.get(year), "colaApplied", data.averageCOLA) / 100

    def step(period: Period[SocialSecurityOverride]) -> SocialSecurityBenefitRow:
        nonlocal benefit
        year = period.key
        cola = 0.0
        paid = 0.0

        if year >= claiming_year:
            if year > claiming_year:
                cola = period.pick("colaApplied", data.averageCOLA)
                benefit *= 1 + cola / 100
            paid = benefit

        return SocialSecurityBenefitRow(
            year=year,
            age=year - data.birthYear,
            colaApplied=cola,
            annualBenefit=whole_units(paid),
            monthlyBenefit=whole_units(paid / 12),
            hasOverride=period.has_override,
        )

    rows = run_projection(data.startYear, data.yearsToProject, step, data.yearOverrides)
    logger.debug("%s projection produced %d rows", ENGINE, len(rows))
    return rows
