"""FERS eligibility and annuity rules."""

from __future__ import annotations

from typing import Literal

FersRetirementType = Literal["regular", "mra10", "early", "deferred"]

SPECIAL_PROVISION_THRESHOLD = 1.5
SPECIAL_PROVISION_FIRST_TIER = 1.7
SPECIAL_PROVISION_SECOND_TIER = 1.0
SPECIAL_PROVISION_TIER_YEARS = 20

COLA_START_AGE = 63
FULL_ANNUITY_AGE = 62
FULL_SERVICE_YEARS = 30
REDUCTION_PER_YEAR_UNDER_62 = 5.0


def minimum_retirement_age(birth_year: int) -> float:
    """Return the MRA in (fractional) years for someone born in ``birth_year``.

    The 1948-1952 and 1965-1969 cohorts phase in two months per birth year.
    """
    if birth_year < 1948:
        return 55.0
    if birth_year <= 1952:
        return 55 + (birth_year - 1947) * 2 / 12
    if birth_year <= 1964:
        return 56.0
    if birth_year <= 1969:
        return 56 + (birth_year - 1964) * 2 / 12
    return 57.0


def minimum_service_years(birth_year: int, retirement_age: int, retirement_type: FersRetirementType) -> int:
    """Minimum years of service for ``retirement_type`` at ``retirement_age``.

    Returns 0 when the combination is not eligible for a pension at all.
    """
    mra = minimum_retirement_age(birth_year)

    if retirement_type == "regular":
        if retirement_age >= 62:
            return 5
        if retirement_age >= 60:
            return 20
        if retirement_age >= mra:
            return 30
        return 0

    if retirement_type == "mra10":
        return 10 if retirement_age >= mra else 0

    if retirement_type == "early":
        return 20 if retirement_age >= 50 else 25

    if retirement_type == "deferred":
        if retirement_age >= 62:
            return 5
        if retirement_age >= mra:
            return 10
        return 0

    return 0


def early_reduction_percent(retirement_type: FersRetirementType, retirement_age: int, years_of_service: float) -> float:
    # MRA+10 and deferred annuities lose 5% per year under 62 unless fully vested.
    if retirement_type not in ("mra10", "deferred"):
        return 0.0
    if years_of_service >= FULL_SERVICE_YEARS:
        return 0.0
    if retirement_type == "deferred" and years_of_service >= 20 and retirement_age >= 60:
        return 0.0
    years_under_62 = max(0, FULL_ANNUITY_AGE - retirement_age)
    return REDUCTION_PER_YEAR_UNDER_62 * years_under_62


def annuity_factor(pension_multiplier: float, years_of_service: float) -> float:
    """Fraction of high-3 paid per year as a basic annuity.

    Multipliers above 1.5% are treated as special-provision (law enforcement,
    firefighter, air traffic) coverage: 1.7% for the first 20 years and 1.0%
    for every year after.
    """
    if pension_multiplier > SPECIAL_PROVISION_THRESHOLD:
        first = min(years_of_service, SPECIAL_PROVISION_TIER_YEARS)
        rest = max(years_of_service - SPECIAL_PROVISION_TIER_YEARS, 0)
        return (first * SPECIAL_PROVISION_FIRST_TIER + rest * SPECIAL_PROVISION_SECOND_TIER) / 100
    return pension_multiplier / 100 * years_of_service


def high3_average(salaries: list[float]) -> float:
    last = salaries[-3:]
    if not last:
        return 0.0
    return sum(last) / len(last)
