"""Social Security benefit formula helpers (2025 parameters)."""

from __future__ import annotations

BEND_POINT_1 = 1226
BEND_POINT_2 = 7391
TAXABLE_MAXIMUM = 176_100

EARLY_REDUCTION_PER_MONTH = 0.005
DELAYED_CREDIT_PER_MONTH = 0.0067
MAX_CREDIT_AGE = 70
EARLIEST_CLAIMING_AGE = 62


def full_retirement_age(birth_year: int) -> float:
    if birth_year <= 1937:
        return 65.0
    if birth_year <= 1942:
        return 65 + (birth_year - 1937) * 2 / 12
    if birth_year <= 1954:
        return 66.0
    if birth_year <= 1959:
        return 66 + (birth_year - 1954) * 2 / 12
    return 67.0


def estimate_pia(average_income: float) -> float:
    """Monthly primary insurance amount from average annual earnings.

    Earnings above the taxable maximum do not count toward benefits.
    """
    monthly = min(max(average_income, 0.0), TAXABLE_MAXIMUM) / 12

    if monthly <= BEND_POINT_1:
        return monthly * 0.9
    if monthly <= BEND_POINT_2:
        return BEND_POINT_1 * 0.9 + (monthly - BEND_POINT_1) * 0.32
    return (
        BEND_POINT_1 * 0.9
        + (BEND_POINT_2 - BEND_POINT_1) * 0.32
        + (monthly - BEND_POINT_2) * 0.15
    )


def claiming_adjustment(claiming_age: float, fra: float) -> float:
    """Multiplier applied to the PIA for claiming before or after FRA.

    Delayed retirement credits stop accruing at age 70.
    """
    if claiming_age < fra:
        months_early = (fra - claiming_age) * 12
        return 1 - months_early * EARLY_REDUCTION_PER_MONTH
    credited_age = min(claiming_age, MAX_CREDIT_AGE)
    if credited_age > fra:
        months_late = (credited_age - fra) * 12
        return 1 + months_late * DELAYED_CREDIT_PER_MONTH
    return 1.0
