"""College tuition savings projection.

Contributions run through the last college year. During college, the year's
tuition (first-year tuition grown by inflation) is withdrawn, capped at what
the account holds after that year's contribution and yield.
"""

from __future__ import annotations

import logging
from typing import List

from projections.core.engine import Period, ensure_valid, run_projection
from projections.schemas.common import FieldError
from projections.schemas.tuition import CollegeTuitionInput, CollegeTuitionRow

logger = logging.getLogger(__name__)

ENGINE = "College tuition"


def validate_college_tuition_input(data: CollegeTuitionInput) -> List[FieldError]:
    errors: List[FieldError] = []

    if data.startYear < 1900:
        errors.append(FieldError(field="startYear", message="Start Year cannot be before 1900"))
    if data.birthYear < 1900:
        errors.append(FieldError(field="birthYear", message="Birth Year cannot be before 1900"))
    if data.yearsToProject < 1:
        errors.append(FieldError(field="yearsToProject", message="Must project at least 1 year"))
    if data.childBirthYear <= data.birthYear:
        errors.append(FieldError(field="childBirthYear", message="Child cannot be older than parent"))
    if data.childCollegeFirstYear <= data.childBirthYear:
        errors.append(
            FieldError(
                field="childCollegeFirstYear",
                message="Child's first year of college must be later than child's birth year",
            )
        )
    if data.childCollegeLastYear < data.childCollegeFirstYear:
        errors.append(
            FieldError(
                field="childCollegeLastYear",
                message="Child's last year of college cannot be before the first year of college",
            )
        )
    if data.initialBalance <= 0:
        errors.append(FieldError(field="initialBalance", message="Initial balance must be greater than zero"))
    if data.annualContribution < 0:
        errors.append(FieldError(field="annualContribution", message="Annual contribution cannot be negative"))
    if data.estimatedYield < -100:
        errors.append(FieldError(field="estimatedYield", message="Yield cannot be less than -100%"))
    if data.estimatedFirstYearTuition <= 0:
        errors.append(
            FieldError(
                field="estimatedFirstYearTuition",
                message="Estimated first year of tuition must be greater than zero",
            )
        )
    if data.estimatedInflationRate < -100:
        errors.append(FieldError(field="estimatedInflationRate", message="Inflation cannot be less than -100%"))

    return errors


def tuition_for_year(data: CollegeTuitionInput, year: int) -> float:
    if not data.childCollegeFirstYear <= year <= data.childCollegeLastYear:
        return 0.0
    years_in = year - data.childCollegeFirstYear
    return data.estimatedFirstYearTuition * (1 + data.estimatedInflationRate / 100) ** years_in


def calculate_college_tuition_projection(data: CollegeTuitionInput) -> List[CollegeTuitionRow]:
    ensure_valid(ENGINE, validate_college_tuition_input(data))

    balance = data.initialBalance

    def step(period: Period) -> CollegeTuitionRow:
        nonlocal balance
        year = period.key
        beginning = balance
        contribution = data.annualContribution if year <= data.childCollegeLastYear else 0.0
        yield_amount = beginning * data.estimatedYield / 100
        tuition = tuition_for_year(data, year)

        available = beginning + contribution + yield_amount
        withdraw = min(tuition, available)
        balance = available - withdraw

        return CollegeTuitionRow(
            year=year,
            age=year - data.birthYear,
            childAge=year - data.childBirthYear,
            beginningBalance=beginning,
            contribution=contribution,
            yieldPercent=data.estimatedYield,
            yieldAmount=yield_amount,
            tuitionAmount=tuition,
            annualWithdraw=withdraw,
            endingBalance=balance,
        )

    rows = run_projection(data.startYear, data.yearsToProject, step)
    logger.debug("%s projection produced %d rows", ENGINE, len(rows))
    return rows
