"""Retirement savings projection.

Per year, in order:
  1) Contribution: grows by contributionIncreaseRate each year, forced to 0
     once withdrawals start (unless overridden).
  2) Yield on the BEGINNING balance.
  3) Withdrawal: withdrawRate% of the beginning balance while withdrawing, or
     a flat overridden amount.
  4) ending = beginning + yield + contribution - withdrawal.

The balance is not floored: a flat withdrawal larger than the available
funds drives it negative.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from projections.core.engine import Period, ensure_valid, run_projection
from projections.schemas.common import FieldError
from projections.schemas.savings import (
    RetirementSavingsInput,
    RetirementSavingsOverride,
    RetirementSavingsRow,
)

logger = logging.getLogger(__name__)

ENGINE = "Retirement savings"


@dataclass
class _SavingsState:
    balance: float
    contribution: float


def validate_retirement_savings_input(data: RetirementSavingsInput) -> List[FieldError]:
    errors: List[FieldError] = []

    if data.startYear < 1900:
        errors.append(FieldError(field="startYear", message="Start Year cannot be before 1900"))
    if data.birthYear < 1900:
        errors.append(FieldError(field="birthYear", message="Birth Year cannot be before 1900"))
    if data.estimatedYield < -100:
        errors.append(FieldError(field="estimatedYield", message="Yield cannot be less than -100%"))
    if data.estimatedWithdrawRate < 0 or data.estimatedWithdrawRate > 100:
        errors.append(
            FieldError(field="estimatedWithdrawRate", message="Withdraw rate must be between 0% and 100%")
        )
    if data.contributionIncreaseRate < -100:
        errors.append(
            FieldError(
                field="contributionIncreaseRate",
                message="Contribution increase rate cannot be less than -100%",
            )
        )
    if data.withdrawStartAge < 0 or data.withdrawStartAge > 80:
        errors.append(FieldError(field="withdrawStartAge", message="Withdraw start age must be between 0 and 80"))
    if data.yearsToProject < 1:
        errors.append(FieldError(field="yearsToProject", message="Must project at least 1 year"))

    return errors


def calculate_retirement_savings_projection(data: RetirementSavingsInput) -> List[RetirementSavingsRow]:
    return calculate_retirement_savings_projection_with_overrides(data.model_copy(update={"yearOverrides": {}}))


def calculate_retirement_savings_projection_with_overrides(
    data: RetirementSavingsInput,
) -> List[RetirementSavingsRow]:
    ensure_valid(ENGINE, validate_retirement_savings_input(data))

    state = _SavingsState(
        balance=max(data.initialBalance, 0.0),
        contribution=max(data.initialContribution, 0.0),
    )

    def step(period: Period[RetirementSavingsOverride]) -> RetirementSavingsRow:
        year = period.key
        age = year - data.birthYear
        is_withdrawing = age >= data.withdrawStartAge

        # contribution carries forward as the growth base for the next year
        if not period.is_first:
            state.contribution *= 1 + data.contributionIncreaseRate / 100
        overridden = period.pick("contribution", None)
        if overridden is not None:
            state.contribution = max(overridden, 0.0)
        elif is_withdrawing:
            state.contribution = 0.0
        contribution = state.contribution

        beginning = state.balance
        yield_percent = period.pick("yieldPercent", data.estimatedYield)
        yield_amount = beginning * yield_percent / 100

        withdraw_rate = period.pick("withdrawRate", data.estimatedWithdrawRate if is_withdrawing else 0.0)
        flat_withdraw = period.pick("annualWithdraw", None)
        if flat_withdraw is not None:
            annual_withdraw = max(flat_withdraw, 0.0)
            withdraw_rate = annual_withdraw / beginning * 100 if beginning > 0 else 0.0
        else:
            annual_withdraw = beginning * withdraw_rate / 100

        state.balance = beginning + yield_amount + contribution - annual_withdraw

        return RetirementSavingsRow(
            year=year,
            age=age,
            beginningBalance=beginning,
            contribution=contribution,
            yieldPercent=yield_percent,
            yieldAmount=yield_amount,
            withdrawRate=withdraw_rate,
            annualWithdraw=annual_withdraw,
            monthlyWithdraw=annual_withdraw / 12,
            endingBalance=state.balance,
            hasOverride=period.has_override,
        )

    rows = run_projection(data.startYear, data.yearsToProject, step, data.yearOverrides)
    logger.debug("%s projection produced %d rows", ENGINE, len(rows))
    return rows
