"""Monthly mortgage amortization and loan-year aggregation."""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, List, Optional

from projections.core.engine import Period, ensure_valid, run_projection
from projections.domain.amortization import add_months, monthly_payment
from projections.schemas.common import FieldError
from projections.schemas.mortgage import (
    AmortizationRow,
    MortgageAmortizationInput,
    YearlyAmortizationRow,
)

logger = logging.getLogger(__name__)

ENGINE = "Mortgage amortization"

PAID_OFF_BALANCE = 0.01
MAX_TERM_YEARS = 50


def validate_mortgage_input(data: MortgageAmortizationInput) -> List[FieldError]:
    errors: List[FieldError] = []

    if data.loanAmount <= 0:
        errors.append(FieldError(field="loanAmount", message="Loan amount must be greater than zero"))
    if data.annualRate < 0:
        errors.append(FieldError(field="annualRate", message="Interest rate cannot be negative"))
    if data.termYears < 1 or data.termYears > MAX_TERM_YEARS:
        errors.append(FieldError(field="termYears", message=f"Term must be between 1 and {MAX_TERM_YEARS} years"))
    if data.extraPayment < 0:
        errors.append(FieldError(field="extraPayment", message="Extra payment cannot be negative"))

    return errors


def calculate_mortgage_amortization(
    data: MortgageAmortizationInput, today: Optional[date] = None
) -> List[AmortizationRow]:
    """Amortize month by month until the balance is paid off or the term ends.

    Extra payments go straight to principal, so they can retire the loan early.
    ``today`` is the start date used when the input has none.
    """
    ensure_valid(ENGINE, validate_mortgage_input(data))

    start = data.startDate or today or date.today()
    rate = data.annualRate / 100 / 12
    payment = monthly_payment(data.loanAmount, data.annualRate, data.termYears)
    balance = data.loanAmount

    def step(period: Period) -> AmortizationRow:
        nonlocal balance
        interest = balance * rate
        principal = min(payment + data.extraPayment - interest, balance)
        balance -= principal

        return AmortizationRow(
            month=period.key,
            date=add_months(start, period.key),
            payment=principal + interest,
            principal=principal,
            interest=interest,
            balance=max(balance, 0.0),
        )

    rows = run_projection(
        1,
        data.termYears * 12,
        step,
        stop_when=lambda row: row.balance <= PAID_OFF_BALANCE,
    )
    logger.debug("%s produced %d monthly rows", ENGINE, len(rows))
    return rows


def group_by_year(rows: List[AmortizationRow]) -> List[YearlyAmortizationRow]:
    """Sum monthly rows into loan years (months 1-12 are year 1, and so on)."""
    totals: Dict[int, Dict[str, float]] = {}
    last: Dict[int, AmortizationRow] = {}

    for row in rows:
        year = (row.month - 1) // 12 + 1
        bucket = totals.setdefault(year, {"payment": 0.0, "principal": 0.0, "interest": 0.0})
        bucket["payment"] += row.payment
        bucket["principal"] += row.principal
        bucket["interest"] += row.interest
        last[year] = row

    return [
        YearlyAmortizationRow(
            year=year,
            month=last[year].month,
            date=last[year].date,
            payment=bucket["payment"],
            principal=bucket["principal"],
            interest=bucket["interest"],
            balance=last[year].balance,
        )
        for year, bucket in totals.items()
    ]
