from __future__ import annotations

from datetime import date


def monthly_payment(loan_amount: float, annual_rate: float, term_years: int) -> float:
    """Level monthly payment that retires ``loan_amount`` over ``term_years``.

    ``annual_rate`` is a percentage. A zero rate falls back to straight-line
    repayment.
    """
    months = term_years * 12
    rate = annual_rate / 100 / 12
    if rate == 0:
        return loan_amount / months
    growth = (1 + rate) ** months
    return loan_amount * rate * growth / (growth - 1)


def add_months(start: date, months: int) -> date:
    """First day of the month ``months`` after ``start``'s month."""
    total = start.year * 12 + (start.month - 1) + months
    return date(total // 12, total % 12 + 1, 1)
