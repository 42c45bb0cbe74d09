"""Data contracts for mortgage amortization."""

import datetime as dt
from typing import Optional

from pydantic import Field

from projections.schemas.common import ProjectionModel


class MortgageAmortizationInput(ProjectionModel):
    loanAmount: float
    annualRate: float = Field(description="Annual interest rate in percent.")
    termYears: int
    startDate: Optional[dt.date] = Field(default=None, description="Defaults to today when omitted.")
    extraPayment: float = 0.0


class AmortizationRow(ProjectionModel):
    month: int
    date: dt.date
    payment: float
    principal: float
    interest: float
    balance: float


class YearlyAmortizationRow(ProjectionModel):
    """Loan-year totals; month, date and balance are those of the year's last payment."""

    year: int
    month: int
    date: dt.date
    payment: float
    principal: float
    interest: float
    balance: float
