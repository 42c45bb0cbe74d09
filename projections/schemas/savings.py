"""Data contracts for the retirement savings projection."""

from typing import Dict, Optional

from pydantic import Field

from projections.schemas.common import ProjectionModel


class RetirementSavingsOverride(ProjectionModel):
    contribution: Optional[float] = None
    yieldPercent: Optional[float] = None
    withdrawRate: Optional[float] = None
    annualWithdraw: Optional[float] = None


class RetirementSavingsInput(ProjectionModel):
    """Assumptions for a single savings account; all rates are percent per year."""

    startYear: int
    birthYear: int
    initialBalance: float
    initialContribution: float
    estimatedYield: float
    estimatedWithdrawRate: float = Field(description="Percent of beginning balance withdrawn each year.")
    contributionIncreaseRate: float
    withdrawStartAge: int
    yearsToProject: int
    yearOverrides: Dict[int, RetirementSavingsOverride] = Field(default_factory=dict)


class RetirementSavingsRow(ProjectionModel):
    year: int
    age: int
    beginningBalance: float
    contribution: float
    yieldPercent: float
    yieldAmount: float
    withdrawRate: float
    annualWithdraw: float
    monthlyWithdraw: float
    endingBalance: float
    hasOverride: bool = False
