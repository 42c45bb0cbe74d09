from typing import Dict, Optional

from pydantic import Field

from projections.schemas.common import ProjectionModel


class SocialSecurityOverride(ProjectionModel):
    colaApplied: Optional[float] = None


class SocialSecurityBenefitInput(ProjectionModel):
    startYear: int
    birthYear: int
    claimingAge: int
    averageIncome: float = Field(description="Average annual indexed earnings.")
    averageCOLA: float
    yearsToProject: int
    yearOverrides: Dict[int, SocialSecurityOverride] = Field(default_factory=dict)


class SocialSecurityBenefitRow(ProjectionModel):
    year: int
    age: int
    colaApplied: float
    annualBenefit: int
    monthlyBenefit: int
    hasOverride: bool = False
