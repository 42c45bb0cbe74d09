"""Data contracts for FERS and military pension projections."""

from typing import Dict, Literal, Optional

from pydantic import Field

from projections.domain.fers import FersRetirementType
from projections.schemas.common import ProjectionModel


class FersPensionOverride(ProjectionModel):
    salary: Optional[float] = None
    salaryGrowthRate: Optional[float] = None
    colaApplied: Optional[float] = None


class FersPensionInput(ProjectionModel):
    startYear: int
    birthYear: int
    serviceStartYear: int
    serviceEndYear: Optional[int] = Field(
        default=None, description="Last year of federal service; required for deferred retirement."
    )
    retirementAge: int
    currentSalary: float
    salaryGrowthRate: float
    high3Salary: float = Field(default=0.0, description="Only used for deferred retirement.")
    colaPercent: float
    pensionMultiplier: float
    yearsToProject: int
    retirementType: FersRetirementType
    survivorBenefitReduction: float = Field(
        default=0.0, description="Percent withheld from the annuity to fund a survivor benefit."
    )
    yearOverrides: Dict[int, FersPensionOverride] = Field(default_factory=dict)


class FersPensionRow(ProjectionModel):
    year: int
    age: int
    salary: float
    salaryGrowthRate: float
    pension: float
    monthlyPension: float
    colaApplied: float
    hasOverride: bool = False


class MilitaryPensionOverride(ProjectionModel):
    colaApplied: Optional[float] = None


class MilitaryPensionInput(ProjectionModel):
    startYear: int
    birthYear: int
    serviceStartYear: int
    serviceEndYear: int
    high3Salary: float
    colaPercent: float
    yearsToProject: int
    retirementType: Literal["high3", "brs"]
    yearOverrides: Dict[int, MilitaryPensionOverride] = Field(default_factory=dict)


class MilitaryPensionRow(ProjectionModel):
    year: int
    age: int
    pension: float
    monthlyPension: float
    colaApplied: float
    hasOverride: bool = False
