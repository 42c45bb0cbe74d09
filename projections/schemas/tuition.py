"""Data contracts for the college tuition savings projection."""

from projections.schemas.common import ProjectionModel


class CollegeTuitionInput(ProjectionModel):
    startYear: int
    birthYear: int
    childBirthYear: int
    childCollegeFirstYear: int
    childCollegeLastYear: int
    initialBalance: float
    annualContribution: float
    estimatedYield: float
    estimatedFirstYearTuition: float
    estimatedInflationRate: float
    yearsToProject: int


class CollegeTuitionRow(ProjectionModel):
    year: int
    age: int
    childAge: int
    beginningBalance: float
    contribution: float
    yieldPercent: float
    yieldAmount: float
    tuitionAmount: float
    annualWithdraw: float
    endingBalance: float
