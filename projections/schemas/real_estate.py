from typing import Dict, Literal, Optional

from pydantic import Field

from projections.schemas.common import ProjectionModel


class RealEstatePropertyOverride(ProjectionModel):
    monthlyMortgage: Optional[float] = None
    annualPropertyTax: Optional[float] = None
    annualInsurance: Optional[float] = None
    monthlyHoaFee: Optional[float] = None
    monthlyRentalIncome: Optional[float] = None


class RealEstatePropertyInput(ProjectionModel):
    startYear: int
    birthYear: int
    propertyType: Literal["residence", "rental"]
    monthlyMortgage: float
    mortgageEndYear: int
    annualPropertyTax: float
    propertyTaxIncreaseRate: float
    annualInsurance: float
    insuranceIncreaseRate: float
    monthlyHoaFee: float = 0.0
    hoaFeeIncreaseRate: float = 0.0
    monthlyRentalIncome: float = 0.0
    rentalIncomeIncreaseRate: float = 0.0
    yearsToProject: int
    yearOverrides: Dict[int, RealEstatePropertyOverride] = Field(default_factory=dict)


class RealEstatePropertyRow(ProjectionModel):
    year: int
    age: int
    monthlyMortgage: float
    annualPropertyTax: int
    annualInsurance: int
    monthlyHoaFee: int
    monthlyRentalIncome: int
    monthlyIncome: int
    annualIncome: int
    monthlyExpense: int
    annualExpense: int
    annualNet: int
    hasOverride: bool = False
