"""Deterministic year-by-year financial projection engines."""

from projections.core.engine import InputValidationError
from projections.core.fers import (
    calculate_fers_pension_projection,
    calculate_fers_pension_projection_with_overrides,
    validate_fers_pension_input,
)
from projections.core.military import (
    calculate_military_pension_projection,
    calculate_military_pension_projection_with_overrides,
    validate_military_pension_input,
)
from projections.core.mortgage import (
    calculate_mortgage_amortization,
    group_by_year,
    validate_mortgage_input,
)
from projections.core.real_estate import (
    calculate_real_estate_projection,
    calculate_real_estate_projection_with_overrides,
    validate_real_estate_input,
)
from projections.core.savings import (
    calculate_retirement_savings_projection,
    calculate_retirement_savings_projection_with_overrides,
    validate_retirement_savings_input,
)
from projections.core.social_security import (
    calculate_social_security_projection,
    calculate_social_security_projection_with_overrides,
    validate_social_security_input,
)
from projections.core.tuition import (
    calculate_college_tuition_projection,
    validate_college_tuition_input,
)
from projections.schemas.common import FieldError

__all__ = [
    "FieldError",
    "InputValidationError",
    "calculate_college_tuition_projection",
    "calculate_fers_pension_projection",
    "calculate_fers_pension_projection_with_overrides",
    "calculate_military_pension_projection",
    "calculate_military_pension_projection_with_overrides",
    "calculate_mortgage_amortization",
    "calculate_real_estate_projection",
    "calculate_real_estate_projection_with_overrides",
    "calculate_retirement_savings_projection",
    "calculate_retirement_savings_projection_with_overrides",
    "calculate_social_security_projection",
    "calculate_social_security_projection_with_overrides",
    "group_by_year",
    "validate_college_tuition_input",
    "validate_fers_pension_input",
    "validate_military_pension_input",
    "validate_mortgage_input",
    "validate_real_estate_input",
    "validate_retirement_savings_input",
    "validate_social_security_input",
]
