"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Callable, Dict, List, Tuple, Type

from flask import Blueprint, abort, jsonify, request
from pydantic import BaseModel, ValidationError

from projections.core.engine import InputValidationError
from projections.core.fers import calculate_fers_pension_projection_with_overrides
from projections.core.military import calculate_military_pension_projection_with_overrides
from projections.core.mortgage import calculate_mortgage_amortization, group_by_year
from projections.core.real_estate import calculate_real_estate_projection_with_overrides
from projections.core.savings import calculate_retirement_savings_projection_with_overrides
from projections.core.social_security import calculate_social_security_projection_with_overrides
from projections.core.tuition import calculate_college_tuition_projection
from projections.schemas.mortgage import MortgageAmortizationInput
from projections.schemas.pension import FersPensionInput, MilitaryPensionInput
from projections.schemas.real_estate import RealEstatePropertyInput
from projections.schemas.savings import RetirementSavingsInput
from projections.schemas.social_security import SocialSecurityBenefitInput
from projections.schemas.tuition import CollegeTuitionInput

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

Calculator = Callable[[Any], List[BaseModel]]

ENGINES: Dict[str, Tuple[Type[BaseModel], Calculator]] = {
    "savings": (RetirementSavingsInput, calculate_retirement_savings_projection_with_overrides),
    "fers": (FersPensionInput, calculate_fers_pension_projection_with_overrides),
    "military": (MilitaryPensionInput, calculate_military_pension_projection_with_overrides),
    "social-security": (SocialSecurityBenefitInput, calculate_social_security_projection_with_overrides),
    "tuition": (CollegeTuitionInput, calculate_college_tuition_projection),
    "real-estate": (RealEstatePropertyInput, calculate_real_estate_projection_with_overrides),
}


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InputValidationError)
def _handle_input_validation_error(exc: InputValidationError):
    """Report every violated input rule at once."""
    return (
        jsonify(
            {
                "error": f"{exc.engine} input validation failed",
                "errors": [error.model_dump() for error in exc.errors],
            }
        ),
        HTTPStatus.BAD_REQUEST,
    )


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint listing the available engines."""
    return jsonify({"message": "pong", "engines": sorted([*ENGINES, "mortgage"])})


@api_bp.post("/calc/mortgage")
def mortgage() -> Any:
    payload = MortgageAmortizationInput.model_validate(request.get_json(force=True, silent=False))
    monthly = calculate_mortgage_amortization(payload)
    return jsonify(
        {
            "monthly": [row.model_dump(mode="json") for row in monthly],
            "yearly": [row.model_dump(mode="json") for row in group_by_year(monthly)],
        }
    )


@api_bp.post("/calc/<engine>")
def projection(engine: str) -> Any:
    """Run one projection engine on the posted input record."""
    if engine not in ENGINES:
        abort(HTTPStatus.NOT_FOUND)

    model, calculate = ENGINES[engine]
    payload = model.model_validate(request.get_json(force=True, silent=False))
    rows = calculate(payload)
    logger.debug("served %d %s rows", len(rows), engine)
    return jsonify([row.model_dump(mode="json") for row in rows])
