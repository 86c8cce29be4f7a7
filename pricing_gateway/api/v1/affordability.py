"""POST /v1/affordability - borrower affordability check"""

from fastapi import APIRouter, Request

from pricing_gateway.api.v1.schemas import AffordabilityRequest, AffordabilityResponse
from pricing_gateway.api.v1.quote import to_affordability_response
from pricing_gateway.api.dependencies import get_request_id
from pricing_gateway.domain.affordability import evaluate_affordability
from pricing_gateway.infrastructure.observability.metrics import record_affordability
from pricing_gateway.infrastructure.observability.logging import log_affordability

router = APIRouter()


@router.post("/affordability", response_model=AffordabilityResponse)
def check_affordability(request_body: AffordabilityRequest, request: Request):
    """
    Evaluate a monthly payment against declared income and expenses.

    Returns:
        Verdict, DTI ratio (null for zero income) and disposable income
    """
    result = evaluate_affordability(
        request_body.monthly_income_cents,
        request_body.monthly_expenses_cents,
        request_body.monthly_payment_cents,
    )
    response = to_affordability_response(result)

    record_affordability(result.can_afford)
    log_affordability(get_request_id(request), result.can_afford, response.dti_ratio)

    return response
