"""POST /v1/quote - loan pricing and repayment schedule endpoint"""

import time
import logging
from decimal import Decimal
from fastapi import APIRouter, HTTPException, Request

from pricing_gateway.api.v1.schemas import (
    AffordabilityResponse,
    FieldError,
    PaymentScheduleItemSchema,
    QuoteRequest,
    QuoteResponse,
)
from pricing_gateway.api.dependencies import get_request_id
from pricing_gateway.domain.affordability import evaluate_affordability
from pricing_gateway.domain.exceptions import InvalidLoanRequestError
from pricing_gateway.domain.models import AffordabilityResult, LoanQuote
from pricing_gateway.domain.pricing import quote_loan
from pricing_gateway.infrastructure.observability.metrics import (
    record_affordability,
    record_quote,
    validation_failure_counter,
)
from pricing_gateway.infrastructure.observability.logging import log_affordability, log_quote
from pricing_gateway.utils.money import format_currency

router = APIRouter()


def as_percent(rate: Decimal) -> float:
    return float(rate * 100)


def to_affordability_response(result: AffordabilityResult) -> AffordabilityResponse:
    return AffordabilityResponse(
        can_afford=result.can_afford,
        dti_ratio=float(result.dti_ratio) if result.dti_ratio is not None else None,
        disposable_income_cents=result.disposable_income_cents,
    )


def to_quote_response(quote: LoanQuote) -> QuoteResponse:
    return QuoteResponse(
        principal_cents=quote.principal_cents,
        term_weeks=quote.term_weeks,
        apr_percent=as_percent(quote.apr),
        weekly_payment_cents=quote.weekly_payment_cents,
        monthly_payment_cents=quote.monthly_payment_cents,
        total_interest_cents=quote.total_interest_cents,
        total_repayment_cents=quote.total_repayment_cents,
        weekly_payment_display=format_currency(quote.weekly_payment_cents),
        total_repayment_display=format_currency(quote.total_repayment_cents),
        schedule=[
            PaymentScheduleItemSchema(
                payment_number=item.payment_number,
                due_date=item.due_date,
                payment_cents=item.payment_cents,
                principal_cents=item.principal_cents,
                interest_cents=item.interest_cents,
                remaining_balance_cents=item.remaining_balance_cents,
            )
            for item in quote.schedule
        ],
    )


@router.post("/quote", response_model=QuoteResponse)
async def create_quote(request_body: QuoteRequest, request: Request):
    """
    Price a loan and return its weekly repayment schedule.

    Flow:
    1. Validate principal and term (field-level errors on failure)
    2. Select the regulated APR
    3. Build the amortization schedule
    4. Evaluate affordability when monthly income was supplied
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        quote = quote_loan(
            request_body.principal_cents,
            request_body.term_weeks,
            request_body.start_date,
        )
        response = to_quote_response(quote)

        if request_body.monthly_income_cents is not None:
            result = evaluate_affordability(
                request_body.monthly_income_cents,
                request_body.monthly_expenses_cents,
                quote.monthly_payment_cents,
            )
            response.affordability = to_affordability_response(result)
            record_affordability(result.can_afford)
            log_affordability(request_id, result.can_afford, response.affordability.dti_ratio)

        duration_ms = (time.time() - start_time) * 1000
        record_quote(quote.principal_cents, quote.apr)
        log_quote(
            request_id,
            quote.principal_cents,
            quote.term_weeks,
            response.apr_percent,
            quote.total_repayment_cents,
            duration_ms,
        )

        return response

    except InvalidLoanRequestError as e:
        for failure in e.failures:
            validation_failure_counter.labels(code=failure.error_code).inc()
        logging.warning(f"Invalid loan request: {e}", extra={"request_id": request_id})
        raise HTTPException(
            status_code=422,
            detail=[
                FieldError(field=f.field, code=f.error_code, message=f.message).model_dump()
                for f in e.failures
            ],
        )

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
