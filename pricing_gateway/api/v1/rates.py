"""GET /v1/rates - published rate table and representative example"""

from fastapi import APIRouter

from pricing_gateway.api.v1.schemas import RatesResponse, RateTierSchema, RepresentativeExample
from pricing_gateway.api.v1.quote import as_percent
from pricing_gateway.domain.pricing import representative_example
from pricing_gateway.domain.rates import rate_sheet
from pricing_gateway.domain.validation import (
    MAX_PRINCIPAL_CENTS,
    MAX_TERM_WEEKS,
    MIN_PRINCIPAL_CENTS,
    MIN_TERM_WEEKS,
)

router = APIRouter()


@router.get("/rates", response_model=RatesResponse)
def get_rates():
    """
    Retrieve the APR range for each principal tier.

    Returns:
        Lendable bounds, tier table, and a worked example quote
    """
    example = representative_example()

    return RatesResponse(
        min_principal_cents=MIN_PRINCIPAL_CENTS,
        max_principal_cents=MAX_PRINCIPAL_CENTS,
        min_term_weeks=MIN_TERM_WEEKS,
        max_term_weeks=MAX_TERM_WEEKS,
        tiers=[
            RateTierSchema(
                min_principal_cents=entry.min_principal_cents,
                max_principal_cents=entry.max_principal_cents,
                min_apr_percent=as_percent(entry.min_apr),
                max_apr_percent=as_percent(entry.max_apr),
            )
            for entry in rate_sheet()
        ],
        representative_example=RepresentativeExample(
            principal_cents=example.principal_cents,
            term_weeks=example.term_weeks,
            apr_percent=as_percent(example.apr),
            weekly_payment_cents=example.weekly_payment_cents,
            monthly_payment_cents=example.monthly_payment_cents,
            total_interest_cents=example.total_interest_cents,
            total_repayment_cents=example.total_repayment_cents,
        ),
    )
