"""Affordability check - debt-to-income and disposable income buffer"""

from decimal import Decimal

from pricing_gateway.domain.models import AffordabilityResult
from pricing_gateway.utils.money import round_ratio

MAX_DTI_PERCENT = Decimal("25.0")
DISPOSABLE_INCOME_BUFFER = Decimal("1.2")


def evaluate_affordability(
    monthly_income_cents: int,
    monthly_expenses_cents: int,
    monthly_payment_cents: int,
) -> AffordabilityResult:
    """
    Decide whether a borrower can carry a monthly payment.

    Both conditions must hold:
    - DTI (payment / income) at or below 25%
    - Disposable income (income - expenses) covers the payment with a 20% buffer

    Thresholds are compared against the exact DTI; the reported ratio is
    rounded to one decimal. With no income there is no ratio to report:
    dti_ratio is None and the borrower cannot afford the loan.
    """
    disposable_income = monthly_income_cents - monthly_expenses_cents

    if monthly_income_cents <= 0:
        return AffordabilityResult(
            can_afford=False,
            dti_ratio=None,
            disposable_income_cents=disposable_income,
        )

    dti = Decimal(monthly_payment_cents) * 100 / Decimal(monthly_income_cents)
    has_buffer = Decimal(disposable_income) >= Decimal(monthly_payment_cents) * DISPOSABLE_INCOME_BUFFER

    return AffordabilityResult(
        can_afford=dti <= MAX_DTI_PERCENT and has_buffer,
        dti_ratio=round_ratio(dti),
        disposable_income_cents=disposable_income,
    )
