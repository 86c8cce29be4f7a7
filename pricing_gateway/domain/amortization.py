"""Simple-interest amortization schedule for weekly repayment"""

from datetime import date
from decimal import Decimal
from typing import List

from pricing_gateway.domain.models import LoanQuote, PaymentScheduleItem
from pricing_gateway.utils.date_utils import weekly_due_dates
from pricing_gateway.utils.money import round_cents

WEEKS_PER_YEAR = 52
WEEKS_PER_MONTH = Decimal("4.33")


def total_interest_cents(principal_cents: int, apr: Decimal, term_weeks: int) -> int:
    """Simple interest on the original principal, prorated over a 52-week year"""
    return round_cents(Decimal(principal_cents) * apr * term_weeks / WEEKS_PER_YEAR)


def monthly_payment_cents(weekly_payment_cents: int) -> int:
    """Approximate monthly figure for display only; billing follows the weekly schedule"""
    return round_cents(Decimal(weekly_payment_cents) * WEEKS_PER_MONTH)


def build_schedule(
    principal_cents: int,
    term_weeks: int,
    apr: Decimal,
    start_date: date | None = None,
) -> LoanQuote:
    """
    Price a loan and expand it into equal weekly payments.

    Requirements:
    - Simple (non-compounding) interest: principal * apr * weeks / 52
    - Equal weekly installments, first due one week after start_date
    - Every amount rounded to the cent (half-up) when assigned
    - Last payment absorbs the rounding remainder so the balance ends at exactly 0

    Args:
        principal_cents: Amount borrowed
        term_weeks: Number of weekly payments
        apr: Annual rate as a fraction (Decimal("0.20") for 20%)
        start_date: Loan start (default: today)

    Returns:
        LoanQuote with totals and the payment schedule

    Example:
        $1000 over 12 weeks at 20%
        interest = 1000 * 0.20 * 12 / 52 = $46.15, repayment = $1046.15
        weekly = $87.18, 11 * $87.18 = $958.98, last payment = $87.17
    """
    if term_weeks < 1:
        raise ValueError(f"term_weeks must be at least 1, got {term_weeks}")

    if start_date is None:
        start_date = date.today()

    total_interest = total_interest_cents(principal_cents, apr, term_weeks)
    total_repayment = principal_cents + total_interest
    weekly_payment = round_cents(Decimal(total_repayment) / term_weeks)
    interest_per_week = round_cents(Decimal(total_interest) / term_weeks)

    schedule: List[PaymentScheduleItem] = []
    remaining_balance = total_repayment

    for number, due_date in enumerate(weekly_due_dates(start_date, term_weeks), start=1):
        # Last period pays off whatever is left, not the nominal weekly amount
        payment = remaining_balance if number == term_weeks else weekly_payment
        remaining_balance -= payment

        schedule.append(
            PaymentScheduleItem(
                payment_number=number,
                due_date=due_date,
                payment_cents=payment,
                principal_cents=payment - interest_per_week,
                interest_cents=interest_per_week,
                remaining_balance_cents=remaining_balance,
            )
        )

    return LoanQuote(
        principal_cents=principal_cents,
        term_weeks=term_weeks,
        apr=apr,
        weekly_payment_cents=weekly_payment,
        monthly_payment_cents=monthly_payment_cents(weekly_payment),
        total_interest_cents=total_interest,
        total_repayment_cents=total_repayment,
        schedule=tuple(schedule),
    )
