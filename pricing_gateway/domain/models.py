"""Domain models - immutable value objects for pricing and repayment"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Tuple


@dataclass(frozen=True)
class LoanRequest:
    """Principal and term requested by an applicant"""

    principal_cents: int
    term_weeks: int


@dataclass(frozen=True)
class RateTier:
    """Principal band and the base APR charged inside it"""

    min_principal_cents: int
    max_principal_cents: Optional[int]  # exclusive; None means no upper bound
    base_apr_bps: int

    def contains(self, principal_cents: int) -> bool:
        if principal_cents < self.min_principal_cents:
            return False
        return self.max_principal_cents is None or principal_cents < self.max_principal_cents


@dataclass(frozen=True)
class PaymentScheduleItem:
    """Single weekly payment in a repayment schedule"""

    payment_number: int
    due_date: date
    payment_cents: int
    principal_cents: int
    interest_cents: int
    remaining_balance_cents: int


@dataclass(frozen=True)
class LoanQuote:
    """Priced loan with totals and full repayment schedule"""

    principal_cents: int
    term_weeks: int
    apr: Decimal
    weekly_payment_cents: int
    monthly_payment_cents: int  # display approximation (weekly * 4.33)
    total_interest_cents: int
    total_repayment_cents: int
    schedule: Tuple[PaymentScheduleItem, ...]


@dataclass(frozen=True)
class AffordabilityResult:
    """Affordability verdict for a monthly payment obligation"""

    can_afford: bool
    dti_ratio: Optional[Decimal]  # None when income is zero or negative
    disposable_income_cents: int


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single input guard"""

    is_valid: bool
    field: str
    error_code: Optional[str] = None
    message: Optional[str] = None
