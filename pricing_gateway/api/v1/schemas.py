"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import List, Optional


class QuoteRequest(BaseModel):
    """Request body for POST /v1/quote"""

    principal_cents: int = Field(..., description="Requested principal in cents ($100 - $5,000)")
    term_weeks: int = Field(..., description="Repayment term in weeks (2 - 26)")
    start_date: Optional[date] = Field(None, description="Loan start date (default: today)")
    monthly_income_cents: Optional[int] = Field(None, description="Declared monthly income for a live affordability preview")
    monthly_expenses_cents: int = Field(0, ge=0, description="Declared monthly expenses in cents")


class AffordabilityRequest(BaseModel):
    """Request body for POST /v1/affordability"""

    monthly_income_cents: int = Field(..., description="Declared monthly income in cents")
    monthly_expenses_cents: int = Field(..., ge=0, description="Declared monthly expenses in cents")
    monthly_payment_cents: int = Field(..., ge=0, description="Monthly payment obligation in cents")


class FieldError(BaseModel):
    """Field-level validation message for a form"""

    field: str
    code: str
    message: str


class PaymentScheduleItemSchema(BaseModel):
    """Single weekly payment"""

    payment_number: int
    due_date: date
    payment_cents: int
    principal_cents: int
    interest_cents: int
    remaining_balance_cents: int


class AffordabilityResponse(BaseModel):
    """Response for POST /v1/affordability"""

    can_afford: bool
    dti_ratio: Optional[float] = None  # null when income is zero
    disposable_income_cents: int


class QuoteResponse(BaseModel):
    """Response for POST /v1/quote"""

    principal_cents: int
    term_weeks: int
    apr_percent: float
    weekly_payment_cents: int
    monthly_payment_cents: int
    total_interest_cents: int
    total_repayment_cents: int
    weekly_payment_display: str
    total_repayment_display: str
    schedule: List[PaymentScheduleItemSchema]
    affordability: Optional[AffordabilityResponse] = None


class RateTierSchema(BaseModel):
    """Published APR range for a principal band"""

    min_principal_cents: int
    max_principal_cents: int
    min_apr_percent: float
    max_apr_percent: float


class RepresentativeExample(BaseModel):
    """Worked example shown alongside the rate table"""

    principal_cents: int
    term_weeks: int
    apr_percent: float
    weekly_payment_cents: int
    monthly_payment_cents: int
    total_interest_cents: int
    total_repayment_cents: int


class RatesResponse(BaseModel):
    """Response for GET /v1/rates"""

    min_principal_cents: int
    max_principal_cents: int
    min_term_weeks: int
    max_term_weeks: int
    tiers: List[RateTierSchema]
    representative_example: RepresentativeExample
