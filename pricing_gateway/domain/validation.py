"""Input guards for loan principal and term"""

from typing import List

from pricing_gateway.domain.models import ValidationResult

MIN_PRINCIPAL_CENTS = 10_000  # $100
MAX_PRINCIPAL_CENTS = 500_000  # $5,000
MIN_TERM_WEEKS = 2
MAX_TERM_WEEKS = 26

INVALID_LOAN_AMOUNT = "InvalidLoanAmount"
INVALID_LOAN_TERM = "InvalidLoanTerm"


def validate_principal(amount_cents: int) -> ValidationResult:
    """Check the principal is within the lendable range ($100 - $5,000 inclusive)"""
    if amount_cents < MIN_PRINCIPAL_CENTS:
        return ValidationResult(False, "principal_cents", INVALID_LOAN_AMOUNT, "Minimum loan amount is $100")
    if amount_cents > MAX_PRINCIPAL_CENTS:
        return ValidationResult(False, "principal_cents", INVALID_LOAN_AMOUNT, "Maximum loan amount is $5,000")
    return ValidationResult(True, "principal_cents")


def validate_term(weeks: int) -> ValidationResult:
    """Check the term is within 2 - 26 weeks inclusive"""
    if weeks < MIN_TERM_WEEKS:
        return ValidationResult(False, "term_weeks", INVALID_LOAN_TERM, "Minimum loan term is 2 weeks")
    if weeks > MAX_TERM_WEEKS:
        return ValidationResult(False, "term_weeks", INVALID_LOAN_TERM, "Maximum loan term is 6 months (26 weeks)")
    return ValidationResult(True, "term_weeks")


def validate_loan_request(principal_cents: int, term_weeks: int) -> List[ValidationResult]:
    """Run both guards and return only the failures (empty list means valid)"""
    results = [validate_principal(principal_cents), validate_term(term_weeks)]
    return [r for r in results if not r.is_valid]
