"""Quote orchestration - validate, select rate, build schedule"""

from datetime import date

from pricing_gateway.config import settings
from pricing_gateway.domain.amortization import build_schedule
from pricing_gateway.domain.exceptions import InvalidLoanAmount, InvalidLoanRequestError, InvalidLoanTerm
from pricing_gateway.domain.models import LoanQuote, LoanRequest
from pricing_gateway.domain.rates import select_apr
from pricing_gateway.domain.validation import INVALID_LOAN_AMOUNT, INVALID_LOAN_TERM, validate_loan_request


def quote_loan(principal_cents: int, term_weeks: int, start_date: date | None = None) -> LoanQuote:
    """
    Main entry point: validate the request and price it.

    Raises:
        InvalidLoanAmount: principal outside $100 - $5,000
        InvalidLoanTerm: term outside 2 - 26 weeks
        InvalidLoanRequestError: both fields invalid
    """
    failures = validate_loan_request(principal_cents, term_weeks)
    if failures:
        codes = {f.error_code for f in failures}
        if codes == {INVALID_LOAN_AMOUNT}:
            raise InvalidLoanAmount(failures)
        if codes == {INVALID_LOAN_TERM}:
            raise InvalidLoanTerm(failures)
        raise InvalidLoanRequestError(failures)

    return price_loan(LoanRequest(principal_cents=principal_cents, term_weeks=term_weeks), start_date)


def price_loan(request: LoanRequest, start_date: date | None = None) -> LoanQuote:
    """Select the APR for an already-validated request and build its schedule"""
    apr = select_apr(request.principal_cents, request.term_weeks)
    return build_schedule(request.principal_cents, request.term_weeks, apr, start_date)


def representative_example(start_date: date | None = None) -> LoanQuote:
    """Quote used as the published representative example"""
    return quote_loan(
        settings.representative_principal_cents,
        settings.representative_term_weeks,
        start_date,
    )
