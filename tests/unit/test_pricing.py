"""Unit tests for quote orchestration"""

import pytest
from decimal import Decimal
from pricing_gateway.domain.amortization import build_schedule
from pricing_gateway.domain.exceptions import (
    DomainException,
    InvalidLoanAmount,
    InvalidLoanRequestError,
    InvalidLoanTerm,
)
from pricing_gateway.domain.models import LoanRequest
from pricing_gateway.domain.pricing import price_loan, quote_loan, representative_example


def test_quote_loan_selects_rate_and_builds_schedule(start_date):
    quote = quote_loan(30_000, 2, start_date)

    assert quote.apr == Decimal("0.35")
    assert quote == build_schedule(30_000, 2, Decimal("0.35"), start_date)


def test_quote_loan_invalid_amount():
    with pytest.raises(InvalidLoanAmount) as exc_info:
        quote_loan(5_000, 12)

    assert [f.error_code for f in exc_info.value.failures] == ["InvalidLoanAmount"]
    assert "Minimum loan amount is $100" in str(exc_info.value)


def test_quote_loan_invalid_term():
    with pytest.raises(InvalidLoanTerm):
        quote_loan(100_000, 30)


def test_quote_loan_both_invalid():
    """Both fields failing raises the common base with both failures attached"""
    with pytest.raises(InvalidLoanRequestError) as exc_info:
        quote_loan(600_000, 1)

    assert type(exc_info.value) is InvalidLoanRequestError
    assert isinstance(exc_info.value, DomainException)
    assert len(exc_info.value.failures) == 2


def test_representative_example(start_date):
    """$1000 over 12 weeks at 20% → $1,046.15 total"""
    quote = representative_example(start_date)

    assert quote.principal_cents == 100_000
    assert quote.term_weeks == 12
    assert quote.apr == Decimal("0.20")
    assert quote.total_repayment_cents == 104615


def test_price_loan_uses_request_fields(start_date):
    quote = price_loan(LoanRequest(principal_cents=300_000, term_weeks=24), start_date)

    assert quote.principal_cents == 300_000
    assert quote.term_weeks == 24
    assert quote.apr == Decimal("0.15")
    assert quote == quote_loan(300_000, 24, start_date)
