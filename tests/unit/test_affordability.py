"""Unit tests for the affordability check"""

from decimal import Decimal
from pricing_gateway.domain.affordability import evaluate_affordability


def test_affordable_borrower():
    """$4500 income, $3000 expenses, $375 payment: DTI 8.3%, $1500 disposable"""
    result = evaluate_affordability(450_000, 300_000, 37_500)

    assert result.can_afford is True
    assert result.dti_ratio == Decimal("8.3")
    assert result.disposable_income_cents == 150_000


def test_high_dti_declines():
    """$1000 income, $375 payment: DTI 37.5% exceeds 25%"""
    result = evaluate_affordability(100_000, 90_000, 37_500)

    assert result.can_afford is False
    assert result.dti_ratio == Decimal("37.5")
    assert result.disposable_income_cents == 10_000


def test_low_dti_without_disposable_buffer_declines():
    """DTI 1%, but $100 disposable does not cover $100 * 1.2"""
    result = evaluate_affordability(1_000_000, 990_000, 10_000)

    assert result.dti_ratio == Decimal("1.0")
    assert result.can_afford is False


def test_dti_at_limit_is_affordable():
    result = evaluate_affordability(400_000, 0, 100_000)

    assert result.dti_ratio == Decimal("25.0")
    assert result.can_afford is True


def test_dti_compared_before_rounding():
    """25.04% is reported as 25.0 but still exceeds the limit"""
    result = evaluate_affordability(100_000, 0, 25_040)

    assert result.dti_ratio == Decimal("25.0")
    assert result.can_afford is False


def test_disposable_income_exactly_covers_buffer():
    result = evaluate_affordability(1_000_000, 880_000, 100_000)

    assert result.disposable_income_cents == 120_000
    assert result.can_afford is True


def test_zero_income_reports_no_ratio():
    """No income: no division, ratio is None rather than 0 or infinity"""
    result = evaluate_affordability(0, 50_000, 10_000)

    assert result.can_afford is False
    assert result.dti_ratio is None
    assert result.disposable_income_cents == -50_000


def test_negative_income_treated_like_zero():
    result = evaluate_affordability(-100, 0, 10_000)

    assert result.can_afford is False
    assert result.dti_ratio is None
