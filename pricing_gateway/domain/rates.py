"""Regulated APR selection - principal tiers, term adjustments, regulatory clamp"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Tuple

from pricing_gateway.domain.models import RateTier
from pricing_gateway.domain.validation import MAX_PRINCIPAL_CENTS, MIN_PRINCIPAL_CENTS

# All rates in basis points (1% = 100 bps) so adjustments stay exact
DEFAULT_APR_BPS = 1500
APR_FLOOR_BPS = 1500
APR_CEILING_BPS = 3500

SHORT_TERM_MAX_WEEKS = 4
SHORT_TERM_ADJUSTMENT_BPS = 500
LONG_TERM_MIN_WEEKS = 20
LONG_TERM_ADJUSTMENT_BPS = -200

RATE_TIERS: Tuple[RateTier, ...] = (
    RateTier(min_principal_cents=0, max_principal_cents=50_000, base_apr_bps=3000),  # under $500
    RateTier(min_principal_cents=50_000, max_principal_cents=100_000, base_apr_bps=2500),  # $500 - $999.99
    RateTier(min_principal_cents=100_000, max_principal_cents=250_000, base_apr_bps=2000),  # $1,000 - $2,499.99
    RateTier(min_principal_cents=250_000, max_principal_cents=None, base_apr_bps=1500),  # $2,500+
)


@dataclass(frozen=True)
class RateSheetEntry:
    """Published APR range for one principal tier"""

    min_principal_cents: int
    max_principal_cents: int
    min_apr: Decimal
    max_apr: Decimal


def bps_to_rate(bps: int) -> Decimal:
    return Decimal(bps) / Decimal(10_000)


def tier_for(principal_cents: int) -> Optional[RateTier]:
    """Tier whose principal band contains the amount, if any"""
    for tier in RATE_TIERS:
        if tier.contains(principal_cents):
            return tier
    return None


def base_apr_bps(principal_cents: int) -> int:
    tier = tier_for(principal_cents)
    return DEFAULT_APR_BPS if tier is None else tier.base_apr_bps


def term_adjustment_bps(term_weeks: int) -> int:
    if term_weeks <= SHORT_TERM_MAX_WEEKS:
        return SHORT_TERM_ADJUSTMENT_BPS
    if term_weeks >= LONG_TERM_MIN_WEEKS:
        return LONG_TERM_ADJUSTMENT_BPS
    return 0


def clamp_apr_bps(bps: int) -> int:
    return max(APR_FLOOR_BPS, min(APR_CEILING_BPS, bps))


def select_apr(principal_cents: int, term_weeks: int) -> Decimal:
    """
    Select the regulated APR for a loan.

    Steps (order matters):
    1. Base rate from the principal tier
    2. +5 points for terms of 4 weeks or less, -2 points for 20 weeks or more
    3. Clamp to the 15% - 35% regulatory band

    Example:
        $300 over 2 weeks  → 30% + 5% = 35%
        $3000 over 24 weeks → 15% - 2% = 13% → clamped to 15%
    """
    bps = base_apr_bps(principal_cents) + term_adjustment_bps(term_weeks)
    return bps_to_rate(clamp_apr_bps(bps))


def rate_sheet() -> List[RateSheetEntry]:
    """APR range each tier can produce across every lendable term"""
    entries = []
    for tier in RATE_TIERS:
        low = max(tier.min_principal_cents, MIN_PRINCIPAL_CENTS)
        high = MAX_PRINCIPAL_CENTS if tier.max_principal_cents is None else tier.max_principal_cents - 1
        if low > high:
            continue

        entries.append(
            RateSheetEntry(
                min_principal_cents=low,
                max_principal_cents=min(high, MAX_PRINCIPAL_CENTS),
                min_apr=bps_to_rate(clamp_apr_bps(tier.base_apr_bps + LONG_TERM_ADJUSTMENT_BPS)),
                max_apr=bps_to_rate(clamp_apr_bps(tier.base_apr_bps + SHORT_TERM_ADJUSTMENT_BPS)),
            )
        )
    return entries
