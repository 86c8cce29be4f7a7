"""Prometheus metrics for monitoring quote volume, pricing mix, and affordability outcomes"""

from decimal import Decimal
from prometheus_client import Counter, Histogram

from pricing_gateway.domain.rates import tier_for

# Quote metrics
quote_counter = Counter(
    "loan_quote_total",
    "Total loan quotes priced",
    ["principal_tier"],  # <$500 | $500-$999 | $1000-$2499 | $2500+
)

apr_histogram = Histogram(
    "loan_quote_apr_percent",
    "APR charged on priced quotes",
    buckets=[15, 18, 20, 23, 25, 28, 30, 35],
)

validation_failure_counter = Counter(
    "loan_validation_failures_total",
    "Quote requests rejected by input validation",
    ["code"],  # InvalidLoanAmount | InvalidLoanTerm
)

# Affordability metrics
affordability_counter = Counter(
    "loan_affordability_total",
    "Affordability evaluations",
    ["outcome"],  # affordable | unaffordable
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def tier_label(principal_cents: int) -> str:
    """Label for the principal's rate tier, such as $500-$999"""
    tier = tier_for(principal_cents)
    if tier is None:
        return "untiered"
    if tier.min_principal_cents == 0:
        return f"<${tier.max_principal_cents // 100}"
    if tier.max_principal_cents is None:
        return f"${tier.min_principal_cents // 100}+"
    return f"${tier.min_principal_cents // 100}-${(tier.max_principal_cents - 1) // 100}"


def record_quote(principal_cents: int, apr: Decimal) -> None:
    """Record quote metrics for monitoring the pricing mix"""
    quote_counter.labels(principal_tier=tier_label(principal_cents)).inc()
    apr_histogram.observe(float(apr * 100))


def record_affordability(can_afford: bool) -> None:
    outcome = "affordable" if can_afford else "unaffordable"
    affordability_counter.labels(outcome=outcome).inc()
