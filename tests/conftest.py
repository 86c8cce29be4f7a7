"""Pytest fixtures for testing"""

import pytest
from datetime import date
from decimal import Decimal
from fastapi.testclient import TestClient
from pricing_gateway.api.main import create_app
from pricing_gateway.domain.amortization import build_schedule
from pricing_gateway.domain.models import LoanQuote


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def start_date() -> date:
    """Fixed loan start so due dates are reproducible"""
    return date(2024, 1, 1)


@pytest.fixture
def sample_quote(start_date: date) -> LoanQuote:
    """$1000 over 12 weeks at 20% - the published representative example"""
    return build_schedule(100_000, 12, Decimal("0.20"), start_date)
