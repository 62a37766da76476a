"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from guarantor_risk.api.main import create_app
from guarantor_risk.domain.models import FinancialInput


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def form_payload() -> dict:
    """Calculator form as pre-filled by /v1/defaults"""
    return {
        "annual_income": 5_000_000,
        "annual_repayment": 1_000_000,
        "loan_amount": 30_000_000,
        "annual_rent_income": 2_000_000,
        "expense_rate": 0.3,
        "vacancy_rate": 0.1,
        "interest_rate": 0.03,
        "other_debt_ratio": 0.1,
    }


@pytest.fixture
def sample_input(form_payload: dict) -> FinancialInput:
    """Salaried borrower with a modestly profitable rental property"""
    return FinancialInput(**form_payload)
