"""
E2E tests for guarantor profiles through the full HTTP flow.

Profiles:
- salaried_landlord: stable salary, rent comfortably covers the loan
- stretched_investor: high leverage, thin rental margin
- no_income: borrower without income
- cash_buyer: no repayment at all
"""

import pytest
from fastapi.testclient import TestClient

PROFILES = {
    "salaried_landlord": {
        "annual_income": 8_000_000,
        "annual_repayment": 1_000_000,
        "loan_amount": 20_000_000,
        "annual_rent_income": 2_400_000,
        "expense_rate": 0.2,
        "vacancy_rate": 0.05,
        "interest_rate": 0.02,
        "other_debt_ratio": 0.0,
    },
    "stretched_investor": {
        "annual_income": 4_000_000,
        "annual_repayment": 2_000_000,
        "loan_amount": 50_000_000,
        "annual_rent_income": 2_500_000,
        "expense_rate": 0.35,
        "vacancy_rate": 0.15,
        "interest_rate": 0.045,
        "other_debt_ratio": 0.25,
    },
    "no_income": {
        "annual_income": 0,
        "annual_repayment": 1_000_000,
        "loan_amount": 30_000_000,
        "annual_rent_income": 2_000_000,
        "expense_rate": 0.3,
        "vacancy_rate": 0.1,
        "interest_rate": 0.03,
        "other_debt_ratio": 0.1,
    },
    "cash_buyer": {
        "annual_income": 6_000_000,
        "annual_repayment": 0,
        "loan_amount": 0,
        "annual_rent_income": 1_200_000,
        "expense_rate": 0.25,
        "vacancy_rate": 0.1,
        "interest_rate": 0.0,
        "other_debt_ratio": 0.0,
    },
}


def simulate(client: TestClient, profile: str, strategy: str) -> dict:
    response = client.post("/v1/simulation", params={"strategy": strategy}, json=PROFILES[profile])
    assert response.status_code == 200
    return response.json()


@pytest.mark.parametrize("strategy", ["dcr", "weighted"])
def test_scores_stay_in_range(client: TestClient, strategy: str):
    for profile in PROFILES:
        data = simulate(client, profile, strategy)
        for scenario in ("original", "vacancy", "rate_hike"):
            assert 0 <= data[scenario]["score"] <= 100, f"{profile}/{scenario} out of range"


def test_salaried_landlord(client: TestClient):
    """
    salaried_landlord: DCR well above target
    Expected: lowest tier under both models
    """
    assert simulate(client, "salaried_landlord", "dcr")["original"]["level"] == "low"

    weighted = simulate(client, "salaried_landlord", "weighted")["original"]
    assert weighted["score"] == 100
    assert weighted["level"] == "low"


def test_stretched_investor(client: TestClient):
    """
    stretched_investor: repayment is half of income, DCR below 1.0
    Expected: top risk tiers, worse under the rate hike
    """
    dcr = simulate(client, "stretched_investor", "dcr")
    assert dcr["original"]["level"] == "very_high"
    assert dcr["rate_hike"]["score"] >= dcr["original"]["score"]

    weighted = simulate(client, "stretched_investor", "weighted")
    assert weighted["original"]["level"] == "high"
    assert weighted["original"]["interest_hike"]["level"] == "high"


def test_no_income_is_fatal(client: TestClient):
    """
    no_income: guarantor would carry the whole loan
    Expected: fatal under the DCR model in every scenario
    """
    data = simulate(client, "no_income", "dcr")
    for scenario in ("original", "vacancy", "rate_hike"):
        assert data[scenario]["score"] == 100
        assert data[scenario]["level"] == "fatal"


def test_cash_buyer_has_no_coverage_risk(client: TestClient):
    """
    cash_buyer: nothing to repay
    Expected: sentinel coverage, no rate-hike effect
    """
    data = simulate(client, "cash_buyer", "dcr")
    assert data["original"]["dcr_value"] == 999.0
    assert data["original"]["score"] == 0
    assert data["new_repayment_amount"] == 0
