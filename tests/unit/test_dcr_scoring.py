"""Unit tests for the DSR/DCR linear model"""

import pytest
from guarantor_risk.domain.dcr_scoring import (
    DCR_SENTINEL,
    adjust_for_dcr,
    assess_dcr,
    calculate_dcr,
    calculate_net_operating_income,
    determine_risk_level,
)
from guarantor_risk.domain.models import FinancialInput


def test_net_operating_income_charges_expenses_on_gross_rent():
    # 2,000,000 x 0.9 - 2,000,000 x 0.3
    assert calculate_net_operating_income(2_000_000, 0.1, 0.3) == pytest.approx(1_200_000)


def test_calculate_dcr_zero_repayment_sentinel():
    assert calculate_dcr(1_200_000, 0) == DCR_SENTINEL
    assert calculate_dcr(1_200_000, 1_000_000) == pytest.approx(1.2)


def test_adjust_for_dcr_single_band():
    assert adjust_for_dcr(0.5)[0] == 40
    assert adjust_for_dcr(1.1)[0] == 15
    assert adjust_for_dcr(1.2)[0] == -10
    assert adjust_for_dcr(DCR_SENTINEL)[0] == -10


def test_determine_risk_level_tiers():
    assert determine_risk_level(70) == ("very_high", "Very high risk (consulting a specialist is strongly recommended)")
    assert determine_risk_level(69)[0] == "high"
    assert determine_risk_level(50)[0] == "high"
    assert determine_risk_level(49)[0] == "medium"
    assert determine_risk_level(30)[0] == "medium"
    assert determine_risk_level(29) == ("low", "Relatively low risk")


def test_zero_income_is_fatal(sample_input: FinancialInput):
    """No income means maximum risk whatever the property does"""
    result = assess_dcr(sample_input.replace(annual_income=0))

    assert result.score == 100
    assert result.level == "fatal"
    assert result.dcr_value == 0.0
    assert result.net_operating_income is None
    assert result.dcr_comment == ""
    assert result.dcr_detail == ""


def test_sample_profile_is_low_risk(sample_input: FinancialInput):
    """DSR 0.2 -> 30, DCR 1.2 -> -10, other debts 10% -> +3"""
    result = assess_dcr(sample_input)

    assert result.score == 23
    assert result.level == "low"
    assert result.level_label == "Relatively low risk"
    assert result.dcr_value == pytest.approx(1.2)
    assert result.net_operating_income == pytest.approx(1_200_000)
    assert "1.20" in result.dcr_comment
    assert result.dcr_detail.startswith("[Low risk]")


def test_negative_cash_flow_adds_forty(sample_input: FinancialInput):
    result = assess_dcr(sample_input.replace(annual_rent_income=1_000_000))

    assert result.dcr_value == pytest.approx(0.6)
    assert result.score == 73
    assert result.level == "very_high"
    assert result.dcr_detail.startswith("[Extreme risk]")


def test_tight_coverage_adds_fifteen(sample_input: FinancialInput):
    result = assess_dcr(sample_input.replace(annual_income=2_000_000, annual_repayment=1_100_000))

    # floor(0.55 x 150) = 82, +15, +3, clamped
    assert result.dcr_detail.startswith("[High risk]")
    assert result.score == 100
    assert result.level == "very_high"


def test_high_and_medium_tiers(sample_input: FinancialInput):
    high = assess_dcr(sample_input.replace(annual_income=2_000_000))
    assert high.score == 68
    assert high.level == "high"

    medium = assess_dcr(sample_input.replace(annual_income=4_000_000))
    assert medium.score == 30
    assert medium.level == "medium"


def test_dsr_component_capped_before_adjustments(sample_input: FinancialInput):
    result = assess_dcr(sample_input.replace(annual_income=1_000_000, other_debt_ratio=0))

    # min(100, 150) - 10
    assert result.score == 90


def test_zero_repayment_uses_sentinel_and_clamps(sample_input: FinancialInput):
    result = assess_dcr(sample_input.replace(annual_repayment=0))

    assert result.dcr_value == DCR_SENTINEL
    assert result.score == 0
    assert result.level == "low"


def test_repayment_override_leaves_input_untouched(sample_input: FinancialInput):
    result = assess_dcr(sample_input, 1_600_000)

    assert result.repayment == 1_600_000
    assert result.dcr_value == pytest.approx(0.75)
    assert result.score == 91
    assert sample_input.annual_repayment == 1_000_000


def test_assess_dcr_is_idempotent(sample_input: FinancialInput):
    assert assess_dcr(sample_input) == assess_dcr(sample_input)


def test_vanishing_income_caps_dsr_component(sample_input: FinancialInput):
    """DSR overflowing to infinity still lands on the 100 cap"""
    result = assess_dcr(sample_input.replace(annual_income=1e-300, annual_repayment=1e10))

    assert result.score == 100
    assert result.level == "very_high"


def test_huge_other_debt_ratio_is_capped(sample_input: FinancialInput):
    result = assess_dcr(sample_input.replace(other_debt_ratio=1e308))

    assert result.score == 100
    assert result.level == "very_high"
