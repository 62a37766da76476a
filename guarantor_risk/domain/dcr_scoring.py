"""DSR/DCR linear risk model - higher score means higher guarantor risk"""

import math
from typing import Optional, Tuple

from guarantor_risk.domain.models import DcrAssessment, FinancialInput
from guarantor_risk.utils.number_utils import clamp

DCR_TARGET = 1.2
DCR_BREAKEVEN = 1.0
DCR_SENTINEL = 999.0  # Coverage when there is nothing to repay

FATAL_LABEL = "Fatal risk: the borrower has no income."

LEVEL_LABELS = {
    "very_high": "Very high risk (consulting a specialist is strongly recommended)",
    "high": "High risk (needs careful consideration)",
    "medium": "Medium risk (verify the details)",
    "low": "Relatively low risk",
}


def calculate_net_operating_income(rent_income: float, vacancy_rate: float, expense_rate: float) -> float:
    """NOI with expenses charged on gross rent, before vacancy"""
    return rent_income * (1 - vacancy_rate) - rent_income * expense_rate


def calculate_dcr(net_operating_income: float, repayment: float) -> float:
    if repayment > 0:
        return net_operating_income / repayment
    return DCR_SENTINEL


def adjust_for_dcr(dcr: float) -> Tuple[int, str]:
    """
    Score adjustment for property coverage; exactly one band applies.

    - DCR < 1.0: +40, rent cannot cover the repayment
    - DCR < 1.2: +15, no cash-flow headroom
    - otherwise: -10

    Returns: (adjustment, detail)
    """
    if dcr < DCR_BREAKEVEN:
        return 40, "[Extreme risk] Rent cannot cover the repayment; the owner must top it up."
    elif dcr < DCR_TARGET:
        return 15, "[High risk] DCR is tight; there is no cash-flow headroom."
    else:
        return -10, "[Low risk] Rent leaves a reasonable margin over the repayment."


def determine_risk_level(score: int) -> Tuple[str, str]:
    """
    Score bands:
    - 70+:   very_high
    - 50-69: high
    - 30-49: medium
    - <30:   low

    Returns: (level, label)
    """
    if score >= 70:
        level = "very_high"
    elif score >= 50:
        level = "high"
    elif score >= 30:
        level = "medium"
    else:
        level = "low"
    return level, LEVEL_LABELS[level]


def assess_dcr(data: FinancialInput, repayment_override: Optional[float] = None) -> DcrAssessment:
    """
    Main entry point for the linear model.

    A borrower without income short-circuits to the fatal result (score 100)
    without computing coverage. Otherwise the score starts from DSR x 150,
    is adjusted by the DCR band and other debts, then clamped to 0-100.
    """
    repayment = data.annual_repayment if repayment_override is None else repayment_override

    if data.annual_income == 0:
        return DcrAssessment(
            score=100,
            level="fatal",
            level_label=FATAL_LABEL,
            dcr_value=0.0,
            dcr_comment="",
            dcr_detail="",
            net_operating_income=None,
            repayment=repayment,
        )

    dsr = repayment / data.annual_income
    base_score = math.floor(min(100, dsr * 150))

    noi = calculate_net_operating_income(data.annual_rent_income, data.vacancy_rate, data.expense_rate)
    dcr = calculate_dcr(noi, repayment)
    comment = f"[Profitability] Debt coverage ratio (DCR): {dcr:.2f} (target: 1.20 or more)"

    adjustment, detail = adjust_for_dcr(dcr)
    base_score += adjustment
    base_score += math.floor(min(100, data.other_debt_ratio * 30))

    score = clamp(base_score, 0, 100)
    level, label = determine_risk_level(score)

    return DcrAssessment(
        score=score,
        level=level,
        level_label=label,
        dcr_value=dcr,
        dcr_comment=comment,
        dcr_detail=detail,
        net_operating_income=noi,
        repayment=repayment,
    )
