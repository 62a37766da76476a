"""Weighted multi-factor risk model - credit, property and interest-rate sub-scores"""

from typing import Optional, Tuple

from guarantor_risk.config import settings
from guarantor_risk.domain.models import FinancialInput, StressResult, WeightedAssessment
from guarantor_risk.domain.repayment import RepaymentEstimator, get_estimator
from guarantor_risk.utils.number_utils import clamp

CREDIT_MAX = 30
PROPERTY_MAX = 40
INTEREST_MAX = 30

DCSR_TARGET = 1.2
DCSR_BREAKEVEN = 1.0

LEVEL_DETAILS = {
    "low": "Low risk: borrower income and property cash flow both support the guarantee.",
    "medium": "Medium risk: some indicators are strained. Review income, debt and rent figures before signing.",
    "high": "High risk: the guarantee is likely to be called. Consult a specialist before signing.",
}


def calculate_net_operating_income(rent_income: float, vacancy_rate: float, expense_rate: float) -> float:
    """NOI with expenses taken from the rent actually collected"""
    return rent_income * (1 - vacancy_rate) * (1 - expense_rate)


def calculate_dcsr(net_operating_income: float, repayment: float) -> float:
    """Debt service coverage; a zero repayment is treated as 1"""
    return net_operating_income / (repayment or 1)


def calculate_credit_score(data: FinancialInput, repayment: float) -> int:
    """
    Borrower's own capacity, 0-30.

    Penalties:
    - 5: repayment above 30% of income
    - 10: total debt above 5x income
    - 5: other debts above 20% of income
    """
    income = data.annual_income or 1
    score = CREDIT_MAX

    if repayment / income > 0.3:
        score -= 5
    if data.loan_amount / income > 5:
        score -= 10
    if data.other_debt_ratio > 0.2:
        score -= 5

    return max(0, score)


def calculate_property_score(data: FinancialInput, dcsr: float) -> int:
    """
    Property cash flow, 0-40.

    DCSR penalties stack: below 1.2 costs 10, below 1.0 costs 25 in total.
    Expense rate above 40% and vacancy above 15% cost 5 each.
    """
    score = PROPERTY_MAX

    if dcsr < DCSR_TARGET:
        score -= 10
    if dcsr < DCSR_BREAKEVEN:
        score -= 15
    if data.expense_rate > 0.4:
        score -= 5
    if data.vacancy_rate > 0.15:
        score -= 5

    return max(0, score)


def calculate_interest_risk_score(data: FinancialInput) -> int:
    """
    Exposure to rate moves, 0-30.

    Rate above 4% costs 10, above 5% another 10; debt above 8x income costs 5.
    """
    income = data.annual_income or 1
    score = INTEREST_MAX

    if data.interest_rate > 0.04:
        score -= 10
    if data.interest_rate > 0.05:
        score -= 10
    if data.loan_amount / income > 8:
        score -= 5

    return max(0, score)


def determine_risk_level(score: int) -> Tuple[str, str]:
    """
    Map the composite score to a level.

    Score bands:
    - 80+:   low
    - 50-79: medium
    - <50:   high

    Returns: (level, detail)
    """
    if score >= 80:
        level = "low"
    elif score >= 50:
        level = "medium"
    else:
        level = "high"
    return level, LEVEL_DETAILS[level]


def classify_coverage(dcsr: float) -> Tuple[str, str]:
    """Level and explanation for a stressed DCSR"""
    if dcsr >= DCSR_TARGET:
        return "low", f"Rent covers the repayment with a margin (DCSR {dcsr:.2f}, target 1.20)."
    elif dcsr >= DCSR_BREAKEVEN:
        return "medium", f"Coverage is tight (DCSR {dcsr:.2f}); there is little room for further shocks."
    else:
        return "high", f"Rent no longer covers the repayment (DCSR {dcsr:.2f}); the shortfall must be paid out of pocket."


def simulate_interest_hike(
    data: FinancialInput,
    net_operating_income: float,
    repayment: float,
    estimator: RepaymentEstimator,
    rate_delta: float,
) -> StressResult:
    """Recompute coverage against the same NOI with a higher repayment"""
    increase = estimator.estimate_increase(
        data.loan_amount, data.interest_rate, rate_delta, data.remaining_years
    )
    new_repayment = repayment + increase
    dcsr = calculate_dcsr(net_operating_income, new_repayment)
    level, detail = classify_coverage(dcsr)

    return StressResult(
        repayment=new_repayment,
        net_operating_income=net_operating_income,
        dcsr=dcsr,
        level=level,
        detail=detail,
    )


def simulate_vacancy_stress(data: FinancialInput, repayment: float, worst_vacancy_rate: float) -> StressResult:
    """Recompute coverage with vacancy forced to the worst-case rate"""
    noi = calculate_net_operating_income(data.annual_rent_income, worst_vacancy_rate, data.expense_rate)
    dcsr = calculate_dcsr(noi, repayment)
    level, detail = classify_coverage(dcsr)

    return StressResult(
        repayment=repayment,
        net_operating_income=noi,
        dcsr=dcsr,
        level=level,
        detail=detail,
    )


def assess_weighted(
    data: FinancialInput,
    repayment_override: Optional[float] = None,
    *,
    estimator: Optional[RepaymentEstimator] = None,
    worst_vacancy_rate: Optional[float] = None,
    rate_increase: Optional[float] = None,
) -> WeightedAssessment:
    """
    Main entry point for the weighted model.

    Scores the input, then runs the interest-hike and vacancy stresses.
    The stressed rate is data.simulated_interest_rate when given, otherwise
    the current rate plus rate_increase. Unset parameters come from settings.
    """
    if estimator is None:
        estimator = get_estimator(settings.hike_estimator, settings.hike_repayment_factor)
    if worst_vacancy_rate is None:
        worst_vacancy_rate = settings.worst_vacancy_rate
    if rate_increase is None:
        rate_increase = settings.rate_increase

    repayment = data.annual_repayment if repayment_override is None else repayment_override

    noi = calculate_net_operating_income(data.annual_rent_income, data.vacancy_rate, data.expense_rate)
    dcsr = calculate_dcsr(noi, repayment)

    credit_score = calculate_credit_score(data, repayment)
    property_score = calculate_property_score(data, dcsr)
    interest_risk_score = calculate_interest_risk_score(data)

    score = clamp(credit_score + property_score + interest_risk_score, 0, 100)
    level, detail = determine_risk_level(score)

    if data.simulated_interest_rate is None:
        rate_delta = rate_increase
    else:
        rate_delta = data.simulated_interest_rate - data.interest_rate

    return WeightedAssessment(
        score=score,
        level=level,
        detail=detail,
        credit_score=credit_score,
        property_score=property_score,
        interest_risk_score=interest_risk_score,
        net_operating_income=noi,
        dcsr=dcsr,
        repayment=repayment,
        interest_hike=simulate_interest_hike(data, noi, repayment, estimator, rate_delta),
        vacancy_stress=simulate_vacancy_stress(data, repayment, worst_vacancy_rate),
    )
