"""Worst-case simulation driver and scorer registry"""

from typing import Callable, Dict, Optional

from guarantor_risk.config import settings
from guarantor_risk.domain.dcr_scoring import assess_dcr
from guarantor_risk.domain.exceptions import UnknownStrategyError
from guarantor_risk.domain.models import Assessment, FinancialInput, WorstCaseReport
from guarantor_risk.domain.repayment import LinearRateDeltaEstimator, RepaymentEstimator
from guarantor_risk.domain.scoring import assess_weighted

Scorer = Callable[[FinancialInput, Optional[float]], Assessment]

SCORERS: Dict[str, Scorer] = {
    "weighted": assess_weighted,
    "dcr": assess_dcr,
}


def get_scorer(name: str) -> Scorer:
    """Look up a scoring strategy by name"""
    try:
        return SCORERS[name]
    except KeyError:
        raise UnknownStrategyError("scoring strategy", name, sorted(SCORERS)) from None


def assess(data: FinancialInput, strategy: Optional[str] = None) -> Assessment:
    """Score the input with the named strategy (configured default if omitted)"""
    return get_scorer(strategy or settings.default_strategy)(data, None)


def run_worst_case_simulation(
    data: FinancialInput,
    strategy: Optional[str] = None,
    rate_increase: Optional[float] = None,
    worst_vacancy_rate: Optional[float] = None,
    estimator: Optional[RepaymentEstimator] = None,
) -> WorstCaseReport:
    """
    Score the current input and two pessimistic variants of it.

    Scenarios:
    - original: input as entered
    - vacancy: vacancy rate forced to worst_vacancy_rate
    - rate_hike: repayment raised by the estimated cost of rate_increase

    The default estimator charges the full rate increase on the loan amount
    (loan_amount x rate_increase).
    """
    strategy = strategy or settings.default_strategy
    scorer = get_scorer(strategy)

    if rate_increase is None:
        rate_increase = settings.rate_increase
    if worst_vacancy_rate is None:
        worst_vacancy_rate = settings.worst_vacancy_rate
    if estimator is None:
        estimator = LinearRateDeltaEstimator(factor=1.0)

    increase = estimator.estimate_increase(
        data.loan_amount,
        data.interest_rate,
        rate_increase,
        data.remaining_years,
    )
    new_repayment = data.annual_repayment + increase

    return WorstCaseReport(
        strategy=strategy,
        original=scorer(data, None),
        vacancy=scorer(data.replace(vacancy_rate=worst_vacancy_rate), None),
        rate_hike=scorer(data, new_repayment),
        new_repayment_amount=new_repayment,
        worst_vacancy_rate=worst_vacancy_rate,
        rate_increase=rate_increase,
    )
