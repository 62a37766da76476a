"""Estimators for the annual repayment after an interest-rate rise"""

import math
from dataclasses import dataclass
from typing import Callable, Dict, Protocol

from guarantor_risk.domain.exceptions import UnknownStrategyError


class RepaymentEstimator(Protocol):
    """Estimate how much the annual repayment grows when the rate moves"""

    def estimate_increase(
        self,
        principal: float,
        current_rate: float,
        rate_delta: float,
        years: int,
    ) -> float:
        ...


@dataclass(frozen=True)
class LinearRateDeltaEstimator:
    """
    Flat approximation: principal x rate delta x factor.

    factor=0.7 is the weighted model's approximation constant;
    factor=1.0 charges the full rate delta on the whole principal,
    which is what the worst-case driver uses.
    """

    factor: float = 0.7

    def estimate_increase(
        self,
        principal: float,
        current_rate: float,
        rate_delta: float,
        years: int,
    ) -> float:
        return principal * rate_delta * self.factor


@dataclass(frozen=True)
class AmortizedPaymentEstimator:
    """Difference between level annual annuity payments at the two rates"""

    def estimate_increase(
        self,
        principal: float,
        current_rate: float,
        rate_delta: float,
        years: int,
    ) -> float:
        return annual_payment(principal, current_rate + rate_delta, years) - annual_payment(
            principal, current_rate, years
        )


def annual_payment(principal: float, rate: float, years: int) -> float:
    """
    Level annual payment that repays principal over years at rate.

    Zero rate degrades to straight-line repayment; a non-positive term
    means the whole principal is due now. Terms long enough to overflow
    the growth factor converge to interest-only, principal x rate.
    """
    if years <= 0:
        return principal
    if rate == 0:
        return principal / years

    try:
        growth = (1 + rate) ** years
    except OverflowError:
        return principal * rate
    if math.isinf(growth):
        return principal * rate
    if growth == 1:
        # Rate too small to register against 1.0
        return principal / years
    return principal * rate * growth / (growth - 1)


ESTIMATORS: Dict[str, Callable[[float], RepaymentEstimator]] = {
    "linear": lambda factor: LinearRateDeltaEstimator(factor=factor),
    "amortized": lambda factor: AmortizedPaymentEstimator(),
}


def get_estimator(name: str, factor: float = 0.7) -> RepaymentEstimator:
    """Look up a repayment estimator by its configured name"""
    try:
        factory = ESTIMATORS[name]
    except KeyError:
        raise UnknownStrategyError("repayment estimator", name, sorted(ESTIMATORS)) from None
    return factory(factor)
