"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, replace
from typing import Optional, Union


@dataclass(frozen=True)
class FinancialInput:
    """Snapshot of borrower and property figures entered for one calculation"""

    annual_income: float
    annual_repayment: float
    loan_amount: float
    annual_rent_income: float
    expense_rate: float  # Share of gross rent, 0.0 - 1.0
    vacancy_rate: float  # 0.0 - 1.0
    interest_rate: float  # 0.0 - 1.0
    other_debt_ratio: float  # Other debts / annual income
    simulated_interest_rate: Optional[float] = None
    remaining_years: int = 20

    def replace(self, **changes) -> "FinancialInput":
        """Return a copy with the given fields changed"""
        return replace(self, **changes)


@dataclass(frozen=True)
class StressResult:
    """Coverage outcome of a single stress scenario"""

    repayment: float
    net_operating_income: float
    dcsr: float
    level: str  # "low" | "medium" | "high"
    detail: str


@dataclass(frozen=True)
class WeightedAssessment:
    """Output of the weighted multi-factor model"""

    score: int
    level: str  # "low" | "medium" | "high"
    detail: str
    credit_score: int
    property_score: int
    interest_risk_score: int
    net_operating_income: float
    dcsr: float
    repayment: float
    interest_hike: StressResult
    vacancy_stress: StressResult


@dataclass(frozen=True)
class DcrAssessment:
    """Output of the DSR/DCR linear model"""

    score: int
    level: str  # "fatal" | "very_high" | "high" | "medium" | "low"
    level_label: str
    dcr_value: float
    dcr_comment: str
    dcr_detail: str
    net_operating_income: Optional[float]
    repayment: float


Assessment = Union[WeightedAssessment, DcrAssessment]


@dataclass(frozen=True)
class WorstCaseReport:
    """Current assessment alongside the two worst-case scenarios"""

    strategy: str
    original: Assessment
    vacancy: Assessment
    rate_hike: Assessment
    new_repayment_amount: float
    worst_vacancy_rate: float
    rate_increase: float
