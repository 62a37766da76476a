"""Pydantic schemas for API request/response validation"""

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from guarantor_risk.config import settings
from guarantor_risk.domain.models import FinancialInput
from guarantor_risk.utils.number_utils import coerce_number


class FinancialInputRequest(BaseModel):
    """Request body for POST /v1/assessment - the calculator form"""

    annual_income: float = Field(0.0, ge=0, description="Borrower's gross annual income")
    annual_repayment: float = Field(0.0, ge=0, description="Current annual loan repayment")
    loan_amount: float = Field(0.0, ge=0, description="Total outstanding principal")
    annual_rent_income: float = Field(0.0, ge=0, description="Gross annual rental income")
    expense_rate: float = Field(0.0, ge=0, description="Operating expenses as a share of rent (0.0 - 1.0)")
    vacancy_rate: float = Field(0.0, ge=0, description="Assumed vacancy (0.0 - 1.0)")
    interest_rate: float = Field(0.0, ge=0, description="Current interest rate (0.0 - 1.0)")
    other_debt_ratio: float = Field(0.0, ge=0, description="Other debts as a share of income (0.0 - 1.0)")
    simulated_interest_rate: Optional[float] = Field(None, ge=0, description="Stressed interest rate")
    remaining_years: int = Field(
        default_factory=lambda: settings.default_remaining_years,
        ge=0,
        le=100,
        description="Remaining loan term, used by the amortized estimator",
    )

    @field_validator(
        "annual_income",
        "annual_repayment",
        "loan_amount",
        "annual_rent_income",
        "expense_rate",
        "vacancy_rate",
        "interest_rate",
        "other_debt_ratio",
        mode="before",
    )
    @classmethod
    def coerce_form_number(cls, value: Any) -> float:
        return coerce_number(value)

    @field_validator("simulated_interest_rate", mode="before")
    @classmethod
    def coerce_optional_rate(cls, value: Any) -> Optional[float]:
        if value is None or value == "":
            return None
        return coerce_number(value)

    @field_validator("remaining_years", mode="before")
    @classmethod
    def coerce_years(cls, value: Any) -> int:
        return int(coerce_number(value))

    def to_domain(self) -> FinancialInput:
        return FinancialInput(**self.model_dump())


class SimulationRequest(FinancialInputRequest):
    """Request body for POST /v1/simulation"""

    rate_increase: Optional[float] = Field(None, ge=0, description="Interest-rate rise to simulate")
    worst_vacancy_rate: Optional[float] = Field(None, ge=0, le=1, description="Worst-case vacancy rate")

    def to_domain(self) -> FinancialInput:
        return FinancialInput(**self.model_dump(exclude={"rate_increase", "worst_vacancy_rate"}))


class StressResultSchema(BaseModel):
    """Coverage under one stress scenario"""

    repayment: float
    net_operating_income: float
    dcsr: float
    level: str
    detail: str


class WeightedAssessmentResponse(BaseModel):
    """Weighted multi-factor model result"""

    strategy: Literal["weighted"] = "weighted"
    score: int
    level: str
    detail: str
    credit_score: int
    property_score: int
    interest_risk_score: int
    net_operating_income: float
    dcsr: float
    repayment: float
    interest_hike: StressResultSchema
    vacancy_stress: StressResultSchema


class DcrAssessmentResponse(BaseModel):
    """DSR/DCR linear model result"""

    strategy: Literal["dcr"] = "dcr"
    score: int
    level: str
    level_label: str
    dcr_value: float
    dcr_comment: str
    dcr_detail: str
    net_operating_income: Optional[float] = None
    repayment: float


AssessmentResponse = Annotated[
    Union[WeightedAssessmentResponse, DcrAssessmentResponse],
    Field(discriminator="strategy"),
]


class WorstCaseResponse(BaseModel):
    """Response for POST /v1/simulation"""

    strategy: str
    original: AssessmentResponse
    vacancy: AssessmentResponse
    rate_hike: AssessmentResponse
    new_repayment_amount: float
    worst_vacancy_rate: float
    rate_increase: float


class DefaultsResponse(BaseModel):
    """Response for GET /v1/defaults"""

    inputs: FinancialInputRequest
    default_strategy: str
    strategies: List[str]
    worst_vacancy_rate: float
    rate_increase: float
