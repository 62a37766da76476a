"""GET /v1/defaults - Starting values for the calculator form"""

from fastapi import APIRouter

from guarantor_risk.api.v1.schemas import DefaultsResponse, FinancialInputRequest
from guarantor_risk.config import settings
from guarantor_risk.domain.simulation import SCORERS

router = APIRouter()

DEFAULT_INPUTS = {
    "annual_income": 5_000_000,
    "annual_repayment": 1_000_000,
    "loan_amount": 30_000_000,
    "annual_rent_income": 2_000_000,
    "expense_rate": 0.3,
    "vacancy_rate": 0.1,
    "interest_rate": 0.03,
    "other_debt_ratio": 0.1,
}


@router.get("/defaults", response_model=DefaultsResponse)
def get_defaults():
    """
    Return a worked example to pre-fill the form, plus the stress settings
    the simulation will use when the request does not override them.
    """
    return DefaultsResponse(
        inputs=FinancialInputRequest(**DEFAULT_INPUTS),
        default_strategy=settings.default_strategy,
        strategies=sorted(SCORERS),
        worst_vacancy_rate=settings.worst_vacancy_rate,
        rate_increase=settings.rate_increase,
    )
