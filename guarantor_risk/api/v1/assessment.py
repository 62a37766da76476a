"""POST /v1/assessment and /v1/simulation - guarantor risk scoring endpoints"""

import time
import logging
from dataclasses import asdict
from typing import Optional, Union

from fastapi import APIRouter, HTTPException, Query, Request

from guarantor_risk.api.v1.schemas import (
    AssessmentResponse,
    DcrAssessmentResponse,
    FinancialInputRequest,
    SimulationRequest,
    WeightedAssessmentResponse,
    WorstCaseResponse,
)
from guarantor_risk.api.dependencies import get_request_id
from guarantor_risk.config import settings
from guarantor_risk.domain.exceptions import UnknownStrategyError
from guarantor_risk.domain.models import Assessment, WeightedAssessment
from guarantor_risk.domain.repayment import get_estimator
from guarantor_risk.domain.simulation import assess, run_worst_case_simulation
from guarantor_risk.infrastructure.observability.metrics import record_assessment, record_simulation
from guarantor_risk.infrastructure.observability.logging import log_assessment, log_simulation

router = APIRouter()


def to_assessment_response(assessment: Assessment) -> Union[WeightedAssessmentResponse, DcrAssessmentResponse]:
    """Convert a domain assessment to the matching response schema"""
    if isinstance(assessment, WeightedAssessment):
        return WeightedAssessmentResponse(**asdict(assessment))
    return DcrAssessmentResponse(**asdict(assessment))


@router.post("/assessment", response_model=AssessmentResponse)
def create_assessment(
    request_body: FinancialInputRequest,
    request: Request,
    strategy: Optional[str] = Query(None, description="Scoring strategy: weighted | dcr"),
):
    """
    Score the current inputs with one strategy.

    Defaults to the configured strategy when none is given.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    strategy = strategy or settings.default_strategy

    try:
        assessment = assess(request_body.to_domain(), strategy)

    except UnknownStrategyError as e:
        logging.warning(f"Unknown strategy: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_assessment(strategy, assessment.score, assessment.level)
    log_assessment(request_id, strategy, assessment.score, assessment.level, duration_ms)

    return to_assessment_response(assessment)


@router.post("/simulation", response_model=WorstCaseResponse)
def create_simulation(
    request_body: SimulationRequest,
    request: Request,
    strategy: Optional[str] = Query(None, description="Scoring strategy: weighted | dcr"),
    estimator: Optional[str] = Query(None, description="Rate-hike repayment estimator: linear | amortized"),
):
    """
    Run the worst-case simulation.

    Flow:
    1. Score the inputs as entered
    2. Score them again with vacancy forced to the worst-case rate
    3. Score them again with the repayment raised by the rate increase
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        report = run_worst_case_simulation(
            request_body.to_domain(),
            strategy=strategy,
            rate_increase=request_body.rate_increase,
            worst_vacancy_rate=request_body.worst_vacancy_rate,
            estimator=get_estimator(estimator or settings.hike_estimator, factor=1.0),
        )

    except UnknownStrategyError as e:
        logging.warning(f"Unknown strategy: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_simulation(report.strategy)
    for scenario in (report.original, report.vacancy, report.rate_hike):
        record_assessment(report.strategy, scenario.score, scenario.level)
    log_simulation(
        request_id,
        report.strategy,
        {
            "original": report.original.score,
            "vacancy": report.vacancy.score,
            "rate_hike": report.rate_hike.score,
        },
        report.new_repayment_amount,
        duration_ms,
    )

    return WorstCaseResponse(
        strategy=report.strategy,
        original=to_assessment_response(report.original),
        vacancy=to_assessment_response(report.vacancy),
        rate_hike=to_assessment_response(report.rate_hike),
        new_repayment_amount=report.new_repayment_amount,
        worst_vacancy_rate=report.worst_vacancy_rate,
        rate_increase=report.rate_increase,
    )
