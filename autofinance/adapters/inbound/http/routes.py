"""HTTP routes."""

from uuid import uuid4

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.concurrency import run_in_threadpool

from autofinance.application.dtos.financing import (
    ComparisonReport,
    FinancingCosts,
    FinancingInput,
    ProfileDefaults,
    RecommendationResult,
)
from autofinance.application.use_cases.recommendation_messages_fr import (
    RecommendationMessagesFR,
)
from autofinance.domain.errors import RecommendationServiceError
from autofinance.infrastructure.config.settings import settings
from autofinance.infrastructure.logging.logger import (
    log_cost_calculation,
    log_recommendation,
    log_request,
)
from autofinance.infrastructure.wiring.dependencies import (
    create_compare_financing_options_use_case,
    create_cost_calculator,
    create_profile_estimator,
    create_recommendation_service,
)

router = APIRouter()

# Create use case instances (wired with dependencies)
_calculator = create_cost_calculator()
_profile_estimator = create_profile_estimator()
_recommendation_service = create_recommendation_service()
_compare_use_case = create_compare_financing_options_use_case(_recommendation_service)


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


@router.get(
    "/financing/defaults",
    status_code=status.HTTP_200_OK,
    response_model=ProfileDefaults,
)
async def financing_defaults(
    vehicle_price: float = Query(..., gt=0),
    down_payment: float = Query(0.0, ge=0),
    duration: int = Query(4, ge=1, le=10),
) -> ProfileDefaults:
    """
    Suggest default interest and residual value rates for the form.

    Args:
        vehicle_price: Vehicle price
        down_payment: Down payment amount
        duration: Contract length in years

    Returns:
        Suggested rates in percent
    """
    return _profile_estimator.suggest_defaults(vehicle_price, down_payment, duration)


@router.post(
    "/financing/costs",
    status_code=status.HTTP_200_OK,
    response_model=FinancingCosts,
)
async def financing_costs(request: FinancingInput) -> FinancingCosts:
    """
    Compute the detailed costs of the three options, without recommendation.

    Args:
        request: Validated financing form

    Returns:
        Detailed costs per option
    """
    request_id = str(uuid4())
    costs = _calculator.calculate_all(request)

    log_cost_calculation(
        request_id=request_id,
        vehicle_price=request.vehicle_price,
        duration=request.duration,
        mileage=request.mileage,
        cheapest_option=costs.ranking()[0].value,
    )

    return costs


@router.post(
    "/financing/recommendation",
    status_code=status.HTTP_200_OK,
    response_model=RecommendationResult,
)
async def financing_recommendation(request: FinancingInput) -> RecommendationResult:
    """
    Ask the recommendation service for the best option.

    Args:
        request: Validated financing form

    Returns:
        Recommended option and reasoning

    Raises:
        HTTPException: 503 when the service is disabled, 502 when the call fails
    """
    request_id = str(uuid4())

    if _recommendation_service is None:
        log_recommendation(request_id=request_id, outcome="disabled")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=RecommendationMessagesFR.ANALYSIS_FAILED,
        )

    try:
        result = await run_in_threadpool(_recommendation_service.recommend, request)
    except RecommendationServiceError as e:
        log_recommendation(request_id=request_id, outcome="failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=RecommendationMessagesFR.ANALYSIS_FAILED,
        ) from e

    log_recommendation(
        request_id=request_id,
        outcome="success",
        recommendation=result.recommendation.value,
    )
    return result


@router.post(
    "/financing/compare",
    status_code=status.HTTP_200_OK,
    response_model=ComparisonReport,
)
async def financing_compare(request: FinancingInput) -> ComparisonReport:
    """
    Handle one financing comparison: costs, ranking and recommendation.

    A failed recommendation never blocks the cost results; it is reported in
    recommendation_error.

    Args:
        request: Validated financing form

    Returns:
        Comparison report
    """
    # Generate request_id for log correlation
    request_id = str(uuid4())

    log_request(
        request_id=request_id,
        component="http",
        vehicle_price=request.vehicle_price,
        duration=request.duration,
        mileage=request.mileage,
    )

    report = await run_in_threadpool(_compare_use_case.execute, request, request_id)

    if settings.debug_mode:
        log_request(request_id=request_id, component="http", report=report.model_dump(mode="json"))

    return report
