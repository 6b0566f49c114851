"""Compare financing options use case."""

from typing import Any, Callable, Optional

from autofinance.application.dtos.financing import (
    ComparisonReport,
    FinancingCosts,
    FinancingInput,
    RecommendationResult,
)
from autofinance.application.ports.recommendation_service import RecommendationService
from autofinance.application.use_cases.calculate_financing_costs import CalculateFinancingCosts
from autofinance.application.use_cases.recommendation_messages_fr import (
    RecommendationMessagesFR,
)
from autofinance.domain.errors import RecommendationServiceError


class CompareFinancingOptions:
    """Use case for handling one financing comparison submission."""

    def __init__(
        self,
        calculator: CalculateFinancingCosts,
        recommendation_service: Optional[RecommendationService] = None,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            calculator: Cost calculator
            recommendation_service: Optional recommendation backend (None when disabled)
            logger: Optional logger function (request_id, component, **kwargs)
        """
        self._calculator = calculator
        self._recommendation_service = recommendation_service
        self._logger = logger

    def _log(self, request_id: str, component: str, **kwargs: Any) -> None:
        if self._logger:
            self._logger(request_id, component, **kwargs)

    def execute(self, financing_input: FinancingInput, request_id: str = "") -> ComparisonReport:
        """
        Compute the three cost breakdowns and ask for a recommendation.

        Costs never depend on the recommendation: a failed call only fills
        recommendation_error.

        Args:
            financing_input: Validated form submission
            request_id: Request identifier for log correlation

        Returns:
            Comparison report
        """
        costs = self._calculator.calculate_all(financing_input)
        ranking = costs.ranking()

        self._log(
            request_id,
            "costs",
            cheapest_option=ranking[0].value,
            total_cost_usage={
                option.value: costs.for_option(option).total_cost_usage for option in ranking
            },
        )

        recommendation, recommendation_error = self._recommend(financing_input, request_id)

        return ComparisonReport(
            costs=costs,
            ranking=ranking,
            cheapest_option=ranking[0],
            monthly_evolution=self._calculator.monthly_evolution(costs, financing_input.duration),
            warnings=self._build_warnings(financing_input, costs),
            recommendation=recommendation,
            recommendation_error=recommendation_error,
        )

    def _recommend(
        self, financing_input: FinancingInput, request_id: str
    ) -> tuple[Optional[RecommendationResult], Optional[str]]:
        if self._recommendation_service is None:
            self._log(request_id, "recommendation", outcome="disabled")
            return None, RecommendationMessagesFR.ANALYSIS_FAILED

        try:
            result = self._recommendation_service.recommend(financing_input)
        except RecommendationServiceError as e:
            self._log(request_id, "recommendation", outcome="failed", error=str(e))
            return None, RecommendationMessagesFR.ANALYSIS_FAILED

        self._log(
            request_id,
            "recommendation",
            outcome="success",
            recommendation=result.recommendation.value,
        )
        return result, None

    @staticmethod
    def _build_warnings(financing_input: FinancingInput, costs: FinancingCosts) -> list[str]:
        warnings = []
        if financing_input.mileage > RecommendationMessagesFR.HIGH_MILEAGE_THRESHOLD:
            warnings.append(RecommendationMessagesFR.high_mileage_warning(financing_input.mileage))
        if costs.credit.remaining_debt:
            warnings.append(
                RecommendationMessagesFR.remaining_debt_warning(costs.credit.remaining_debt)
            )
        return warnings
