"""Dependency injection factory functions."""

from typing import Any, Optional

from autofinance.adapters.outbound.llm.llm_recommendation_service import (
    LLMRecommendationService,
)
from autofinance.adapters.outbound.llm.openai_llm_client import OpenAILLMClient
from autofinance.application.ports.llm_client import LLMClient
from autofinance.application.ports.recommendation_service import RecommendationService
from autofinance.application.use_cases.calculate_financing_costs import CalculateFinancingCosts
from autofinance.application.use_cases.compare_financing_options import (
    CompareFinancingOptions,
)
from autofinance.application.use_cases.estimate_financing_profile import (
    EstimateFinancingProfile,
)
from autofinance.infrastructure.config.settings import settings
from autofinance.infrastructure.logging.logger import log_recommendation, log_request, logger


def create_cost_calculator() -> CalculateFinancingCosts:
    """
    Factory function to create the cost calculator.

    Returns:
        CalculateFinancingCosts configured with settings.cost_assumptions
    """
    return CalculateFinancingCosts(settings.cost_assumptions)


def create_profile_estimator() -> EstimateFinancingProfile:
    """
    Factory function to create the profile estimator.

    Returns:
        EstimateFinancingProfile instance
    """
    return EstimateFinancingProfile()


def create_llm_client() -> Optional[LLMClient]:
    """
    Factory function to create LLM client if enabled.

    Returns:
        LLMClient instance if enabled, None otherwise
    """
    if not settings.llm_enabled:
        return None

    try:
        return OpenAILLMClient()
    except ValueError as e:
        # Missing API key: the service starts, recommendations report as unavailable
        logger.warning("LLM client disabled: %s", e)
        return None


def create_recommendation_service() -> Optional[RecommendationService]:
    """
    Factory function to create the recommendation service.

    Returns:
        RecommendationService instance, None when no LLM client is available
    """
    llm_client = create_llm_client()
    if llm_client is None:
        return None
    return LLMRecommendationService(llm_client)


def create_compare_financing_options_use_case(
    recommendation_service: Optional[RecommendationService] = None,
) -> CompareFinancingOptions:
    """
    Factory function to create CompareFinancingOptions with dependencies.

    Args:
        recommendation_service: Recommendation backend shared with the HTTP layer

    Returns:
        CompareFinancingOptions instance
    """

    # Wire logger function
    def _logger_func(request_id: str, component: str, **kwargs: Any) -> None:
        if component == "recommendation":
            log_recommendation(request_id, **kwargs)
        else:
            log_request(request_id, component, **kwargs)

    return CompareFinancingOptions(
        create_cost_calculator(),
        recommendation_service,
        logger=_logger_func,
    )
