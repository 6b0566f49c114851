"""Recommendation service port interface."""

from abc import ABC, abstractmethod

from autofinance.application.dtos.financing import FinancingInput, RecommendationResult


class RecommendationService(ABC):
    """Port interface for the financing recommendation service."""

    @abstractmethod
    def recommend(self, financing_input: FinancingInput) -> RecommendationResult:
        """
        Recommend one financing option for the submitted profile.

        Args:
            financing_input: Validated form submission

        Returns:
            Recommended option and its justification

        Raises:
            RecommendationServiceError: If the call fails or the answer is malformed
        """
        pass
