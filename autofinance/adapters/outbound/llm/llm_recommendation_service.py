"""Recommendation service backed by an LLM client."""

import json

from pydantic import ValidationError

from autofinance.application.dtos.financing import FinancingInput, RecommendationResult
from autofinance.application.ports.llm_client import LLMClient
from autofinance.application.ports.recommendation_service import RecommendationService
from autofinance.application.use_cases.recommendation_messages_fr import (
    RecommendationMessagesFR,
)
from autofinance.domain.entities.financing_option import FinancingOption
from autofinance.domain.errors import RecommendationServiceError


class LLMRecommendationService(RecommendationService):
    """Renders the French prompt, calls the LLM once and validates its JSON answer."""

    def __init__(self, llm_client: LLMClient) -> None:
        """
        Initialize recommendation service.

        Args:
            llm_client: Text-generation backend
        """
        self._llm_client = llm_client

    def recommend(self, financing_input: FinancingInput) -> RecommendationResult:
        """
        Ask the LLM for a recommendation.

        Args:
            financing_input: Validated form submission

        Returns:
            Recommended option and reasoning

        Raises:
            RecommendationServiceError: If the call fails or the answer is malformed
        """
        context = financing_input.model_dump()
        try:
            reply = self._llm_client.generate_reply(
                system_prompt=RecommendationMessagesFR.SYSTEM_PROMPT,
                user_message=RecommendationMessagesFR.render_user_prompt(financing_input),
                context=context,
            )
        except RecommendationServiceError:
            raise
        except Exception as e:
            raise RecommendationServiceError(f"Recommendation call failed: {str(e)}") from e

        return self._parse_reply(reply)

    @staticmethod
    def _parse_reply(reply: str) -> RecommendationResult:
        """
        Parse the two-field JSON answer.

        Raises:
            RecommendationServiceError: If the reply is not the expected object
        """
        if not reply or not reply.strip():
            raise RecommendationServiceError("Empty recommendation reply")

        try:
            payload = json.loads(reply)
        except json.JSONDecodeError as e:
            raise RecommendationServiceError("Recommendation reply is not valid JSON") from e

        if not isinstance(payload, dict):
            raise RecommendationServiceError("Recommendation reply must be a JSON object")

        label = payload.get("recommendation")
        reasoning = payload.get("reasoning")
        if not isinstance(label, str) or not isinstance(reasoning, str):
            raise RecommendationServiceError(
                "Recommendation reply must contain 'recommendation' and 'reasoning' strings"
            )

        try:
            return RecommendationResult(
                recommendation=FinancingOption.from_label(label),
                reasoning=reasoning.strip(),
            )
        except (ValueError, ValidationError) as e:
            raise RecommendationServiceError(f"Malformed recommendation: {str(e)}") from e
