"""OpenAI LLM client adapter."""

from typing import Optional

from openai import OpenAI

from autofinance.application.ports.llm_client import LLMClient
from autofinance.domain.errors import RecommendationServiceError
from autofinance.infrastructure.config.settings import settings


class OpenAILLMClient(LLMClient):
    """OpenAI LLM client implementation using official SDK."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout_seconds: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> None:
        """
        Initialize OpenAI LLM client.

        Args:
            api_key: OpenAI API key (defaults to settings.openai_api_key)
            model: Model name (defaults to settings.openai_model)
            timeout_seconds: Request timeout in seconds
                (defaults to settings.openai_timeout_seconds)
            temperature: Sampling temperature (defaults to settings.openai_temperature)
        """
        self._api_key = api_key or settings.openai_api_key
        self._model = model or settings.openai_model
        self._timeout = timeout_seconds or settings.openai_timeout_seconds
        self._temperature = temperature if temperature is not None else settings.openai_temperature

        if not self._api_key:
            raise ValueError("OpenAI API key is required")

        # Single attempt: failures are reported to the user, never retried
        self._client = OpenAI(
            api_key=self._api_key,
            timeout=self._timeout,
            max_retries=0,
        )

    def generate_reply(self, system_prompt: str, user_message: str, context: dict) -> str:
        """
        Generate a JSON reply using OpenAI API.

        Args:
            system_prompt: System prompt to guide LLM behavior
            user_message: Rendered prompt
            context: Raw form fields the prompt was rendered from

        Returns:
            Raw reply text (a JSON object)

        Raises:
            RecommendationServiceError: If the API call fails or returns an empty response
        """
        messages = [
            {
                "role": "system",
                "content": f"{system_prompt}\n\nIMPORTANT: You must respond ONLY in French.",
            },
            {
                "role": "user",
                "content": user_message,
            },
        ]

        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=messages,
                temperature=self._temperature,
                max_tokens=700,
                response_format={"type": "json_object"},
            )

            if not response.choices or response.choices[0].message.content is None:
                raise ValueError("Empty response from OpenAI API")

            reply = response.choices[0].message.content.strip()

            if not reply:
                raise ValueError("Empty reply from OpenAI API")

            return reply

        except Exception as e:
            raise RecommendationServiceError(f"OpenAI API call failed: {str(e)}") from e
