"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from autofinance.application.dtos.assumptions import CostAssumptions


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    llm_enabled: bool = False
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 10
    openai_temperature: float = 0.3
    cost_assumptions: CostAssumptions = CostAssumptions()

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
        env_nested_delimiter="__",
    )


settings = Settings()
