"""Configuration management for Sentix."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # OpenAI API
    openai_api_key: str = Field("", description="OpenAI API key")
    openai_model: str = Field("gpt-4o-mini", description="Model used for sentiment classification")
    request_timeout: float = Field(30.0, description="Per-request timeout in seconds")
    temperature: float = Field(0.2, description="Sampling temperature for classification")

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Analysis settings
    max_concurrent_requests: int = Field(1, description="Analysis calls allowed in flight during batch loads")
    top_aspects_limit: int = Field(5, description="Number of aspects shown in the top aspects chart")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
