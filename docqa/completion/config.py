"""Completion service configuration with environment variable loading.

Pydantic-based configuration for the Gemini text-generation API.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

HARM_CATEGORIES: tuple[str, ...] = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)


class CompletionConfig(BaseModel):
    """Configuration for the completion service.

    Attributes:
        api_key: API key for model access.
        base_url: API base URL.
        model_name: Model identifier to use.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        top_k: Number of highest-probability tokens considered per step.
        top_p: Nucleus sampling probability mass.
        max_output_tokens: Maximum tokens in generated response.
        timeout: Request timeout in seconds.
        safety_threshold: Block threshold applied to every harm category.
    """

    model_config = ConfigDict(validate_default=True)

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", ""),
        description="API key for the Gemini API",
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv("GEMINI_BASE_URL") or DEFAULT_BASE_URL,
        description="API base URL",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-1.5-flash"),
        description="Model to use",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    top_k: int = Field(
        default=40,
        ge=1,
        description="Top-k sampling cutoff",
    )
    top_p: float = Field(
        default=0.95,
        ge=0.0,
        le=1.0,
        description="Top-p sampling cutoff",
    )
    max_output_tokens: int = Field(
        default=1024,
        ge=1,
        le=8192,
        description="Maximum tokens in generated response",
    )
    timeout: float = Field(
        default=30.0,
        gt=0.0,
        description="Request timeout in seconds",
    )
    safety_threshold: str = Field(
        default="BLOCK_MEDIUM_AND_ABOVE",
        description="Threshold applied to every harm category",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("API key required. Set GEMINI_API_KEY in .env")
        return v.strip()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def endpoint(self) -> str:
        """URL of the generateContent method for the configured model."""
        return f"{self.base_url}/models/{self.model_name}:generateContent"

    def generation_config(self) -> dict[str, float | int]:
        return {
            "temperature": self.temperature,
            "topK": self.top_k,
            "topP": self.top_p,
            "maxOutputTokens": self.max_output_tokens,
        }

    def safety_settings(self) -> list[dict[str, str]]:
        return [
            {"category": category, "threshold": self.safety_threshold}
            for category in HARM_CATEGORIES
        ]


def get_completion_config() -> CompletionConfig:
    """Create completion configuration from environment.

    Returns:
        Configured CompletionConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return CompletionConfig()
