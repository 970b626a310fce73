"""Question answering configuration."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

load_dotenv()


class AssistantConfig(BaseModel):
    """Configuration for the question answering service.

    Attributes:
        context_chunks: Maximum chunks placed in a prompt.
        fallback_to_leading_chunks: Use the first chunks of the document when
            no chunk contains the question.
    """

    model_config = ConfigDict(validate_default=True)

    context_chunks: int = Field(
        default_factory=lambda: int(os.getenv("DOCQA_CONTEXT_CHUNKS", "5")),
        ge=1,
        le=50,
    )
    fallback_to_leading_chunks: bool = True


def get_assistant_config() -> AssistantConfig:
    """Create assistant configuration from environment."""
    return AssistantConfig()
