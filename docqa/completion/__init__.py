"""Completion service client for answer generation.

Wraps the Gemini generateContent HTTP API behind a one-method interface
and classifies every failure so the HTTP layer can report it.
"""

from docqa.completion.client import CompletionService, GeminiClient
from docqa.completion.config import CompletionConfig, get_completion_config
from docqa.completion.errors import CompletionErrorKind, CompletionServiceError

__all__ = [
    "CompletionConfig",
    "CompletionErrorKind",
    "CompletionService",
    "CompletionServiceError",
    "GeminiClient",
    "get_completion_config",
]
