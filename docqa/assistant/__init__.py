"""Question answering over the uploaded document.

Responsibilities:
    - Chunk selection for the prompt context
    - Prompt construction labelled by page and chunk
    - Completion calls with classified error propagation
    - Per-session document storage and suggested questions
"""

from docqa.assistant.config import AssistantConfig, get_assistant_config
from docqa.assistant.service import Answer, QAService, get_qa_service, suggested_questions
from docqa.assistant.store import DocumentStore, StoredDocument

__all__ = [
    "Answer",
    "AssistantConfig",
    "DocumentStore",
    "QAService",
    "StoredDocument",
    "get_assistant_config",
    "get_qa_service",
    "suggested_questions",
]
