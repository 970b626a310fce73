"""Question answering over an ingested PDF.

Ranks the document's chunks against the question, builds a context prompt
from the best matches and asks the completion service for an answer.
Completion failures propagate unchanged so the caller can decide whether
to show the message or retry.
"""

import asyncio
import logging
from dataclasses import dataclass, field

from docqa.assistant.config import AssistantConfig, get_assistant_config
from docqa.assistant.prompt import build_prompt
from docqa.assistant.store import DocumentStore, StoredDocument
from docqa.completion.client import CompletionService, GeminiClient
from docqa.ingestion.pipeline import IngestionPipeline
from docqa.models.schemas import DocumentIndex, ScoredChunk
from docqa.retrieval.ranker import RelevanceRanker

logger = logging.getLogger(__name__)

BASE_QUESTIONS: tuple[str, ...] = (
    "What is this document about?",
    "What are the main topics covered?",
    "Can you summarize the key points?",
    "What are the important conclusions?",
    "What recommendations are mentioned?",
)
LONG_DOCUMENT_PAGES = 50
LARGE_TEXT_LENGTH = 10000


@dataclass(frozen=True, slots=True)
class Answer:
    """Generated answer with the chunks used as context."""

    text: str
    sources: list[ScoredChunk] = field(default_factory=list)


def suggested_questions(index: DocumentIndex) -> list[str]:
    """Starter questions tailored to the size of the document."""
    questions = list(BASE_QUESTIONS)
    if index.total_pages > LONG_DOCUMENT_PAGES:
        questions[0] = "What is the main purpose of this long document?"
        questions[1] = "What are the major sections and their content?"
    if index.total_text_length > LARGE_TEXT_LENGTH:
        questions[2] = "Can you provide a comprehensive summary?"
    return questions


class QAService:
    """Service tying ingestion, ranking and completion together.

    Holds:
    - An ingestion pipeline for uploaded PDFs
    - A relevance ranker sized to the prompt context budget
    - The completion client, created on first use
    - An in-memory per-session document store
    """

    def __init__(
        self,
        config: AssistantConfig | None = None,
        pipeline: IngestionPipeline | None = None,
        completion: CompletionService | None = None,
        store: DocumentStore | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            config: Optional assistant configuration.
                    Loads from environment if not provided.
            pipeline: Ingestion pipeline, built from environment if omitted.
            completion: Completion service. A GeminiClient is created on the
                        first question when omitted, so uploads work without
                        an API key.
            store: Document store shared by the HTTP routes.
        """
        self._config = config or get_assistant_config()
        self._pipeline = pipeline or IngestionPipeline()
        self._ranker = RelevanceRanker(top_k=self._config.context_chunks)
        self._completion = completion
        self._store = store or DocumentStore()

    @property
    def store(self) -> DocumentStore:
        return self._store

    @property
    def completion(self) -> CompletionService:
        if self._completion is None:
            self._completion = GeminiClient()
        return self._completion

    def ingest(self, data: bytes) -> DocumentIndex:
        """Build an index for a PDF without storing it.

        Raises:
            IngestionError: If the document cannot be opened.
        """
        return self._pipeline.ingest(data)

    async def ingest_document(self, session_id: str, filename: str, data: bytes) -> StoredDocument:
        """Ingest a PDF off the event loop and make it the session's document.

        The store is only updated after ingestion has finished, so a cancelled
        upload leaves the previous document in place.

        Raises:
            IngestionError: If the document cannot be opened.
        """
        index = await asyncio.to_thread(self._pipeline.ingest, data)
        stored = self._store.put(session_id, filename, index)
        logger.info(
            f"Indexed {filename} for session {session_id}: "
            f"{index.content_pages}/{index.total_pages} pages, {index.total_chunks} chunks"
        )
        return stored

    def select_context(self, index: DocumentIndex, question: str) -> list[ScoredChunk]:
        """Pick the chunks placed in the prompt.

        Ranked matches come first. When no chunk contains the question the
        leading chunks of the document are used instead.
        """
        ranked = self._ranker.rank(index.chunks, question)
        if ranked or not self._config.fallback_to_leading_chunks:
            return ranked
        return [
            ScoredChunk(chunk=chunk, position=position, relevance=0.0)
            for position, chunk in enumerate(index.chunks[: self._config.context_chunks])
        ]

    async def answer(self, index: DocumentIndex, question: str) -> Answer:
        """Answer a question and report the context used.

        Args:
            index: Index of the document being asked about.
            question: The user's question.

        Returns:
            Answer with generated text and source chunks.

        Raises:
            ValueError: If the question is blank.
            CompletionServiceError: If the completion service fails.
        """
        question = question.strip()
        if not question:
            raise ValueError("Question must not be empty")

        selected = self.select_context(index, question)
        prompt = build_prompt(selected, question)
        logger.info(
            f"Using {len(selected)} chunks from pages "
            f"{', '.join(str(item.chunk.page) for item in selected) or '-'}"
        )

        text = await self.completion.complete(prompt)
        return Answer(text=text.strip(), sources=selected)

    async def ask(self, index: DocumentIndex, question: str) -> str:
        """Answer a question about an ingested document.

        Raises:
            ValueError: If the question is blank.
            CompletionServiceError: If the completion service fails.
        """
        result = await self.answer(index, question)
        return result.text


# Module-level singleton instance
_qa_service: QAService | None = None


def get_qa_service() -> QAService:
    """Get or create the global QA service.

    Returns:
        The QAService instance.
    """
    global _qa_service
    if _qa_service is None:
        _qa_service = QAService()
    return _qa_service
