"""Pydantic models for the document index and the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class Chunk(BaseModel):
    """A bounded span of page text used as a retrieval unit.

    Attributes:
        text: Chunk text, never empty.
        page: 1-based number of the page the text came from.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1)
    page: int = Field(..., ge=1)


class DocumentIndex(BaseModel):
    """Result of ingesting one document.

    Built once per ingestion and replaced wholesale on re-ingestion.

    Attributes:
        total_pages: Page count reported by the renderer.
        content_pages: Pages accepted by the page filter.
        skipped_pages: Pages rejected or unreadable.
        chunks: Chunks in page order, then offset order within a page.
        total_text_length: Sum of trimmed text lengths of accepted pages.
    """

    model_config = ConfigDict(frozen=True)

    total_pages: int = Field(..., ge=0)
    content_pages: int = Field(default=0, ge=0)
    skipped_pages: int = Field(default=0, ge=0)
    chunks: tuple[Chunk, ...] = ()
    total_text_length: int = Field(default=0, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_chunks(self) -> int:
        return len(self.chunks)


class ScoredChunk(BaseModel):
    """A ranking candidate, recomputed per query.

    Attributes:
        chunk: The matched chunk.
        position: 0-based ordinal of the chunk within its index.
        relevance: Heuristic score, higher is better.
    """

    model_config = ConfigDict(frozen=True)

    chunk: Chunk
    position: int = Field(..., ge=0)
    relevance: float


class SourceReference(BaseModel):
    """A chunk cited as context for an answer."""

    page: int
    chunk: int = Field(..., description="1-based chunk number within the document")
    relevance: float | None = None


class DocumentInfo(BaseModel):
    """Summary of the document held for a session.

    Attributes:
        session_id: Session owning the document.
        filename: Name of the uploaded file.
        total_pages: Number of pages in the document.
        content_pages: Pages that were indexed.
        skipped_pages: Pages that were skipped.
        total_chunks: Number of chunks in the index.
        total_text_length: Characters of indexed text.
        suggested_questions: Starter questions for the chat.
    """

    session_id: str
    filename: str
    total_pages: int
    content_pages: int
    skipped_pages: int
    total_chunks: int
    total_text_length: int
    suggested_questions: list[str] = Field(default_factory=list)


class DocumentUploadResponse(DocumentInfo):
    """Response after a PDF upload has been ingested."""

    success: bool = True
    error: str | None = None


class AskRequest(BaseModel):
    """Request payload for the ask endpoint.

    Attributes:
        question: User's question about the document.
        session_id: Session whose document should be queried.
    """

    question: str = Field(..., min_length=1)
    session_id: str = Field(default="default", min_length=1)

    @field_validator("question", mode="before")
    @classmethod
    def strip_question(cls, v: str) -> str:
        """Strip whitespace from question before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class AskResponse(BaseModel):
    """Answer from the completion service with source attribution."""

    answer: str
    session_id: str
    sources: list[SourceReference] = Field(default_factory=list)


class ErrorDetail(BaseModel):
    """Classified error surfaced to API callers."""

    kind: str
    message: str
