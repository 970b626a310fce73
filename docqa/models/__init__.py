"""Pydantic models for the document index and API payloads.

Models:
    - Chunk: Page-tagged span of text used for retrieval
    - DocumentIndex: Chunks and page statistics for one document
    - ScoredChunk: Query-time ranking result
    - AskRequest / AskResponse: Question answering payloads
    - DocumentInfo / DocumentUploadResponse: Upload and document summaries
"""

from docqa.models.schemas import (
    AskRequest,
    AskResponse,
    Chunk,
    DocumentIndex,
    DocumentInfo,
    DocumentUploadResponse,
    ErrorDetail,
    ScoredChunk,
    SourceReference,
)

__all__ = [
    "AskRequest",
    "AskResponse",
    "Chunk",
    "DocumentIndex",
    "DocumentInfo",
    "DocumentUploadResponse",
    "ErrorDetail",
    "ScoredChunk",
    "SourceReference",
]
