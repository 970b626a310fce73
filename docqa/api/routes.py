"""Document upload and question endpoints.

Handles file upload, validation, ingestion and question answering against
the session's document.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, UploadFile, status

from docqa.assistant.service import QAService, get_qa_service, suggested_questions
from docqa.assistant.store import StoredDocument
from docqa.completion.errors import CompletionErrorKind, CompletionServiceError
from docqa.ingestion.extractor import MAX_FILE_SIZE
from docqa.ingestion.pipeline import IngestionError
from docqa.models.schemas import (
    AskRequest,
    AskResponse,
    DocumentInfo,
    DocumentUploadResponse,
    ErrorDetail,
    SourceReference,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["documents"])

# 10MB limit matches extractor constant
MAX_UPLOAD_SIZE = MAX_FILE_SIZE

_COMPLETION_STATUS: dict[CompletionErrorKind, int] = {
    CompletionErrorKind.RATE_LIMITED: status.HTTP_429_TOO_MANY_REQUESTS,
    CompletionErrorKind.NETWORK_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
    CompletionErrorKind.NO_RESPONSE: status.HTTP_504_GATEWAY_TIMEOUT,
}

ServiceDep = Annotated[QAService, Depends(get_qa_service)]


def _validate_file_extension(filename: str | None) -> str:
    """Validate that file has .pdf extension.

    Raises:
        HTTPException: 400 if extension is invalid.
    """
    if not filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )

    if not filename.lower().endswith(".pdf"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only PDF files are accepted",
        )

    return filename


async def _read_and_validate_size(file: UploadFile) -> bytes:
    """Read file content and validate size.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()

    if len(content) > MAX_UPLOAD_SIZE:
        size_mb = len(content) / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)",
        )

    return content


def _document_info(session_id: str, stored: StoredDocument) -> DocumentInfo:
    index = stored.index
    return DocumentInfo(
        session_id=session_id,
        filename=stored.filename,
        total_pages=index.total_pages,
        content_pages=index.content_pages,
        skipped_pages=index.skipped_pages,
        total_chunks=index.total_chunks,
        total_text_length=index.total_text_length,
        suggested_questions=suggested_questions(index),
    )


def _require_document(service: QAService, session_id: str) -> StoredDocument:
    stored = service.store.get(session_id)
    if stored is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No document uploaded for this session. Please upload a PDF first.",
        )
    return stored


@router.post("/documents", response_model=DocumentUploadResponse)
async def upload_document(
    file: UploadFile,
    service: ServiceDep,
    session_id: Annotated[str, Query(min_length=1)] = "default",
) -> DocumentUploadResponse:
    """Upload a PDF and make it the session's document.

    Args:
        file: The uploaded PDF file (multipart/form-data).
        service: QA service holding the document store.
        session_id: Session that owns the document.

    Returns:
        DocumentUploadResponse with page statistics and suggested questions.

    Raises:
        400: Invalid file (not PDF, empty, corrupt).
        413: File exceeds 10MB limit.
    """
    filename = _validate_file_extension(file.filename)
    content = await _read_and_validate_size(file)

    try:
        stored = await service.ingest_document(session_id, filename, content)
    except IngestionError as e:
        logger.warning(f"PDF ingestion error for {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    info = _document_info(session_id, stored)
    return DocumentUploadResponse(**info.model_dump(), success=True)


@router.get("/documents/{session_id}", response_model=DocumentInfo)
async def get_document(session_id: str, service: ServiceDep) -> DocumentInfo:
    """Summarize the document held for a session.

    Raises:
        404: No document uploaded for the session.
    """
    stored = _require_document(service, session_id)
    return _document_info(session_id, stored)


@router.post("/ask", response_model=AskResponse)
async def ask(request: AskRequest, service: ServiceDep) -> AskResponse:
    """Answer a question about the session's document.

    Raises:
        404: No document uploaded for the session.
        429/502/503/504: Completion service failure, with kind and message.
    """
    stored = _require_document(service, request.session_id)

    try:
        answer = await service.answer(stored.index, request.question)
    except CompletionServiceError as e:
        logger.error(f"Completion failed for session {request.session_id}: {e.kind.value}")
        raise HTTPException(
            status_code=_COMPLETION_STATUS.get(e.kind, status.HTTP_502_BAD_GATEWAY),
            detail=ErrorDetail(kind=e.kind.value, message=e.message).model_dump(),
        ) from e

    return AskResponse(
        answer=answer.text,
        session_id=request.session_id,
        sources=[
            SourceReference(page=item.chunk.page, chunk=item.position + 1, relevance=item.relevance)
            for item in answer.sources
        ],
    )
