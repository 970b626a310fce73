"""Ingestion pipeline turning an uploaded PDF into a DocumentIndex.

Pages are visited strictly in order because the page filter depends on how
many content pages were accepted earlier. Counters and chunks are kept in
locals for the duration of one call and the index is only built once the
loop has finished, so callers never see a partially populated index.
"""

import logging
from typing import Protocol

from docqa.ingestion.chunker import Chunker
from docqa.ingestion.config import IngestionConfig, get_ingestion_config
from docqa.ingestion.extractor import DecodeError, DocumentRenderer, ExtractionError, PypdfRenderer
from docqa.ingestion.page_filter import PageFilter, RejectionReason
from docqa.models.schemas import Chunk, DocumentIndex

logger = logging.getLogger(__name__)


class IngestionError(Exception):
    """Raised when a document cannot be ingested at all."""

    pass


class IngestionObserver(Protocol):
    """Receives diagnostic events while a document is ingested."""

    def document_opened(self, total_pages: int) -> None: ...

    def page_skipped(self, page: int, reason: RejectionReason, text_length: int) -> None: ...

    def page_failed(self, page: int, error: ExtractionError) -> None: ...

    def page_accepted(self, page: int, text_length: int, chunk_count: int) -> None: ...

    def page_cap_reached(self, cap: int) -> None: ...

    def completed(self, index: DocumentIndex) -> None: ...


class NullObserver:
    """Observer that ignores every event."""

    def document_opened(self, total_pages: int) -> None:
        pass

    def page_skipped(self, page: int, reason: RejectionReason, text_length: int) -> None:
        pass

    def page_failed(self, page: int, error: ExtractionError) -> None:
        pass

    def page_accepted(self, page: int, text_length: int, chunk_count: int) -> None:
        pass

    def page_cap_reached(self, cap: int) -> None:
        pass

    def completed(self, index: DocumentIndex) -> None:
        pass


class LoggingObserver:
    """Observer that reports ingestion progress through logging."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def document_opened(self, total_pages: int) -> None:
        self._log.info(f"Processing PDF with {total_pages} pages")

    def page_skipped(self, page: int, reason: RejectionReason, text_length: int) -> None:
        self._log.debug(f"Skipping page {page} ({reason.value}: {text_length} chars)")

    def page_failed(self, page: int, error: ExtractionError) -> None:
        self._log.warning(f"Skipping unreadable page {page}: {error}")

    def page_accepted(self, page: int, text_length: int, chunk_count: int) -> None:
        self._log.debug(f"Page {page}: {text_length} characters, {chunk_count} chunks - accepted")

    def page_cap_reached(self, cap: int) -> None:
        self._log.info(f"Reached limit of {cap} content pages, stopping extraction")

    def completed(self, index: DocumentIndex) -> None:
        self._log.info(
            f"Extracted {index.content_pages} content pages with {index.total_chunks} chunks "
            f"({index.skipped_pages} skipped, {index.total_text_length} characters)"
        )


class IngestionPipeline:
    """Orchestrates extraction, page filtering and chunking.

    Collaborators are injected so tests can substitute a fake renderer and a
    recording observer.
    """

    def __init__(
        self,
        config: IngestionConfig | None = None,
        renderer: DocumentRenderer | None = None,
        observer: IngestionObserver | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            config: Optional ingestion configuration.
                    Loads from environment if not provided.
            renderer: Document renderer, pypdf by default.
            observer: Diagnostic observer, logging by default.
        """
        self._config = config or get_ingestion_config()
        self._renderer = renderer or PypdfRenderer()
        self._observer = observer or LoggingObserver()
        self._page_filter = PageFilter(self._config.page_filter)
        self._chunker = Chunker(self._config.chunker)

    @property
    def config(self) -> IngestionConfig:
        return self._config

    def ingest(self, data: bytes) -> DocumentIndex:
        """Build a DocumentIndex from a document buffer.

        Args:
            data: Raw document bytes.

        Returns:
            The complete index for the document.

        Raises:
            IngestionError: If the document cannot be opened.
        """
        try:
            handle = self._renderer.open_document(data)
            total_pages = self._renderer.page_count(handle)
        except DecodeError as e:
            raise IngestionError(f"Failed to process PDF: {e}") from e

        self._observer.document_opened(total_pages)

        chunks: list[Chunk] = []
        content_pages = 0
        skipped_pages = 0
        total_text_length = 0
        cap = self._config.max_content_pages

        for page in range(1, total_pages + 1):
            try:
                text = self._renderer.get_page_text(handle, page)
            except ExtractionError as e:
                self._observer.page_failed(page, e)
                text = ""

            trimmed = text.strip()
            decision = self._page_filter.evaluate(trimmed, page, content_pages)
            if not decision.accepted:
                skipped_pages += 1
                if decision.reason is not None:
                    self._observer.page_skipped(page, decision.reason, len(trimmed))
                continue

            page_chunks = self._chunker.split(trimmed, page)
            chunks.extend(page_chunks)
            content_pages += 1
            total_text_length += len(trimmed)
            self._observer.page_accepted(page, len(trimmed), len(page_chunks))

            if content_pages >= cap:
                self._observer.page_cap_reached(cap)
                break

        index = DocumentIndex(
            total_pages=total_pages,
            content_pages=content_pages,
            skipped_pages=skipped_pages,
            chunks=tuple(chunks),
            total_text_length=total_text_length,
        )
        self._observer.completed(index)
        return index
