"""PDF page extraction using pypdf.

Opens an uploaded byte buffer and returns the visible text of individual
pages. Parsing is delegated to pypdf; this module only validates input and
classifies failures.
"""

import io
import logging
from typing import Any, Protocol

from pypdf import PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PDF_MAGIC_BYTES = b"%PDF"


class DecodeError(Exception):
    """Raised when a document cannot be opened at all."""

    pass


class ExtractionError(Exception):
    """Raised when a single page cannot be decoded."""

    def __init__(self, page_index: int, message: str) -> None:
        super().__init__(f"Failed to extract text from page {page_index}: {message}")
        self.page_index = page_index


class DocumentRenderer(Protocol):
    """Renderer collaborator used by the ingestion pipeline."""

    def open_document(self, data: bytes) -> Any:
        """Open a document, raising DecodeError when it is unreadable."""
        ...

    def page_count(self, handle: Any) -> int:
        """Return the number of pages in an opened document."""
        ...

    def get_page_text(self, handle: Any, page_index: int) -> str:
        """Return the text of a 1-based page, raising ExtractionError on failure."""
        ...


def _validate_pdf_bytes(data: bytes, max_file_size: int) -> None:
    """Validate PDF file content before parsing.

    Args:
        data: Raw bytes of the PDF file.
        max_file_size: Largest accepted buffer in bytes.

    Raises:
        DecodeError: If validation fails.
    """
    if not data:
        raise DecodeError("Empty file provided")

    if len(data) > max_file_size:
        size_mb = len(data) / (1024 * 1024)
        limit_mb = max_file_size / (1024 * 1024)
        raise DecodeError(f"File size ({size_mb:.1f}MB) exceeds maximum allowed ({limit_mb:.0f}MB)")

    if not data.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise DecodeError("Invalid PDF: file does not start with PDF header")


class PypdfRenderer:
    """DocumentRenderer backed by pypdf."""

    def __init__(self, max_file_size: int = MAX_FILE_SIZE) -> None:
        self._max_file_size = max_file_size

    def open_document(self, data: bytes) -> PdfReader:
        """Open a PDF from bytes.

        Args:
            data: Raw bytes of the PDF file.

        Returns:
            Initialized PdfReader.

        Raises:
            DecodeError: If the file is invalid, too large, empty, or corrupt.
        """
        _validate_pdf_bytes(data, self._max_file_size)

        try:
            reader = PdfReader(io.BytesIO(data))
            pages = len(reader.pages)
        except PdfReadError as e:
            raise DecodeError(f"Corrupt or invalid PDF: {e}") from e
        except Exception as e:
            raise DecodeError(f"Failed to read PDF: {e}") from e

        if pages == 0:
            raise DecodeError("PDF contains no pages")

        return reader

    def page_count(self, handle: PdfReader) -> int:
        return len(handle.pages)

    def get_page_text(self, handle: PdfReader, page_index: int) -> str:
        """Extract the text of one page.

        Fragments reported by pypdf are joined with single spaces.

        Args:
            handle: Reader returned by open_document.
            page_index: 1-based page number.

        Returns:
            Page text, possibly empty.

        Raises:
            ExtractionError: If pypdf cannot decode the page.
        """
        try:
            page = handle.pages[page_index - 1]
            raw = page.extract_text() or ""
        except Exception as e:
            raise ExtractionError(page_index, str(e)) from e

        return " ".join(raw.split())
