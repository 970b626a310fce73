"""Document ingestion for PDF question answering.

Transforms an uploaded PDF into a DocumentIndex of page-tagged chunks.

Responsibilities:
    - Page text extraction with pypdf
    - Page filtering that skips front matter, boilerplate and short pages
    - Word-window chunking with overlap for context preservation
    - A content-page cap bounding downstream completion cost
"""

from docqa.ingestion.chunker import Chunker
from docqa.ingestion.config import (
    ChunkerConfig,
    IngestionConfig,
    PageFilterConfig,
    get_ingestion_config,
)
from docqa.ingestion.extractor import (
    DecodeError,
    DocumentRenderer,
    ExtractionError,
    PypdfRenderer,
)
from docqa.ingestion.page_filter import FilterDecision, PageFilter, RejectionReason
from docqa.ingestion.pipeline import (
    IngestionError,
    IngestionObserver,
    IngestionPipeline,
    LoggingObserver,
    NullObserver,
)

__all__ = [
    "Chunker",
    "ChunkerConfig",
    "DecodeError",
    "DocumentRenderer",
    "ExtractionError",
    "FilterDecision",
    "IngestionConfig",
    "IngestionError",
    "IngestionObserver",
    "IngestionPipeline",
    "LoggingObserver",
    "NullObserver",
    "PageFilter",
    "PageFilterConfig",
    "PypdfRenderer",
    "RejectionReason",
    "get_ingestion_config",
]
