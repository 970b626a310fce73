"""Ingestion configuration with environment variable loading.

Every threshold used while filtering and chunking pages lives here so it can
be tuned per deployment and shrunk for small test fixtures.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, model_validator

load_dotenv()

DEFAULT_BOILERPLATE_MARKERS: tuple[str, ...] = (
    "project gutenberg",
    "copyright",
    "table of contents",
    "contents",
    "introduction",
    "preface",
    "chapter i",
    "book i",
)


class PageFilterConfig(BaseModel):
    """Heuristics deciding whether a page counts as content.

    Attributes:
        front_matter_pages: Pages at or below this 1-based index are rejected.
        boilerplate_markers: Lowercase substrings that mark a page as boilerplate.
        min_page_chars: Minimum trimmed length of any content page.
        warmup_pages: Number of accepted pages before the warmup rule relaxes.
        warmup_min_chars: Minimum trimmed length while still warming up.
        short_token_length: Tokens at or below this length count as short.
        short_token_ratio: Reject when the share of short tokens exceeds this.
    """

    front_matter_pages: int = Field(default=5, ge=0)
    boilerplate_markers: tuple[str, ...] = DEFAULT_BOILERPLATE_MARKERS
    min_page_chars: int = Field(default=200, ge=0)
    warmup_pages: int = Field(default=2, ge=0)
    warmup_min_chars: int = Field(default=500, ge=0)
    short_token_length: int = Field(default=3, ge=0)
    short_token_ratio: float = Field(default=0.7, ge=0.0, le=1.0)


class ChunkerConfig(BaseModel):
    """Word window sizes for chunking.

    Attributes:
        chunk_size: Maximum words per chunk.
        overlap: Words shared by consecutive chunks; must be below chunk_size.
    """

    model_config = ConfigDict(validate_default=True)

    chunk_size: int = Field(
        default_factory=lambda: int(os.getenv("DOCQA_CHUNK_SIZE", "1000")),
        ge=1,
    )
    overlap: int = Field(
        default_factory=lambda: int(os.getenv("DOCQA_CHUNK_OVERLAP", "100")),
        ge=0,
    )

    @model_validator(mode="after")
    def validate_overlap(self) -> "ChunkerConfig":
        """Reject windows that would never advance."""
        if self.overlap >= self.chunk_size:
            raise ValueError(
                f"overlap ({self.overlap}) must be smaller than chunk_size ({self.chunk_size})"
            )
        return self


class IngestionConfig(BaseModel):
    """Configuration for the ingestion pipeline.

    Attributes:
        max_content_pages: Stop after this many content pages are accepted.
        page_filter: Page filter heuristics.
        chunker: Chunk window sizes.
    """

    model_config = ConfigDict(validate_default=True)

    max_content_pages: int = Field(
        default_factory=lambda: int(os.getenv("DOCQA_MAX_CONTENT_PAGES", "30")),
        ge=1,
    )
    page_filter: PageFilterConfig = Field(default_factory=PageFilterConfig)
    chunker: ChunkerConfig = Field(default_factory=ChunkerConfig)


def get_ingestion_config() -> IngestionConfig:
    """Create ingestion configuration from environment.

    Returns:
        Configured IngestionConfig instance.

    Raises:
        ValueError: If the configured chunk overlap is not below the chunk size.
    """
    return IngestionConfig()
