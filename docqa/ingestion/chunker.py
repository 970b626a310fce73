"""Word-window chunking with overlap.

Consecutive chunks share ``overlap`` words so that a sentence cut at a
boundary still appears whole in at least one chunk.
"""

from docqa.ingestion.config import ChunkerConfig
from docqa.models.schemas import Chunk


class Chunker:
    """Split page text into overlapping fixed-size word windows."""

    def __init__(self, config: ChunkerConfig | None = None) -> None:
        self._config = config or ChunkerConfig()

    @property
    def config(self) -> ChunkerConfig:
        return self._config

    @property
    def step(self) -> int:
        """Words between the starts of consecutive chunks."""
        return self._config.chunk_size - self._config.overlap

    def split(self, text: str, page: int) -> list[Chunk]:
        """Chunk the text of one page.

        Args:
            text: Page text.
            page: 1-based page number attached to every chunk.

        Returns:
            Chunks in offset order. Empty when the text is blank.
        """
        trimmed = text.strip()
        if not trimmed:
            return []

        words = trimmed.split()
        chunk_size = self._config.chunk_size

        if len(words) < chunk_size:
            return [Chunk(text=trimmed, page=page)]

        chunks: list[Chunk] = []
        for start in range(0, len(words), self.step):
            chunk_text = " ".join(words[start : start + chunk_size])
            if chunk_text:
                chunks.append(Chunk(text=chunk_text, page=page))
            # the window already covers the tail
            if start + chunk_size >= len(words):
                break
        return chunks
