"""Keyword relevance ranking over document chunks.

A chunk is a candidate only when it contains the whole query. Candidates are
scored by query-token occurrences plus a capped length bonus, so keyword
density wins but longer chunks get a small edge for carrying more context.
"""

from collections.abc import Sequence

from docqa.models.schemas import Chunk, ScoredChunk

DEFAULT_TOP_K = 5
OCCURRENCE_WEIGHT = 10
LENGTH_BONUS_DIVISOR = 100
LENGTH_BONUS_CAP = 50


class RankingError(Exception):
    """Raised when ranking is requested with invalid parameters."""

    pass


class RelevanceRanker:
    """Scores and ranks chunks against a query string."""

    def __init__(self, top_k: int = DEFAULT_TOP_K) -> None:
        if top_k < 1:
            raise RankingError(f"top_k must be at least 1, got {top_k}")
        self._top_k = top_k

    @property
    def top_k(self) -> int:
        return self._top_k

    def rank(
        self,
        chunks: Sequence[Chunk],
        query: str,
        top_k: int | None = None,
    ) -> list[ScoredChunk]:
        """Return the best matching chunks for a query.

        Args:
            chunks: Chunks in document order.
            query: Free-text query, matched case-insensitively.
            top_k: Override for the number of results.

        Returns:
            Up to top_k chunks by descending relevance. Ties keep document order.

        Raises:
            RankingError: If top_k is below 1.
        """
        limit = self._top_k if top_k is None else top_k
        if limit < 1:
            raise RankingError(f"top_k must be at least 1, got {limit}")

        needle = query.strip().lower()
        if not needle or not chunks:
            return []

        results = [
            ScoredChunk(chunk=chunk, position=position, relevance=score(chunk.text, needle))
            for position, chunk in enumerate(chunks)
            if needle in chunk.text.lower()
        ]
        # sorted() is stable, so equal scores stay in document order
        results = sorted(results, key=lambda result: result.relevance, reverse=True)
        return results[:limit]


def score(text: str, query: str) -> float:
    """Heuristic relevance of text for a query.

    Each whitespace token of the lowercased query adds 10 points per
    occurrence in the text. A length bonus of one point per 100 characters,
    capped at 50, is added on top.
    """
    lowered = text.lower()
    total = 0.0
    for token in query.lower().split():
        total += OCCURRENCE_WEIGHT * lowered.count(token)
    total += min(len(text) / LENGTH_BONUS_DIVISOR, LENGTH_BONUS_CAP)
    return total
