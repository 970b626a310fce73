"""Keyword retrieval over an ingested document."""

from docqa.retrieval.ranker import DEFAULT_TOP_K, RankingError, RelevanceRanker, score

__all__ = ["DEFAULT_TOP_K", "RankingError", "RelevanceRanker", "score"]
