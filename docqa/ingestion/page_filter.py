"""Page filter deciding which pages are worth indexing.

Front matter, boilerplate and pages made mostly of numbers or headings are
rejected so the chunk budget is spent on body text.
"""

from dataclasses import dataclass
from enum import Enum

from docqa.ingestion.config import PageFilterConfig


class RejectionReason(str, Enum):
    """Why a page was not treated as content."""

    FRONT_MATTER = "front_matter"
    BOILERPLATE = "boilerplate"
    TOO_SHORT = "too_short"
    WARMUP_TOO_SHORT = "warmup_too_short"
    MOSTLY_SHORT_TOKENS = "mostly_short_tokens"


@dataclass(frozen=True, slots=True)
class FilterDecision:
    """Outcome of filtering one page.

    Attributes:
        accepted: Whether the page should be chunked.
        reason: Rejection reason, None when accepted.
    """

    accepted: bool
    reason: RejectionReason | None = None

    @classmethod
    def accept(cls) -> "FilterDecision":
        return cls(accepted=True)

    @classmethod
    def reject(cls, reason: RejectionReason) -> "FilterDecision":
        return cls(accepted=False, reason=reason)


class PageFilter:
    """Stateless content-page classifier.

    The number of pages accepted so far is passed in on every call, so the
    same filter can serve any number of concurrent ingestions.
    """

    def __init__(self, config: PageFilterConfig | None = None) -> None:
        self._config = config or PageFilterConfig()
        self._markers = tuple(marker.lower() for marker in self._config.boilerplate_markers)

    @property
    def config(self) -> PageFilterConfig:
        return self._config

    def evaluate(self, text: str, page_index: int, accepted_so_far: int) -> FilterDecision:
        """Decide whether a page is content.

        Rules are applied in order and the first match wins.

        Args:
            text: Raw page text.
            page_index: 1-based page number.
            accepted_so_far: Content pages accepted before this one.

        Returns:
            FilterDecision with the rejection reason when the page is skipped.
        """
        config = self._config
        trimmed = text.strip()

        if page_index <= config.front_matter_pages:
            return FilterDecision.reject(RejectionReason.FRONT_MATTER)

        lowered = trimmed.lower()
        if any(marker in lowered for marker in self._markers):
            return FilterDecision.reject(RejectionReason.BOILERPLATE)

        if len(trimmed) < config.min_page_chars:
            return FilterDecision.reject(RejectionReason.TOO_SHORT)

        if accepted_so_far < config.warmup_pages and len(trimmed) < config.warmup_min_chars:
            return FilterDecision.reject(RejectionReason.WARMUP_TOO_SHORT)

        if self._mostly_short_tokens(trimmed):
            return FilterDecision.reject(RejectionReason.MOSTLY_SHORT_TOKENS)

        return FilterDecision.accept()

    def is_content(self, text: str, page_index: int, accepted_so_far: int) -> bool:
        """Boolean shortcut for evaluate()."""
        return self.evaluate(text, page_index, accepted_so_far).accepted

    def _mostly_short_tokens(self, text: str) -> bool:
        tokens = text.split()
        if not tokens:
            return False
        short = sum(1 for token in tokens if len(token) <= self._config.short_token_length)
        return short / len(tokens) > self._config.short_token_ratio
