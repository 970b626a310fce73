"""Unit tests for the content page filter."""

import pytest
import pytest_check as check

from docqa.ingestion.config import PageFilterConfig
from docqa.ingestion.page_filter import FilterDecision, PageFilter, RejectionReason
from tests.helpers import make_prose


@pytest.fixture
def page_filter() -> PageFilter:
    return PageFilter()


class TestFrontMatter:
    """Pages inside the front matter window are always rejected."""

    @pytest.mark.parametrize("page_index", [1, 2, 3, 4, 5])
    def test_rejects_first_five_pages_regardless_of_content(
        self, page_filter: PageFilter, page_index: int
    ) -> None:
        """Substantive prose on pages 1-5 is still front matter."""
        decision = page_filter.evaluate(make_prose(2000), page_index, accepted_so_far=10)

        check.is_false(decision.accepted)
        check.equal(decision.reason, RejectionReason.FRONT_MATTER)

    def test_front_matter_window_is_configurable(self) -> None:
        page_filter = PageFilter(PageFilterConfig(front_matter_pages=0))

        assert page_filter.is_content(make_prose(600), 1, accepted_so_far=3)


class TestRules:
    """Tests for each rejection rule after the front matter."""

    def test_accepts_600_chars_of_prose_as_third_content_page(self, page_filter: PageFilter) -> None:
        """Page 6 with 600 characters of prose is accepted after two content pages."""
        text = make_prose(600)[:600]

        decision = page_filter.evaluate(text, 6, accepted_so_far=2)

        assert decision == FilterDecision.accept()
        assert decision.reason is None

    @pytest.mark.parametrize(
        "marker",
        [
            "Project Gutenberg",
            "COPYRIGHT",
            "Table of Contents",
            "contents",
            "Introduction",
            "preface",
            "Chapter I",
            "Book I",
        ],
    )
    def test_rejects_boilerplate_markers_case_insensitively(
        self, page_filter: PageFilter, marker: str
    ) -> None:
        text = make_prose(800) + " " + marker

        decision = page_filter.evaluate(text, 12, accepted_so_far=5)

        assert decision.reason == RejectionReason.BOILERPLATE

    def test_custom_denylist_replaces_defaults(self) -> None:
        page_filter = PageFilter(PageFilterConfig(boilerplate_markers=("Appendix",)))
        prose = make_prose(800)

        check.is_true(page_filter.is_content(prose + " preface", 9, 4))
        check.is_false(page_filter.is_content(prose + " appendix", 9, 4))

    def test_rejects_text_shorter_than_200_chars(self, page_filter: PageFilter) -> None:
        decision = page_filter.evaluate(make_prose(150), 8, accepted_so_far=5)

        assert decision.reason == RejectionReason.TOO_SHORT

    def test_length_is_measured_after_trimming(self, page_filter: PageFilter) -> None:
        padded = " " * 300 + make_prose(150) + "\n" * 100

        decision = page_filter.evaluate(padded, 8, accepted_so_far=5)

        assert decision.reason == RejectionReason.TOO_SHORT

    def test_rejects_short_page_before_two_content_pages(self, page_filter: PageFilter) -> None:
        """Pages under 500 characters are skipped until two pages were accepted."""
        text = make_prose(300)

        check.equal(page_filter.evaluate(text, 7, 0).reason, RejectionReason.WARMUP_TOO_SHORT)
        check.equal(page_filter.evaluate(text, 7, 1).reason, RejectionReason.WARMUP_TOO_SHORT)
        check.is_true(page_filter.evaluate(text, 7, 2).accepted)

    def test_rejects_pages_of_mostly_short_tokens(self, page_filter: PageFilter) -> None:
        """Pages made of numbers and numerals are rejected."""
        text = " ".join(["12", "iv", "xii", "a", "lengthy"] * 60)

        decision = page_filter.evaluate(text, 9, accepted_so_far=4)

        assert decision.reason == RejectionReason.MOSTLY_SHORT_TOKENS

    def test_some_short_tokens_are_tolerated(self, page_filter: PageFilter) -> None:
        text = " ".join(["one", "two", "six", "ten", "cat", "dog", "meadows", "harvest", "orchard", "lantern"] * 30)

        assert page_filter.is_content(text, 9, accepted_so_far=4)

    def test_exactly_seventy_percent_short_tokens_is_accepted(self, page_filter: PageFilter) -> None:
        """Only a share above the ratio rejects the page."""
        text = " ".join(["one", "two", "six", "ten", "cat", "dog", "sun", "meadows", "harvest", "orchard"] * 30)

        decision = page_filter.evaluate(text, 9, accepted_so_far=4)

        assert decision == FilterDecision.accept()

    def test_rules_apply_in_order(self, page_filter: PageFilter) -> None:
        """A short boilerplate page reports the boilerplate rule first."""
        decision = page_filter.evaluate("copyright 2024", 9, accepted_so_far=0)

        assert decision.reason == RejectionReason.BOILERPLATE

    def test_evaluate_is_pure(self, page_filter: PageFilter) -> None:
        text = make_prose(450)

        first = page_filter.evaluate(text, 10, 1)
        page_filter.evaluate(make_prose(900), 11, 1)
        second = page_filter.evaluate(text, 10, 1)

        assert first == second
