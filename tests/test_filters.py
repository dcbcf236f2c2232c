"""Tests for the filter engine."""

import pytest
from sentiscope.core.filters import filter_rows, hotel_names, row_matches
from sentiscope.core.models import FilterCriteria

from conftest import make_row


class TestFilterRows:
    """Test conjunctive filtering."""

    def test_noop_is_identity(self, sample_rows):
        """No criteria keeps every row in order."""
        assert filter_rows(sample_rows, FilterCriteria()) == sample_rows
        assert filter_rows(sample_rows) == sample_rows

    def test_single_criteria(self, sample_rows):
        """Each exact-match criterion narrows the rows."""
        assert [r.review_id for r in filter_rows(sample_rows, FilterCriteria(hotel="Hotel B"))] == ["R3"]
        assert [r.review_id for r in filter_rows(sample_rows, FilterCriteria(sentiment="negative"))] == ["R2"]
        assert [r.review_id for r in filter_rows(sample_rows, FilterCriteria(language="id"))] == ["R2"]
        assert [r.aspect for r in filter_rows(sample_rows, FilterCriteria(aspect="Cleanliness"))] == ["Cleanliness"]

    def test_criteria_combine_with_and(self, sample_rows):
        """All active criteria must hold."""
        criteria = FilterCriteria(hotel="Hotel A", aspect="Service", sentiment="positive")
        result = filter_rows(sample_rows, criteria)
        assert len(result) == 1
        assert result[0].review_id == "R1"

    def test_search_is_case_insensitive_over_text_and_hotel(self, sample_rows):
        """Query matches review text or hotel name."""
        assert [r.review_id for r in filter_rows(sample_rows, FilterCriteria(query="LAMBAT"))] == ["R2"]
        assert [r.review_id for r in filter_rows(sample_rows, FilterCriteria(query="hotel b"))] == ["R3"]

    def test_preserves_order(self, sample_rows):
        """Retained rows keep their relative order."""
        result = filter_rows(sample_rows, FilterCriteria(hotel="Hotel A"))
        assert result == [r for r in sample_rows if r.hotel_name == "Hotel A"]

    def test_idempotent(self, sample_rows):
        """Filtering twice equals filtering once."""
        criteria = FilterCriteria(query="staff")
        once = filter_rows(sample_rows, criteria)
        assert filter_rows(once, criteria) == once

    def test_empty_input(self):
        """Nothing in, nothing out."""
        assert filter_rows([], FilterCriteria(hotel="Hotel A")) == []

    def test_input_not_mutated(self, sample_rows):
        """The source list is left alone."""
        before = list(sample_rows)
        filter_rows(sample_rows, FilterCriteria(sentiment="positive"))
        assert sample_rows == before


def test_row_matches_all_sentinel():
    """The 'all' sentinel disables a criterion."""
    assert row_matches(make_row(), FilterCriteria(hotel="all", aspect="all"))
    assert not row_matches(make_row(), FilterCriteria(hotel="Other"))


def test_hotel_names(sample_rows):
    """Distinct non-empty names, first-seen order."""
    rows = sample_rows + [make_row(hotel_name=""), make_row(hotel_name="Hotel A")]
    assert hotel_names(rows) == ["Hotel A", "Hotel B"]


if __name__ == "__main__":
    pytest.main([__file__])
