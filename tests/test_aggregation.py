"""Tests for dashboard aggregations."""

import pytest
from sentiscope.core.aggregation import (
    aspect_sentiment_counts,
    hotel_aspect_heatmap,
    kpi_summary,
    round_half_up,
    sentiment_distribution,
    sentiment_trend,
    topic_keywords,
)
from sentiscope.core.constants import AspectConstants

from conftest import make_row


class TestKPISummary:
    """Test headline numbers."""

    def test_rate_and_rating(self):
        """One positive and one negative: 50% and mean 4.0."""
        rows = [
            make_row(review_id="A", rating=5, sentiment="positive"),
            make_row(review_id="B", rating=3, sentiment="negative"),
        ]
        kpi = kpi_summary(rows)
        assert kpi.total_reviews == 2
        assert kpi.positive_rate == 50
        assert kpi.avg_rating == 4.0

    def test_distinct_review_ids(self, sample_rows):
        """Aspect rows of one review count once."""
        assert kpi_summary(sample_rows).total_reviews == 3

    def test_unrated_rows_ignored_in_average(self, sample_rows):
        """Rating 0 means unrated."""
        assert kpi_summary(sample_rows).avg_rating == 4.0  # (5 + 5 + 2) / 3

    def test_rounding_half_up(self):
        """2 of 3 positive rounds to 67, 1 of 8 (12.5) rounds to 13."""
        rows = [make_row(sentiment="positive"), make_row(sentiment="positive"), make_row(sentiment="neutral")]
        assert kpi_summary(rows).positive_rate == 67
        rows = [make_row(sentiment="positive")] + [make_row(sentiment="negative") for _ in range(7)]
        assert kpi_summary(rows).positive_rate == 13

    def test_bad_ratings_do_not_break_average(self):
        """Infinite and out-of-range ratings are left out of the mean."""
        rows = [
            make_row(review_id="A", rating="Infinity"),
            make_row(review_id="B", rating=float("inf")),
            make_row(review_id="C", rating=7),
            make_row(review_id="D", rating=3),
        ]
        assert kpi_summary(rows).avg_rating == 3.0

    def test_empty(self):
        """Empty input gives zeros."""
        kpi = kpi_summary([])
        assert kpi.total_reviews == 0
        assert kpi.positive_rate == 0
        assert kpi.avg_rating == 0.0


def test_round_half_up():
    """Halves round away from zero."""
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(2.5) == 3.0
    assert round_half_up(3.25, 1) == 3.3


class TestAspectCounts:
    """Test per-aspect sentiment counts."""

    def test_all_configured_aspects_present(self):
        """Zero-count aspects are still listed in order."""
        counts = aspect_sentiment_counts([])
        assert [c.aspect for c in counts] == list(AspectConstants.ASPECTS)
        assert all(c.total == 0 for c in counts)

    def test_counts(self, sample_rows):
        """Counts land on the right aspect and label."""
        by_aspect = {c.aspect: c for c in aspect_sentiment_counts(sample_rows)}
        assert (by_aspect["Service"].positive, by_aspect["Service"].negative) == (1, 1)
        assert by_aspect["Food"].neutral == 1
        assert by_aspect["Cleanliness"].positive == 1

    def test_unknown_aspects_appended(self):
        """Aspects outside the taxonomy follow the configured ones."""
        rows = [make_row(aspect="Wifi"), make_row(aspect="Parking", sentiment="negative")]
        counts = aspect_sentiment_counts(rows)
        assert [c.aspect for c in counts[-2:]] == ["Wifi", "Parking"]
        assert len(counts) == len(AspectConstants.ASPECTS) + 2

    def test_total_matches_row_count(self, sample_rows):
        """Every labelled row is counted exactly once."""
        counts = aspect_sentiment_counts(sample_rows)
        assert sum(c.total for c in counts) == len(sample_rows)


class TestHeatmap:
    """Test hotel x aspect net sentiment."""

    def test_scores_and_no_data(self, sample_rows):
        """Mixed cells average out, empty cells are None."""
        heatmap = {row.hotel: row.scores for row in hotel_aspect_heatmap(sample_rows)}
        assert heatmap["Hotel A"]["Service"] == 0.0
        assert heatmap["Hotel A"]["Cleanliness"] == 1.0
        assert heatmap["Hotel A"]["Food"] is None
        assert heatmap["Hotel B"]["Food"] == 0.0
        assert heatmap["Hotel B"]["Service"] is None

    def test_columns_in_aspect_order(self, sample_rows):
        """One column per configured aspect."""
        for row in hotel_aspect_heatmap(sample_rows):
            assert list(row.scores) == list(AspectConstants.ASPECTS)

    def test_hotel_key_fallback(self):
        """Hotel name, then id, then Unknown."""
        rows = [
            make_row(hotel_name="", hotel_id="H9"),
            make_row(hotel_name="", hotel_id=""),
        ]
        assert [row.hotel for row in hotel_aspect_heatmap(rows)] == ["H9", "Unknown"]

    def test_scores_bounded(self, sample_rows):
        """Scores stay within [-1, 1]."""
        rows = sample_rows + [make_row(aspect="Price", sentiment="negative")]
        for row in hotel_aspect_heatmap(rows):
            for score in row.scores.values():
                assert score is None or -1.0 <= score <= 1.0

    def test_empty(self):
        """No rows, no hotels."""
        assert hotel_aspect_heatmap([]) == []


class TestTrend:
    """Test sentiment over time."""

    def test_sorted_by_date(self, sample_rows):
        """Dates ascend lexicographically."""
        trend = sentiment_trend(sample_rows)
        assert [p.date for p in trend] == ["2024-01-01", "2024-01-02", "2024-01-03"]
        assert [p.score for p in trend] == [-1.0, 1.0, 0.0]

    def test_empty(self):
        """Empty input gives an empty series."""
        assert sentiment_trend([]) == []


def test_sentiment_distribution(sample_rows):
    """Counts per label in positive/neutral/negative order."""
    dist = sentiment_distribution(sample_rows)
    assert [(d["key"], d["value"]) for d in dist] == [("positive", 2), ("neutral", 1), ("negative", 1)]
    assert dist[0]["name"] == "Positive"
    assert [d["value"] for d in sentiment_distribution([])] == [0, 0, 0]


def test_topic_keywords_count_rows():
    """A word counts once per row it tops, not per occurrence."""
    rows = [
        make_row(review_text="breakfast breakfast pool"),
        make_row(review_text="breakfast view"),
    ]
    topics = topic_keywords(rows, per_review=12, top_n=2)
    assert [(t.word, t.count) for t in topics] == [("breakfast", 2), ("pool", 1)]
    assert topic_keywords([]) == []


if __name__ == "__main__":
    pytest.main([__file__])
