"""Tests for the heuristic ensemble scorer."""

import pytest
from sentiscope.core.scoring import HeuristicScorer

from conftest import make_row


class TestHeuristicScorer:
    """Test word-list voting and confidence."""

    def setup_method(self):
        """Set up test instance."""
        self.scorer = HeuristicScorer()

    def test_two_positive_words_high_rating(self):
        """Positive words plus 5 stars is confidently positive."""
        result = self.scorer.score(make_row(review_text="Clean room and friendly staff", rating=5))
        assert result.sentiment == "positive"
        assert result.confidence == 0.91  # 0.65 + 2*0.08 + 2*0.05
        assert 0.6 <= result.confidence <= 0.98

    def test_negative_words_low_rating(self):
        """Negative evidence and a low rating."""
        result = self.scorer.score(make_row(review_text="Kamar kotor dan berisik", rating=1))
        assert result.sentiment == "negative"
        assert result.confidence == 0.71  # 0.65 + 0.16 - 0.10

    def test_rating_alone_decides_without_words(self):
        """No evidence: rating nudges the vote past the threshold."""
        assert self.scorer.score(make_row(review_text="Stayed two nights", rating=4)).sentiment == "positive"
        assert self.scorer.score(make_row(review_text="Stayed two nights", rating=2)).sentiment == "negative"
        assert self.scorer.score(make_row(review_text="Stayed two nights", rating=3)).sentiment == "neutral"

    def test_rating_can_cancel_words(self):
        """One positive word with rating 1 nets +0.5, still positive; tie with rating 3 is neutral."""
        assert self.scorer.score(make_row(review_text="great", rating=1)).sentiment == "positive"
        assert self.scorer.score(make_row(review_text="great but dirty", rating=3)).sentiment == "neutral"

    def test_unrated_row_has_no_rating_term(self):
        """Rating 0 contributes nothing and leaves the vote alone."""
        result = self.scorer.score(make_row(review_text="Stayed two nights", rating=0))
        assert result.sentiment == "negative"  # 0 <= 2 counts as low
        assert result.confidence == 0.65

    def test_confidence_clamped(self):
        """Confidence stays within [0.6, 0.98]."""
        rich = "clean friendly tasty delicious great helpful convenient"
        assert self.scorer.score(make_row(review_text=rich, rating=5)).confidence == 0.98
        assert self.scorer.score(make_row(review_text="nothing", rating=1)).confidence == 0.6

    def test_substring_matching(self):
        """List entries match inside longer words and count once each."""
        pos, neg = self.scorer.count_terms("The hotel was hot, hot, HOT")
        assert (pos, neg) == (0, 1)
        assert self.scorer.count_terms("uncomfortable") == (1, 0)

    def test_custom_word_lists(self):
        """Injected lists replace the built-in lexicon."""
        scorer = HeuristicScorer(positive_words=["lovely"], negative_words=["meh"])
        assert scorer.count_terms("Lovely, clean, meh") == (1, 1)


class TestScoreRows:
    """Test batch rescoring."""

    def setup_method(self):
        """Set up test instance."""
        self.scorer = HeuristicScorer()

    def test_only_sentiment_and_confidence_change(self):
        """Other fields are carried over and inputs are untouched."""
        row = make_row(review_text="Dirty and noisy", rating=1, sentiment="positive", confidence=0.9)
        updated, changed = self.scorer.score_rows([row])
        assert changed == 1
        assert updated[0].sentiment == "negative"
        assert updated[0].review_id == row.review_id
        assert updated[0].review_text == row.review_text
        assert row.sentiment == "positive"

    def test_unchanged_rows_not_counted(self):
        """Same label and confidence within 0.05 is not a change."""
        row = make_row(review_text="Clean room and friendly staff", rating=5, sentiment="positive", confidence=0.88)
        updated, changed = self.scorer.score_rows([row])
        assert changed == 0
        assert updated[0].confidence == 0.91

    def test_confidence_shift_counted(self):
        """Same label but confidence moved by more than 0.05."""
        row = make_row(review_text="Clean room and friendly staff", rating=5, sentiment="positive", confidence=0.5)
        _, changed = self.scorer.score_rows([row])
        assert changed == 1

    def test_empty(self):
        """Nothing to score."""
        assert self.scorer.score_rows([]) == ([], 0)


if __name__ == "__main__":
    pytest.main([__file__])
