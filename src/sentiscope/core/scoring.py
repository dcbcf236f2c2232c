"""Rule-based sentiment scoring used by the hybrid ensemble pass."""

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence, Tuple

from .aggregation import round_half_up
from .constants import AspectConstants, LexiconConstants, ScoringConstants
from .models import AspectRow, ScoreResult

logger = logging.getLogger(__name__)


def _sign(x: int) -> int:
    return (x > 0) - (x < 0)


class HeuristicScorer:
    """Word-list voting nudged by the star rating.

    A list entry matches when it occurs anywhere in the lowercased text, so
    ``"hot"`` also matches inside ``"hotel"``. Each entry counts at most once.
    """

    def __init__(
        self,
        positive_words: Optional[Sequence[str]] = None,
        negative_words: Optional[Sequence[str]] = None,
        change_threshold: float = 0.05,
    ):
        self.positive_words = tuple(LexiconConstants.POSITIVE_WORDS if positive_words is None else positive_words)
        self.negative_words = tuple(LexiconConstants.NEGATIVE_WORDS if negative_words is None else negative_words)
        self.change_threshold = change_threshold

    def count_terms(self, text: str) -> Tuple[int, int]:
        """Number of positive and negative list entries present in ``text``."""
        text = (text or "").lower()
        pos = sum(1 for word in self.positive_words if word in text)
        neg = sum(1 for word in self.negative_words if word in text)
        return pos, neg

    @staticmethod
    def vote(pos: int, neg: int, rating: float) -> float:
        vote = float(_sign(pos - neg))
        if rating >= ScoringConstants.HIGH_RATING:
            vote += ScoringConstants.RATING_NUDGE
        elif rating <= ScoringConstants.LOW_RATING:
            vote -= ScoringConstants.RATING_NUDGE
        return vote

    @staticmethod
    def label_for_vote(vote: float) -> str:
        if vote > ScoringConstants.VOTE_THRESHOLD:
            return AspectConstants.POSITIVE
        if vote < -ScoringConstants.VOTE_THRESHOLD:
            return AspectConstants.NEGATIVE
        return AspectConstants.NEUTRAL

    @staticmethod
    def raw_confidence(pos: int, neg: int, rating: float) -> float:
        """Unrounded confidence clamped to the ensemble's range."""
        evidence = max(pos, neg)
        conf = (
            ScoringConstants.BASE_CONFIDENCE
            + min(ScoringConstants.MAX_EVIDENCE_BONUS, evidence * ScoringConstants.EVIDENCE_WEIGHT)
            + ((rating - 3) * ScoringConstants.RATING_WEIGHT if rating > 0 else 0.0)
        )
        return max(ScoringConstants.MIN_CONFIDENCE, min(ScoringConstants.MAX_CONFIDENCE, conf))

    def _evaluate(self, row: AspectRow) -> Tuple[str, float]:
        pos, neg = self.count_terms(row.review_text)
        rating = row.rating or 0.0
        return self.label_for_vote(self.vote(pos, neg, rating)), self.raw_confidence(pos, neg, rating)

    def score(self, row: AspectRow) -> ScoreResult:
        """Sentiment label and confidence (2 decimals) for one row."""
        sentiment, conf = self._evaluate(row)
        return ScoreResult(sentiment=sentiment, confidence=round_half_up(conf, 2))

    def is_material_change(self, row: AspectRow, sentiment: str, raw_conf: float) -> bool:
        return sentiment != row.sentiment or abs((row.confidence or 0.0) - raw_conf) > self.change_threshold

    def score_rows(self, rows: Iterable[AspectRow]) -> Tuple[List[AspectRow], int]:
        """Rescore every row; returns new rows and how many changed materially.

        Only ``sentiment`` and ``confidence`` differ between input and output
        rows; the inputs are not modified.
        """
        updated = []
        changed = 0
        for row in rows:
            sentiment, raw_conf = self._evaluate(row)
            if self.is_material_change(row, sentiment, raw_conf):
                changed += 1
            updated.append(replace(row, sentiment=sentiment, confidence=round_half_up(raw_conf, 2)))
        logger.debug(f"Rescored {len(updated)} rows, {changed} changed")
        return updated, changed
