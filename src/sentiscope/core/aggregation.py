"""Aggregations behind the dashboard charts."""

from collections import defaultdict
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional, Sequence

from .constants import AspectConstants
from .keywords import top_keywords
from .models import AspectRow, KPISummary, AspectCounts, HeatmapRow, TrendPoint, KeywordCount

POSITIVE = AspectConstants.POSITIVE
NEGATIVE = AspectConstants.NEGATIVE


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a spreadsheet would (0.5 away from zero)."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def _net_score(pos: int, neg: int, total: int) -> float:
    return (pos - neg) / total if total else 0.0


def kpi_summary(rows: Iterable[AspectRow]) -> KPISummary:
    """Distinct reviews, positive share and mean rating of rated rows."""
    rows = list(rows)
    total_reviews = len({row.review_id for row in rows})

    counts = {label: 0 for label in AspectConstants.SENTIMENTS}
    for row in rows:
        if row.sentiment in counts:
            counts[row.sentiment] += 1
    labelled = sum(counts.values())
    positive_rate = int(round_half_up(100 * counts[POSITIVE] / labelled)) if labelled else 0

    ratings = [row.rating for row in rows if row.rating > 0]
    avg_rating = round_half_up(sum(ratings) / (len(ratings) or 1), 1)

    return KPISummary(total_reviews=total_reviews, positive_rate=positive_rate, avg_rating=avg_rating)


def sentiment_distribution(rows: Iterable[AspectRow]) -> List[Dict[str, object]]:
    """Overall sentiment counts in chart order."""
    counts = {label: 0 for label in AspectConstants.SENTIMENTS}
    for row in rows:
        if row.sentiment in counts:
            counts[row.sentiment] += 1
    return [
        {"name": label.title(), "value": counts[label], "key": label}
        for label in AspectConstants.SENTIMENTS
    ]


def aspect_sentiment_counts(
    rows: Iterable[AspectRow],
    aspects: Sequence[str] = AspectConstants.ASPECTS,
) -> List[AspectCounts]:
    """Per-aspect sentiment counts.

    Every configured aspect is present even with zero rows; aspects seen in
    the data but not configured are appended in first-seen order.
    """
    agg: Dict[str, AspectCounts] = {aspect: AspectCounts(aspect=aspect) for aspect in aspects}
    for row in rows:
        cell = agg.get(row.aspect)
        if cell is None:
            cell = agg[row.aspect] = AspectCounts(aspect=row.aspect)
        if row.sentiment in AspectConstants.SENTIMENTS:
            setattr(cell, row.sentiment, getattr(cell, row.sentiment) + 1)
    return list(agg.values())


def hotel_key(row: AspectRow) -> str:
    return row.hotel_name or row.hotel_id or AspectConstants.UNKNOWN_HOTEL


def hotel_aspect_heatmap(
    rows: Iterable[AspectRow],
    aspects: Sequence[str] = AspectConstants.ASPECTS,
) -> List[HeatmapRow]:
    """Net sentiment in [-1, 1] per (hotel, aspect); ``None`` when no rows."""
    cells = defaultdict(lambda: defaultdict(lambda: {"pos": 0, "neg": 0, "tot": 0}))
    for row in rows:
        cell = cells[hotel_key(row)][row.aspect]
        if row.sentiment == POSITIVE:
            cell["pos"] += 1
        elif row.sentiment == NEGATIVE:
            cell["neg"] += 1
        cell["tot"] += 1

    heatmap = []
    for hotel, by_aspect in cells.items():
        scores: Dict[str, Optional[float]] = {}
        for aspect in aspects:
            cell = by_aspect.get(aspect)
            scores[aspect] = None if not cell or cell["tot"] == 0 else _net_score(cell["pos"], cell["neg"], cell["tot"])
        heatmap.append(HeatmapRow(hotel=hotel, scores=scores))
    return heatmap


def sentiment_trend(rows: Iterable[AspectRow]) -> List[TrendPoint]:
    """Net sentiment per review date, oldest first.

    Dates are ISO strings so lexicographic order is chronological.
    """
    buckets = defaultdict(lambda: {"pos": 0, "neg": 0, "tot": 0})
    for row in rows:
        bucket = buckets[row.review_date or ""]
        if row.sentiment == POSITIVE:
            bucket["pos"] += 1
        elif row.sentiment == NEGATIVE:
            bucket["neg"] += 1
        bucket["tot"] += 1
    return [
        TrendPoint(date=date, score=_net_score(b["pos"], b["neg"], b["tot"]))
        for date, b in sorted(buckets.items(), key=lambda item: item[0])
    ]


def topic_keywords(
    rows: Iterable[AspectRow],
    per_review: int = 12,
    top_n: int = 12,
    stopwords: Optional[Iterable[str]] = None,
) -> List[KeywordCount]:
    """Keyword sketch: how many rows list each word among their top keywords."""
    if stopwords is not None:
        stopwords = frozenset(stopwords)
    freq: Dict[str, int] = {}
    for row in rows:
        for word in top_keywords(row.review_text, per_review, stopwords):
            freq[word] = freq.get(word, 0) + 1
    ranked = sorted(freq.items(), key=lambda item: -item[1])
    return [KeywordCount(word=word, count=count) for word, count in ranked[:top_n]]
