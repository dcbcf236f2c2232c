"""View models for the dashboard, built from one snapshot of the dataset."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..core.aggregation import (
    kpi_summary, sentiment_distribution, aspect_sentiment_counts,
    hotel_aspect_heatmap, sentiment_trend, topic_keywords,
)
from ..core.config import settings
from ..core.constants import AspectConstants
from ..core.filters import filter_rows, hotel_names
from ..core.models import (
    AspectRow, FilterCriteria, KPISummary, AspectCounts, HeatmapRow, TrendPoint, KeywordCount,
)


@dataclass
class DashboardView:
    """Everything the dashboard renders for one filter selection."""
    criteria: FilterCriteria
    total_rows: int
    filtered: List[AspectRow]
    kpi: KPISummary
    sentiments: List[Dict[str, object]]
    aspect_counts: List[AspectCounts]
    heatmap: List[HeatmapRow]
    trend: List[TrendPoint]
    topics: List[KeywordCount]
    hotels: List[str] = field(default_factory=list)
    aspects: Sequence[str] = AspectConstants.ASPECTS


def build_dashboard(
    rows: Sequence[AspectRow],
    criteria: Optional[FilterCriteria] = None,
    aspects: Sequence[str] = AspectConstants.ASPECTS,
) -> DashboardView:
    """Filter ``rows`` and derive every chart.

    Headline views fall back to the full collection when the filter matches
    nothing; the aspect breakdown and trend always show the filtered rows.
    """
    criteria = criteria or FilterCriteria()
    rows = list(rows)
    filtered = filter_rows(rows, criteria)
    overview = filtered if filtered else rows

    return DashboardView(
        criteria=criteria,
        total_rows=len(rows),
        filtered=filtered,
        kpi=kpi_summary(overview),
        sentiments=sentiment_distribution(overview),
        aspect_counts=aspect_sentiment_counts(filtered, aspects),
        heatmap=hotel_aspect_heatmap(overview, aspects),
        trend=sentiment_trend(filtered),
        topics=topic_keywords(
            overview,
            per_review=settings.topic_keywords_per_review,
            top_n=max(settings.topic_chart_size, settings.topic_cloud_size),
        ),
        hotels=hotel_names(rows),
        aspects=tuple(aspects),
    )
