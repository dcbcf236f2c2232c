"""Core modules for SentiScope."""

from .models import *
from .config import settings
from .normalize import normalize, load_csv, CSVParseError
from .filters import filter_rows
from .aggregation import kpi_summary, aspect_sentiment_counts, hotel_aspect_heatmap, sentiment_trend
from .keywords import top_keywords
from .scoring import HeuristicScorer

__all__ = [
    "settings",
    "AspectRow",
    "FilterCriteria",
    "KPISummary",
    "AspectCounts",
    "HeatmapRow",
    "TrendPoint",
    "KeywordCount",
    "ScoreResult",
    "ManualReview",
    "UploadResult",
    "HybridRunResult",
    "normalize",
    "load_csv",
    "CSVParseError",
    "filter_rows",
    "kpi_summary",
    "aspect_sentiment_counts",
    "hotel_aspect_heatmap",
    "sentiment_trend",
    "top_keywords",
    "HeuristicScorer",
]
